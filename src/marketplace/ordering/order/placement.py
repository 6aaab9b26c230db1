"""Order placement: command and handler.

Placement validates products and stock but deducts nothing; stock moves
only when the order is dispatched. No notification is sent.
"""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.order.code import generate_order_code
from marketplace.ordering.order.lines import ensure_stock, parse_address, parse_items, price_lines
from marketplace.ordering.order.order import Order
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Order")
class PlaceOrder:
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON array of {product_id, quantity}
    shipping_address = Text(required=True)  # JSON {street, city, zip_code}


@marketplace.command_handler(part_of=Order)
class PlaceOrderHandler:
    @handle(PlaceOrder)
    def place_order(self, command):
        customer_id = ensure_identifier(command.customer_id, "customer_id")
        lines = price_lines(parse_items(command.items))
        ensure_stock(lines)
        shipping_address = parse_address(command.shipping_address)

        repo = current_domain.repository_for(Order)
        order = Order.place(
            order_code=generate_order_code(repo.code_exists),
            customer_id=customer_id,
            lines=lines,
            shipping_address=shipping_address,
        )
        repo.add(order)

        logger.info(
            "Order placed",
            order_id=str(order.id),
            order_code=order.order_code,
            customer_id=customer_id,
            total_amount=order.total_amount,
        )
        return order
