"""Order modification: command and handler."""

from protean import handle
from protean.fields import Identifier, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.order.lines import ensure_stock, parse_address, parse_items, price_lines
from marketplace.ordering.order.order import Order, OrderStatus
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Order")
class UpdateOrder:
    """Replace the items and/or the shipping address of a pending order."""

    order_id = Identifier(required=True)
    items = Text()  # JSON array of {product_id, quantity}
    shipping_address = Text()  # JSON {street, city, zip_code}


@marketplace.command_handler(part_of=Order)
class UpdateOrderHandler:
    @handle(UpdateOrder)
    def update_order(self, command):
        order_id = ensure_identifier(command.order_id, "order_id")
        repo = current_domain.repository_for(Order)

        with repo.guard(order_id):
            order = repo.get(order_id)
            order.ensure_modifiable()

            lines = None
            if command.items is not None:
                lines = price_lines(parse_items(command.items))
                ensure_stock(lines)

            shipping_address = None
            if command.shipping_address is not None:
                shipping_address = parse_address(command.shipping_address)

            order.revise(lines=lines, shipping_address=shipping_address)
            repo.save_if_status(order, OrderStatus.PENDING.value)

        logger.info(
            "Order updated",
            order_id=order_id,
            items_replaced=lines is not None,
            address_replaced=shipping_address is not None,
        )
        return order
