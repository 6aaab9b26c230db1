"""Order dispatch: command and handler.

Dispatch is where stock actually leaves: every line is checked first, then
all deductions are committed together, then the order flips to Dispatched.
If the order cannot be saved the deductions are released again.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.catalogue.product.lookup import find_product
from marketplace.domain import marketplace
from marketplace.inventory.stock.ledger import InventoryLedger, StockLine
from marketplace.ordering.order.order import Order
from marketplace.shared.exceptions import InvalidOrderState, PersistenceFailure
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Order")
class DispatchOrder:
    order_id = Identifier(required=True)


@marketplace.command_handler(part_of=Order)
class DispatchOrderHandler:
    @handle(DispatchOrder)
    def dispatch_order(self, command):
        order_id = ensure_identifier(command.order_id, "order_id")
        repo = current_domain.repository_for(Order)
        ledger = InventoryLedger()

        with repo.guard(order_id):
            order = repo.get(order_id)
            expected_status = order.status
            order.dispatch()

            for item in order.items:
                find_product(item.product_id)

            lines = [StockLine(product_id=str(item.product_id), quantity=item.quantity) for item in order.items]
            ledger.ensure_available(lines)
            ledger.commit(lines)

            try:
                repo.save_if_status(order, expected_status)
            except (InvalidOrderState, PersistenceFailure) as exc:
                logger.warning("Dispatch lost its order, releasing stock", order_id=order_id, error=str(exc))
                ledger.release(lines)
                raise

        logger.info("Order dispatched", order_id=order_id, order_code=order.order_code)
        return order
