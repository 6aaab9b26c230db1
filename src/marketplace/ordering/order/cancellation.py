"""Two-phase cancellation: commands and handler.

A customer requests cancellation; staff confirm it. Administrators and
customer service representatives hear about every request, and the
customer hears about the confirmation. Stock is never touched here.
"""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.identity.user.user import Role
from marketplace.notifications.notification.dispatch import notify, notify_roles
from marketplace.ordering.order.order import Order
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Order")
class RequestCancellation:
    order_id = Identifier(required=True)


@marketplace.command(part_of="Order")
class ConfirmCancellation:
    order_id = Identifier(required=True)


@marketplace.command_handler(part_of=Order)
class CancellationHandler:
    @handle(RequestCancellation)
    def request_cancellation(self, command):
        order_id = ensure_identifier(command.order_id, "order_id")
        repo = current_domain.repository_for(Order)

        with repo.guard(order_id):
            order = repo.get(order_id)
            expected_status = order.status
            order.request_cancellation()
            repo.save_if_status(order, expected_status)

        logger.info("Cancellation requested", order_id=order_id, order_code=order.order_code)
        notify_roles(
            [Role.ADMINISTRATOR.value, Role.CSR.value],
            f"Order {order.order_code} has a cancellation request.",
        )
        return order

    @handle(ConfirmCancellation)
    def confirm_cancellation(self, command):
        order_id = ensure_identifier(command.order_id, "order_id")
        repo = current_domain.repository_for(Order)

        with repo.guard(order_id):
            order = repo.get(order_id)
            expected_status = order.status
            order.confirm_cancellation()
            repo.save_if_status(order, expected_status)

        logger.info("Order cancelled", order_id=order_id, order_code=order.order_code)
        notify(order.customer_id, f"Order {order.order_code} has been cancelled.")
        return order
