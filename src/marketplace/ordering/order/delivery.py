"""Per-vendor delivery progress: command and handler."""

from protean import handle
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.notifications.notification.dispatch import notify
from marketplace.ordering.order.order import Order, VendorStatus
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Order")
class UpdateVendorStatus:
    order_id = Identifier(required=True)
    vendor_id = Identifier(required=True)
    status = String(choices=VendorStatus, required=True)


@marketplace.command_handler(part_of=Order)
class VendorStatusHandler:
    @handle(UpdateVendorStatus)
    def update_vendor_status(self, command):
        order_id = ensure_identifier(command.order_id, "order_id")
        vendor_id = ensure_identifier(command.vendor_id, "vendor_id")
        repo = current_domain.repository_for(Order)

        with repo.guard(order_id):
            order = repo.get(order_id)
            expected_status = order.status
            completed = order.update_vendor_status(vendor_id, command.status)
            repo.save_if_status(order, expected_status)

        logger.info(
            "Vendor status updated",
            order_id=order_id,
            vendor_id=vendor_id,
            vendor_status=command.status,
            order_status=order.status,
        )
        if completed:
            notify(order.customer_id, f"Order {order.order_code} has been delivered.")
        return order
