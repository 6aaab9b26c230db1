"""Domain events for the Order aggregate.

Line items travel as JSON text, the same shape the commands accept.
"""

from protean.fields import DateTime, Float, Identifier, String, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Order")
class OrderPlaced:
    """A customer placed an order; stock was validated but not deducted."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_code: String(required=True)
    customer_id: Identifier(required=True)
    items: Text(required=True)  # JSON array of line snapshots
    total_amount: Float(required=True)
    placed_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class OrderUpdated:
    """Items or shipping address of a pending order were revised."""

    __version__ = 1

    order_id: Identifier(required=True)
    items: Text(required=True)
    total_amount: Float(required=True)
    updated_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class OrderDispatched:
    """Stock for every line was deducted and the order left the warehouse."""

    __version__ = 1

    order_id: Identifier(required=True)
    order_code: String(required=True)
    dispatched_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class VendorStatusUpdated:
    """One vendor reported progress on its part of the order."""

    __version__ = 1

    order_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    vendor_status: String(required=True)
    order_status: String(required=True)
    updated_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class OrderDelivered:
    """Every vendor delivered its part of the order."""

    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    delivered_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class CancellationRequested:
    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    previous_status: String(required=True)
    requested_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class OrderCancelled:
    __version__ = 1

    order_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    cancelled_at: DateTime(required=True)


@marketplace.event(part_of="Order")
class VendorRated:
    """The customer rated one vendor of a delivered order."""

    __version__ = 1

    order_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    rated_at: DateTime(required=True)
