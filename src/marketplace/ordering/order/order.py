"""Order aggregate: the core of the ordering context.

State Machine:
    PENDING → DISPATCHED → PARTIALLY_DELIVERED → DELIVERED
    PENDING/PROCESSING → CANCELLATION_REQUESTED → CANCELLED

Each order carries one VendorOrderStatus per distinct vendor of its items.
Vendors report delivery independently; the order status follows from the
set of vendor statuses once the order has been dispatched.
"""

import json
from datetime import UTC, datetime
from enum import Enum

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Float, HasMany, Identifier, Integer, String, ValueObject

from marketplace.domain import marketplace
from marketplace.ordering.order.events import (
    CancellationRequested,
    OrderCancelled,
    OrderDelivered,
    OrderDispatched,
    OrderPlaced,
    OrderUpdated,
    VendorRated,
    VendorStatusUpdated,
)
from marketplace.shared.exceptions import InvalidOrderState


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------
class OrderStatus(Enum):
    PENDING = "Pending"
    PROCESSING = "Processing"
    DISPATCHED = "Dispatched"
    PARTIALLY_DELIVERED = "Partially Delivered"
    DELIVERED = "Delivered"
    CANCELLATION_REQUESTED = "Cancellation Requested"
    CANCELLED = "Cancelled"


class VendorStatus(Enum):
    PROCESSING = "Processing"
    DELIVERED = "Delivered"


# State machine transition map
_VALID_TRANSITIONS = {
    OrderStatus.PENDING: {OrderStatus.DISPATCHED, OrderStatus.CANCELLATION_REQUESTED},
    OrderStatus.PROCESSING: {OrderStatus.DISPATCHED, OrderStatus.CANCELLATION_REQUESTED},
    OrderStatus.DISPATCHED: {OrderStatus.PARTIALLY_DELIVERED, OrderStatus.DELIVERED},
    OrderStatus.PARTIALLY_DELIVERED: {OrderStatus.PARTIALLY_DELIVERED, OrderStatus.DELIVERED},
    OrderStatus.CANCELLATION_REQUESTED: {OrderStatus.CANCELLED},
    OrderStatus.DELIVERED: set(),  # Terminal
    OrderStatus.CANCELLED: set(),  # Terminal
}

# States in which vendors may report delivery progress
_DELIVERABLE_STATES = {OrderStatus.DISPATCHED, OrderStatus.PARTIALLY_DELIVERED}

# States that no longer hold a claim on a product
_CLOSED_STATES = {OrderStatus.CANCELLED, OrderStatus.DELIVERED}


def is_closed(status) -> bool:
    return OrderStatus(status) in _CLOSED_STATES


# ---------------------------------------------------------------------------
# Value Objects
# ---------------------------------------------------------------------------
@marketplace.value_object(part_of="Order")
class ShippingAddress:
    """Where the order goes. Replaced wholesale, never edited in place."""

    street = String(required=True, max_length=255)
    city = String(required=True, max_length=100)
    zip_code = String(required=True, max_length=20)


# ---------------------------------------------------------------------------
# Entities
# ---------------------------------------------------------------------------
@marketplace.entity(part_of="Order")
class OrderItem:
    """A line of the order.

    Name, unit price and vendor are snapshots taken from the product when
    the line was priced.
    """

    product_id = Identifier(required=True)
    product_name = String(required=True, max_length=255)
    vendor_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    unit_price = Float(required=True, min_value=0.0)

    @property
    def line_total(self) -> float:
        return self.quantity * self.unit_price


@marketplace.entity(part_of="Order")
class VendorOrderStatus:
    """Delivery progress of one vendor's share of the order."""

    vendor_id = Identifier(required=True)
    status = String(choices=VendorStatus, default=VendorStatus.PROCESSING.value)
    rated = Boolean(default=False)


# ---------------------------------------------------------------------------
# Aggregate Root
# ---------------------------------------------------------------------------
@marketplace.aggregate
class Order:
    order_code = String(required=True, max_length=20)
    customer_id = Identifier(required=True)
    status = String(choices=OrderStatus, default=OrderStatus.PENDING.value)
    items = HasMany(OrderItem)
    vendor_statuses = HasMany(VendorOrderStatus)
    shipping_address = ValueObject(ShippingAddress)
    total_amount = Float(default=0.0)
    placed_at = DateTime()
    updated_at = DateTime()

    @invariant.post
    def one_vendor_entry_per_vendor(self):
        if not self.items or not self.vendor_statuses:
            return
        item_vendors = {str(item.vendor_id) for item in self.items}
        entry_vendors = [str(entry.vendor_id) for entry in self.vendor_statuses]
        if len(entry_vendors) != len(set(entry_vendors)) or set(entry_vendors) != item_vendors:
            raise ValidationError({"vendor_statuses": ["Vendor statuses must match the vendors of the items"]})

    # -------------------------------------------------------------------
    # Factory method
    # -------------------------------------------------------------------
    @classmethod
    def place(cls, order_code, customer_id, lines, shipping_address):
        """Create a pending order from priced lines.

        Args:
            order_code: Human-facing code, unique across orders.
            customer_id: The customer placing the order.
            lines: List of dicts with product_id, product_name, vendor_id,
                   quantity and unit_price.
            shipping_address: A ShippingAddress value object.
        """
        _ensure_lines(lines)
        now = datetime.now(UTC)

        order = cls(
            order_code=order_code,
            customer_id=str(customer_id),
            status=OrderStatus.PENDING.value,
            items=[OrderItem(**line) for line in lines],
            vendor_statuses=[VendorOrderStatus(vendor_id=vendor_id) for vendor_id in _distinct_vendors(lines)],
            shipping_address=shipping_address,
            total_amount=_total(lines),
            placed_at=now,
            updated_at=now,
        )
        order.raise_(
            OrderPlaced(
                order_id=str(order.id),
                order_code=order_code,
                customer_id=str(customer_id),
                items=json.dumps(lines),
                total_amount=order.total_amount,
                placed_at=now,
            )
        )
        return order

    # -------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------
    def _assert_can_transition(self, target_status):
        current = OrderStatus(self.status)
        if target_status not in _VALID_TRANSITIONS.get(current, set()):
            raise InvalidOrderState({"status": [f"Cannot transition from {current.value} to {target_status.value}"]})

    def vendor_entry(self, vendor_id):
        return next((entry for entry in self.vendor_statuses if str(entry.vendor_id) == str(vendor_id)), None)

    def lines_for_vendor(self, vendor_id) -> list:
        return [item for item in self.items if str(item.vendor_id) == str(vendor_id)]

    def ensure_modifiable(self):
        if OrderStatus(self.status) != OrderStatus.PENDING:
            raise InvalidOrderState({"status": [f"Orders can only be updated while Pending, not {self.status}"]})

    # -------------------------------------------------------------------
    # Modification (only while PENDING)
    # -------------------------------------------------------------------
    def revise(self, lines=None, shipping_address=None):
        """Replace the lines and/or the shipping address.

        Replacement lines are priced again, so the total and the vendor
        entries are rebuilt from them. ``updated_at`` moves even when
        nothing else changes.
        """
        self.ensure_modifiable()
        if lines is not None:
            _ensure_lines(lines)
        now = datetime.now(UTC)

        with atomic_change(self):
            if lines is not None:
                for item in list(self.items):
                    self.remove_items(item)
                for entry in list(self.vendor_statuses):
                    self.remove_vendor_statuses(entry)
                for line in lines:
                    self.add_items(OrderItem(**line))
                for vendor_id in _distinct_vendors(lines):
                    self.add_vendor_statuses(VendorOrderStatus(vendor_id=vendor_id))
                self.total_amount = _total(lines)

            if shipping_address is not None:
                self.shipping_address = shipping_address

            self.updated_at = now

        self.raise_(
            OrderUpdated(
                order_id=str(self.id),
                items=json.dumps([_item_snapshot(item) for item in self.items]),
                total_amount=self.total_amount,
                updated_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Lifecycle transitions
    # -------------------------------------------------------------------
    def dispatch(self):
        """Mark the order dispatched. Stock is deducted by the caller."""
        self._assert_can_transition(OrderStatus.DISPATCHED)
        now = datetime.now(UTC)
        self.status = OrderStatus.DISPATCHED.value
        self.updated_at = now
        self.raise_(
            OrderDispatched(
                order_id=str(self.id),
                order_code=self.order_code,
                dispatched_at=now,
            )
        )

    def update_vendor_status(self, vendor_id, status) -> bool:
        """Record a vendor's progress and derive the order status.

        Returns True when this update completed the delivery of the order.
        """
        current = OrderStatus(self.status)
        if current not in _DELIVERABLE_STATES:
            raise InvalidOrderState(
                {"status": [f"Vendor status can only change once dispatched, order is {current.value}"]}
            )

        entry = self.vendor_entry(vendor_id)
        if entry is None:
            raise ValidationError({"vendor_id": [f"Vendor {vendor_id} is not part of this order"]})

        target = VendorStatus(status)
        if entry.status == VendorStatus.DELIVERED.value and target != VendorStatus.DELIVERED:
            raise InvalidOrderState({"status": [f"Vendor {vendor_id} has already delivered"]})

        now = datetime.now(UTC)
        entry.status = target.value

        delivered = [e.status == VendorStatus.DELIVERED.value for e in self.vendor_statuses]
        completed = False
        if all(delivered):
            self._assert_can_transition(OrderStatus.DELIVERED)
            self.status = OrderStatus.DELIVERED.value
            completed = True
        elif any(delivered):
            self._assert_can_transition(OrderStatus.PARTIALLY_DELIVERED)
            self.status = OrderStatus.PARTIALLY_DELIVERED.value
        self.updated_at = now

        self.raise_(
            VendorStatusUpdated(
                order_id=str(self.id),
                vendor_id=str(vendor_id),
                vendor_status=entry.status,
                order_status=self.status,
                updated_at=now,
            )
        )
        if completed:
            self.raise_(
                OrderDelivered(
                    order_id=str(self.id),
                    customer_id=str(self.customer_id),
                    delivered_at=now,
                )
            )
        return completed

    def request_cancellation(self):
        previous = self.status
        self._assert_can_transition(OrderStatus.CANCELLATION_REQUESTED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLATION_REQUESTED.value
        self.updated_at = now
        self.raise_(
            CancellationRequested(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                previous_status=previous,
                requested_at=now,
            )
        )

    def confirm_cancellation(self):
        """Cancel the order. Inventory is left as it is."""
        self._assert_can_transition(OrderStatus.CANCELLED)
        now = datetime.now(UTC)
        self.status = OrderStatus.CANCELLED.value
        self.updated_at = now
        self.raise_(
            OrderCancelled(
                order_id=str(self.id),
                customer_id=str(self.customer_id),
                cancelled_at=now,
            )
        )

    # -------------------------------------------------------------------
    # Ratings
    # -------------------------------------------------------------------
    def mark_vendor_rated(self, vendor_id):
        entry = self.vendor_entry(vendor_id)
        if entry is None:
            raise ValidationError({"vendor_id": [f"Vendor {vendor_id} is not part of this order"]})
        if entry.status != VendorStatus.DELIVERED.value:
            raise InvalidOrderState({"status": ["Only delivered vendors can be rated"]})
        if entry.rated:
            raise ValidationError({"vendor_id": [f"Vendor {vendor_id} has already been rated for this order"]})

        now = datetime.now(UTC)
        entry.rated = True
        self.updated_at = now
        self.raise_(VendorRated(order_id=str(self.id), vendor_id=str(vendor_id), rated_at=now))

    def clear_vendor_rating(self, vendor_id):
        entry = self.vendor_entry(vendor_id)
        if entry is not None and entry.rated:
            entry.rated = False
            self.updated_at = datetime.now(UTC)


def _ensure_lines(lines):
    if not lines:
        raise ValidationError({"items": ["An order must contain at least one item"]})


def _distinct_vendors(lines) -> list[str]:
    seen = []
    for line in lines:
        vendor_id = str(line["vendor_id"])
        if vendor_id not in seen:
            seen.append(vendor_id)
    return seen


def _total(lines) -> float:
    return round(sum(line["quantity"] * line["unit_price"] for line in lines), 2)


def _item_snapshot(item) -> dict:
    return {
        "product_id": str(item.product_id),
        "product_name": item.product_name,
        "vendor_id": str(item.vendor_id),
        "quantity": item.quantity,
        "unit_price": item.unit_price,
    }
