"""Inventory aggregate: the stock on hand for one product.

Quantities never go negative. ``low_stock_alert`` mirrors whether the
quantity sits below the low-stock threshold, and a ``LowStockDetected``
event is raised only when a change moves the quantity from at-or-above
the threshold to below it.
"""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import Boolean, DateTime, Identifier, Integer
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.inventory.stock.events import InventoryRemoved, LowStockDetected, StockAdjusted
from marketplace.shared.exceptions import InsufficientStock

DEFAULT_LOW_STOCK_THRESHOLD = 10


def low_stock_threshold() -> int:
    """Threshold from the ``[custom]`` config section, falling back to the default."""
    custom = current_domain.config.get("custom") or {}
    return int(custom.get("LOW_STOCK_THRESHOLD", DEFAULT_LOW_STOCK_THRESHOLD))


@marketplace.aggregate
class Inventory:
    product_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    stock_quantity: Integer(default=0, min_value=0)
    low_stock_alert: Boolean(default=False)
    last_updated: DateTime()

    @classmethod
    def create(cls, product_id, vendor_id, stock_quantity=0, threshold=DEFAULT_LOW_STOCK_THRESHOLD):
        if stock_quantity is None or stock_quantity < 0:
            raise ValidationError({"stock_quantity": ["Stock quantity cannot be negative"]})

        return cls(
            product_id=str(product_id),
            vendor_id=str(vendor_id),
            stock_quantity=stock_quantity,
            low_stock_alert=stock_quantity < threshold,
            last_updated=datetime.now(UTC),
        )

    def can_cover(self, quantity) -> bool:
        return self.stock_quantity >= quantity

    def apply_delta(self, delta, threshold=DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        """Adjust stock by ``delta``.

        Returns True when the change crossed below the threshold.
        """
        new_quantity = self.stock_quantity + delta
        if new_quantity < 0:
            raise InsufficientStock(
                {
                    "stock_quantity": [
                        f"Insufficient stock for product {self.product_id}: "
                        f"{self.stock_quantity} available, {-delta} requested"
                    ]
                }
            )
        return self._set_quantity(new_quantity, threshold)

    def replace(self, stock_quantity, threshold=DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        """Set stock to an absolute value.

        Returns True when the change crossed below the threshold.
        """
        if stock_quantity is None or stock_quantity < 0:
            raise ValidationError({"stock_quantity": ["Stock quantity cannot be negative"]})
        return self._set_quantity(stock_quantity, threshold)

    def mark_removed(self):
        self.raise_(
            InventoryRemoved(
                inventory_id=str(self.id),
                product_id=str(self.product_id),
                removed_at=datetime.now(UTC),
            )
        )

    def _set_quantity(self, new_quantity, threshold) -> bool:
        previous = self.stock_quantity
        now = datetime.now(UTC)

        self.stock_quantity = new_quantity
        self.low_stock_alert = new_quantity < threshold
        self.last_updated = now

        self.raise_(
            StockAdjusted(
                inventory_id=str(self.id),
                product_id=str(self.product_id),
                previous_quantity=previous,
                new_quantity=new_quantity,
                adjusted_at=now,
            )
        )

        crossed = previous >= threshold > new_quantity
        if crossed:
            self.raise_(
                LowStockDetected(
                    inventory_id=str(self.id),
                    product_id=str(self.product_id),
                    vendor_id=str(self.vendor_id),
                    stock_quantity=new_quantity,
                    threshold=threshold,
                    detected_at=now,
                )
            )
        return crossed
