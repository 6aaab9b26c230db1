"""Domain events for the Inventory aggregate."""

from protean.fields import DateTime, Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="Inventory")
class StockAdjusted:
    """Stock on hand changed, by delta or by absolute replacement."""

    __version__ = 1

    inventory_id: Identifier(required=True)
    product_id: Identifier(required=True)
    previous_quantity: Integer(required=True)
    new_quantity: Integer(required=True)
    adjusted_at: DateTime(required=True)


@marketplace.event(part_of="Inventory")
class LowStockDetected:
    """Stock dropped below the low-stock threshold."""

    __version__ = 1

    inventory_id: Identifier(required=True)
    product_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    stock_quantity: Integer(required=True)
    threshold: Integer(required=True)
    detected_at: DateTime(required=True)


@marketplace.event(part_of="Inventory")
class InventoryRemoved:
    """An inventory record and its product were removed from the catalogue."""

    __version__ = 1

    inventory_id: Identifier(required=True)
    product_id: Identifier(required=True)
    removed_at: DateTime(required=True)
