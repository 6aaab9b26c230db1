"""Repository for the Inventory aggregate."""

from marketplace.domain import marketplace
from marketplace.inventory.stock.inventory import Inventory
from marketplace.shared.query import scan


@marketplace.repository(part_of=Inventory)
class InventoryRepository:
    def get_by_product_id(self, product_id) -> Inventory | None:
        records = self._dao.query.filter(product_id=str(product_id)).all().items
        return records[0] if records else None

    def find(self, inventory_id) -> Inventory | None:
        records = self._dao.query.filter(id=str(inventory_id)).all().items
        return records[0] if records else None

    def list_all(self, vendor_id=None) -> list[Inventory]:
        if vendor_id:
            return list(scan(self._dao, vendor_id=str(vendor_id)))
        return list(scan(self._dao))

    def list_low_stock(self, vendor_id=None) -> list[Inventory]:
        filters = {"low_stock_alert": True}
        if vendor_id:
            filters["vendor_id"] = str(vendor_id)
        return list(scan(self._dao, **filters))

    def remove(self, inventory: Inventory) -> None:
        self._dao.delete(inventory)
