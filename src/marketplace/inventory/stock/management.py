"""Stock management: commands and handler."""

from protean import handle
from protean.fields import Identifier, Integer

from marketplace.domain import marketplace
from marketplace.inventory.stock.inventory import Inventory
from marketplace.inventory.stock.ledger import InventoryLedger


@marketplace.command(part_of="Inventory")
class AdjustStock:
    """Add (positive delta) or remove (negative delta) units."""

    inventory_id: Identifier(required=True)
    delta: Integer(required=True)


@marketplace.command(part_of="Inventory")
class ReplaceStock:
    """Overwrite the stock count, e.g. after a physical count."""

    inventory_id: Identifier(required=True)
    stock_quantity: Integer(required=True)


@marketplace.command(part_of="Inventory")
class DeleteInventory:
    inventory_id: Identifier(required=True)


@marketplace.command_handler(part_of=Inventory)
class ManageStockHandler:
    @handle(AdjustStock)
    def adjust_stock(self, command):
        return InventoryLedger().apply_delta(command.inventory_id, command.delta)

    @handle(ReplaceStock)
    def replace_stock(self, command):
        return InventoryLedger().replace(command.inventory_id, command.stock_quantity)

    @handle(DeleteInventory)
    def delete_inventory(self, command):
        return InventoryLedger().delete(command.inventory_id)
