"""FastAPI endpoints for the Inventory context."""

from fastapi import APIRouter, HTTPException
from protean.utils.globals import current_domain

from marketplace.inventory.api.schemas import (
    AdjustStockRequest,
    DeleteResponse,
    InventoryResponse,
    ReplaceStockRequest,
)
from marketplace.inventory.stock.inventory import Inventory
from marketplace.inventory.stock.ledger import InventoryLedger
from marketplace.inventory.stock.management import AdjustStock, DeleteInventory, ReplaceStock

router = APIRouter(prefix="/inventory", tags=["inventory"])


def _inventory_response(inventory: Inventory) -> InventoryResponse:
    return InventoryResponse(
        id=str(inventory.id),
        product_id=str(inventory.product_id),
        vendor_id=str(inventory.vendor_id),
        stock_quantity=inventory.stock_quantity,
        low_stock_alert=inventory.low_stock_alert,
        last_updated=inventory.last_updated,
    )


@router.get("", response_model=list[InventoryResponse])
async def list_inventory(vendor_id: str | None = None) -> list[InventoryResponse]:
    repo = current_domain.repository_for(Inventory)
    return [_inventory_response(i) for i in repo.list_all(vendor_id=vendor_id)]


@router.get("/low-stock", response_model=list[InventoryResponse])
async def list_low_stock(vendor_id: str | None = None) -> list[InventoryResponse]:
    repo = current_domain.repository_for(Inventory)
    return [_inventory_response(i) for i in repo.list_low_stock(vendor_id=vendor_id)]


@router.get("/products/{product_id}", response_model=InventoryResponse)
async def get_product_inventory(product_id: str) -> InventoryResponse:
    inventory = InventoryLedger().get_by_product_id(product_id)
    if inventory is None:
        raise HTTPException(status_code=404, detail=f"No inventory for product {product_id}")
    return _inventory_response(inventory)


@router.post("/{inventory_id}/adjust", response_model=InventoryResponse)
async def adjust_stock(inventory_id: str, body: AdjustStockRequest) -> InventoryResponse:
    result = current_domain.process(AdjustStock(inventory_id=inventory_id, delta=body.delta), asynchronous=False)
    return _inventory_response(result)


@router.put("/{inventory_id}", response_model=InventoryResponse)
async def replace_stock(inventory_id: str, body: ReplaceStockRequest) -> InventoryResponse:
    command = ReplaceStock(inventory_id=inventory_id, stock_quantity=body.stock_quantity)
    result = current_domain.process(command, asynchronous=False)
    return _inventory_response(result)


@router.delete("/{inventory_id}", response_model=DeleteResponse)
async def delete_inventory(inventory_id: str) -> DeleteResponse:
    result = current_domain.process(DeleteInventory(inventory_id=inventory_id), asynchronous=False)
    return DeleteResponse(deleted=bool(result))
