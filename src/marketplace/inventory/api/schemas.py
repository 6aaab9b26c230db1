"""Pydantic request/response schemas for the Inventory API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class AdjustStockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"delta": -3}]}}

    delta: int


class ReplaceStockRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"stock_quantity": 25}]}}

    stock_quantity: int


class InventoryResponse(BaseModel):
    id: str
    product_id: str
    vendor_id: str
    stock_quantity: int
    low_stock_alert: bool
    last_updated: datetime | None = None


class DeleteResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"deleted": True}]}}

    deleted: bool
