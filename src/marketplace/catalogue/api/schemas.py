"""Pydantic request/response schemas for the Catalogue API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class AddProductRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "name": "Ceylon Black Tea 400g",
                    "price": 12.5,
                    "vendor_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "category": "Groceries",
                    "description": "High-grown orange pekoe.",
                    "stock_quantity": 40,
                }
            ]
        }
    }

    name: str = Field(..., max_length=255)
    price: float
    vendor_id: str
    category: str | None = Field(None, max_length=100)
    description: str | None = None
    stock_quantity: int = 0


class UpdateProductDetailsRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"name": "Ceylon Black Tea 500g", "price": 14.0}]}}

    name: str | None = Field(None, max_length=255)
    price: float | None = None
    category: str | None = Field(None, max_length=100)
    description: str | None = None


class ChangeProductStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Deactivated"}]}}

    status: str


class ProductIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901"}]}}

    product_id: str


class ProductResponse(BaseModel):
    id: str
    name: str
    category: str | None = None
    description: str | None = None
    price: float
    vendor_id: str
    status: str
    created_at: datetime | None = None
    updated_at: datetime | None = None


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
