"""Pydantic request/response schemas for the Ordering API."""

from __future__ import annotations

import json
from datetime import datetime

from pydantic import BaseModel, Field

# --- Request Schemas ---


class OrderItemRequest(BaseModel):
    product_id: str
    quantity: int


class ShippingAddressSchema(BaseModel):
    street: str = Field(..., max_length=255)
    city: str = Field(..., max_length=100)
    zip_code: str = Field(..., max_length=20)


class PlaceOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "items": [{"product_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901", "quantity": 2}],
                    "shipping_address": {"street": "12 Galle Road", "city": "Colombo", "zip_code": "00300"},
                }
            ]
        }
    }

    customer_id: str
    items: list[OrderItemRequest]
    shipping_address: ShippingAddressSchema

    def items_json(self) -> str:
        return json.dumps([item.model_dump() for item in self.items])


class UpdateOrderRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"shipping_address": {"street": "7 Temple Road", "city": "Kandy", "zip_code": "20000"}}]
        }
    }

    items: list[OrderItemRequest] | None = None
    shipping_address: ShippingAddressSchema | None = None


class VendorStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Delivered"}]}}

    status: str


# --- Response Schemas ---


class OrderItemResponse(BaseModel):
    product_id: str
    product_name: str
    vendor_id: str
    vendor_name: str | None = None
    quantity: int
    unit_price: float


class VendorStatusResponse(BaseModel):
    vendor_id: str
    vendor_name: str | None = None
    status: str
    rated: bool = False


class OrderResponse(BaseModel):
    id: str
    order_code: str
    customer_id: str
    customer_name: str | None = None
    status: str
    total_amount: float
    shipping_address: ShippingAddressSchema | None = None
    items: list[OrderItemResponse]
    vendor_statuses: list[VendorStatusResponse]
    placed_at: datetime | None = None
    updated_at: datetime | None = None
