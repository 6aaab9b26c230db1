"""Pydantic request/response schemas for the Ratings API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class SubmitRatingRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "customer_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890",
                    "vendor_id": "b2c3d4e5-f6a7-8901-bcde-f12345678901",
                    "order_id": "c3d4e5f6-a7b8-9012-cdef-123456789012",
                    "rating": 5,
                    "comment": "Arrived well packed and on time.",
                }
            ]
        }
    }

    customer_id: str
    vendor_id: str
    order_id: str
    rating: int
    comment: str | None = None


class UpdateRatingRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"rating": 4, "comment": "Second parcel was late."}]}}

    rating: int | None = None
    comment: str | None = None


class RatingResponse(BaseModel):
    id: str
    customer_id: str
    vendor_id: str
    order_id: str
    rating: int
    comment: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None


class VendorRatingsResponse(BaseModel):
    vendor_id: str
    average_rating: float | None = None
    count: int
    ratings: list[RatingResponse]


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
