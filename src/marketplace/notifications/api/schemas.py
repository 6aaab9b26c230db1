"""Pydantic response schemas for the Notifications API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel


class NotificationResponse(BaseModel):
    id: str
    user_id: str
    message: str
    is_read: bool
    created_at: datetime | None = None
    read_at: datetime | None = None


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
