"""Pydantic request/response schemas for the Identity API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, Field


class RegisterUserRequest(BaseModel):
    model_config = {
        "json_schema_extra": {
            "examples": [{"name": "Nimal Perera", "email": "nimal@example.com", "role": "Customer"}]
        }
    }

    name: str = Field(..., max_length=150)
    email: str = Field(..., max_length=254)
    role: str


class ChangeUserStatusRequest(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "Active"}]}}

    status: str


class UserIdResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"user_id": "a1b2c3d4-e5f6-7890-abcd-ef1234567890"}]}}

    user_id: str


class UserResponse(BaseModel):
    id: str
    name: str
    email: str
    role: str
    status: str
    created_at: datetime | None = None


class StatusResponse(BaseModel):
    model_config = {"json_schema_extra": {"examples": [{"status": "ok"}]}}

    status: str = "ok"
