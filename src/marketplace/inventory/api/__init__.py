"""Inventory context API package."""

from marketplace.inventory.api.routes import router

__all__ = ["router"]
