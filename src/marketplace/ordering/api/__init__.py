"""Ordering context API package."""

from marketplace.ordering.api.routes import order_router

__all__ = ["order_router"]
