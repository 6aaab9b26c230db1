"""Ratings context API package."""

from marketplace.ratings.api.routes import router

__all__ = ["router"]
