"""Vendor rating read operations."""

from protean.utils.globals import current_domain

from marketplace.ratings.rating.rating import VendorRating
from marketplace.shared.identifiers import ensure_identifier


def _rating_view(vendor_rating: VendorRating) -> dict:
    return {
        "id": str(vendor_rating.id),
        "customer_id": str(vendor_rating.customer_id),
        "vendor_id": str(vendor_rating.vendor_id),
        "order_id": str(vendor_rating.order_id),
        "rating": vendor_rating.rating,
        "comment": vendor_rating.comment,
        "created_at": vendor_rating.created_at,
        "updated_at": vendor_rating.updated_at,
    }


def vendor_ratings(vendor_id) -> dict:
    """All ratings of a vendor with their average (None when unrated)."""
    ratings = current_domain.repository_for(VendorRating).list_by_vendor(ensure_identifier(vendor_id, "vendor_id"))
    average = round(sum(r.rating for r in ratings) / len(ratings), 2) if ratings else None
    return {
        "vendor_id": str(vendor_id),
        "average_rating": average,
        "count": len(ratings),
        "ratings": [_rating_view(r) for r in ratings],
    }


def customer_ratings(customer_id) -> list[dict]:
    repo = current_domain.repository_for(VendorRating)
    return [_rating_view(r) for r in repo.list_by_customer(ensure_identifier(customer_id, "customer_id"))]
