"""Domain events for the VendorRating aggregate."""

from protean.fields import DateTime, Identifier, Integer

from marketplace.domain import marketplace


@marketplace.event(part_of="VendorRating")
class VendorRatingSubmitted:
    __version__ = 1

    rating_id: Identifier(required=True)
    customer_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    order_id: Identifier(required=True)
    rating: Integer(required=True)
    submitted_at: DateTime(required=True)


@marketplace.event(part_of="VendorRating")
class VendorRatingRevised:
    __version__ = 1

    rating_id: Identifier(required=True)
    previous_rating: Integer(required=True)
    new_rating: Integer(required=True)
    revised_at: DateTime(required=True)
