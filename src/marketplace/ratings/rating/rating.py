"""VendorRating aggregate: a customer's verdict on one vendor of one order."""

from datetime import UTC, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Identifier, Integer, Text

from marketplace.domain import marketplace
from marketplace.ratings.rating.events import VendorRatingRevised, VendorRatingSubmitted

MIN_RATING = 1
MAX_RATING = 5


def _check_rating(rating):
    if rating is None or not MIN_RATING <= rating <= MAX_RATING:
        raise ValidationError({"rating": [f"Rating must be between {MIN_RATING} and {MAX_RATING}"]})


@marketplace.aggregate
class VendorRating:
    customer_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    order_id: Identifier(required=True)
    rating: Integer(required=True, min_value=MIN_RATING, max_value=MAX_RATING)
    comment: Text()
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def submit(cls, customer_id, vendor_id, order_id, rating, comment=None):
        _check_rating(rating)
        now = datetime.now(UTC)
        vendor_rating = cls(
            customer_id=str(customer_id),
            vendor_id=str(vendor_id),
            order_id=str(order_id),
            rating=rating,
            comment=comment,
            created_at=now,
            updated_at=now,
        )
        vendor_rating.raise_(
            VendorRatingSubmitted(
                rating_id=str(vendor_rating.id),
                customer_id=str(customer_id),
                vendor_id=str(vendor_id),
                order_id=str(order_id),
                rating=rating,
                submitted_at=now,
            )
        )
        return vendor_rating

    def revise(self, rating=None, comment=None):
        """Change the score and/or the comment."""
        previous = self.rating
        if rating is not None:
            _check_rating(rating)
            self.rating = rating
        if comment is not None:
            self.comment = comment

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            VendorRatingRevised(
                rating_id=str(self.id),
                previous_rating=previous,
                new_rating=self.rating,
                revised_at=now,
            )
        )
