"""Repository for the VendorRating aggregate."""

from marketplace.domain import marketplace
from marketplace.ratings.rating.rating import VendorRating
from marketplace.shared.query import scan


@marketplace.repository(part_of=VendorRating)
class VendorRatingRepository:
    def list_by_vendor(self, vendor_id) -> list[VendorRating]:
        return list(scan(self._dao, order_by="created_at", vendor_id=str(vendor_id)))

    def list_by_customer(self, customer_id) -> list[VendorRating]:
        return list(scan(self._dao, order_by="created_at", customer_id=str(customer_id)))

    def remove(self, vendor_rating: VendorRating) -> None:
        self._dao.delete(vendor_rating)
