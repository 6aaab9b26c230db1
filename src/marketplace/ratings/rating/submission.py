"""Vendor rating submission, revision and removal: commands and handler.

A customer may rate each vendor of an order once, after that vendor has
delivered. The order's vendor entry remembers that it was rated; deleting
the rating clears the mark so the vendor can be rated again.
"""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier, Integer, Text
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order
from marketplace.ratings.rating.rating import VendorRating
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="VendorRating")
class SubmitVendorRating:
    customer_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    order_id: Identifier(required=True)
    rating: Integer(required=True)
    comment: Text()


@marketplace.command(part_of="VendorRating")
class UpdateVendorRating:
    rating_id: Identifier(required=True)
    rating: Integer()
    comment: Text()


@marketplace.command(part_of="VendorRating")
class DeleteVendorRating:
    rating_id: Identifier(required=True)


@marketplace.command_handler(part_of=VendorRating)
class VendorRatingHandler:
    @handle(SubmitVendorRating)
    def submit_rating(self, command):
        customer_id = ensure_identifier(command.customer_id, "customer_id")
        vendor_id = ensure_identifier(command.vendor_id, "vendor_id")
        order_id = ensure_identifier(command.order_id, "order_id")

        orders = current_domain.repository_for(Order)
        with orders.guard(order_id):
            order = orders.get(order_id)
            if str(order.customer_id) != customer_id:
                raise ValidationError({"order_id": ["Order does not belong to this customer"]})

            vendor_rating = VendorRating.submit(
                customer_id=customer_id,
                vendor_id=vendor_id,
                order_id=order_id,
                rating=command.rating,
                comment=command.comment,
            )
            expected_status = order.status
            order.mark_vendor_rated(vendor_id)
            orders.save_if_status(order, expected_status)
            current_domain.repository_for(VendorRating).add(vendor_rating)

        logger.info(
            "Vendor rated",
            rating_id=str(vendor_rating.id),
            vendor_id=vendor_id,
            order_id=order_id,
            rating=command.rating,
        )
        return vendor_rating

    @handle(UpdateVendorRating)
    def update_rating(self, command):
        repo = current_domain.repository_for(VendorRating)
        vendor_rating = repo.get(ensure_identifier(command.rating_id, "rating_id"))
        vendor_rating.revise(rating=command.rating, comment=command.comment)
        repo.add(vendor_rating)
        return vendor_rating

    @handle(DeleteVendorRating)
    def delete_rating(self, command):
        repo = current_domain.repository_for(VendorRating)
        vendor_rating = repo.get(ensure_identifier(command.rating_id, "rating_id"))

        orders = current_domain.repository_for(Order)
        with orders.guard(vendor_rating.order_id):
            order = orders.find(vendor_rating.order_id)
            if order is not None:
                order.clear_vendor_rating(vendor_rating.vendor_id)
                orders.save_if_status(order, order.status)

        repo.remove(vendor_rating)
        logger.info("Vendor rating deleted", rating_id=str(vendor_rating.id))
        return True
