"""FastAPI endpoints for the Ratings context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from marketplace.ratings.api.schemas import (
    RatingResponse,
    StatusResponse,
    SubmitRatingRequest,
    UpdateRatingRequest,
    VendorRatingsResponse,
)
from marketplace.ratings.rating.listing import customer_ratings, vendor_ratings
from marketplace.ratings.rating.submission import DeleteVendorRating, SubmitVendorRating, UpdateVendorRating

router = APIRouter(prefix="/ratings", tags=["ratings"])


def _rating_response(vendor_rating) -> RatingResponse:
    return RatingResponse(
        id=str(vendor_rating.id),
        customer_id=str(vendor_rating.customer_id),
        vendor_id=str(vendor_rating.vendor_id),
        order_id=str(vendor_rating.order_id),
        rating=vendor_rating.rating,
        comment=vendor_rating.comment,
        created_at=vendor_rating.created_at,
        updated_at=vendor_rating.updated_at,
    )


@router.post("", status_code=201, response_model=RatingResponse)
async def submit_rating(body: SubmitRatingRequest) -> RatingResponse:
    command = SubmitVendorRating(
        customer_id=body.customer_id,
        vendor_id=body.vendor_id,
        order_id=body.order_id,
        rating=body.rating,
        comment=body.comment,
    )
    return _rating_response(current_domain.process(command, asynchronous=False))


@router.put("/{rating_id}", response_model=RatingResponse)
async def update_rating(rating_id: str, body: UpdateRatingRequest) -> RatingResponse:
    command = UpdateVendorRating(rating_id=rating_id, rating=body.rating, comment=body.comment)
    return _rating_response(current_domain.process(command, asynchronous=False))


@router.delete("/{rating_id}", response_model=StatusResponse)
async def delete_rating(rating_id: str) -> StatusResponse:
    current_domain.process(DeleteVendorRating(rating_id=rating_id), asynchronous=False)
    return StatusResponse()


@router.get("/vendors/{vendor_id}", response_model=VendorRatingsResponse)
async def get_vendor_ratings(vendor_id: str) -> VendorRatingsResponse:
    return VendorRatingsResponse(**vendor_ratings(vendor_id))


@router.get("/customers/{customer_id}", response_model=list[RatingResponse])
async def get_customer_ratings(customer_id: str) -> list[RatingResponse]:
    return [RatingResponse(**view) for view in customer_ratings(customer_id)]
