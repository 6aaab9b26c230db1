"""FastAPI endpoints for the Catalogue context."""

from fastapi import APIRouter
from protean.utils.globals import current_domain

from marketplace.catalogue.api.schemas import (
    AddProductRequest,
    ChangeProductStatusRequest,
    ProductIdResponse,
    ProductResponse,
    StatusResponse,
    UpdateProductDetailsRequest,
)
from marketplace.catalogue.product.lookup import find_product
from marketplace.catalogue.product.management import AddProduct, ChangeProductStatus, UpdateProductDetails
from marketplace.catalogue.product.product import Product
from marketplace.shared.identifiers import ensure_identifier

product_router = APIRouter(prefix="/products", tags=["products"])


def _product_response(product: Product) -> ProductResponse:
    return ProductResponse(
        id=str(product.id),
        name=product.name,
        category=product.category,
        description=product.description,
        price=product.price,
        vendor_id=str(product.vendor_id),
        status=product.status,
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


@product_router.post("", status_code=201, response_model=ProductIdResponse)
async def add_product(body: AddProductRequest) -> ProductIdResponse:
    command = AddProduct(
        name=body.name,
        price=body.price,
        vendor_id=body.vendor_id,
        category=body.category,
        description=body.description,
        stock_quantity=body.stock_quantity,
    )
    result = current_domain.process(command, asynchronous=False)
    return ProductIdResponse(product_id=result)


@product_router.put("/{product_id}/details", response_model=StatusResponse)
async def update_product_details(product_id: str, body: UpdateProductDetailsRequest) -> StatusResponse:
    command = UpdateProductDetails(
        product_id=product_id,
        name=body.name,
        price=body.price,
        category=body.category,
        description=body.description,
    )
    current_domain.process(command, asynchronous=False)
    return StatusResponse()


@product_router.put("/{product_id}/status", response_model=StatusResponse)
async def change_product_status(product_id: str, body: ChangeProductStatusRequest) -> StatusResponse:
    current_domain.process(ChangeProductStatus(product_id=product_id, status=body.status), asynchronous=False)
    return StatusResponse()


@product_router.get("/{product_id}", response_model=ProductResponse)
async def get_product(product_id: str) -> ProductResponse:
    return _product_response(find_product(product_id))


@product_router.get("/vendors/{vendor_id}", response_model=list[ProductResponse])
async def list_vendor_products(vendor_id: str) -> list[ProductResponse]:
    repo = current_domain.repository_for(Product)
    return [_product_response(p) for p in repo.list_by_vendor(ensure_identifier(vendor_id, "vendor_id"))]
