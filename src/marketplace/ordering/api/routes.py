"""FastAPI endpoints for the Ordering context."""

import json

from fastapi import APIRouter
from protean.utils.globals import current_domain

from marketplace.ordering.api.schemas import (
    OrderResponse,
    PlaceOrderRequest,
    UpdateOrderRequest,
    VendorStatusRequest,
)
from marketplace.ordering.order.cancellation import ConfirmCancellation, RequestCancellation
from marketplace.ordering.order.delivery import UpdateVendorStatus
from marketplace.ordering.order.dispatch import DispatchOrder
from marketplace.ordering.order.listing import (
    get_order,
    list_customer_orders,
    list_orders,
    list_vendor_orders,
)
from marketplace.ordering.order.modification import UpdateOrder
from marketplace.ordering.order.placement import PlaceOrder

order_router = APIRouter(prefix="/orders", tags=["orders"])


def _process(command) -> OrderResponse:
    order = current_domain.process(command, asynchronous=False)
    return OrderResponse(**get_order(str(order.id)))


# --- Commands ---


@order_router.post("", status_code=201, response_model=OrderResponse)
async def place_order(body: PlaceOrderRequest) -> OrderResponse:
    command = PlaceOrder(
        customer_id=body.customer_id,
        items=body.items_json(),
        shipping_address=json.dumps(body.shipping_address.model_dump()),
    )
    return _process(command)


@order_router.put("/{order_id}", response_model=OrderResponse)
async def update_order(order_id: str, body: UpdateOrderRequest) -> OrderResponse:
    command = UpdateOrder(
        order_id=order_id,
        items=json.dumps([item.model_dump() for item in body.items]) if body.items is not None else None,
        shipping_address=json.dumps(body.shipping_address.model_dump()) if body.shipping_address else None,
    )
    return _process(command)


@order_router.post("/{order_id}/dispatch", response_model=OrderResponse)
async def dispatch_order(order_id: str) -> OrderResponse:
    return _process(DispatchOrder(order_id=order_id))


@order_router.put("/{order_id}/vendors/{vendor_id}/status", response_model=OrderResponse)
async def update_vendor_status(order_id: str, vendor_id: str, body: VendorStatusRequest) -> OrderResponse:
    return _process(UpdateVendorStatus(order_id=order_id, vendor_id=vendor_id, status=body.status))


@order_router.post("/{order_id}/cancellation-request", response_model=OrderResponse)
async def request_cancellation(order_id: str) -> OrderResponse:
    return _process(RequestCancellation(order_id=order_id))


@order_router.post("/{order_id}/cancellation", response_model=OrderResponse)
async def confirm_cancellation(order_id: str) -> OrderResponse:
    return _process(ConfirmCancellation(order_id=order_id))


# --- Queries ---


@order_router.get("", response_model=list[OrderResponse])
async def get_orders(page: int = 1, page_size: int | None = None) -> list[OrderResponse]:
    return [OrderResponse(**view) for view in list_orders(page, page_size)]


@order_router.get("/customers/{customer_id}", response_model=list[OrderResponse])
async def get_customer_orders(customer_id: str, page: int = 1, page_size: int | None = None) -> list[OrderResponse]:
    return [OrderResponse(**view) for view in list_customer_orders(customer_id, page, page_size)]


@order_router.get("/vendors/{vendor_id}", response_model=list[OrderResponse])
async def get_vendor_orders(vendor_id: str, page: int = 1, page_size: int | None = None) -> list[OrderResponse]:
    return [OrderResponse(**view) for view in list_vendor_orders(vendor_id, page, page_size)]


@order_router.get("/{order_id}", response_model=OrderResponse)
async def get_single_order(order_id: str) -> OrderResponse:
    return OrderResponse(**get_order(order_id))
