from uuid import uuid4

import pytest
from protean.exceptions import ValidationError

from marketplace.ordering.order.events import (
    CancellationRequested,
    OrderCancelled,
    OrderDelivered,
    OrderDispatched,
    VendorRated,
    VendorStatusUpdated,
)
from marketplace.ordering.order.order import Order, OrderStatus, ShippingAddress, VendorStatus, is_closed
from marketplace.shared.exceptions import InvalidOrderState

VENDOR_1 = str(uuid4())
VENDOR_2 = str(uuid4())


def _order():
    lines = [
        {"product_id": str(uuid4()), "product_name": "A", "vendor_id": VENDOR_1, "quantity": 3, "unit_price": 10.0},
        {"product_id": str(uuid4()), "product_name": "B", "vendor_id": VENDOR_2, "quantity": 1, "unit_price": 25.0},
    ]
    order = Order.place(
        order_code="EC-10000001",
        customer_id=str(uuid4()),
        lines=lines,
        shipping_address=ShippingAddress(street="12 Galle Road", city="Colombo", zip_code="00300"),
    )
    order._events.clear()
    return order


def _dispatched():
    order = _order()
    order.dispatch()
    order._events.clear()
    return order


def _delivered():
    order = _dispatched()
    order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)
    order.update_vendor_status(VENDOR_2, VendorStatus.DELIVERED.value)
    order._events.clear()
    return order


class TestDispatch:
    def test_pending_order_can_be_dispatched(self):
        order = _order()
        order.dispatch()
        assert order.status == OrderStatus.DISPATCHED.value
        assert isinstance(order._events[0], OrderDispatched)

    def test_processing_order_can_be_dispatched(self):
        order = _order()
        order.status = OrderStatus.PROCESSING.value
        order.dispatch()
        assert order.status == OrderStatus.DISPATCHED.value

    def test_dispatch_twice_is_rejected(self):
        order = _dispatched()
        with pytest.raises(InvalidOrderState):
            order.dispatch()


class TestVendorStatus:
    def test_first_delivery_makes_order_partially_delivered(self):
        order = _dispatched()

        completed = order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)

        assert completed is False
        assert order.status == OrderStatus.PARTIALLY_DELIVERED.value
        event = order._events[0]
        assert isinstance(event, VendorStatusUpdated)
        assert event.order_status == OrderStatus.PARTIALLY_DELIVERED.value

    def test_last_delivery_completes_order(self):
        order = _dispatched()
        order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)

        completed = order.update_vendor_status(VENDOR_2, VendorStatus.DELIVERED.value)

        assert completed is True
        assert order.status == OrderStatus.DELIVERED.value
        assert any(isinstance(e, OrderDelivered) for e in order._events)

    def test_processing_update_leaves_status_unchanged(self):
        order = _dispatched()

        order.update_vendor_status(VENDOR_1, VendorStatus.PROCESSING.value)

        assert order.status == OrderStatus.DISPATCHED.value

    def test_delivered_vendor_cannot_go_back_to_processing(self):
        order = _dispatched()
        order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)

        with pytest.raises(InvalidOrderState):
            order.update_vendor_status(VENDOR_1, VendorStatus.PROCESSING.value)

        assert order.vendor_entry(VENDOR_1).status == VendorStatus.DELIVERED.value
        assert order.status == OrderStatus.PARTIALLY_DELIVERED.value

    def test_repeated_delivery_keeps_partial_status(self):
        order = _dispatched()
        order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)

        completed = order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)

        assert completed is False
        assert order.status == OrderStatus.PARTIALLY_DELIVERED.value

    def test_unknown_vendor_is_rejected(self):
        order = _dispatched()
        with pytest.raises(ValidationError) as exc:
            order.update_vendor_status(str(uuid4()), VendorStatus.DELIVERED.value)
        assert "vendor_id" in exc.value.messages

    def test_unknown_vendor_status_is_rejected(self):
        order = _dispatched()
        with pytest.raises(ValueError):
            order.update_vendor_status(VENDOR_1, "Lost")

    def test_pending_order_cannot_take_vendor_updates(self):
        order = _order()
        with pytest.raises(InvalidOrderState):
            order.update_vendor_status(VENDOR_1, VendorStatus.DELIVERED.value)


class TestCancellation:
    @pytest.mark.parametrize("status", [OrderStatus.PENDING.value, OrderStatus.PROCESSING.value])
    def test_request_from_open_states(self, status):
        order = _order()
        order.status = status

        order.request_cancellation()

        assert order.status == OrderStatus.CANCELLATION_REQUESTED.value
        event = order._events[0]
        assert isinstance(event, CancellationRequested)
        assert event.previous_status == status

    def test_request_after_dispatch_is_rejected(self):
        order = _dispatched()
        with pytest.raises(InvalidOrderState):
            order.request_cancellation()
        assert order.status == OrderStatus.DISPATCHED.value

    def test_confirm(self):
        order = _order()
        order.request_cancellation()

        order.confirm_cancellation()

        assert order.status == OrderStatus.CANCELLED.value
        assert isinstance(order._events[-1], OrderCancelled)

    def test_confirm_without_request_is_rejected(self):
        order = _order()
        with pytest.raises(InvalidOrderState):
            order.confirm_cancellation()

    def test_cancelled_is_terminal(self):
        order = _order()
        order.request_cancellation()
        order.confirm_cancellation()
        with pytest.raises(InvalidOrderState):
            order.dispatch()


class TestModifiable:
    def test_only_pending_orders_can_be_revised(self):
        order = _dispatched()
        with pytest.raises(InvalidOrderState):
            order.revise(shipping_address=ShippingAddress(street="1 Main", city="Kandy", zip_code="20000"))


class TestRatingMarks:
    def test_delivered_vendor_can_be_marked_rated(self):
        order = _delivered()

        order.mark_vendor_rated(VENDOR_1)

        assert order.vendor_entry(VENDOR_1).rated is True
        assert isinstance(order._events[0], VendorRated)

    def test_undelivered_vendor_cannot_be_rated(self):
        order = _dispatched()
        with pytest.raises(InvalidOrderState):
            order.mark_vendor_rated(VENDOR_1)

    def test_vendor_cannot_be_rated_twice(self):
        order = _delivered()
        order.mark_vendor_rated(VENDOR_1)
        with pytest.raises(ValidationError):
            order.mark_vendor_rated(VENDOR_1)

    def test_clearing_allows_rating_again(self):
        order = _delivered()
        order.mark_vendor_rated(VENDOR_1)

        order.clear_vendor_rating(VENDOR_1)
        order.mark_vendor_rated(VENDOR_1)

        assert order.vendor_entry(VENDOR_1).rated is True


@pytest.mark.parametrize(
    "status, closed",
    [
        (OrderStatus.PENDING.value, False),
        (OrderStatus.DISPATCHED.value, False),
        (OrderStatus.CANCELLATION_REQUESTED.value, False),
        (OrderStatus.DELIVERED.value, True),
        (OrderStatus.CANCELLED.value, True),
    ],
)
def test_is_closed(status, closed):
    assert is_closed(status) is closed
