"""Shared fixtures for the Ratings tests: a customer with a delivered two-vendor order."""

import pytest
from protean import current_domain

from marketplace.ordering.order.delivery import UpdateVendorStatus
from marketplace.ordering.order.dispatch import DispatchOrder


@pytest.fixture()
def vendor_1(register_user):
    return register_user(name="Spice Co", role="Vendor")


@pytest.fixture()
def vendor_2(register_user):
    return register_user(name="Tea Co", role="Vendor")


@pytest.fixture()
def customer_id(register_user):
    return register_user(name="Kamal Silva", role="Customer")


@pytest.fixture()
def order(place_order, add_product, customer_id, vendor_1, vendor_2):
    """A dispatched order where only ``vendor_1`` has delivered."""
    product_a = add_product(vendor_1, name="Cinnamon", price=10.0, stock=20)
    product_b = add_product(vendor_2, name="Black Tea", price=25.0, stock=20)
    placed = place_order(customer_id, [(product_a, 1), (product_b, 1)])
    current_domain.process(DispatchOrder(order_id=str(placed.id)), asynchronous=False)
    return current_domain.process(
        UpdateVendorStatus(order_id=str(placed.id), vendor_id=vendor_1, status="Delivered"),
        asynchronous=False,
    )
