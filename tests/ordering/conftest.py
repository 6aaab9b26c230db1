"""Shared fixtures for the Ordering tests: two vendors, two products, one customer."""

import pytest


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
def product_a(add_product, vendor_1):
    return add_product(vendor_1, name="Cinnamon", price=10.0, stock=50)


@pytest.fixture()
def product_b(add_product, vendor_2):
    return add_product(vendor_2, name="Black Tea", price=25.0, stock=50)


@pytest.fixture()
def pending_order(place_order, customer_id, product_a, product_b):
    return place_order(customer_id, [(product_a, 3), (product_b, 1)])
