"""Shared BDD fixtures and step definitions for the order lifecycle."""

import pytest
from protean import current_domain
from pytest_bdd import given, parsers, then

from marketplace.catalogue.product.management import AddProduct
from marketplace.identity.user.registration import ChangeUserStatus, RegisterUser
from marketplace.inventory.stock.ledger import InventoryLedger
from marketplace.notifications.notification.notification import Notification
from marketplace.ordering.order.order import Order
from marketplace.shared.exceptions import InsufficientStock, InvalidOrderState


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------
@pytest.fixture()
def world():
    """Names to ids, the order under test and the last captured error."""
    return {"users": {}, "products": {}, "order_id": None, "error": None}


def _register(world, name, role):
    user_id = current_domain.process(
        RegisterUser(name=name, email=f"{name.lower().replace(' ', '.')}@example.com", role=role),
        asynchronous=False,
    )
    current_domain.process(ChangeUserStatus(user_id=user_id, status="Active"), asynchronous=False)
    world["users"][name] = user_id
    return user_id


def current_order(world) -> Order:
    return current_domain.repository_for(Order).get(world["order_id"])


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(parsers.cfparse('the vendor "{vendor}" sells "{product}" at {price:f} with {stock:d} in stock'))
def vendor_sells(world, vendor, product, price, stock):
    vendor_id = world["users"].get(vendor) or _register(world, vendor, "Vendor")
    world["products"][product] = current_domain.process(
        AddProduct(name=product, price=price, vendor_id=vendor_id, stock_quantity=stock),
        asynchronous=False,
    )


@given(parsers.cfparse('an active customer "{name}"'))
def active_customer(world, name):
    world["users"]["customer"] = _register(world, name, "Customer")


@given(parsers.cfparse('an active "{role}" user "{name}"'))
def active_user(world, role, name):
    _register(world, name, role)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('the order status is "{status}"'))
def order_status_is(world, status):
    assert current_order(world).status == status


@then("the request is rejected for insufficient stock")
def rejected_for_stock(world):
    assert isinstance(world["error"], InsufficientStock)


@then("the request is rejected as an invalid state")
def rejected_as_invalid_state(world):
    assert isinstance(world["error"], InvalidOrderState)


@then(parsers.cfparse('"{product}" has {quantity:d} units in stock'))
def product_stock(world, product, quantity):
    assert InventoryLedger().get_by_product_id(world["products"][product]).stock_quantity == quantity


@then(parsers.cfparse('the customer is told "{text}"'))
def customer_is_told(world, text):
    _user_is_told(world, "customer", text)


@then(parsers.cfparse('"{name}" is told "{text}"'))
def user_is_told(world, name, text):
    _user_is_told(world, name, text)


def _user_is_told(world, key, text):
    order = current_order(world)
    messages = [n.message for n in current_domain.repository_for(Notification).list_for_user(world["users"][key])]
    assert f"Order {order.order_code} {text}" in messages
