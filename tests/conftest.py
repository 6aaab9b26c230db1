import json
import os
from pathlib import Path
from uuid import uuid4

import pytest
from protean.integrations.pytest import DomainFixture


def pytest_addoption(parser):
    parser.addoption(
        "--env",
        action="store",
        default="test",
        help="Config environment to run tests on",
    )


def pytest_sessionstart(session):
    os.environ["PROTEAN_ENV"] = session.config.option.env


def pytest_collection_modifyitems(config, items):
    """Automatically mark tests based on their directory location."""
    for item in items:
        test_path = str(Path(item.fspath))

        if "/domain/" in test_path:
            item.add_marker(pytest.mark.domain)
        elif "/application/" in test_path:
            item.add_marker(pytest.mark.application)
        elif "/integration/" in test_path:
            item.add_marker(pytest.mark.integration)
            # Integration tests are often slower
            if not any(m.name == "fast" for m in item.iter_markers()):
                item.add_marker(pytest.mark.slow)
        elif "/bdd/" in test_path:
            item.add_marker(pytest.mark.bdd)


@pytest.fixture(scope="session")
def marketplace_bed():
    from marketplace.domain import marketplace, register_elements

    register_elements()
    bed = DomainFixture(marketplace)
    bed.setup()
    yield bed
    bed.teardown()


@pytest.fixture(autouse=True)
def _ctx(marketplace_bed):
    with marketplace_bed.domain_context():
        yield

        from protean import current_domain

        from marketplace.notifications.sink import reset_sink
        from marketplace.shared.locking import inventory_locks, order_locks

        # Clear all databases
        for _, provider in current_domain.providers.items():
            provider._data_reset()

        # Drain event stores
        current_domain.event_store.store._data_reset()

        reset_sink()
        inventory_locks.reset()
        order_locks.reset()


# ---------------------------------------------------------------------------
# Builders shared by every context
# ---------------------------------------------------------------------------
DEFAULT_ADDRESS = {"street": "12 Galle Road", "city": "Colombo", "zip_code": "00300"}


@pytest.fixture()
def register_user():
    """Register a user and, for reviewed roles, activate the account."""
    from protean import current_domain

    from marketplace.identity.user.registration import ChangeUserStatus, RegisterUser
    from marketplace.identity.user.user import UserStatus

    def _register(name="Test User", role="Customer", email=None, activate=True):
        email = email or f"{uuid4().hex[:12]}@example.com"
        user_id = current_domain.process(RegisterUser(name=name, email=email, role=role), asynchronous=False)
        if activate:
            current_domain.process(
                ChangeUserStatus(user_id=user_id, status=UserStatus.ACTIVE.value),
                asynchronous=False,
            )
        return user_id

    return _register


@pytest.fixture()
def add_product():
    """Add a product (and its inventory record); returns the product id."""
    from protean import current_domain

    from marketplace.catalogue.product.management import AddProduct

    def _add(vendor_id, name="Widget", price=10.0, stock=50, category="General"):
        return current_domain.process(
            AddProduct(
                name=name,
                price=price,
                vendor_id=vendor_id,
                category=category,
                stock_quantity=stock,
            ),
            asynchronous=False,
        )

    return _add


@pytest.fixture()
def stock_of():
    """Current stock quantity of a product."""
    from marketplace.inventory.stock.ledger import InventoryLedger

    def _stock(product_id):
        return InventoryLedger().get_by_product_id(product_id).stock_quantity

    return _stock


@pytest.fixture()
def place_order():
    """Place an order from ``(product_id, quantity)`` pairs; returns the Order."""
    from protean import current_domain

    from marketplace.ordering.order.placement import PlaceOrder

    def _place(customer_id, lines, address=None):
        return current_domain.process(
            PlaceOrder(
                customer_id=customer_id,
                items=json.dumps([{"product_id": pid, "quantity": qty} for pid, qty in lines]),
                shipping_address=json.dumps(address or DEFAULT_ADDRESS),
            ),
            asynchronous=False,
        )

    return _place


@pytest.fixture()
def inbox():
    """Messages stored for a user, newest first."""
    from protean import current_domain

    from marketplace.notifications.notification.notification import Notification

    def _inbox(user_id):
        return [n.message for n in current_domain.repository_for(Notification).list_for_user(user_id)]

    return _inbox
