from uuid import uuid4

import pytest
from protean.exceptions import ValidationError

from marketplace.inventory.stock.events import InventoryRemoved, LowStockDetected, StockAdjusted
from marketplace.inventory.stock.inventory import Inventory, low_stock_threshold
from marketplace.shared.exceptions import InsufficientStock


def _inventory(quantity):
    inventory = Inventory.create(product_id=str(uuid4()), vendor_id=str(uuid4()), stock_quantity=quantity)
    inventory._events.clear()
    return inventory


def _low_stock_events(inventory):
    return [e for e in inventory._events if isinstance(e, LowStockDetected)]


class TestInventoryCreation:
    def test_alert_reflects_initial_quantity(self):
        assert _inventory(10).low_stock_alert is False
        assert _inventory(9).low_stock_alert is True

    def test_negative_initial_quantity_is_rejected(self):
        with pytest.raises(ValidationError):
            Inventory.create(product_id=str(uuid4()), vendor_id=str(uuid4()), stock_quantity=-1)

    def test_threshold_is_read_from_config(self):
        assert low_stock_threshold() == 10


class TestApplyDelta:
    def test_decrement(self):
        inventory = _inventory(20)

        crossed = inventory.apply_delta(-5)

        assert inventory.stock_quantity == 15
        assert crossed is False
        event = inventory._events[0]
        assert isinstance(event, StockAdjusted)
        assert event.previous_quantity == 20
        assert event.new_quantity == 15

    def test_cannot_go_negative(self):
        inventory = _inventory(2)

        with pytest.raises(InsufficientStock):
            inventory.apply_delta(-3)

        assert inventory.stock_quantity == 2
        assert inventory._events == []

    def test_draining_to_zero_is_allowed(self):
        inventory = _inventory(3)
        inventory.apply_delta(-3)
        assert inventory.stock_quantity == 0

    def test_crossing_below_threshold_is_reported_once(self):
        inventory = _inventory(12)

        assert inventory.apply_delta(-3) is True
        assert inventory.low_stock_alert is True
        assert len(_low_stock_events(inventory)) == 1

        assert inventory.apply_delta(-1) is False
        assert len(_low_stock_events(inventory)) == 1

    def test_landing_exactly_on_threshold_is_not_low(self):
        inventory = _inventory(15)
        assert inventory.apply_delta(-5) is False
        assert inventory.low_stock_alert is False

    def test_restock_clears_alert_without_event(self):
        inventory = _inventory(5)

        inventory.apply_delta(20)

        assert inventory.low_stock_alert is False
        assert _low_stock_events(inventory) == []

    def test_last_updated_moves(self):
        inventory = _inventory(5)
        before = inventory.last_updated
        inventory.apply_delta(1)
        assert inventory.last_updated >= before


class TestReplace:
    def test_absolute_set(self):
        inventory = _inventory(5)
        inventory.replace(40)
        assert inventory.stock_quantity == 40
        assert inventory.low_stock_alert is False

    def test_negative_is_rejected(self):
        inventory = _inventory(5)
        with pytest.raises(ValidationError) as exc:
            inventory.replace(-1)
        assert "stock_quantity" in exc.value.messages

    def test_crossing_is_reported(self):
        inventory = _inventory(30)
        assert inventory.replace(4) is True
        event = _low_stock_events(inventory)[0]
        assert event.stock_quantity == 4
        assert event.threshold == 10


def test_mark_removed_raises_event():
    inventory = _inventory(5)
    inventory.mark_removed()
    assert isinstance(inventory._events[0], InventoryRemoved)
