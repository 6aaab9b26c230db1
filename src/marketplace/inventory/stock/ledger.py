"""Inventory ledger: every stock mutation goes through here.

Reads and writes of one inventory record happen under that record's lock,
so the check ("is there enough?") and the write it guards cannot interleave
with another mutation of the same record. ``commit`` extends this to a set
of records: all of them are locked, all are checked, and only then is any
of them written.
"""

from dataclasses import dataclass

from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.inventory.stock.inventory import Inventory, low_stock_threshold
from marketplace.notifications.notification.dispatch import notify
from marketplace.ordering.order.order import Order
from marketplace.shared.exceptions import InsufficientStock
from marketplace.shared.identifiers import ensure_identifier
from marketplace.shared.locking import KeyedLock, inventory_locks
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class StockLine:
    """A quantity of one product to deduct or re-credit."""

    product_id: str
    quantity: int


def _totals(lines) -> dict[str, int]:
    """Sum quantities per product, preserving first-seen order."""
    totals: dict[str, int] = {}
    for line in lines:
        product_id = str(line.product_id)
        totals[product_id] = totals.get(product_id, 0) + line.quantity
    return totals


def _shortage(product_id, available, requested) -> str:
    return f"Insufficient stock for product {product_id}: {available} available, {requested} requested"


class InventoryLedger:
    def __init__(self, locks: KeyedLock = inventory_locks):
        self._locks = locks

    @property
    def repository(self):
        return current_domain.repository_for(Inventory)

    def get_by_product_id(self, product_id) -> Inventory | None:
        return self.repository.get_by_product_id(ensure_identifier(product_id, "product_id"))

    def apply_delta(self, inventory_id, delta: int) -> Inventory:
        """Adjust one record by ``delta``; never below zero."""
        inventory_id = ensure_identifier(inventory_id, "inventory_id")
        repo = self.repository

        with self._locks.hold(inventory_id):
            inventory = repo.get(inventory_id)
            crossed = inventory.apply_delta(delta, low_stock_threshold())
            repo.add(inventory)

        logger.info(
            "Stock adjusted",
            inventory_id=inventory_id,
            delta=delta,
            stock_quantity=inventory.stock_quantity,
        )
        if crossed:
            self._alert_vendor(inventory)
        return inventory

    def replace(self, inventory_id, stock_quantity: int) -> Inventory:
        """Set one record to an absolute quantity."""
        inventory_id = ensure_identifier(inventory_id, "inventory_id")
        repo = self.repository

        with self._locks.hold(inventory_id):
            inventory = repo.get(inventory_id)
            crossed = inventory.replace(stock_quantity, low_stock_threshold())
            repo.add(inventory)

        logger.info("Stock replaced", inventory_id=inventory_id, stock_quantity=stock_quantity)
        if crossed:
            self._alert_vendor(inventory)
        return inventory

    def ensure_available(self, lines) -> None:
        """Check, without writing, that stock covers every product's total.

        Raises ``InsufficientStock`` naming each product that has no inventory
        record or too few units.
        """
        requested = _totals(lines)
        repo = self.repository

        problems = []
        for product_id, quantity in requested.items():
            inventory = repo.get_by_product_id(product_id)
            if inventory is None:
                problems.append(f"No inventory record for product {product_id}")
            elif not inventory.can_cover(quantity):
                problems.append(_shortage(product_id, inventory.stock_quantity, quantity))
        if problems:
            raise InsufficientStock({"items": problems})

    def commit(self, lines) -> list[Inventory]:
        """Deduct every line, or nothing at all.

        Raises ``InsufficientStock`` when any product has no inventory record
        or too little stock; no record is written in that case.
        """
        requested = _totals(lines)
        repo = self.repository

        located = {}
        missing = []
        for product_id in requested:
            inventory = repo.get_by_product_id(product_id)
            if inventory is None:
                missing.append(product_id)
            else:
                located[product_id] = inventory
        if missing:
            raise InsufficientStock(
                {"items": [f"No inventory record for product {product_id}" for product_id in missing]}
            )

        crossed = []
        with self._locks.hold(*(str(inventory.id) for inventory in located.values())):
            current = {product_id: repo.get(str(inventory.id)) for product_id, inventory in located.items()}

            shortages = [
                _shortage(product_id, inventory.stock_quantity, requested[product_id])
                for product_id, inventory in current.items()
                if not inventory.can_cover(requested[product_id])
            ]
            if shortages:
                raise InsufficientStock({"items": shortages})

            threshold = low_stock_threshold()
            for product_id, inventory in current.items():
                if inventory.apply_delta(-requested[product_id], threshold):
                    crossed.append(inventory)
                repo.add(inventory)

        logger.info("Stock committed", products=list(requested), units=sum(requested.values()))
        for inventory in crossed:
            self._alert_vendor(inventory)
        return list(current.values())

    def release(self, lines) -> list[Inventory]:
        """Re-credit lines taken by an earlier ``commit``."""
        requested = _totals(lines)
        repo = self.repository

        located = {}
        for product_id in requested:
            inventory = repo.get_by_product_id(product_id)
            if inventory is None:
                logger.warning("Cannot release stock, inventory is gone", product_id=product_id)
                continue
            located[product_id] = inventory

        released = []
        with self._locks.hold(*(str(inventory.id) for inventory in located.values())):
            threshold = low_stock_threshold()
            for product_id, inventory in located.items():
                inventory = repo.get(str(inventory.id))
                inventory.apply_delta(requested[product_id], threshold)
                repo.add(inventory)
                released.append(inventory)

        logger.info("Stock released", products=list(located))
        return released

    def delete(self, inventory_id) -> bool:
        """Remove a record and its product.

        Returns False, without raising, when the record does not exist or an
        order that is neither cancelled nor delivered still references the
        product.
        """
        inventory_id = ensure_identifier(inventory_id, "inventory_id")
        repo = self.repository

        with self._locks.hold(inventory_id):
            inventory = repo.find(inventory_id)
            if inventory is None:
                logger.info("Inventory not found, nothing to delete", inventory_id=inventory_id)
                return False

            if current_domain.repository_for(Order).has_open_orders_for_product(inventory.product_id):
                logger.info(
                    "Inventory still referenced by open orders",
                    inventory_id=inventory_id,
                    product_id=str(inventory.product_id),
                )
                return False

            inventory.mark_removed()
            repo.add(inventory)
            repo.remove(inventory)

            products = current_domain.repository_for(Product)
            product = products.find(inventory.product_id)
            if product is not None:
                products.remove(product)

        logger.info("Inventory deleted", inventory_id=inventory_id, product_id=str(inventory.product_id))
        return True

    def _alert_vendor(self, inventory: Inventory) -> None:
        product = current_domain.repository_for(Product).find(inventory.product_id)
        label = product.name if product is not None else str(inventory.product_id)
        notify(
            inventory.vendor_id,
            f"Low stock alert: {label} has {inventory.stock_quantity} units left",
        )
