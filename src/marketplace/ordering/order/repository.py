"""Repository for the Order aggregate.

Status changes are persisted with ``save_if_status``: the write only goes
through when the stored order still has the status the change was
computed from.
"""

from marketplace.domain import marketplace
from marketplace.ordering.order.order import Order, is_closed
from marketplace.shared.exceptions import InvalidOrderState, PersistenceFailure
from marketplace.shared.locking import order_locks
from marketplace.shared.query import fetch_page, scan


@marketplace.repository(part_of=Order)
class OrderRepository:
    def guard(self, order_id):
        """Serialize read-check-write sequences on one order."""
        return order_locks.hold(str(order_id))

    def code_exists(self, order_code: str) -> bool:
        return self.find_by_code(order_code) is not None

    def find(self, order_id) -> Order | None:
        orders = self._dao.query.filter(id=str(order_id)).all().items
        return orders[0] if orders else None

    def find_by_code(self, order_code: str) -> Order | None:
        orders = self._dao.query.filter(order_code=order_code).all().items
        return orders[0] if orders else None

    def page(self, page: int, page_size: int, **filters) -> list[Order]:
        return fetch_page(self._dao, page, page_size, order_by="placed_at", **filters)

    def all_orders(self, **filters):
        """Every order matching ``filters``, oldest first."""
        return scan(self._dao, order_by="placed_at", **filters)

    def has_open_orders_for_product(self, product_id) -> bool:
        """True while an order that is not cancelled or delivered lists the product."""
        product_id = str(product_id)
        for order in self.all_orders():
            if is_closed(order.status):
                continue
            if any(str(item.product_id) == product_id for item in order.items):
                return True
        return False

    def save_if_status(self, order: Order, expected_status: str) -> Order:
        """Persist ``order`` only if the stored copy is still in ``expected_status``."""
        stored = self.find(order.id)
        if stored is None:
            raise PersistenceFailure({"order": [f"Order {order.id} no longer exists"]})
        if stored.status != expected_status:
            raise InvalidOrderState({"status": [f"Order {order.id} is {stored.status}, expected {expected_status}"]})

        self.add(order)
        return order
