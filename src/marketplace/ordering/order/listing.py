"""Order read operations.

Results are plain dicts enriched at read time with the customer's name and
each vendor's name, so renamed users show up with their current name.
"""

from protean.utils.globals import current_domain

from marketplace.identity.user.user import User
from marketplace.ordering.order.order import Order
from marketplace.shared.identifiers import ensure_identifier
from marketplace.shared.query import default_page_size, ensure_page


class _NameResolver:
    """Memoizes user-name lookups for the duration of one read."""

    def __init__(self):
        self._repo = current_domain.repository_for(User)
        self._names: dict[str, str | None] = {}

    def __call__(self, user_id) -> str | None:
        key = str(user_id)
        if key not in self._names:
            self._names[key] = self._repo.display_name(key)
        return self._names[key]


def _order_view(order: Order, names: _NameResolver, vendor_id=None) -> dict:
    items = order.items if vendor_id is None else order.lines_for_vendor(vendor_id)
    entries = [
        entry for entry in order.vendor_statuses if vendor_id is None or str(entry.vendor_id) == str(vendor_id)
    ]
    address = order.shipping_address

    return {
        "id": str(order.id),
        "order_code": order.order_code,
        "customer_id": str(order.customer_id),
        "customer_name": names(order.customer_id),
        "status": order.status,
        "total_amount": order.total_amount,
        "shipping_address": {
            "street": address.street,
            "city": address.city,
            "zip_code": address.zip_code,
        }
        if address
        else None,
        "items": [
            {
                "product_id": str(item.product_id),
                "product_name": item.product_name,
                "vendor_id": str(item.vendor_id),
                "vendor_name": names(item.vendor_id),
                "quantity": item.quantity,
                "unit_price": item.unit_price,
            }
            for item in items
        ],
        "vendor_statuses": [
            {
                "vendor_id": str(entry.vendor_id),
                "vendor_name": names(entry.vendor_id),
                "status": entry.status,
                "rated": entry.rated,
            }
            for entry in entries
        ],
        "placed_at": order.placed_at,
        "updated_at": order.updated_at,
    }


def get_order(order_id) -> dict:
    order = current_domain.repository_for(Order).get(ensure_identifier(order_id, "order_id"))
    return _order_view(order, _NameResolver())


def list_orders(page: int = 1, page_size: int | None = None) -> list[dict]:
    page_size = default_page_size() if page_size is None else page_size
    ensure_page(page, page_size)
    names = _NameResolver()
    return [_order_view(order, names) for order in current_domain.repository_for(Order).page(page, page_size)]


def list_customer_orders(customer_id, page: int = 1, page_size: int | None = None) -> list[dict]:
    customer_id = ensure_identifier(customer_id, "customer_id")
    page_size = default_page_size() if page_size is None else page_size
    ensure_page(page, page_size)
    names = _NameResolver()
    orders = current_domain.repository_for(Order).page(page, page_size, customer_id=customer_id)
    return [_order_view(order, names) for order in orders]


def list_vendor_orders(vendor_id, page: int = 1, page_size: int | None = None) -> list[dict]:
    """Orders containing the vendor's products, showing only that vendor's lines."""
    vendor_id = ensure_identifier(vendor_id, "vendor_id")
    page_size = default_page_size() if page_size is None else page_size
    ensure_page(page, page_size)

    matching = [order for order in current_domain.repository_for(Order).all_orders() if order.vendor_entry(vendor_id)]
    start = (page - 1) * page_size
    names = _NameResolver()
    return [_order_view(order, names, vendor_id=vendor_id) for order in matching[start : start + page_size]]
