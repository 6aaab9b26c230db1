"""Parsing and pricing of order lines.

Placement and item updates share the same rules: every product must exist,
every quantity must be positive, and the stock on hand must cover the
total requested per product. Nothing here writes to the store.
"""

import json

from protean.exceptions import ValidationError

from marketplace.catalogue.product.lookup import find_product
from marketplace.inventory.stock.ledger import InventoryLedger, StockLine
from marketplace.ordering.order.order import ShippingAddress

_ADDRESS_FIELDS = ("street", "city", "zip_code")


def parse_items(raw) -> list[dict]:
    """Decode the JSON item list carried by commands."""
    try:
        items = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError:
        raise ValidationError({"items": ["Items must be a JSON array"]}) from None

    if not isinstance(items, list) or not all(isinstance(item, dict) for item in items):
        raise ValidationError({"items": ["Items must be a list of objects"]})
    if not items:
        raise ValidationError({"items": ["An order must contain at least one item"]})
    return items


def parse_address(raw) -> ShippingAddress:
    try:
        data = json.loads(raw) if isinstance(raw, str) else raw
    except json.JSONDecodeError:
        raise ValidationError({"shipping_address": ["Shipping address must be a JSON object"]}) from None

    if not isinstance(data, dict):
        raise ValidationError({"shipping_address": ["Shipping address must be a JSON object"]})
    return ShippingAddress(**{field: data.get(field) for field in _ADDRESS_FIELDS})


def _valid_quantity(quantity) -> bool:
    return isinstance(quantity, int) and not isinstance(quantity, bool) and quantity > 0


def price_lines(items) -> list[dict]:
    """Validate raw items and snapshot product name, price and vendor."""
    lines = []
    for item in items:
        product = find_product(item.get("product_id"))

        quantity = item.get("quantity")
        if not _valid_quantity(quantity):
            raise ValidationError({"quantity": [f"Quantity for product {product.id} must be greater than zero"]})

        lines.append(
            {
                "product_id": str(product.id),
                "product_name": product.name,
                "vendor_id": str(product.vendor_id),
                "quantity": quantity,
                "unit_price": product.price,
            }
        )
    return lines


def stock_lines(lines) -> list[StockLine]:
    return [StockLine(product_id=str(line["product_id"]), quantity=line["quantity"]) for line in lines]


def ensure_stock(lines) -> None:
    """Raise ``InsufficientStock`` unless stock covers every product's total."""
    InventoryLedger().ensure_available(stock_lines(lines))
