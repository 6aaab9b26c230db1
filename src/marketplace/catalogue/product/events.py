"""Domain events for the Product aggregate."""

from protean.fields import DateTime, Float, Identifier, String

from marketplace.domain import marketplace


@marketplace.event(part_of="Product")
class ProductAdded:
    """A vendor listed a new product."""

    __version__ = 1

    product_id: Identifier(required=True)
    vendor_id: Identifier(required=True)
    name: String(required=True)
    category: String()
    price: Float(required=True)
    added_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductDetailsUpdated:
    __version__ = 1

    product_id: Identifier(required=True)
    name: String(required=True)
    category: String()
    price: Float(required=True)
    updated_at: DateTime(required=True)


@marketplace.event(part_of="Product")
class ProductStatusChanged:
    __version__ = 1

    product_id: Identifier(required=True)
    previous_status: String(required=True)
    new_status: String(required=True)
    changed_at: DateTime(required=True)
