"""Product aggregate: what a vendor sells, at what price."""

from datetime import UTC, datetime
from enum import Enum

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, Identifier, String, Text

from marketplace.catalogue.product.events import ProductAdded, ProductDetailsUpdated, ProductStatusChanged
from marketplace.domain import marketplace


class ProductStatus(Enum):
    ACTIVE = "Active"
    DEACTIVATED = "Deactivated"


@marketplace.aggregate
class Product:
    """A sellable item owned by one vendor.

    Orders copy the name, price and vendor at placement time, so later
    edits here never change an existing order.
    """

    name: String(required=True, max_length=255)
    category: String(max_length=100)
    description: Text()
    price: Float(required=True, min_value=0.0)
    vendor_id: Identifier(required=True)
    status: String(choices=ProductStatus, default=ProductStatus.ACTIVE.value)
    created_at: DateTime()
    updated_at: DateTime()

    @classmethod
    def create(cls, name, price, vendor_id, category=None, description=None):
        if price is None or price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        now = datetime.now(UTC)
        product = cls(
            name=name,
            price=price,
            vendor_id=str(vendor_id),
            category=category,
            description=description,
            status=ProductStatus.ACTIVE.value,
            created_at=now,
            updated_at=now,
        )
        product.raise_(
            ProductAdded(
                product_id=str(product.id),
                vendor_id=str(vendor_id),
                name=name,
                category=category,
                price=price,
                added_at=now,
            )
        )
        return product

    def update_details(self, name=None, price=None, category=None, description=None):
        """Partial update; arguments left as None keep their current value."""
        if price is not None and price < 0:
            raise ValidationError({"price": ["Price cannot be negative"]})

        if name is not None:
            self.name = name
        if price is not None:
            self.price = price
        if category is not None:
            self.category = category
        if description is not None:
            self.description = description

        now = datetime.now(UTC)
        self.updated_at = now
        self.raise_(
            ProductDetailsUpdated(
                product_id=str(self.id),
                name=self.name,
                category=self.category,
                price=self.price,
                updated_at=now,
            )
        )

    def change_status(self, status):
        new_status = ProductStatus(status).value
        if new_status == self.status:
            return

        previous = self.status
        now = datetime.now(UTC)
        self.status = new_status
        self.updated_at = now
        self.raise_(
            ProductStatusChanged(
                product_id=str(self.id),
                previous_status=previous,
                new_status=new_status,
                changed_at=now,
            )
        )
