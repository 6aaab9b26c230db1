"""Repository for the Product aggregate."""

from marketplace.catalogue.product.product import Product
from marketplace.domain import marketplace
from marketplace.shared.query import scan


@marketplace.repository(part_of=Product)
class ProductRepository:
    def find(self, product_id) -> Product | None:
        """Product with ``product_id``, or None."""
        products = self._dao.query.filter(id=str(product_id)).all().items
        return products[0] if products else None

    def list_by_vendor(self, vendor_id) -> list[Product]:
        return list(scan(self._dao, order_by="created_at", vendor_id=str(vendor_id)))

    def list_all(self) -> list[Product]:
        return list(scan(self._dao, order_by="created_at"))

    def remove(self, product: Product) -> None:
        self._dao.delete(product)
