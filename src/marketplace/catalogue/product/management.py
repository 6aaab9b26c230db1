"""Product management: commands and handler.

Adding a product also opens its inventory record, so every product can be
stocked and ordered from the moment it exists.
"""

from protean import handle
from protean.fields import Float, Identifier, Integer, String, Text
from protean.utils.globals import current_domain

from marketplace.catalogue.product.lookup import find_product
from marketplace.catalogue.product.product import Product, ProductStatus
from marketplace.domain import marketplace
from marketplace.inventory.stock.inventory import Inventory, low_stock_threshold
from marketplace.shared.identifiers import ensure_identifier
from marketplace.utils.logging import get_logger

logger = get_logger(__name__)


@marketplace.command(part_of="Product")
class AddProduct:
    name: String(required=True, max_length=255)
    price: Float(required=True)
    vendor_id: Identifier(required=True)
    category: String(max_length=100)
    description: Text()
    stock_quantity: Integer(default=0)


@marketplace.command(part_of="Product")
class UpdateProductDetails:
    product_id: Identifier(required=True)
    name: String(max_length=255)
    price: Float()
    category: String(max_length=100)
    description: Text()


@marketplace.command(part_of="Product")
class ChangeProductStatus:
    product_id: Identifier(required=True)
    status: String(choices=ProductStatus, required=True)


@marketplace.command_handler(part_of=Product)
class ManageProductHandler:
    @handle(AddProduct)
    def add_product(self, command):
        vendor_id = ensure_identifier(command.vendor_id, "vendor_id")
        product = Product.create(
            name=command.name,
            price=command.price,
            vendor_id=vendor_id,
            category=command.category,
            description=command.description,
        )
        inventory = Inventory.create(
            product_id=product.id,
            vendor_id=vendor_id,
            stock_quantity=command.stock_quantity or 0,
            threshold=low_stock_threshold(),
        )

        current_domain.repository_for(Product).add(product)
        current_domain.repository_for(Inventory).add(inventory)

        logger.info(
            "Product added",
            product_id=str(product.id),
            inventory_id=str(inventory.id),
            vendor_id=vendor_id,
        )
        return str(product.id)

    @handle(UpdateProductDetails)
    def update_product_details(self, command):
        product = find_product(command.product_id)
        product.update_details(
            name=command.name,
            price=command.price,
            category=command.category,
            description=command.description,
        )
        current_domain.repository_for(Product).add(product)
        return product

    @handle(ChangeProductStatus)
    def change_product_status(self, command):
        product = find_product(command.product_id)
        product.change_status(command.status)
        current_domain.repository_for(Product).add(product)
        return product
