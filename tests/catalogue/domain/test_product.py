from uuid import uuid4

import pytest
from protean.exceptions import ValidationError

from marketplace.catalogue.product.events import ProductAdded, ProductDetailsUpdated, ProductStatusChanged
from marketplace.catalogue.product.product import Product, ProductStatus

VENDOR_ID = str(uuid4())


def _product(**overrides):
    defaults = {"name": "Ceylon Black Tea", "price": 12.5, "vendor_id": VENDOR_ID, "category": "Groceries"}
    defaults.update(overrides)
    return Product.create(**defaults)


class TestProductCreation:
    def test_new_product_is_active(self):
        product = _product()
        assert product.status == ProductStatus.ACTIVE.value
        assert product.created_at is not None
        assert product.created_at == product.updated_at

    def test_free_products_are_allowed(self):
        assert _product(price=0.0).price == 0.0

    def test_negative_price_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            _product(price=-1.0)
        assert "price" in exc.value.messages

    def test_name_is_required(self):
        with pytest.raises(ValidationError):
            _product(name=None)

    def test_raises_product_added(self):
        product = _product()
        event = product._events[0]
        assert isinstance(event, ProductAdded)
        assert event.product_id == str(product.id)
        assert event.vendor_id == VENDOR_ID
        assert event.price == 12.5


class TestProductDetails:
    def test_partial_update_keeps_other_fields(self):
        product = _product()
        product.update_details(price=14.0)

        assert product.price == 14.0
        assert product.name == "Ceylon Black Tea"
        assert product.category == "Groceries"

    def test_update_raises_event(self):
        product = _product()
        product._events.clear()

        product.update_details(name="Ceylon Green Tea")

        assert isinstance(product._events[0], ProductDetailsUpdated)
        assert product._events[0].name == "Ceylon Green Tea"

    def test_negative_price_update_is_rejected(self):
        product = _product()
        with pytest.raises(ValidationError):
            product.update_details(price=-5.0)
        assert product.price == 12.5


class TestProductStatus:
    def test_deactivate(self):
        product = _product()
        product._events.clear()

        product.change_status(ProductStatus.DEACTIVATED.value)

        assert product.status == ProductStatus.DEACTIVATED.value
        event = product._events[0]
        assert isinstance(event, ProductStatusChanged)
        assert event.previous_status == ProductStatus.ACTIVE.value

    def test_unchanged_status_raises_nothing(self):
        product = _product()
        product._events.clear()
        product.change_status(ProductStatus.ACTIVE.value)
        assert product._events == []
