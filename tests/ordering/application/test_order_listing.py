from uuid import uuid4

import pytest
from protean.exceptions import ObjectNotFoundError, ValidationError

from marketplace.ordering.order.listing import get_order, list_customer_orders, list_orders, list_vendor_orders


class TestGetOrder:
    def test_view_carries_names(self, pending_order, vendor_1, vendor_2):
        view = get_order(str(pending_order.id))

        assert view["customer_name"] == "Kamal Silva"
        assert view["order_code"] == pending_order.order_code
        assert {i["vendor_name"] for i in view["items"]} == {"Spice Co", "Tea Co"}
        names = {e["vendor_id"]: e["vendor_name"] for e in view["vendor_statuses"]}
        assert names == {vendor_1: "Spice Co", vendor_2: "Tea Co"}
        assert view["shipping_address"] == {"street": "12 Galle Road", "city": "Colombo", "zip_code": "00300"}

    def test_names_are_resolved_at_read_time(self, pending_order, customer_id):
        from protean import current_domain

        from marketplace.identity.user.user import User

        repo = current_domain.repository_for(User)
        user = repo.get(customer_id)
        user.name = "Kamal Perera"
        repo.add(user)

        assert get_order(str(pending_order.id))["customer_name"] == "Kamal Perera"

    def test_unknown_order(self):
        with pytest.raises(ObjectNotFoundError):
            get_order(str(uuid4()))

    def test_malformed_order_id(self):
        with pytest.raises(ValidationError):
            get_order("EC-12345678")


class TestListOrders:
    def test_pagination(self, place_order, customer_id, product_a):
        for _ in range(5):
            place_order(customer_id, [(product_a, 1)])

        assert len(list_orders(page=1, page_size=2)) == 2
        assert len(list_orders(page=3, page_size=2)) == 1
        assert list_orders(page=4, page_size=2) == []

    def test_default_page_size(self, place_order, customer_id, product_a):
        for _ in range(12):
            place_order(customer_id, [(product_a, 1)])

        assert len(list_orders()) == 10

    @pytest.mark.parametrize("page, page_size", [(0, 10), (1, 0), (-1, -1)])
    def test_invalid_paging(self, page, page_size):
        with pytest.raises(ValidationError):
            list_orders(page=page, page_size=page_size)

    def test_customer_orders(self, pending_order, customer_id, register_user, place_order, product_a):
        other = register_user(name="Nimal")
        place_order(other, [(product_a, 1)])

        views = list_customer_orders(customer_id)

        assert [v["id"] for v in views] == [str(pending_order.id)]

    def test_vendor_orders_show_only_that_vendors_lines(self, pending_order, vendor_1, product_a):
        [view] = list_vendor_orders(vendor_1)

        assert [i["product_id"] for i in view["items"]] == [product_a]
        assert [e["vendor_id"] for e in view["vendor_statuses"]] == [vendor_1]
        assert view["total_amount"] == 55.0

    def test_vendor_without_orders(self, pending_order, register_user):
        idle_vendor = register_user(name="Idle Co", role="Vendor")
        assert list_vendor_orders(idle_vendor) == []

    def test_vendor_orders_are_paged(self, place_order, customer_id, product_a, vendor_1):
        for _ in range(3):
            place_order(customer_id, [(product_a, 1)])

        assert len(list_vendor_orders(vendor_1, page=1, page_size=2)) == 2
        assert len(list_vendor_orders(vendor_1, page=2, page_size=2)) == 1
