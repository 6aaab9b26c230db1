"""Ordering load test scenarios.

OrderLifecycleJourney walks one order from placement through dispatch,
delivery and rating. DispatchContentionUser places many orders against a
product with scarce stock and dispatches them concurrently; the stock must
never be driven negative, so shortages surface as 409 responses.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, constant_pacing, task

from loadtests.data_generators import order_data, product_data, rating_data, user_data
from loadtests.helpers.response import extract_error_detail
from loadtests.helpers.state import MarketplaceState, OrderState


def register_active_user(client, role: str) -> str | None:
    """Register a user and activate the account. Returns the id or None."""
    with client.post("/users", json=user_data(role), catch_response=True, name="POST /users") as resp:
        if resp.status_code != 201:
            resp.failure(f"Register {role} failed: {resp.status_code} - {extract_error_detail(resp)}")
            return None
        user_id = resp.json()["user_id"]

    with client.put(
        f"/users/{user_id}/status",
        json={"status": "Active"},
        catch_response=True,
        name="PUT /users/{id}/status",
    ) as resp:
        if resp.status_code != 200:
            resp.failure(f"Activate {role} failed: {resp.status_code} - {extract_error_detail(resp)}")
            return None
    return user_id


def add_product(client, vendor_id: str, stock_quantity: int | None = None) -> str | None:
    with client.post(
        "/products",
        json=product_data(vendor_id, stock_quantity),
        catch_response=True,
        name="POST /products",
    ) as resp:
        if resp.status_code != 201:
            resp.failure(f"Add product failed: {resp.status_code} - {extract_error_detail(resp)}")
            return None
        return resp.json()["product_id"]


class OrderLifecycleJourney(SequentialTaskSet):
    """Place -> Browse -> Dispatch -> Vendors Deliver -> Rate Vendors.

    Generates events: OrderPlaced, OrderDispatched, VendorStatusUpdated
    (one per vendor), OrderDelivered, VendorRated.
    """

    def on_start(self):
        self.order = OrderState()

    @task
    def place_order(self):
        state = self.user.state
        with self.client.post(
            "/orders",
            json=order_data(state.customer_id, state.product_ids),
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                body = resp.json()
                self.order.order_id = body["id"]
                self.order.vendor_ids = [v["vendor_id"] for v in body["vendor_statuses"]]
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def list_customer_orders(self):
        self.client.get(f"/orders/customers/{self.user.state.customer_id}", name="GET /orders/customers/{id}")

    @task
    def dispatch_order(self):
        with self.client.post(
            f"/orders/{self.order.order_id}/dispatch",
            catch_response=True,
            name="POST /orders/{id}/dispatch",
        ) as resp:
            if resp.status_code == 200:
                self.order.current_status = "Dispatched"
            else:
                resp.failure(f"Dispatch failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def vendors_deliver(self):
        for vendor_id in self.order.vendor_ids:
            with self.client.put(
                f"/orders/{self.order.order_id}/vendors/{vendor_id}/status",
                json={"status": "Delivered"},
                catch_response=True,
                name="PUT /orders/{id}/vendors/{vendor_id}/status",
            ) as resp:
                if resp.status_code == 200:
                    self.order.current_status = resp.json()["status"]
                else:
                    resp.failure(f"Vendor status failed: {resp.status_code} - {extract_error_detail(resp)}")
                    self.interrupt()

    @task
    def rate_vendors(self):
        for vendor_id in self.order.vendor_ids:
            with self.client.post(
                "/ratings",
                json=rating_data(self.user.state.customer_id, vendor_id, self.order.order_id),
                catch_response=True,
                name="POST /ratings",
            ) as resp:
                if resp.status_code != 201:
                    resp.failure(f"Rate vendor failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OrderCancellationJourney(SequentialTaskSet):
    """Place -> Request Cancellation -> Confirm Cancellation.

    Stock is only taken at dispatch, so cancelling a pending order
    leaves inventory untouched.
    """

    def on_start(self):
        self.order = OrderState()

    @task
    def place_order(self):
        state = self.user.state
        with self.client.post(
            "/orders",
            json=order_data(state.customer_id, state.product_ids),
            catch_response=True,
            name="POST /orders",
        ) as resp:
            if resp.status_code == 201:
                self.order.order_id = resp.json()["id"]
            else:
                resp.failure(f"Place order failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def request_cancellation(self):
        with self.client.post(
            f"/orders/{self.order.order_id}/cancellation-request",
            catch_response=True,
            name="POST /orders/{id}/cancellation-request",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Request cancellation failed: {resp.status_code} - {extract_error_detail(resp)}")
                self.interrupt()

    @task
    def confirm_cancellation(self):
        with self.client.post(
            f"/orders/{self.order.order_id}/cancellation",
            catch_response=True,
            name="POST /orders/{id}/cancellation",
        ) as resp:
            if resp.status_code == 200:
                self.order.current_status = "Cancelled"
            else:
                resp.failure(f"Confirm cancellation failed: {resp.status_code} - {extract_error_detail(resp)}")

    @task
    def done(self):
        self.interrupt()


class OrderingUser(HttpUser):
    """A shopper with their own vendor and a small catalogue."""

    wait_time = between(0.5, 2.0)
    tasks = {OrderLifecycleJourney: 4, OrderCancellationJourney: 1}

    def on_start(self):
        self.state = MarketplaceState()
        self.state.vendor_id = register_active_user(self.client, "Vendor")
        self.state.customer_id = register_active_user(self.client, "Customer")
        if not (self.state.vendor_id and self.state.customer_id):
            self.stop()
            return
        for _ in range(3):
            product_id = add_product(self.client, self.state.vendor_id)
            if product_id:
                self.state.product_ids.append(product_id)
        if not self.state.product_ids:
            self.stop()


class DispatchContentionUser(HttpUser):
    """Stress test: concurrent dispatches against scarce stock.

    Every user owns a product with little stock and keeps placing and
    dispatching orders for it. Once the stock runs out dispatch must
    answer 409 and the inventory must stay at or above zero.
    Monitor: GET /inventory/low-stock lists the exhausted products.
    """

    wait_time = constant_pacing(0.2)

    def on_start(self):
        self.state = MarketplaceState()
        self.state.vendor_id = register_active_user(self.client, "Vendor")
        self.state.customer_id = register_active_user(self.client, "Customer")
        product_id = self.state.vendor_id and add_product(self.client, self.state.vendor_id, stock_quantity=20)
        if not (product_id and self.state.customer_id):
            self.stop()
            return
        self.state.product_ids.append(product_id)

    @task
    def place_and_dispatch(self):
        resp = self.client.post(
            "/orders",
            json=order_data(self.state.customer_id, self.state.product_ids, max_quantity=5),
            name="[CONTENTION] POST /orders",
        )
        if resp.status_code != 201:
            return

        with self.client.post(
            f"/orders/{resp.json()['id']}/dispatch",
            catch_response=True,
            name="[CONTENTION] POST /orders/{id}/dispatch",
        ) as dispatch:
            # A shortage is the expected outcome once stock runs out
            if dispatch.status_code in (200, 409):
                dispatch.success()
            else:
                dispatch.failure(f"Dispatch failed: {dispatch.status_code} - {extract_error_detail(dispatch)}")

    @task
    def check_stock(self):
        product_id = random.choice(self.state.product_ids)
        with self.client.get(
            f"/inventory/products/{product_id}",
            catch_response=True,
            name="[CONTENTION] GET /inventory/products/{id}",
        ) as resp:
            if resp.status_code == 200 and resp.json()["stock_quantity"] < 0:
                resp.failure(f"Stock went negative for {product_id}")
