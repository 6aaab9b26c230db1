"""Faker-based data generators for Locust load test scenarios.

Payloads match the field names of the API's Pydantic request schemas and
pass the domain's validation rules.
"""

import random
import uuid

from faker import Faker

fake = Faker()


def valid_email() -> str:
    """Unique email address; registration rejects duplicates."""
    local = fake.user_name()[:20]
    return f"{local}.{uuid.uuid4().hex[:6]}@{fake.free_email_domain()}"


def user_data(role: str) -> dict:
    return {"name": fake.name()[:150], "email": valid_email(), "role": role}


def product_data(vendor_id: str, stock_quantity: int | None = None) -> dict:
    return {
        "name": f"{fake.word().title()} {fake.word().title()}"[:255],
        "price": round(random.uniform(1.0, 250.0), 2),
        "vendor_id": vendor_id,
        "category": random.choice(["Groceries", "Books", "Home", "Toys", "Garden"]),
        "description": fake.sentence(),
        "stock_quantity": random.randint(100, 1000) if stock_quantity is None else stock_quantity,
    }


def shipping_address() -> dict:
    return {
        "street": fake.street_address()[:255],
        "city": fake.city()[:100],
        "zip_code": fake.postcode()[:20],
    }


def order_data(customer_id: str, product_ids: list[str], max_quantity: int = 3) -> dict:
    chosen = random.sample(product_ids, k=random.randint(1, len(product_ids)))
    return {
        "customer_id": customer_id,
        "items": [{"product_id": pid, "quantity": random.randint(1, max_quantity)} for pid in chosen],
        "shipping_address": shipping_address(),
    }


def rating_data(customer_id: str, vendor_id: str, order_id: str) -> dict:
    return {
        "customer_id": customer_id,
        "vendor_id": vendor_id,
        "order_id": order_id,
        "rating": random.randint(1, 5),
        "comment": fake.sentence(),
    }
