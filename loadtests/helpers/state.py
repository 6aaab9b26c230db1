"""Per-user state tracking for Locust load test scenarios.

Each Locust user instance keeps its own ids; nothing is shared across users.
"""

from dataclasses import dataclass, field


@dataclass
class MarketplaceState:
    """Ids created while setting up a simulated shopper and their vendor."""

    vendor_id: str | None = None
    customer_id: str | None = None
    product_ids: list[str] = field(default_factory=list)


@dataclass
class OrderState:
    """Tracks a single order through its lifecycle."""

    order_id: str | None = None
    vendor_ids: list[str] = field(default_factory=list)
    current_status: str = "Pending"
