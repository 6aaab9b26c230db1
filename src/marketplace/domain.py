"""Domain initialization and configuration.

A single Protean domain hosts every marketplace context (identity,
catalogue, inventory, ordering, notifications, ratings) so that order
placement and dispatch can read and mutate products, stock and orders
synchronously within one request.
"""

import importlib

from protean.domain import Domain

from marketplace.utils.logging import configure_logging, get_logger

# Configure logging for the application
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
marketplace = Domain(name="marketplace")

# Element modules sit two levels below this package (<context>/<aggregate>/),
# deeper than ``init()`` traverses, so they are imported explicitly.
ELEMENT_MODULES = (
    "marketplace.identity.user.events",
    "marketplace.identity.user.user",
    "marketplace.identity.user.repository",
    "marketplace.identity.user.registration",
    "marketplace.catalogue.product.events",
    "marketplace.catalogue.product.product",
    "marketplace.catalogue.product.repository",
    "marketplace.catalogue.product.management",
    "marketplace.inventory.stock.events",
    "marketplace.inventory.stock.inventory",
    "marketplace.inventory.stock.repository",
    "marketplace.inventory.stock.management",
    "marketplace.notifications.notification.events",
    "marketplace.notifications.notification.notification",
    "marketplace.notifications.notification.repository",
    "marketplace.notifications.notification.management",
    "marketplace.ordering.order.events",
    "marketplace.ordering.order.order",
    "marketplace.ordering.order.repository",
    "marketplace.ordering.order.placement",
    "marketplace.ordering.order.modification",
    "marketplace.ordering.order.dispatch",
    "marketplace.ordering.order.delivery",
    "marketplace.ordering.order.cancellation",
    "marketplace.ratings.rating.events",
    "marketplace.ratings.rating.rating",
    "marketplace.ratings.rating.repository",
    "marketplace.ratings.rating.submission",
)


def register_elements() -> Domain:
    """Import every element module so its decorators register with the domain.

    Call before ``marketplace.init()``.
    """
    for module in ELEMENT_MODULES:
        importlib.import_module(module)
    return marketplace
