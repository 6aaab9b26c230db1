"""Product lookup used by order placement, update and dispatch."""

from protean.utils.globals import current_domain

from marketplace.catalogue.product.product import Product
from marketplace.shared.identifiers import ensure_identifier


def find_product(product_id, field: str = "product_id") -> Product:
    """Load a product.

    Raises ``ValidationError`` for a malformed id and ``ObjectNotFoundError``
    when no product has that id.
    """
    return current_domain.repository_for(Product).get(ensure_identifier(product_id, field))
