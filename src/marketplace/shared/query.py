"""Batched reads over a repository DAO.

Protean query sets are paginated, so listing "everything" means walking
the store in fixed-size batches.
"""

from collections.abc import Iterator

from protean.exceptions import ValidationError
from protean.utils.globals import current_domain

_BATCH_SIZE = 100
_DEFAULT_PAGE_SIZE = 10


def _queryset(dao, order_by=None, **filters):
    queryset = dao.query.filter(**filters) if filters else dao.query
    if order_by:
        queryset = queryset.order_by(order_by)
    return queryset


def scan(dao, order_by=None, batch_size: int = _BATCH_SIZE, **filters) -> Iterator:
    """Yield every record matching ``filters``, one batch at a time."""
    offset = 0
    while True:
        items = _queryset(dao, order_by, **filters).offset(offset).limit(batch_size).all().items
        yield from items
        if len(items) < batch_size:
            return
        offset += batch_size


def fetch_page(dao, page: int, page_size: int, order_by=None, **filters) -> list:
    """One page of records; ``page`` is 1-based."""
    offset = (page - 1) * page_size
    return list(_queryset(dao, order_by, **filters).offset(offset).limit(page_size).all().items)


def ensure_page(page, page_size) -> None:
    """Reject page numbers and sizes below one."""
    errors = {}
    if page is None or page < 1:
        errors["page"] = ["Page must be at least 1"]
    if page_size is None or page_size < 1:
        errors["page_size"] = ["Page size must be at least 1"]
    if errors:
        raise ValidationError(errors)


def default_page_size() -> int:
    custom = current_domain.config.get("custom") or {}
    return int(custom.get("DEFAULT_PAGE_SIZE", _DEFAULT_PAGE_SIZE))
