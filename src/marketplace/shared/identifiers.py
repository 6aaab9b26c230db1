"""Identifier validation shared by every context."""

from uuid import UUID

from protean.exceptions import ValidationError


def ensure_identifier(value, field: str = "id") -> str:
    """Return ``value`` as a string, or raise if it is not a well-formed UUID."""
    if value is None or value == "":
        raise ValidationError({field: ["Identifier is required"]})
    try:
        UUID(str(value))
    except (TypeError, ValueError):
        raise ValidationError({field: [f"Malformed identifier: {value}"]}) from None
    return str(value)
