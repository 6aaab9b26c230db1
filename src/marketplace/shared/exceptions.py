"""Marketplace-specific exceptions layered over Protean's exception hierarchy.

Malformed input stays a plain ``ValidationError`` and missing records a plain
``ObjectNotFoundError``; the classes below narrow the cases the HTTP layer
maps to dedicated status codes. Each carries field-keyed ``messages`` like
``ValidationError`` does.
"""

from protean.exceptions import InvalidOperationError, ProteanExceptionWithMessage, ValidationError


class InsufficientStock(ValidationError):
    """Stock is missing or too low to cover a requested quantity."""


class InvalidOrderState(InvalidOperationError):
    """The order is not in a status that allows the requested transition."""

    def __init__(self, messages, **kwargs):
        super().__init__(messages, **kwargs)
        self.messages = messages

    def __str__(self) -> str:
        return f"{self.messages}"


class PersistenceFailure(ProteanExceptionWithMessage):
    """A write could not be applied because the stored record is gone."""
