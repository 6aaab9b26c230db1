"""Notification sink port: abstract interface for message delivery."""

from abc import ABC, abstractmethod


class NotificationSink(ABC):
    """Abstract interface for notification delivery adapters."""

    @abstractmethod
    def notify(self, user_id: str, message: str) -> None:
        """Deliver a message to a user. Raises on failure."""
        ...
