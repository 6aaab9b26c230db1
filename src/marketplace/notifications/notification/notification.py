"""Notification aggregate: an in-app message addressed to one user."""

from datetime import UTC, datetime

from protean.fields import Boolean, DateTime, Identifier, Text

from marketplace.domain import marketplace
from marketplace.notifications.notification.events import NotificationCreated, NotificationRead


@marketplace.aggregate
class Notification:
    user_id: Identifier(required=True)
    message: Text(required=True)
    is_read: Boolean(default=False)
    created_at: DateTime()
    read_at: DateTime()

    @classmethod
    def create(cls, user_id, message):
        now = datetime.now(UTC)
        notification = cls(
            user_id=str(user_id),
            message=message,
            is_read=False,
            created_at=now,
        )
        notification.raise_(
            NotificationCreated(
                notification_id=str(notification.id),
                user_id=str(user_id),
                message=message,
                created_at=now,
            )
        )
        return notification

    def mark_read(self):
        """Mark as read. Reading twice is a no-op."""
        if self.is_read:
            return

        now = datetime.now(UTC)
        self.is_read = True
        self.read_at = now
        self.raise_(
            NotificationRead(
                notification_id=str(self.id),
                user_id=str(self.user_id),
                read_at=now,
            )
        )
