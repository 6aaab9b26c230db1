"""Repository for the Notification aggregate."""

from marketplace.domain import marketplace
from marketplace.notifications.notification.notification import Notification
from marketplace.shared.query import scan


@marketplace.repository(part_of=Notification)
class NotificationRepository:
    def list_for_user(self, user_id) -> list[Notification]:
        """Every notification of a user, newest first."""
        return list(scan(self._dao, order_by="-created_at", user_id=str(user_id)))

    def remove(self, notification: Notification) -> None:
        self._dao.delete(notification)
