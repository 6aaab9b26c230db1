"""Store-backed sink: keeps notifications as aggregates in the inbox."""

from protean.utils.globals import current_domain

from marketplace.notifications.notification.notification import Notification
from marketplace.notifications.sink.port import NotificationSink


class StoreNotificationSink(NotificationSink):
    """Persists each message as a Notification the user can list and read."""

    def notify(self, user_id: str, message: str) -> None:
        notification = Notification.create(user_id=user_id, message=message)
        current_domain.repository_for(Notification).add(notification)
