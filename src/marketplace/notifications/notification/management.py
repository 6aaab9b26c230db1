"""Notification inbox management: commands and handler."""

from protean import handle
from protean.fields import Identifier
from protean.utils.globals import current_domain

from marketplace.domain import marketplace
from marketplace.notifications.notification.notification import Notification
from marketplace.shared.identifiers import ensure_identifier


@marketplace.command(part_of="Notification")
class MarkNotificationRead:
    notification_id: Identifier(required=True)


@marketplace.command(part_of="Notification")
class DeleteNotification:
    notification_id: Identifier(required=True)


@marketplace.command_handler(part_of=Notification)
class ManageNotificationHandler:
    @handle(MarkNotificationRead)
    def mark_read(self, command):
        repo = current_domain.repository_for(Notification)
        notification = repo.get(ensure_identifier(command.notification_id, "notification_id"))
        notification.mark_read()
        repo.add(notification)
        return notification

    @handle(DeleteNotification)
    def delete_notification(self, command):
        repo = current_domain.repository_for(Notification)
        notification = repo.get(ensure_identifier(command.notification_id, "notification_id"))
        repo.remove(notification)
        return True
