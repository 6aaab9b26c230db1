"""Domain events for the Notification aggregate."""

from protean.fields import DateTime, Identifier, Text

from marketplace.domain import marketplace


@marketplace.event(part_of="Notification")
class NotificationCreated:
    """A message was stored for a user."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    message: Text(required=True)
    created_at: DateTime(required=True)


@marketplace.event(part_of="Notification")
class NotificationRead:
    """The recipient marked a notification as read."""

    __version__ = 1

    notification_id: Identifier(required=True)
    user_id: Identifier(required=True)
    read_at: DateTime(required=True)
