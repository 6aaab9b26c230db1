from uuid import uuid4

import pytest
from protean import current_domain
from protean.exceptions import ObjectNotFoundError

from marketplace.notifications.notification.dispatch import notify
from marketplace.notifications.notification.management import DeleteNotification, MarkNotificationRead
from marketplace.notifications.notification.notification import Notification


def _inbox(user_id):
    return current_domain.repository_for(Notification).list_for_user(user_id)


class TestInbox:
    def test_newest_first(self):
        user_id = str(uuid4())
        notify(user_id, "first")
        notify(user_id, "second")

        assert [n.message for n in _inbox(user_id)] == ["second", "first"]

    def test_mark_read(self):
        user_id = str(uuid4())
        notify(user_id, "hello")
        notification_id = str(_inbox(user_id)[0].id)

        current_domain.process(MarkNotificationRead(notification_id=notification_id), asynchronous=False)

        assert _inbox(user_id)[0].is_read is True

    def test_delete(self):
        user_id = str(uuid4())
        notify(user_id, "hello")
        notification_id = str(_inbox(user_id)[0].id)

        result = current_domain.process(DeleteNotification(notification_id=notification_id), asynchronous=False)

        assert result is True
        assert _inbox(user_id) == []

    def test_delete_unknown(self):
        with pytest.raises(ObjectNotFoundError):
            current_domain.process(DeleteNotification(notification_id=str(uuid4())), asynchronous=False)
