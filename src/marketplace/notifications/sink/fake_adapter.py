"""Fake sink: records messages in memory for test assertions."""

from marketplace.notifications.sink.port import NotificationSink


class FakeNotificationSink(NotificationSink):
    def __init__(self):
        self.messages: list[dict] = []
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"

    def configure(self, should_succeed: bool = True, failure_reason: str = "Notification delivery failed"):
        """Configure the fake sink behavior for testing."""
        self.should_succeed = should_succeed
        self.failure_reason = failure_reason

    def notify(self, user_id: str, message: str) -> None:
        if not self.should_succeed:
            raise RuntimeError(self.failure_reason)
        self.messages.append({"user_id": user_id, "message": message})

    def messages_for(self, user_id: str) -> list[str]:
        return [m["message"] for m in self.messages if m["user_id"] == str(user_id)]

    def reset(self):
        """Clear recorded messages (useful between tests)."""
        self.messages.clear()
        self.should_succeed = True
        self.failure_reason = "Notification delivery failed"
