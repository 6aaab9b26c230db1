"""Notification sink registry.

Provides singleton access to the active sink. The store-backed sink is the
default; tests and alternative deployments swap it with ``use_sink``.
"""

from marketplace.notifications.sink.port import NotificationSink

_sink_instance: NotificationSink | None = None


def get_sink() -> NotificationSink:
    """Return the configured sink, creating the store-backed default on first use."""
    global _sink_instance
    if _sink_instance is None:
        from marketplace.notifications.sink.store_adapter import StoreNotificationSink

        _sink_instance = StoreNotificationSink()
    return _sink_instance


def use_sink(sink: NotificationSink) -> NotificationSink:
    """Install ``sink`` as the active sink and return it."""
    global _sink_instance
    _sink_instance = sink
    return sink


def reset_sink():
    """Drop the active sink so the default is rebuilt (useful for testing)."""
    global _sink_instance
    _sink_instance = None
