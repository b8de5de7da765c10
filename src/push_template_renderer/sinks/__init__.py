"""Notification sinks."""

from push_template_renderer.sinks.base import NotificationSink
from push_template_renderer.sinks.console import ConsoleNotificationSink
from push_template_renderer.sinks.in_memory import InMemoryNotificationSink, SinkCall

__all__ = [
    "ConsoleNotificationSink",
    "InMemoryNotificationSink",
    "NotificationSink",
    "SinkCall",
]
