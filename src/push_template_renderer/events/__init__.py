# -*- coding: utf-8 -*-
"""Event bus and event types."""

from push_template_renderer.events.bus import get_event_bus, set_event_bus
from push_template_renderer.events.notification_events import (
    MessageIgnoredEvent,
    NotificationCancelledEvent,
    NotificationDisplayedEvent,
    NotificationDroppedEvent,
)

__all__ = [
    "MessageIgnoredEvent",
    "NotificationCancelledEvent",
    "NotificationDisplayedEvent",
    "NotificationDroppedEvent",
    "get_event_bus",
    "set_event_bus",
]
