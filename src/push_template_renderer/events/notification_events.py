"""Notification lifecycle events (emitted by PushNotificationHandler)."""

from __future__ import annotations

from bubus import BaseEvent  # type: ignore[import-untyped]


class NotificationDisplayedEvent(BaseEvent[None]):
    """Emitted after a notification was handed to the sink."""

    notification_id: int
    template: str
    style: str
    action_count: int = 0
    is_overlay: bool = False
    """True for the buttons-only notification of "overlay" actions mode."""


class NotificationDroppedEvent(BaseEvent[None]):
    """Emitted when an accepted message produced no primary notification."""

    notification_id: int
    template: str
    reason: str
    """One of: missing_image, image_fetch_failed, missing_conversation, missing_lines."""


class MessageIgnoredEvent(BaseEvent[None]):
    """Emitted when a message was not addressed to this renderer."""

    reason: str
    message_type: str | None = None


class NotificationCancelledEvent(BaseEvent[None]):
    notification_id: int
