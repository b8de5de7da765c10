"""Styler interface."""

from __future__ import annotations

from typing import Protocol

from push_template_renderer.models.notification import RenderableNotification


class NotificationStyler(Protocol):
    """Render a notification into a formatted string for text-based sinks."""

    def render(self, notification: RenderableNotification, *, parse_html: bool = False) -> str:
        """Return a formatted text for the given notification.

        Args:
            notification: Notification to render.
            parse_html: If True, output includes HTML. If False (default), plain text.
        """
        ...
