# -*- coding: utf-8 -*-
"""Style-aware text rendering of notifications with emoji headers and separators."""

from __future__ import annotations

import html
from datetime import datetime, timezone

from push_template_renderer.models.notification import (
    BigTextStyle,
    ConversationStyle,
    InboxStyle,
    LargeImageStyle,
    RenderableNotification,
)
from push_template_renderer.stylers.base import NotificationStyler

_STYLE_TITLES: dict[str, tuple[str, str]] = {
    "default": ("🔔", "Notification"),
    "big_text": ("📝", "Notification"),
    "large_image": ("🖼️", "Image Notification"),
    "conversation": ("💬", "Conversation"),
    "inbox": ("📥", "Inbox"),
}


class NotificationTextStyler(NotificationStyler):
    """Render a RenderableNotification as plain text (or light HTML), one section per part."""

    def render(self, notification: RenderableNotification, *, parse_html: bool = False) -> str:
        emoji, fallback_title = _STYLE_TITLES.get(notification.style_name, ("ℹ️", "Notification"))
        title = notification.title or fallback_title
        lines = [
            f"{emoji} {self._bold(self._text(title, parse_html), parse_html)} "
            f"[#{notification.id} {notification.color.hex}]",
        ]
        lines.extend(self._style_lines(notification, parse_html))
        if notification.deeplink:
            lines.append(f"🔗 {self._text(notification.deeplink, parse_html)}")
        if notification.actions:
            lines.append("─" * 12)
            for action in notification.actions:
                label = self._bold(self._text(action.label, parse_html), parse_html)
                lines.append(f"▶ {label} → {self._text(action.deeplink_target, parse_html)}")
        if not notification.sound_enabled:
            lines.append("🔕 silent")
        return "\n".join(line for line in lines if line).strip()

    def _style_lines(self, notification: RenderableNotification, parse_html: bool) -> list[str]:
        style = notification.style
        match style:
            case BigTextStyle(body=body):
                return [self._text(body, parse_html)]
            case LargeImageStyle(bitmap=bitmap):
                return [
                    self._text(notification.body or "", parse_html),
                    f"[{bitmap.format} image, {bitmap.size} bytes] {self._text(bitmap.url, parse_html)}",
                ]
            case ConversationStyle(messages=messages):
                return [
                    f"{self._format_timestamp(m.timestamp_millis)} "
                    f"{self._bold(self._text(m.sender_name, parse_html), parse_html)}: "
                    f"{self._text(m.text, parse_html)}"
                    for m in messages
                ]
            case InboxStyle(lines=inbox_lines):
                body = [self._text(notification.body or "", parse_html)]
                return body + [f"• {self._text(line, parse_html)}" for line in inbox_lines]
            case _:
                return [self._text(notification.body or "", parse_html)]

    @staticmethod
    def _text(value: str, parse_html: bool) -> str:
        return html.escape(value) if parse_html else value

    @staticmethod
    def _bold(value: str, parse_html: bool) -> str:
        return f"<b>{value}</b>" if parse_html else value

    @staticmethod
    def _format_timestamp(millis: int) -> str:
        """Format epoch milliseconds as HH:MM (UTC) when possible."""
        try:
            return datetime.fromtimestamp(millis / 1000, tz=timezone.utc).strftime("%H:%M")
        except (OSError, OverflowError, ValueError):
            return str(millis)
