"""Text stylers for sinks that print or send text."""

from push_template_renderer.stylers.base import NotificationStyler
from push_template_renderer.stylers.text_styler import NotificationTextStyler

__all__ = ["NotificationStyler", "NotificationTextStyler"]
