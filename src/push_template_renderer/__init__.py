"""Push template renderer: classify push payloads and render them into notifications."""

from push_template_renderer.config import get_settings
from push_template_renderer.DI import Container
from push_template_renderer.models import IncomingMessage, RenderableNotification, TemplateType
from push_template_renderer.rendering import (
    StructuredPayloadParser,
    TemplateClassifier,
    TemplateRenderer,
)
from push_template_renderer.services import PushMessageIntake, PushNotificationHandler

__version__ = "0.1.0"
__all__ = [
    "Container",
    "IncomingMessage",
    "PushMessageIntake",
    "PushNotificationHandler",
    "RenderableNotification",
    "StructuredPayloadParser",
    "TemplateClassifier",
    "TemplateRenderer",
    "TemplateType",
    "get_settings",
]
