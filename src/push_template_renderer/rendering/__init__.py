"""Template dispatch and payload-parsing core."""

from push_template_renderer.rendering.classifier import (
    AcceptedMessage,
    Classification,
    RejectedMessage,
    TemplateClassifier,
)
from push_template_renderer.rendering.color import ColorResolver, parse_color
from push_template_renderer.rendering.identity import (
    NotificationIdAllocator,
    parse_notification_id,
)
from push_template_renderer.rendering.payload_parser import StructuredPayloadParser
from push_template_renderer.rendering.render_config import RenderConfig
from push_template_renderer.rendering.renderer import RenderResult, TemplateRenderer

__all__ = [
    "AcceptedMessage",
    "Classification",
    "ColorResolver",
    "NotificationIdAllocator",
    "RejectedMessage",
    "RenderConfig",
    "RenderResult",
    "StructuredPayloadParser",
    "TemplateClassifier",
    "TemplateRenderer",
    "parse_color",
    "parse_notification_id",
]
