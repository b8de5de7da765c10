"""Domain value objects."""

from push_template_renderer.models.incoming_message import (
    IncomingMessage,
    MessageField,
    TemplateType,
)
from push_template_renderer.models.notification import (
    ActionButton,
    BigTextStyle,
    Bitmap,
    ConversationMessage,
    ConversationStyle,
    DefaultStyle,
    InboxStyle,
    LargeImageStyle,
    NotificationIdentity,
    NotificationStyle,
    RenderableNotification,
    ResolvedColor,
)

__all__ = [
    "ActionButton",
    "BigTextStyle",
    "Bitmap",
    "ConversationMessage",
    "ConversationStyle",
    "DefaultStyle",
    "InboxStyle",
    "IncomingMessage",
    "LargeImageStyle",
    "MessageField",
    "NotificationIdentity",
    "NotificationStyle",
    "RenderableNotification",
    "ResolvedColor",
    "TemplateType",
]
