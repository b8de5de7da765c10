"""RenderableNotification and its value objects.

All types are immutable and built fresh per inbound message. The visual style is a
closed union (NotificationStyle); each variant carries only the data it needs.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

type NotificationIdentity = int
"""Stable id shared by create, update (overwrite) and delete of one notification."""


@dataclass(frozen=True, slots=True)
class ResolvedColor:
    """Concrete ARGB color (0xAARRGGBB)."""

    argb: int

    @property
    def alpha(self) -> int:
        return (self.argb >> 24) & 0xFF

    @property
    def rgb(self) -> int:
        return self.argb & 0xFFFFFF

    @property
    def hex(self) -> str:
        """#AARRGGBB, upper case."""
        return f"#{self.argb:08X}"


@dataclass(frozen=True, slots=True)
class ConversationMessage:
    """One message of a conversation thread. The sender is modeled by display name only."""

    text: str
    timestamp_millis: int
    sender_name: str


@dataclass(frozen=True, slots=True)
class ActionButton:
    """Clickable action attached to a notification."""

    label: str
    deeplink_target: str
    handle: Any = field(default=None, compare=False)
    """Opaque value from the DeeplinkResolver; None until the renderer resolves it."""


@dataclass(frozen=True, slots=True)
class Bitmap:
    """Fetched and validated image ready for a large-image notification."""

    url: str
    data: bytes = field(repr=False)
    format: str
    """Detected image format: png, jpeg, gif, webp or bmp."""
    content_type: str | None = None

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True, slots=True)
class DefaultStyle:
    """Plain title/body notification."""


@dataclass(frozen=True, slots=True)
class BigTextStyle:
    """Expandable notification showing the full body."""

    body: str


@dataclass(frozen=True, slots=True)
class LargeImageStyle:
    bitmap: Bitmap


@dataclass(frozen=True, slots=True)
class ConversationStyle:
    """Messaging thread; self_display_name is the local user's name."""

    messages: tuple[ConversationMessage, ...]
    self_display_name: str = "Me"


@dataclass(frozen=True, slots=True)
class InboxStyle:
    lines: tuple[str, ...]


type NotificationStyle = DefaultStyle | BigTextStyle | LargeImageStyle | ConversationStyle | InboxStyle


@dataclass(frozen=True, slots=True)
class RenderableNotification:
    """Normalized, style-tagged notification ready for a NotificationSink."""

    id: NotificationIdentity
    color: ResolvedColor
    style: NotificationStyle = field(default_factory=DefaultStyle)
    title: str | None = None
    body: str | None = None
    deeplink: str | None = None
    actions: tuple[ActionButton, ...] = ()
    content_action: Any = field(default=None, compare=False)
    """Opaque handle for the deeplink opened on tap (from the DeeplinkResolver)."""
    sound_enabled: bool = True
    channel_id: str = "default_channel_id"

    @property
    def style_name(self) -> str:
        """Short style label used in logs and events."""
        match self.style:
            case BigTextStyle():
                return "big_text"
            case LargeImageStyle():
                return "large_image"
            case ConversationStyle():
                return "conversation"
            case InboxStyle():
                return "inbox"
            case _:
                return "default"
