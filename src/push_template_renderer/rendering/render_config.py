"""Immutable rendering configuration injected into the classifier and renderer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

from push_template_renderer.models.notification import ResolvedColor
from push_template_renderer.rendering.color import parse_color

if TYPE_CHECKING:  # pragma: no cover
    from push_template_renderer.config.config import RenderingSettings

ActionsMode = Literal["merge", "overlay"]

DEFAULT_COLOR = ResolvedColor(0xFF2196F3)


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Process-wide rendering defaults, passed explicitly instead of read from globals."""

    default_color: ResolvedColor = DEFAULT_COLOR
    sound_enabled: bool = True
    channel_id: str = "default_channel_id"
    conversation_self_name: str = "Me"
    accepted_type: str = "ANDP"
    actions_mode: ActionsMode = "merge"

    @classmethod
    def from_settings(cls, settings: "RenderingSettings") -> RenderConfig:
        """Build from RENDERING__* settings.

        Raises:
            ValueError: If RENDERING__DEFAULT_COLOR is not a valid color.
        """
        return cls(
            default_color=parse_color(settings.default_color),
            sound_enabled=settings.sound_enabled,
            channel_id=settings.channel_id,
            conversation_self_name=settings.conversation_self_name,
            accepted_type=settings.accepted_type,
            actions_mode=settings.actions_mode,
        )
