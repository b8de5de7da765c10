# -*- coding: utf-8 -*-
"""Template dispatch: build a RenderableNotification from an accepted message.

One pass per message. The template picks exactly one style branch; a missing
required field means "nothing to render" rather than an error. Action buttons are
processed afterwards, independently of the branch, and always share the primary
notification's id.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Optional

import structlog

from push_template_renderer.models.incoming_message import TemplateType
from push_template_renderer.models.notification import (
    ActionButton,
    BigTextStyle,
    ConversationStyle,
    DefaultStyle,
    InboxStyle,
    LargeImageStyle,
    NotificationIdentity,
    NotificationStyle,
    RenderableNotification,
    ResolvedColor,
)
from push_template_renderer.rendering.payload_parser import StructuredPayloadParser
from push_template_renderer.rendering.render_config import RenderConfig

if TYPE_CHECKING:  # pragma: no cover
    from push_template_renderer.collaborators.deeplink import DeeplinkResolver
    from push_template_renderer.collaborators.image_fetch import ImageFetchAdapter
    from push_template_renderer.collaborators.sound import SoundPreference
    from push_template_renderer.rendering.classifier import AcceptedMessage


@dataclass(frozen=True, slots=True)
class RenderResult:
    """Outcome of one render pass.

    notification is None when the primary style produced nothing; dropped_reason says why.
    overlay is only set in "overlay" actions mode.
    """

    notification: RenderableNotification | None
    overlay: RenderableNotification | None = None
    dropped_reason: str | None = None

    @property
    def notifications(self) -> tuple[RenderableNotification, ...]:
        """Notifications in display order."""
        return tuple(n for n in (self.notification, self.overlay) if n is not None)


type _Primary = tuple[RenderableNotification | None, str | None]


class TemplateRenderer:
    """Dispatch on TemplateType and attach action buttons."""

    def __init__(
        self,
        config: RenderConfig,
        image_fetcher: "ImageFetchAdapter",
        *,
        parser: StructuredPayloadParser | None = None,
        deeplink_resolver: "DeeplinkResolver | None" = None,
        sound_preference: "SoundPreference | None" = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._config = config
        self._image_fetcher = image_fetcher
        self._parser = parser or StructuredPayloadParser(get_logger=get_logger)
        self._deeplinks = deeplink_resolver
        self._sound = sound_preference
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def render(self, message: "AcceptedMessage") -> RenderResult:
        notification, dropped_reason = await self.render_primary(message)
        if dropped_reason is not None:
            self._logger.debug(
                "notification_not_rendered",
                notification_id=message.id,
                template=message.template.value,
                reason=dropped_reason,
            )

        if message.buttons_json is None:
            return RenderResult(notification, dropped_reason=dropped_reason)

        actions = self._resolve_actions(self._parser.parse_buttons(message.buttons_json))

        if self._config.actions_mode == "overlay":
            overlay = self._base(
                message.id,
                color=self._config.default_color,
                actions=actions,
            )
            return RenderResult(notification, overlay=overlay, dropped_reason=dropped_reason)

        if notification is not None:
            merged = replace(notification, actions=notification.actions + actions)
            return RenderResult(merged, dropped_reason=dropped_reason)
        if actions:
            # Buttons still apply when the primary style produced nothing.
            actions_only = self._base(message.id, color=self._config.default_color, actions=actions)
            return RenderResult(actions_only, dropped_reason=dropped_reason)
        return RenderResult(None, dropped_reason=dropped_reason)

    async def render_primary(self, message: "AcceptedMessage") -> _Primary:
        """Build the style-specific notification, without actions."""
        match message.template:
            case TemplateType.LARGE:
                return await self._render_large_image(message)
            case TemplateType.CONVERSATION:
                return self._render_conversation(message)
            case TemplateType.BIG_TEXT:
                return self._render_big_text(message), None
            case TemplateType.INBOX:
                return self._render_inbox(message)
            case _:
                return self._render_default(message), None

    async def _render_large_image(self, message: "AcceptedMessage") -> _Primary:
        if message.image_url is None:
            return None, "missing_image"
        bitmap = await self._image_fetcher.fetch(message.image_url)
        if bitmap is None:
            return None, "image_fetch_failed"
        return (
            self._base(
                message.id,
                title=message.title,
                body=message.body,
                deeplink=message.deeplink,
                color=message.color,
                style=LargeImageStyle(bitmap),
            ),
            None,
        )

    def _render_conversation(self, message: "AcceptedMessage") -> _Primary:
        if message.conversation_json is None:
            return None, "missing_conversation"
        messages = self._parser.parse_conversation(message.conversation_json)
        style = ConversationStyle(
            messages=messages,
            self_display_name=self._config.conversation_self_name,
        )
        return self._base(message.id, title=message.title, color=message.color, style=style), None

    def _render_big_text(self, message: "AcceptedMessage") -> RenderableNotification:
        return self._base(
            message.id,
            title=message.title,
            body=message.body,
            deeplink=message.deeplink,
            color=message.color,
            style=BigTextStyle(body=message.body or ""),
        )

    def _render_inbox(self, message: "AcceptedMessage") -> _Primary:
        if message.lines_json is None:
            return None, "missing_lines"
        lines = self._parser.parse_inbox_lines(message.lines_json)
        return (
            self._base(
                message.id,
                title=message.title,
                body=message.body,
                color=message.color,
                style=InboxStyle(lines=lines),
            ),
            None,
        )

    def _render_default(self, message: "AcceptedMessage") -> RenderableNotification:
        return self._base(
            message.id,
            title=message.title,
            body=message.body,
            deeplink=message.deeplink,
            color=message.color,
        )

    def _base(
        self,
        notification_id: NotificationIdentity,
        *,
        color: ResolvedColor,
        title: str | None = None,
        body: str | None = None,
        deeplink: str | None = None,
        style: NotificationStyle | None = None,
        actions: tuple[ActionButton, ...] = (),
    ) -> RenderableNotification:
        """Common fields shared by every style: color, tap action, sound, channel."""
        content_action = None
        if deeplink is not None and self._deeplinks is not None:
            content_action = self._deeplinks.resolve(deeplink)
        return RenderableNotification(
            id=notification_id,
            color=color,
            style=style if style is not None else DefaultStyle(),
            title=title,
            body=body,
            deeplink=deeplink,
            actions=actions,
            content_action=content_action,
            sound_enabled=self._sound_enabled(),
            channel_id=self._config.channel_id,
        )

    def _sound_enabled(self) -> bool:
        if self._sound is None:
            return self._config.sound_enabled
        return self._sound.is_enabled()

    def _resolve_actions(self, buttons: tuple[ActionButton, ...]) -> tuple[ActionButton, ...]:
        if self._deeplinks is None:
            return buttons
        return tuple(
            replace(button, handle=self._deeplinks.resolve(button.deeplink_target))
            for button in buttons
        )
