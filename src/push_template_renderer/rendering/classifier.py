# -*- coding: utf-8 -*-
"""Early accept/reject of inbound messages and base field extraction."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Optional

import structlog

from push_template_renderer.models.incoming_message import (
    IncomingMessage,
    MessageField,
    TemplateType,
)
from push_template_renderer.models.notification import NotificationIdentity, ResolvedColor
from push_template_renderer.rendering.color import ColorResolver
from push_template_renderer.rendering.identity import NotificationIdAllocator
from push_template_renderer.rendering.render_config import RenderConfig


@dataclass(frozen=True, slots=True)
class AcceptedMessage:
    """A message addressed to this renderer, with base fields extracted."""

    id: NotificationIdentity
    color: ResolvedColor
    template: TemplateType
    raw_template: str | None = None
    title: str | None = None
    body: str | None = None
    deeplink: str | None = None
    image_url: str | None = None
    conversation_json: str | None = None
    lines_json: str | None = None
    buttons_json: str | None = None


@dataclass(frozen=True, slots=True)
class RejectedMessage:
    """A message that is not for this renderer. Not an error."""

    reason: str
    message_type: str | None = None


type Classification = AcceptedMessage | RejectedMessage


class TemplateClassifier:
    """Reject messages whose `type` is not the configured marker; extract fields otherwise."""

    def __init__(
        self,
        config: RenderConfig,
        *,
        color_resolver: ColorResolver | None = None,
        id_allocator: NotificationIdAllocator | None = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._config = config
        self._colors = color_resolver or ColorResolver(config.default_color)
        self._ids = id_allocator or NotificationIdAllocator()
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def classify(self, message: IncomingMessage) -> Classification:
        message_type = message.get(MessageField.TYPE)
        if message_type is None:
            self._logger.debug(
                "message_ignored",
                reason="missing_type",
                message_sender=message.sender,
            )
            return RejectedMessage(reason="missing_type")
        if message_type != self._config.accepted_type:
            self._logger.debug(
                "message_ignored",
                reason="irrelevant_type",
                message_type=message_type,
                message_sender=message.sender,
            )
            return RejectedMessage(reason="irrelevant_type", message_type=message_type)

        raw_template = message.get(MessageField.TEMPLATE)
        return AcceptedMessage(
            id=self._ids.identity_for(message.get(MessageField.ID)),
            color=self._colors.resolve(message.get(MessageField.COLOR)),
            template=TemplateType.from_raw(raw_template),
            raw_template=raw_template,
            title=message.get(MessageField.TITLE),
            body=message.get(MessageField.MESSAGE),
            deeplink=message.get(MessageField.DEEPLINK),
            image_url=message.get(MessageField.IMAGE),
            conversation_json=message.get(MessageField.CONVERSATION),
            lines_json=message.get(MessageField.LINES),
            buttons_json=message.get(MessageField.BUTTONS),
        )
