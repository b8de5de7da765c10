# -*- coding: utf-8 -*-
"""PushNotificationHandler: classify, render and display one inbound message."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Literal, Optional

import structlog
from structlog.contextvars import bound_contextvars

from push_template_renderer.events.notification_events import (
    MessageIgnoredEvent,
    NotificationCancelledEvent,
    NotificationDisplayedEvent,
    NotificationDroppedEvent,
)
from push_template_renderer.models.incoming_message import IncomingMessage
from push_template_renderer.models.notification import NotificationIdentity, RenderableNotification
from push_template_renderer.rendering.classifier import RejectedMessage

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]

    from push_template_renderer.rendering.classifier import AcceptedMessage, TemplateClassifier
    from push_template_renderer.rendering.renderer import TemplateRenderer
    from push_template_renderer.sinks.base import NotificationSink


@dataclass(frozen=True, slots=True)
class HandleOutcome:
    """What happened to one inbound message."""

    status: Literal["ignored", "displayed", "dropped"]
    notification_id: NotificationIdentity | None = None
    displayed: tuple[RenderableNotification, ...] = ()
    reason: str | None = None


class PushNotificationHandler:
    """Runs one message through TemplateClassifier, TemplateRenderer and the sink.

    Never raises for bad input: rejected messages, missing fields, malformed payloads,
    failed image fetches and sink errors all degrade to fewer (or no) notifications.
    """

    def __init__(
        self,
        classifier: "TemplateClassifier",
        renderer: "TemplateRenderer",
        sink: "NotificationSink",
        *,
        event_bus: Any = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._classifier = classifier
        self._renderer = renderer
        self._sink = sink
        self._event_bus: "EventBus | None" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def handle(self, message: IncomingMessage | Mapping[str, Any]) -> HandleOutcome:
        if not isinstance(message, IncomingMessage):
            message = IncomingMessage.from_data(message)

        classification = self._classifier.classify(message)
        if isinstance(classification, RejectedMessage):
            self._emit(
                MessageIgnoredEvent(
                    reason=classification.reason,
                    message_type=classification.message_type,
                )
            )
            return HandleOutcome(status="ignored", reason=classification.reason)

        with bound_contextvars(
            notification_id=classification.id,
            template=classification.template.value,
        ):
            return await self._render_and_display(classification)

    async def delete(self, notification_id: NotificationIdentity) -> None:
        """Cancel a displayed notification by id."""
        await self._sink.cancel(notification_id)
        self._logger.debug("notification_cancelled", notification_id=notification_id)
        self._emit(NotificationCancelledEvent(notification_id=notification_id))

    async def _render_and_display(self, message: "AcceptedMessage") -> HandleOutcome:
        result = await self._renderer.render(message)

        if result.dropped_reason is not None:
            self._emit(
                NotificationDroppedEvent(
                    notification_id=message.id,
                    template=message.template.value,
                    reason=result.dropped_reason,
                )
            )

        displayed: list[RenderableNotification] = []
        for notification in result.notifications:
            if await self._display(notification):
                displayed.append(notification)
                self._emit(
                    NotificationDisplayedEvent(
                        notification_id=notification.id,
                        template=message.template.value,
                        style=notification.style_name,
                        action_count=len(notification.actions),
                        is_overlay=notification is result.overlay,
                    )
                )

        self._logger.info(
            "push_message_handled",
            notification_displayed_count=len(displayed),
            dropped_reason=result.dropped_reason,
        )
        return HandleOutcome(
            status="displayed" if displayed else "dropped",
            notification_id=message.id,
            displayed=tuple(displayed),
            reason=result.dropped_reason,
        )

    async def _display(self, notification: RenderableNotification) -> bool:
        try:
            await self._sink.display(notification.id, notification)
        except Exception as exc:
            self._logger.error(
                "notification_display_failed",
                style=notification.style_name,
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
            return False
        return True

    def _emit(self, event: Any) -> None:
        if self._event_bus is None:
            return
        self._event_bus.dispatch(event)
