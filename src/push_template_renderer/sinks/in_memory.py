"""In-memory sink: records calls and keeps the currently shown notification per id."""

from __future__ import annotations

import asyncio
from dataclasses import dataclass
from typing import Literal

from push_template_renderer.models.notification import NotificationIdentity, RenderableNotification
from push_template_renderer.sinks.base import NotificationSink


@dataclass(frozen=True, slots=True)
class SinkCall:
    """One display or cancel call, in arrival order."""

    kind: Literal["display", "cancel"]
    notification_id: NotificationIdentity
    notification: RenderableNotification | None = None


class InMemoryNotificationSink(NotificationSink):
    """Sink for tests and embedding; display() overwrites by id like a platform tray."""

    def __init__(self) -> None:
        self._running = True
        self._lock = asyncio.Lock()
        self._calls: list[SinkCall] = []
        self._shown: dict[NotificationIdentity, RenderableNotification] = {}

    @property
    def is_running(self) -> bool:
        return self._running

    async def initialize(self) -> None:
        self._running = True

    async def shutdown(self) -> None:
        self._running = False

    async def display(
        self,
        notification_id: NotificationIdentity,
        notification: RenderableNotification,
    ) -> None:
        async with self._lock:
            self._calls.append(SinkCall("display", notification_id, notification))
            self._shown[notification_id] = notification

    async def cancel(self, notification_id: NotificationIdentity) -> None:
        async with self._lock:
            self._calls.append(SinkCall("cancel", notification_id))
            self._shown.pop(notification_id, None)

    @property
    def calls(self) -> list[SinkCall]:
        return list(self._calls)

    @property
    def displayed(self) -> dict[NotificationIdentity, RenderableNotification]:
        """Notifications currently shown, by id."""
        return dict(self._shown)

    def display_calls(self, notification_id: NotificationIdentity | None = None) -> list[SinkCall]:
        return [
            c
            for c in self._calls
            if c.kind == "display" and (notification_id is None or c.notification_id == notification_id)
        ]

    def clear(self) -> None:
        self._calls.clear()
        self._shown.clear()
