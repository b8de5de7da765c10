# -*- coding: utf-8 -*-
"""Console sink (print-based)."""

from __future__ import annotations

from typing import TYPE_CHECKING

from push_template_renderer.models.notification import NotificationIdentity, RenderableNotification
from push_template_renderer.sinks.base import NotificationSink

if TYPE_CHECKING:  # pragma: no cover
    from push_template_renderer.config import Settings
    from push_template_renderer.stylers import NotificationStyler


class ConsoleNotificationSink(NotificationSink):
    """Print rendered notifications to stdout."""

    def __init__(
        self,
        settings: "Settings",
        styler: "NotificationStyler",
    ) -> None:
        self.settings = settings
        self._running = False
        self._styler = styler

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
        if not self.is_running or not self.settings.console.enabled:
            return
        print(self._styler.render(notification))

    async def cancel(self, notification_id: NotificationIdentity) -> None:
        if not self.is_running or not self.settings.console.enabled:
            return
        print(f"✖ notification #{notification_id} cancelled")
