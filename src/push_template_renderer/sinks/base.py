# -*- coding: utf-8 -*-
"""Base notification sink."""

from __future__ import annotations

from abc import ABC, abstractmethod

from push_template_renderer.models.notification import NotificationIdentity, RenderableNotification


class NotificationSink(ABC):
    """Abstract display/cancel boundary.

    display() with an id that is already shown replaces that notification
    (last write wins); cancel() removes it.
    """

    @property
    @abstractmethod
    def is_running(self) -> bool:
        """Whether the sink accepts display/cancel calls."""
        pass

    @abstractmethod
    async def initialize(self) -> None:
        pass

    @abstractmethod
    async def shutdown(self) -> None:
        pass

    @abstractmethod
    async def display(
        self,
        notification_id: NotificationIdentity,
        notification: RenderableNotification,
    ) -> None:
        """Show or replace the notification with this id."""
        pass

    @abstractmethod
    async def cancel(self, notification_id: NotificationIdentity) -> None:
        """Remove the notification with this id, if shown."""
        pass
