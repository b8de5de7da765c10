# -*- coding: utf-8 -*-
"""DeliveryStatsRecorder: counts displayed, dropped, ignored and cancelled notifications from bus events."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Callable, Optional

import structlog

from push_template_renderer.events.notification_events import (
    MessageIgnoredEvent,
    NotificationCancelledEvent,
    NotificationDisplayedEvent,
    NotificationDroppedEvent,
)

if TYPE_CHECKING:
    from bubus import EventBus  # type: ignore[import-untyped]


@dataclass
class DeliveryStats:
    displayed: int = 0
    overlays: int = 0
    cancelled: int = 0
    dropped: Counter[str] = field(default_factory=Counter)
    ignored: Counter[str] = field(default_factory=Counter)
    styles: Counter[str] = field(default_factory=Counter)


class DeliveryStatsRecorder:
    """Subscribes to notification events and keeps running totals for the process."""

    def __init__(
        self,
        event_bus: Any,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._event_bus: "EventBus" = event_bus
        self._logger = get_logger(logger_name or self.__class__.__name__)
        self._stats = DeliveryStats()

    def start(self) -> None:
        self._event_bus.on(NotificationDisplayedEvent, self._on_displayed)
        self._event_bus.on(NotificationDroppedEvent, self._on_dropped)
        self._event_bus.on(MessageIgnoredEvent, self._on_ignored)
        self._event_bus.on(NotificationCancelledEvent, self._on_cancelled)
        self._logger.debug("delivery_stats_started")

    def stop(self) -> None:
        """Unsubscribe and log the totals."""
        handlers = getattr(self._event_bus, "handlers", {})
        own = {self._on_displayed, self._on_dropped, self._on_ignored, self._on_cancelled}
        for key in (
            NotificationDisplayedEvent.__name__,
            NotificationDroppedEvent.__name__,
            MessageIgnoredEvent.__name__,
            NotificationCancelledEvent.__name__,
        ):
            if key in handlers:
                handlers[key] = [h for h in handlers[key] if h not in own]
        stats = self._stats
        self._logger.info(
            "delivery_stats_summary",
            stats_displayed=stats.displayed,
            stats_overlays=stats.overlays,
            stats_cancelled=stats.cancelled,
            stats_dropped=dict(stats.dropped),
            stats_ignored=dict(stats.ignored),
            stats_styles=dict(stats.styles),
        )

    @property
    def stats(self) -> DeliveryStats:
        return self._stats

    def _on_displayed(self, event: NotificationDisplayedEvent) -> None:
        self._stats.displayed += 1
        if event.is_overlay:
            self._stats.overlays += 1
        self._stats.styles[event.style] += 1

    def _on_dropped(self, event: NotificationDroppedEvent) -> None:
        self._stats.dropped[event.reason] += 1

    def _on_ignored(self, event: MessageIgnoredEvent) -> None:
        self._stats.ignored[event.reason] += 1

    def _on_cancelled(self, event: NotificationCancelledEvent) -> None:
        self._stats.cancelled += 1
