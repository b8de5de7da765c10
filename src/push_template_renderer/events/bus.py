"""Process-wide bubus EventBus carrying notification lifecycle events."""

from __future__ import annotations

from bubus import EventBus  # type: ignore[import-untyped]

EVENT_BUS_NAME = "PushTemplateRenderer"
EVENT_HISTORY_SIZE = 100

_event_bus: EventBus | None = None


def get_event_bus() -> EventBus:
    """Return the bus shared by the handler and its subscribers, creating it on first use."""
    global _event_bus
    if _event_bus is None:
        _event_bus = EventBus(name=EVENT_BUS_NAME, max_history_size=EVENT_HISTORY_SIZE, wal_path=None)
    return _event_bus


def set_event_bus(bus: EventBus | None) -> None:
    """Install a bus (tests, embedding); None drops it so the next get creates a fresh one."""
    global _event_bus
    _event_bus = bus
