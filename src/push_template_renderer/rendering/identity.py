"""Notification id parsing and time-based allocation."""

from __future__ import annotations

import re
import time
from collections.abc import Callable

from push_template_renderer.models.notification import NotificationIdentity

ID_MASK = 0x0FFFFFFF
INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1

_DECIMAL_ID = re.compile(r"[+-]?[0-9]+")


def current_time_millis() -> int:
    """Wall clock in milliseconds since the epoch."""
    return time.time_ns() // 1_000_000


def parse_notification_id(raw: str | None) -> NotificationIdentity | None:
    """Parse a decimal id that fits a signed 32-bit integer.

    Returns None for absent, non-decimal (whitespace, underscores, hex) or out-of-range values.
    """
    if raw is None or not _DECIMAL_ID.fullmatch(raw):
        return None
    try:
        value = int(raw)
    except ValueError:
        # Beyond the interpreter's integer digit limit.
        return None
    if value < INT32_MIN or value > INT32_MAX:
        return None
    return value


class NotificationIdAllocator:
    """Derive a notification id from the low 28 bits of a millisecond clock.

    Not globally unique: two allocations within the same millisecond collide.
    """

    def __init__(self, clock_millis: Callable[[], int] = current_time_millis) -> None:
        self._clock_millis = clock_millis

    def allocate(self) -> NotificationIdentity:
        return self._clock_millis() & ID_MASK

    def identity_for(self, raw: str | None) -> NotificationIdentity:
        """Use the supplied id verbatim when it parses, otherwise allocate one."""
        parsed = parse_notification_id(raw)
        if parsed is not None:
            return parsed
        return self.allocate()
