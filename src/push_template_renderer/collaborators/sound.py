"""Sound preference boundary."""

from __future__ import annotations

from typing import Protocol


class SoundPreference(Protocol):
    """Whether notifications should play the default sound."""

    def is_enabled(self) -> bool:
        ...


class StaticSoundPreference:
    """Fixed preference, typically RENDERING__SOUND_ENABLED."""

    def __init__(self, enabled: bool = True) -> None:
        self._enabled = enabled

    def is_enabled(self) -> bool:
        return self._enabled
