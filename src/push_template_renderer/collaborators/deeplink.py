"""Deeplink resolution boundary."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol


class DeeplinkResolver(Protocol):
    """Turn a deeplink URL into an opaque handle the display platform can open."""

    def resolve(self, url: str) -> Any:
        ...


@dataclass(frozen=True, slots=True)
class DeeplinkAction:
    """View action for a URI; stands in for a platform intent."""

    uri: str
    action: str = "view"


class PassthroughDeeplinkResolver:
    """Wrap the URL unchanged in a DeeplinkAction."""

    def resolve(self, url: str) -> DeeplinkAction:
        return DeeplinkAction(uri=url)
