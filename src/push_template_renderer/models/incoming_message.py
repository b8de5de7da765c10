"""Inbound remote message and template discriminator.

Every field of a remote message is optional and untrusted; absence is a normal state.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from types import MappingProxyType
from typing import Any


class MessageField:
    """Keys of the inbound data mapping."""

    TYPE = "type"
    ID = "id"
    TITLE = "title"
    MESSAGE = "message"
    COLOR = "color"
    DEEPLINK = "deeplink"
    TEMPLATE = "template"
    IMAGE = "image"
    CONVERSATION = "conversation"
    LINES = "lines"
    BUTTONS = "buttons"


class TemplateType(StrEnum):
    """Visual layout selected by the `template` field."""

    LARGE = "LARGE"
    CONVERSATION = "CONVERSATION"
    BIG_TEXT = "BIG_TEXT"
    INBOX = "INBOX"
    DEFAULT = "DEFAULT"

    @classmethod
    def from_raw(cls, raw: str | None) -> TemplateType:
        """Map a raw discriminator to a template; absent or unknown values map to DEFAULT.

        Matching is exact (case-sensitive), as sent by the backend.
        """
        if raw is None:
            return cls.DEFAULT
        try:
            return cls(raw)
        except ValueError:
            return cls.DEFAULT


@dataclass(frozen=True, slots=True)
class IncomingMessage:
    """Raw push message: string keys to string values, plus the sender for diagnostics."""

    data: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    sender: str | None = None

    def get(self, key: str) -> str | None:
        """Return the value for key, or None when absent."""
        return self.data.get(key)

    def has(self, key: str) -> bool:
        return key in self.data

    @classmethod
    def from_data(cls, data: Mapping[str, Any], *, sender: str | None = None) -> IncomingMessage:
        """Build from a decoded payload mapping.

        None values are dropped (absent); other non-string values are coerced with str().
        """
        cleaned: dict[str, str] = {}
        for key, value in data.items():
            if value is None:
                continue
            cleaned[str(key)] = value if isinstance(value, str) else str(value)
        return cls(data=MappingProxyType(cleaned), sender=sender)
