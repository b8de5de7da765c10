# -*- coding: utf-8 -*-
"""Parsers for the JSON-array sub-payloads embedded in a push message.

Each parse is all-or-nothing: a payload that is not a JSON array, or any element
with a missing or mistyped field, yields an empty tuple. Inbox lines are lenient
about element types and keep every entry as text. Failures are logged and
never raised to the caller.

Expected shapes:

    conversation: [{"text": "Hello", "timestamp": 1634567890123, "sender": "John"}, ...]
    lines:        ["Line 1", "Line 2"]
    buttons:      [{"text": "Open App", "deeplink": "https://example.com/app"}, ...]
"""

from __future__ import annotations

import json
from collections.abc import Callable
from typing import Any, Optional, cast

import structlog

from push_template_renderer.exceptions import PayloadParseError
from push_template_renderer.models.notification import ActionButton, ConversationMessage

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


def _load_array(raw: str, payload_kind: str) -> list[Any]:
    try:
        decoded = json.loads(raw)
    except (ValueError, RecursionError) as exc:
        raise PayloadParseError(
            f"{payload_kind} is not valid JSON: {exc}",
            payload_kind=payload_kind,
        ) from exc
    if not isinstance(decoded, list):
        raise PayloadParseError(
            f"{payload_kind} must be a JSON array, got {type(decoded).__name__}",
            payload_kind=payload_kind,
        )
    return cast(list[Any], decoded)


def _object_at(items: list[Any], index: int, payload_kind: str) -> dict[str, Any]:
    item = items[index]
    if not isinstance(item, dict):
        raise PayloadParseError(
            f"{payload_kind}[{index}] must be an object",
            payload_kind=payload_kind,
            index=index,
        )
    return cast(dict[str, Any], item)


def _string_field(obj: dict[str, Any], key: str, payload_kind: str, index: int) -> str:
    value = obj.get(key)
    if not isinstance(value, str):
        raise PayloadParseError(
            f"{payload_kind}[{index}].{key} must be a string",
            payload_kind=payload_kind,
            index=index,
        )
    return value


def _long_field(obj: dict[str, Any], key: str, payload_kind: str, index: int) -> int:
    """Integral number or decimal-integer string within signed 64 bits; booleans are rejected."""
    value = obj.get(key)
    parsed: int | None = None
    if isinstance(value, bool):
        pass
    elif isinstance(value, int):
        parsed = value
    elif isinstance(value, float) and value.is_integer():
        parsed = int(value)
    elif isinstance(value, str):
        try:
            parsed = int(value.strip())
        except ValueError:
            pass
    if parsed is not None and INT64_MIN <= parsed <= INT64_MAX:
        return parsed
    raise PayloadParseError(
        f"{payload_kind}[{index}].{key} must be an integer",
        payload_kind=payload_kind,
        index=index,
    )


def _line_text(item: Any, payload_kind: str, index: int) -> str:
    if isinstance(item, str):
        return item
    try:
        return json.dumps(item, separators=(",", ":"))
    except (ValueError, RecursionError) as exc:
        raise PayloadParseError(
            f"{payload_kind}[{index}] cannot be rendered as text",
            payload_kind=payload_kind,
            index=index,
        ) from exc


class StructuredPayloadParser:
    """Parse conversation, inbox-line and button payloads into typed records."""

    def __init__(
        self,
        *,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        self._logger = get_logger(logger_name or self.__class__.__name__)

    def parse_conversation(self, raw: str) -> tuple[ConversationMessage, ...]:
        """Parse conversation messages; empty on any malformed entry."""
        kind = "conversation"
        try:
            items = _load_array(raw, kind)
            messages: list[ConversationMessage] = []
            for index in range(len(items)):
                obj = _object_at(items, index, kind)
                messages.append(
                    ConversationMessage(
                        text=_string_field(obj, "text", kind, index),
                        timestamp_millis=_long_field(obj, "timestamp", kind, index),
                        sender_name=_string_field(obj, "sender", kind, index),
                    )
                )
        except PayloadParseError as exc:
            self._log_failure(exc)
            return ()
        return tuple(messages)

    def parse_inbox_lines(self, raw: str) -> tuple[str, ...]:
        """Parse inbox lines in order.

        Non-string entries (null, numbers, booleans, nested objects and arrays) become
        their compact JSON text, as a JSON array's getString does.
        """
        kind = "lines"
        try:
            items = _load_array(raw, kind)
            lines: list[str] = []
            for index, item in enumerate(items):
                lines.append(_line_text(item, kind, index))
        except PayloadParseError as exc:
            self._log_failure(exc)
            return ()
        return tuple(lines)

    def parse_buttons(self, raw: str) -> tuple[ActionButton, ...]:
        """Parse (label, deeplink) button pairs in order."""
        kind = "buttons"
        try:
            items = _load_array(raw, kind)
            buttons: list[ActionButton] = []
            for index in range(len(items)):
                obj = _object_at(items, index, kind)
                buttons.append(
                    ActionButton(
                        label=_string_field(obj, "text", kind, index),
                        deeplink_target=_string_field(obj, "deeplink", kind, index),
                    )
                )
        except PayloadParseError as exc:
            self._log_failure(exc)
            return ()
        return tuple(buttons)

    def _log_failure(self, exc: PayloadParseError) -> None:
        self._logger.warning(
            "payload_parse_failed",
            payload_kind=exc.payload_kind,
            payload_index=exc.index,
            error_type=type(exc.__cause__ or exc).__name__,
            error_message=str(exc),
        )
