# -*- coding: utf-8 -*-
"""Unit tests for PushNotificationHandler orchestration."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import replace
from typing import Any
from unittest.mock import AsyncMock, Mock

import pytest

from push_template_renderer.collaborators.image_fetch import HttpImageFetcher
from push_template_renderer.config import Settings
from push_template_renderer.events.notification_events import (
    MessageIgnoredEvent,
    NotificationCancelledEvent,
    NotificationDisplayedEvent,
    NotificationDroppedEvent,
)
from push_template_renderer.models.incoming_message import IncomingMessage
from push_template_renderer.models.notification import LargeImageStyle
from push_template_renderer.rendering.classifier import TemplateClassifier
from push_template_renderer.rendering.render_config import RenderConfig
from push_template_renderer.rendering.renderer import TemplateRenderer
from push_template_renderer.services.notification_handler import PushNotificationHandler
from push_template_renderer.sinks.in_memory import InMemoryNotificationSink

BUTTONS = '[{"text":"Open","deeplink":"https://x"}]'


def _handler(
    classifier: TemplateClassifier,
    renderer: TemplateRenderer,
    sink: Any,
    event_bus: Any = None,
) -> PushNotificationHandler:
    return PushNotificationHandler(classifier, renderer, sink, event_bus=event_bus)


async def test_irrelevant_message_invokes_no_collaborator(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    image_fetcher: Any,
) -> None:
    sink = Mock(display=AsyncMock(), cancel=AsyncMock())
    handler = _handler(classifier, renderer_factory(), sink)

    for data in ({"type": "OTHER", "template": "LARGE", "image": "http://x"}, {"title": "no type"}):
        outcome = await handler.handle(data)
        assert outcome.status == "ignored"

    sink.display.assert_not_called()
    sink.cancel.assert_not_called()
    assert image_fetcher.requested == []


async def test_big_text_displays_once(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(), sink)

    outcome = await handler.handle(IncomingMessage.from_data(push_data(template="BIG_TEXT", message="hello")))

    assert outcome.status == "displayed"
    assert outcome.notification_id == 42
    calls = sink.display_calls()
    assert len(calls) == 1
    assert calls[0].notification_id == 42
    assert calls[0].notification is not None
    assert calls[0].notification.body == "hello"


async def test_large_without_image_never_invokes_sink(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(), sink)

    outcome = await handler.handle(push_data(template="LARGE"))

    assert outcome.status == "dropped"
    assert outcome.reason == "missing_image"
    assert sink.calls == []


async def test_large_with_good_image_displays_exactly_once(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(), sink)

    await handler.handle(push_data(template="LARGE", image="http://good.png"))

    calls = sink.display_calls()
    assert len(calls) == 1
    assert calls[0].notification is not None
    assert isinstance(calls[0].notification.style, LargeImageStyle)


async def test_large_with_failed_fetch_displays_nothing(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    failing_image_fetcher: Any,
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(image_fetcher=failing_image_fetcher), sink)

    outcome = await handler.handle(push_data(template="LARGE", image="http://bad.png"))

    assert outcome.status == "dropped"
    assert outcome.reason == "image_fetch_failed"
    assert sink.display_calls() == []


async def test_overlay_mode_displays_twice_for_same_id_and_last_write_wins(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    render_config: RenderConfig,
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
) -> None:
    renderer = renderer_factory(config=replace(render_config, actions_mode="overlay"))
    handler = _handler(classifier, renderer, sink)

    for template in ("BIG_TEXT", "SOMETHING", "INBOX"):
        sink.clear()
        await handler.handle(push_data(template=template, lines='["a"]', buttons=BUTTONS))

        calls = sink.display_calls(42)
        assert len(calls) >= 2
        # The buttons-only notification replaced the styled one.
        shown = sink.displayed[42]
        assert shown.title is None
        assert [a.label for a in shown.actions] == ["Open"]


async def test_merge_mode_displays_once_with_actions(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(), sink)

    await handler.handle(push_data(template="BIG_TEXT", buttons=BUTTONS))

    assert len(sink.display_calls(42)) == 1
    shown = sink.displayed[42]
    assert shown.title == "Title"
    assert [a.label for a in shown.actions] == ["Open"]


async def test_sink_failure_is_logged_and_not_raised(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    push_data: Callable[..., dict[str, str]],
) -> None:
    logger = Mock()
    sink = Mock(display=AsyncMock(side_effect=RuntimeError("tray unavailable")))
    handler = PushNotificationHandler(
        classifier, renderer_factory(), sink, get_logger=lambda _name: logger
    )

    outcome = await handler.handle(push_data())

    assert outcome.status == "dropped"
    assert outcome.displayed == ()
    logger.error.assert_called_once()
    assert logger.error.call_args.args[0] == "notification_display_failed"


async def test_events_emitted_for_displayed_dropped_and_ignored(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    event_bus: Any,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(), sink, event_bus=event_bus)

    await handler.handle(push_data(template="BIG_TEXT", buttons=BUTTONS))
    await handler.handle(push_data(template="INBOX"))
    await handler.handle({"type": "OTHER"})

    displayed, dropped, ignored = event_bus.dispatched
    assert isinstance(displayed, NotificationDisplayedEvent)
    assert displayed.notification_id == 42
    assert displayed.template == "BIG_TEXT"
    assert displayed.style == "big_text"
    assert displayed.action_count == 1
    assert displayed.is_overlay is False
    assert isinstance(dropped, NotificationDroppedEvent)
    assert dropped.reason == "missing_lines"
    assert isinstance(ignored, MessageIgnoredEvent)
    assert ignored.reason == "irrelevant_type"
    assert ignored.message_type == "OTHER"


async def test_delete_cancels_by_id(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    event_bus: Any,
    push_data: Callable[..., dict[str, str]],
) -> None:
    handler = _handler(classifier, renderer_factory(), sink, event_bus=event_bus)
    await handler.handle(push_data())

    await handler.delete(42)

    assert sink.displayed == {}
    assert sink.calls[-1].kind == "cancel"
    assert isinstance(event_bus.dispatched[-1], NotificationCancelledEvent)
    assert event_bus.dispatched[-1].notification_id == 42


HUGE_NUMBER = "1" * 5000


@pytest.mark.parametrize(
    "fields",
    [
        {"id": HUGE_NUMBER},
        {"template": "CONVERSATION", "conversation": f"[{HUGE_NUMBER}]"},
        {"template": "INBOX", "lines": f"[{HUGE_NUMBER}]"},
        {"buttons": f"[{HUGE_NUMBER}]"},
        {"template": "LARGE", "image": "http://[::1/x.png"},
        {"color": "#" + "F" * 5000, "template": "BIG_TEXT"},
        {"lines": "[" * 10_000, "template": "INBOX", "buttons": "{" * 10_000},
    ],
)
async def test_handle_never_raises_on_hostile_fields(
    classifier: TemplateClassifier,
    renderer_factory: Callable[..., TemplateRenderer],
    sink: InMemoryNotificationSink,
    push_data: Callable[..., dict[str, str]],
    fields: dict[str, str],
) -> None:
    fetcher = HttpImageFetcher(Settings(), session=Mock(closed=False))
    handler = _handler(classifier, renderer_factory(image_fetcher=fetcher), sink)

    outcome = await handler.handle(push_data(**fields))

    assert outcome.status in ("displayed", "dropped")
