# -*- coding: utf-8 -*-
"""Shared pytest fixtures for unit tests."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest

from push_template_renderer.collaborators.image_fetch import ImageFetchAdapter
from push_template_renderer.models.incoming_message import IncomingMessage
from push_template_renderer.models.notification import Bitmap, ResolvedColor
from push_template_renderer.rendering.classifier import AcceptedMessage, TemplateClassifier
from push_template_renderer.rendering.identity import NotificationIdAllocator
from push_template_renderer.rendering.render_config import RenderConfig
from push_template_renderer.rendering.renderer import TemplateRenderer
from push_template_renderer.sinks.in_memory import InMemoryNotificationSink

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"\x00" * 24


class FakeImageFetcher(ImageFetchAdapter):
    """Image fetcher returning a fixed result and recording requested URLs."""

    def __init__(self, bitmap: Bitmap | None = None) -> None:
        self.bitmap = bitmap
        self.requested: list[str] = []

    async def fetch(self, url: str) -> Bitmap | None:
        self.requested.append(url)
        return self.bitmap


class FakeEventBus:
    """Minimal event bus fake for unit tests."""

    def __init__(self) -> None:
        self.handlers: dict[str, list[Any]] = {}
        self.dispatched: list[Any] = []

    def on(self, event_type: type[Any], handler: Any) -> None:
        self.handlers.setdefault(event_type.__name__, []).append(handler)

    def dispatch(self, event: Any) -> None:
        self.dispatched.append(event)


@pytest.fixture
def default_color() -> ResolvedColor:
    return ResolvedColor(0xFF123456)


@pytest.fixture
def render_config(default_color: ResolvedColor) -> RenderConfig:
    """Merge-mode config with a recognisable default color."""
    return RenderConfig(default_color=default_color, channel_id="test_channel")


@pytest.fixture
def fixed_clock() -> Callable[[], int]:
    """Clock pinned to a millisecond value whose low 28 bits are 0x0ABCDEF."""
    return lambda: 0x7_0ABC_DEF


@pytest.fixture
def bitmap() -> Bitmap:
    return Bitmap(url="http://good.png", data=PNG_BYTES, format="png", content_type="image/png")


@pytest.fixture
def image_fetcher(bitmap: Bitmap) -> FakeImageFetcher:
    return FakeImageFetcher(bitmap)


@pytest.fixture
def failing_image_fetcher() -> FakeImageFetcher:
    return FakeImageFetcher(None)


@pytest.fixture
def sink() -> InMemoryNotificationSink:
    """Fresh in-memory sink per test."""
    return InMemoryNotificationSink()


@pytest.fixture
def event_bus() -> FakeEventBus:
    return FakeEventBus()


@pytest.fixture
def classifier(render_config: RenderConfig, fixed_clock: Callable[[], int]) -> TemplateClassifier:
    return TemplateClassifier(render_config, id_allocator=NotificationIdAllocator(fixed_clock))


@pytest.fixture
def renderer_factory(
    render_config: RenderConfig,
    image_fetcher: FakeImageFetcher,
) -> Callable[..., TemplateRenderer]:
    """Build TemplateRenderer with sensible defaults and easy overrides."""

    def _build(**overrides: Any) -> TemplateRenderer:
        return TemplateRenderer(
            overrides.pop("config", render_config),
            overrides.pop("image_fetcher", image_fetcher),
            **overrides,
        )

    return _build


@pytest.fixture
def push_data() -> Callable[..., dict[str, str]]:
    """Build an ANDP push data mapping; keyword overrides set (or, with None, remove) keys."""

    def _build(**fields: str | None) -> dict[str, str]:
        data: dict[str, str] = {"type": "ANDP", "id": "42", "title": "Title", "message": "Body"}
        for key, value in fields.items():
            if value is None:
                data.pop(key, None)
            else:
                data[key] = value
        return data

    return _build


@pytest.fixture
def accepted_factory(
    classifier: TemplateClassifier,
    push_data: Callable[..., dict[str, str]],
) -> Callable[..., AcceptedMessage]:
    """Classify push data built from overrides and return the AcceptedMessage."""

    def _build(**fields: str | None) -> AcceptedMessage:
        result = classifier.classify(IncomingMessage.from_data(push_data(**fields)))
        assert isinstance(result, AcceptedMessage)
        return result

    return _build
