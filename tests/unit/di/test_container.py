# -*- coding: utf-8 -*-
"""Unit tests for the dependency injection container wiring."""

from __future__ import annotations

from typing import Any

from dependency_injector import providers

from push_template_renderer.config import ConsoleSinkSettings, RenderingSettings, Settings
from push_template_renderer.DI import Container
from push_template_renderer.services.message_intake import PushMessageIntake
from push_template_renderer.sinks.console import ConsoleNotificationSink
from push_template_renderer.sinks.in_memory import InMemoryNotificationSink


def _container(settings: Settings, event_bus: Any) -> Container:
    container = Container()
    container.config.override(providers.Object(settings))
    container.event_bus.override(providers.Object(event_bus))
    return container


async def test_container_wires_intake_with_in_memory_sink(event_bus: Any) -> None:
    settings = Settings(
        console=ConsoleSinkSettings(enabled=False),
        rendering=RenderingSettings(actions_mode="overlay", default_color="#000000"),
    )
    container = _container(settings, event_bus)

    intake = container.message_intake()
    assert isinstance(intake, PushMessageIntake)
    assert isinstance(container.sink(), InMemoryNotificationSink)
    assert intake.sinks == [container.sink()]
    assert container.render_config().actions_mode == "overlay"

    await intake.initialize()
    intake.submit({"type": "ANDP", "id": "5", "title": "Hi", "template": "BIG_TEXT"})
    await intake.shutdown()

    assert container.sink().displayed[5].title == "Hi"
    assert [type(e).__name__ for e in event_bus.dispatched] == ["NotificationDisplayedEvent"]


def test_console_sink_selected_when_enabled(event_bus: Any) -> None:
    container = _container(Settings(), event_bus)
    assert isinstance(container.sink(), ConsoleNotificationSink)
