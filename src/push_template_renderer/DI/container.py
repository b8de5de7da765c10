# -*- coding: utf-8 -*-
"""Dependency injection container (dependency-injector)."""

from __future__ import annotations

from dependency_injector import containers, providers

from push_template_renderer.collaborators.deeplink import PassthroughDeeplinkResolver
from push_template_renderer.collaborators.image_fetch import HttpImageFetcher
from push_template_renderer.collaborators.sound import StaticSoundPreference
from push_template_renderer.config import Settings, get_settings
from push_template_renderer.events.bus import get_event_bus
from push_template_renderer.models.notification import ResolvedColor
from push_template_renderer.rendering.classifier import TemplateClassifier
from push_template_renderer.rendering.color import ColorResolver
from push_template_renderer.rendering.identity import NotificationIdAllocator
from push_template_renderer.rendering.payload_parser import StructuredPayloadParser
from push_template_renderer.rendering.render_config import RenderConfig
from push_template_renderer.rendering.renderer import TemplateRenderer
from push_template_renderer.services.delivery_stats import DeliveryStatsRecorder
from push_template_renderer.services.message_intake import PushMessageIntake
from push_template_renderer.services.notification_handler import PushNotificationHandler
from push_template_renderer.sinks.base import NotificationSink
from push_template_renderer.sinks.console import ConsoleNotificationSink
from push_template_renderer.sinks.in_memory import InMemoryNotificationSink
from push_template_renderer.stylers.text_styler import NotificationTextStyler


def _build_render_config(settings: Settings) -> RenderConfig:
    return RenderConfig.from_settings(settings.rendering)


def _build_sink(settings: Settings, styler: NotificationTextStyler) -> NotificationSink:
    """Console sink when enabled, otherwise an in-memory sink."""
    if settings.console.enabled:
        return ConsoleNotificationSink(settings=settings, styler=styler)
    return InMemoryNotificationSink()


def _default_color(config: RenderConfig) -> ResolvedColor:
    return config.default_color


def _sound_enabled(settings: Settings) -> bool:
    return settings.rendering.sound_enabled


def _intake_queue_size(settings: Settings) -> int:
    return settings.intake.queue_size


class Container(containers.DeclarativeContainer):
    """Application container. Wires settings, collaborators, rendering core, handler and intake."""

    config = providers.Callable(get_settings)

    render_config = providers.Singleton(_build_render_config, config)

    event_bus = providers.Callable(get_event_bus)

    image_fetcher = providers.Singleton(
        HttpImageFetcher,
        settings=config,
    )

    deeplink_resolver = providers.Singleton(PassthroughDeeplinkResolver)

    sound_preference = providers.Singleton(
        StaticSoundPreference,
        enabled=providers.Callable(_sound_enabled, config),
    )

    payload_parser = providers.Singleton(StructuredPayloadParser)

    color_resolver = providers.Singleton(
        ColorResolver,
        default=providers.Callable(_default_color, render_config),
    )

    id_allocator = providers.Singleton(NotificationIdAllocator)

    classifier = providers.Singleton(
        TemplateClassifier,
        config=render_config,
        color_resolver=color_resolver,
        id_allocator=id_allocator,
    )

    renderer = providers.Singleton(
        TemplateRenderer,
        config=render_config,
        image_fetcher=image_fetcher,
        parser=payload_parser,
        deeplink_resolver=deeplink_resolver,
        sound_preference=sound_preference,
    )

    notification_styler = providers.Singleton(NotificationTextStyler)

    sink = providers.Singleton(_build_sink, config, notification_styler)

    notification_handler = providers.Singleton(
        PushNotificationHandler,
        classifier=classifier,
        renderer=renderer,
        sink=sink,
        event_bus=event_bus,
    )

    delivery_stats = providers.Singleton(DeliveryStatsRecorder, event_bus=event_bus)

    message_intake = providers.Singleton(
        PushMessageIntake,
        handler=notification_handler,
        sinks=providers.List(sink),
        queue_size=providers.Callable(_intake_queue_size, config),
    )
