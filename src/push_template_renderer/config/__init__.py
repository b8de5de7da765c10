"""Configuration subpackage."""

from push_template_renderer.config.config import (
    AppSettings,
    ConsoleSinkSettings,
    ImageFetchSettings,
    IntakeSettings,
    LoggingSettings,
    RenderingSettings,
    Settings,
    get_settings,
)

__all__ = [
    "AppSettings",
    "ConsoleSinkSettings",
    "ImageFetchSettings",
    "IntakeSettings",
    "LoggingSettings",
    "RenderingSettings",
    "Settings",
    "get_settings",
]
