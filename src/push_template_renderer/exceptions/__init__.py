"""Exceptions subpackage."""

from push_template_renderer.exceptions.exceptions import (
    ImageFetchError,
    IntakeNotRunningError,
    MissingRequiredConfigError,
    PayloadParseError,
    PushRendererError,
)

__all__ = [
    "ImageFetchError",
    "IntakeNotRunningError",
    "MissingRequiredConfigError",
    "PayloadParseError",
    "PushRendererError",
]
