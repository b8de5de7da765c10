"""Logging setup."""

from push_template_renderer.logging.config import configure_logging

__all__ = ["configure_logging"]
