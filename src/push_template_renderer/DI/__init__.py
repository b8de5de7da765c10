"""Dependency injection."""

from push_template_renderer.DI.container import Container

__all__ = ["Container"]
