# -*- coding: utf-8 -*-
"""structlog (+ optional Logfire) setup for the renderer.

Logs are written to stderr so stdout stays free for the console sink's
rendered notifications. An optional daily-rotated file always gets JSON.
"""

from __future__ import annotations

import logging
import sys
from logging.handlers import TimedRotatingFileHandler
from pathlib import Path
from typing import Any

import logfire
import structlog
from structlog.types import EventDict, Processor

from push_template_renderer.config import Settings, get_settings
from push_template_renderer.exceptions import MissingRequiredConfigError


def _add_app_context(settings: Settings) -> Processor:
    app = settings.app

    def processor(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
        event_dict["logger"] = getattr(getattr(logger, "_logger", logger), "name", "")
        event_dict["app_name"] = app.service_name or app.app_name
        event_dict["environment"] = app.environment
        return event_dict

    return processor


def configure_logging(settings: Settings | None = None) -> None:
    """Configure structlog from settings (defaults to get_settings()).

    Raises:
        MissingRequiredConfigError: If Logfire is enabled without LOGGING__LOGFIRE_TOKEN.
    """
    settings = settings or get_settings()
    log_settings = settings.logging
    if log_settings.logfire_enabled and not log_settings.logfire_token:
        raise MissingRequiredConfigError("LOGGING__LOGFIRE_TOKEN")

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_settings.file_path:
        path = Path(log_settings.file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(
            TimedRotatingFileHandler(
                path,
                when="midnight",
                backupCount=log_settings.file_backup_count,
                encoding="utf-8",
                utc=True,
            )
        )
    for handler in handlers:
        handler.setFormatter(logging.Formatter("%(message)s"))
    logging.basicConfig(level=log_settings.level, handlers=handlers, force=True)

    processors: list[Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.dev.set_exc_info,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        _add_app_context(settings),
    ]
    if log_settings.logfire_enabled:
        logfire.configure(
            token=log_settings.logfire_token,
            service_name=settings.app.service_name or settings.app.app_name,
            service_version=settings.app.service_version,
            environment=settings.app.environment,
        )
        processors.append(logfire.StructlogProcessor())  # type: ignore[arg-type]

    use_json = log_settings.json_format or bool(log_settings.file_path)
    processors.append(
        structlog.processors.JSONRenderer() if use_json else structlog.dev.ConsoleRenderer()
    )

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )
