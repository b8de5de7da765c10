# -*- coding: utf-8 -*-
"""Configuration loaded from environment via Pydantic Settings.

Nested env vars use <section>__<key>, e.g. LOGGING__LEVEL, RENDERING__DEFAULT_COLOR.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Literal, Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    """General application configuration."""

    model_config = SettingsConfigDict(extra="ignore")

    app_name: str = "push-template-renderer"
    service_name: Optional[str] = None
    service_version: Optional[str] = None
    environment: Literal["development", "test", "production"] = "development"


class LoggingSettings(BaseSettings):
    """structlog output settings (from env LOGGING__*). Logs go to stderr; stdout belongs to the console sink."""

    model_config = SettingsConfigDict(extra="ignore")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"
    json_format: bool = False
    # Daily-rotated JSON log file; None disables it.
    file_path: Optional[str] = None
    file_backup_count: int = Field(default=7, ge=0)

    logfire_enabled: bool = False
    logfire_token: Optional[str] = None


class RenderingSettings(BaseSettings):
    """Template rendering configuration (from env RENDERING__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    accepted_type: str = Field(
        default="ANDP",
        min_length=1,
        description="Value of the `type` field a message must carry to be rendered.",
    )
    default_color: str = Field(
        default="#FF2196F3",
        description="Fallback color (#RRGGBB or #AARRGGBB) when a message has none or an invalid one.",
    )
    sound_enabled: bool = Field(
        default=True,
        description="Default sound preference when no SoundPreference collaborator is injected.",
    )
    channel_id: str = Field(default="default_channel_id", min_length=1)
    conversation_self_name: str = Field(
        default="Me",
        description="Display name of the local user in conversation notifications.",
    )
    actions_mode: Literal["merge", "overlay"] = Field(
        default="merge",
        description=(
            "merge: attach buttons to the primary notification. "
            "overlay: display a second buttons-only notification under the same id."
        ),
    )


class ImageFetchSettings(BaseSettings):
    """HTTP image fetch configuration (from env IMAGE_FETCH__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    timeout_seconds: Optional[float] = Field(
        default=None,
        gt=0.0,
        le=600.0,
        description="Total fetch timeout in seconds. None disables the timeout.",
    )
    max_bytes: int = Field(
        default=10 * 1024 * 1024,
        ge=1024,
        description="Largest image body accepted; bigger responses are dropped.",
    )
    user_agent: str = "push-template-renderer/0.1"


class IntakeSettings(BaseSettings):
    """In-process message intake configuration (from env INTAKE__*)."""

    model_config = SettingsConfigDict(extra="ignore")

    queue_size: int = Field(default=1000, ge=1, le=100_000)


class ConsoleSinkSettings(BaseSettings):
    """Console sink settings."""

    model_config = SettingsConfigDict(extra="ignore")

    enabled: bool = True


class Settings(BaseSettings):
    """Root application configuration.

    Groups all sub-configurations so the rest of the code does not
    read environment variables directly. Nested overrides use
    <section>__<key>, e.g. LOGGING__LEVEL, RENDERING__ACTIONS_MODE.
    """

    model_config = SettingsConfigDict(
        env_nested_delimiter="__",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    app: AppSettings = Field(default_factory=AppSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    rendering: RenderingSettings = Field(default_factory=RenderingSettings)
    image_fetch: ImageFetchSettings = Field(default_factory=ImageFetchSettings)
    intake: IntakeSettings = Field(default_factory=IntakeSettings)
    console: ConsoleSinkSettings = Field(default_factory=ConsoleSinkSettings)

    @classmethod
    def from_env(cls, **overrides: Any) -> Settings:
        """Build settings from environment (and .env), with optional overrides.

        Nested overrides can be passed as nested dicts, e.g.:
        - from_env(rendering={"actions_mode": "overlay"})

        Returns:
            A new Settings instance.
        """
        return cls(**overrides)


@lru_cache
def get_settings() -> Settings:
    """Return a single cached instance of Settings.

    Typical usage:

        from push_template_renderer.config import get_settings

        settings = get_settings()
        marker = settings.rendering.accepted_type
    """
    return Settings()
