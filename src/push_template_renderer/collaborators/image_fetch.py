# -*- coding: utf-8 -*-
"""Image fetch boundary for large-image notifications."""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from typing import Any, Callable, Optional

import aiohttp
import structlog
from structlog.contextvars import bound_contextvars

from push_template_renderer.config import Settings
from push_template_renderer.exceptions import ImageFetchError
from push_template_renderer.models.notification import Bitmap
from push_template_renderer.utils.image_format import detect_image_format, is_http_url


class ImageFetchAdapter(ABC):
    """Fetch and decode an image. Failures resolve to None, never raise."""

    @abstractmethod
    async def fetch(self, url: str) -> Bitmap | None:
        """Return the decoded image at url, or None if it cannot be fetched or decoded."""
        ...


class HttpImageFetcher(ImageFetchAdapter):
    """Single-shot aiohttp GET of an image. No retry; timeout only if configured.

    Injects Settings and optionally an aiohttp.ClientSession. If no session
    is provided, one is created and must be closed via aclose() or used
    as an async context manager.
    """

    def __init__(
        self,
        settings: Settings,
        *,
        session: Optional[aiohttp.ClientSession] = None,
        get_logger: Callable[[str], Any] = structlog.get_logger,
        logger_name: Optional[str] = None,
    ) -> None:
        """Initialize the fetcher.

        Args:
            settings: Configuration (uses settings.image_fetch).
            session: Optional shared aiohttp session. If None, the fetcher
                creates and owns a session (call aclose() when done).
            get_logger: Logger factory (injected) with default of structlog.get_logger.
            logger_name: Optional logger name (defaults to class name).
        """
        self._settings = settings
        self._session = session
        self._owns_session = session is None
        self._logger = get_logger(logger_name or self.__class__.__name__)

    async def _get_session(self) -> aiohttp.ClientSession:
        if self._session is None or self._session.closed:
            cfg = self._settings.image_fetch
            self._session = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=cfg.timeout_seconds),
                headers={"User-Agent": cfg.user_agent},
            )
        return self._session

    async def aclose(self) -> None:
        """Close the session if this fetcher owns it."""
        if self._owns_session and self._session is not None and not self._session.closed:
            await self._session.close()
            self._session = None

    async def __aenter__(self) -> HttpImageFetcher:
        return self

    async def __aexit__(self, *args: Any) -> None:
        await self.aclose()

    async def fetch(self, url: str) -> Bitmap | None:
        with bound_contextvars(image_url=url):
            try:
                return await self._download(url)
            except ImageFetchError as exc:
                self._logger.warning(
                    "image_fetch_rejected",
                    http_status_code=exc.status_code,
                    error_message=str(exc),
                )
            except (aiohttp.ClientError, asyncio.TimeoutError, ValueError) as exc:
                self._logger.warning(
                    "image_fetch_failed",
                    error_type=type(exc).__name__,
                    error_message=str(exc),
                )
            return None

    async def _download(self, url: str) -> Bitmap:
        if not is_http_url(url):
            raise ImageFetchError("Image URL must be absolute http(s)", url=url)

        max_bytes = self._settings.image_fetch.max_bytes
        session = await self._get_session()
        async with session.get(url) as response:
            if response.status >= 400:
                raise ImageFetchError(
                    f"GET returned HTTP {response.status}",
                    url=url,
                    status_code=response.status,
                )
            if response.content_length is not None and response.content_length > max_bytes:
                raise ImageFetchError(
                    f"Image declares {response.content_length} bytes, limit is {max_bytes}",
                    url=url,
                    status_code=response.status,
                )
            body = bytearray()
            async for chunk in response.content.iter_chunked(64 * 1024):
                body.extend(chunk)
                if len(body) > max_bytes:
                    raise ImageFetchError(
                        f"Image exceeds {max_bytes} bytes",
                        url=url,
                        status_code=response.status,
                    )
            content_type = response.headers.get("Content-Type")

        data = bytes(body)
        image_format = detect_image_format(data)
        if image_format is None:
            raise ImageFetchError(
                "Response body is not a supported image",
                url=url,
                status_code=response.status,
            )
        self._logger.debug(
            "image_fetched",
            image_format=image_format,
            image_size_bytes=len(data),
        )
        return Bitmap(url=url, data=data, format=image_format, content_type=content_type)
