# -*- coding: utf-8 -*-
"""
Entry point: render push payloads read from stdin.

Each stdin line is one JSON object holding the push data mapping, e.g.
    {"type": "ANDP", "title": "Hi", "message": "Hello", "template": "BIG_TEXT"}

Lines flow: stdin -> PushMessageIntake -> PushNotificationHandler -> sink (console by default).
Stops at EOF or SIGINT, after in-flight messages (including image fetches) finish.

Run with: python -m push_template_renderer.main < payloads.ndjson
"""
from __future__ import annotations

import asyncio
import json
import signal
import sys
from collections.abc import AsyncIterator
from typing import Any

import structlog

from push_template_renderer.DI import Container
from push_template_renderer.logging.config import configure_logging


def _setup_sigint(shutdown_event: asyncio.Event) -> None:
    try:
        loop = asyncio.get_running_loop()
        loop.add_signal_handler(signal.SIGINT, shutdown_event.set)
    except NotImplementedError:
        pass  # Windows has no add_signal_handler


def parse_line(line: str, logger: Any) -> dict[str, Any] | None:
    """Decode one stdin line; blank or invalid lines are skipped."""
    line = line.strip()
    if not line:
        return None
    try:
        decoded = json.loads(line)
    except json.JSONDecodeError as exc:
        logger.warning("main_invalid_json_line", error_message=str(exc))
        return None
    if not isinstance(decoded, dict):
        logger.warning("main_line_not_object", line_type=type(decoded).__name__)
        return None
    return decoded


async def _stdin_lines() -> AsyncIterator[str]:
    """Yield stdin lines; pipes and terminals are read without blocking the loop."""
    loop = asyncio.get_running_loop()
    reader = asyncio.StreamReader()
    try:
        await loop.connect_read_pipe(lambda: asyncio.StreamReaderProtocol(reader), sys.stdin)
    except (ValueError, NotImplementedError):
        # Regular files (stdin redirected from disk) are not pipes; they always reach EOF.
        for line in sys.stdin:
            yield line
        return
    while raw := await reader.readline():
        yield raw.decode("utf-8", errors="replace")


async def _read_stdin(intake: Any, logger: Any) -> None:
    async for line in _stdin_lines():
        data = parse_line(line, logger)
        if data is not None:
            intake.submit(data)


async def run() -> None:
    configure_logging()
    logger = structlog.get_logger("main")

    container = Container()
    intake = container.message_intake()
    image_fetcher = container.image_fetcher()
    delivery_stats = container.delivery_stats()
    delivery_stats.start()
    await intake.initialize()
    shutdown_event = asyncio.Event()
    _setup_sigint(shutdown_event)
    logger.info("main_started")

    reader = asyncio.create_task(_read_stdin(intake, logger))
    stopper = asyncio.create_task(shutdown_event.wait())
    try:
        await asyncio.wait({reader, stopper}, return_when=asyncio.FIRST_COMPLETED)
    finally:
        stopper.cancel()
        reader.cancel()
        try:
            await reader
        except asyncio.CancelledError:
            pass
        await intake.shutdown()
        await image_fetcher.aclose()
        await container.event_bus().wait_until_idle()
        delivery_stats.stop()
        logger.info("main_shutdown_complete")


def main() -> None:
    asyncio.run(run())


__all__ = ["run", "main", "parse_line"]

if __name__ == "__main__":
    main()
