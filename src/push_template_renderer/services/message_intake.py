"""Non-blocking in-process intake for push messages.

submit() returns immediately; a worker task takes messages off the queue and
starts one handling task per message, so a slow image fetch for one LARGE
notification never holds up the others. No ordering is kept between messages.
"""

from __future__ import annotations

import asyncio
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import structlog

from push_template_renderer.exceptions import IntakeNotRunningError
from push_template_renderer.models.incoming_message import IncomingMessage

if TYPE_CHECKING:
    from push_template_renderer.services.notification_handler import PushNotificationHandler
    from push_template_renderer.sinks.base import NotificationSink


@dataclass
class PushMessageIntake:
    """Queue inbound messages and hand each one to PushNotificationHandler."""

    handler: PushNotificationHandler
    sinks: list[NotificationSink] = field(default_factory=list)
    queue_size: int = 1000
    get_logger: Callable[[str], Any] = field(default=structlog.get_logger)
    _queue: asyncio.Queue[IncomingMessage] | None = field(init=False, default=None)
    _worker_task: asyncio.Task[None] | None = field(init=False, default=None)
    _in_flight: set[asyncio.Task[None]] = field(init=False, default_factory=set)
    _logger: Any = field(init=False)

    def __post_init__(self) -> None:
        self._logger = self.get_logger("PushMessageIntake")

    @property
    def is_running(self) -> bool:
        return self._queue is not None

    async def initialize(self) -> None:
        """Initialize sinks and start the worker."""
        for sink in self.sinks:
            await sink.initialize()
        self._queue = asyncio.Queue[IncomingMessage](maxsize=self.queue_size)
        self._worker_task = asyncio.create_task(self._worker_loop())
        self._logger.debug(
            "intake_init_complete",
            intake_queue_size=self.queue_size,
            intake_sinks_count=len(self.sinks),
        )

    async def shutdown(self) -> None:
        """Stop accepting messages, wait for queued and in-flight messages, shut sinks down."""
        self._logger.debug("intake_shutdown_started")
        if self._queue is not None:
            self._queue.shutdown()
            await self._queue.join()
            self._logger.debug("intake_shutdown_queue_drained")
        if self._worker_task is not None:
            await self._worker_task
            self._worker_task = None
        self._queue = None

        for sink in self.sinks:
            await sink.shutdown()
        self._logger.debug("intake_shutdown_complete")

    def submit(self, message: IncomingMessage | Mapping[str, Any]) -> bool:
        """Enqueue a message without blocking.

        Returns:
            False if the queue is full and the message was dropped.

        Raises:
            IntakeNotRunningError: If initialize() has not been awaited.
        """
        queue = self._queue
        if queue is None:
            raise IntakeNotRunningError("PushMessageIntake not initialized")
        if not isinstance(message, IncomingMessage):
            message = IncomingMessage.from_data(message)
        try:
            queue.put_nowait(message)
        except asyncio.QueueFull:
            self._logger.warning(
                "intake_queue_full_dropped",
                message_sender=message.sender,
            )
            return False
        except asyncio.QueueShutDown as exc:
            raise IntakeNotRunningError("PushMessageIntake is shutting down") from exc
        return True

    async def _worker_loop(self) -> None:
        queue = self._queue
        if queue is None:
            return
        while True:
            try:
                message = await queue.get()
            except asyncio.QueueShutDown:
                self._logger.debug("intake_worker_shutting_down")
                break
            task = asyncio.create_task(self._handle(queue, message))
            self._in_flight.add(task)
            task.add_done_callback(self._in_flight.discard)

    async def _handle(self, queue: asyncio.Queue[IncomingMessage], message: IncomingMessage) -> None:
        try:
            await self.handler.handle(message)
        except Exception as exc:
            self._logger.exception(
                "intake_handle_failed",
                error_type=type(exc).__name__,
                error_message=str(exc),
            )
        finally:
            queue.task_done()
