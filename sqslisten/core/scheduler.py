"""Fixed-period poll loop and the handle that owns it.

Each PollScheduler runs as its own asyncio task. Ticks never overlap: the
next firing is only scheduled once the current tick has returned, and
firings missed while a tick overran are coalesced into one.
"""

import asyncio
import logging
from typing import TYPE_CHECKING

from sqslisten.core.dispatcher import Dispatcher
from sqslisten.core.errors import QueueError
from sqslisten.core.message import ReceiveMessageRequest
from sqslisten.core.stats import ListenStats

if TYPE_CHECKING:
    from sqslisten.clients.base import QueueClient


class PollScheduler:
    """Invokes receive on a fixed period until stopped."""

    def __init__(
        self,
        client: "QueueClient",
        request: ReceiveMessageRequest,
        dispatcher: Dispatcher,
        period: float,
        log: logging.Logger,
    ) -> None:
        if period <= 0:
            raise ValueError(f"period must be positive, got {period}")
        self.client = client
        self.request = request
        self.dispatcher = dispatcher
        self.period = period
        self._log = log
        self._loop: asyncio.AbstractEventLoop | None = None
        self._stop_event: asyncio.Event | None = None
        self._stopped = False

    @property
    def stats(self) -> ListenStats:
        return self.dispatcher.stats

    def start(self) -> "ListenHandle":
        """Schedule the poll loop on the running event loop and return at once.

        Raises:
            RuntimeError: If called without a running event loop.
        """
        self._loop = asyncio.get_running_loop()
        self._stop_event = asyncio.Event()
        task = self._loop.create_task(
            self._run(), name=f"sqslisten-poll:{self.request.queue_url}"
        )
        return ListenHandle(self, task)

    def stop(self) -> None:
        """Prevent any further firing. Safe to call from any thread."""
        if self._stopped:
            return
        self._stopped = True
        if self._loop is None or self._loop.is_closed():
            return
        if _on_loop(self._loop):
            self._stop_event.set()
        else:
            self._loop.call_soon_threadsafe(self._stop_event.set)

    async def _wait_stopped(self, delay: float) -> bool:
        """Sleep up to ``delay`` seconds; return True if stopped meanwhile."""
        if delay > 0:
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=delay)
            except TimeoutError:
                pass
        return self._stopped

    async def _run(self) -> None:
        loop = asyncio.get_running_loop()
        next_run = loop.time() + self.period

        while not await self._wait_stopped(next_run - loop.time()):
            self.stats.ticks += 1
            try:
                await self._tick()
            except Exception as e:
                self._log.error(
                    f"Poll tick failed: {e}",
                    exc_info=True,
                    extra={"queue_url": self.request.queue_url, "tick": self.stats.ticks},
                )

            next_run += self.period
            now = loop.time()
            if next_run < now:
                next_run = now

        self._log.info(
            "Poll loop stopped",
            extra={"queue_url": self.request.queue_url, "tick": self.stats.ticks},
        )

    async def _tick(self) -> None:
        tick = self.stats.ticks
        try:
            result = await self.client.receive(self.request)
        except QueueError as e:
            self.stats.receive_errors += 1
            self._log.error(
                f"Receive failed: {e}",
                extra={"queue_url": self.request.queue_url, "tick": tick, "error": str(e)},
            )
            await self.dispatcher.report_error(e)
            return

        self._log.debug(
            f"Received {len(result)} message(s)",
            extra={"queue_url": self.request.queue_url, "tick": tick},
        )
        await self.dispatcher.dispatch(result)


class ListenHandle:
    """Ownership of one running poll loop.

    ``stop()`` must be called for a clean shutdown; a handle that is simply
    dropped leaves its task running until the event loop closes.
    """

    def __init__(self, scheduler: PollScheduler, task: asyncio.Task) -> None:
        self._scheduler = scheduler
        self._task = task

    @property
    def queue_url(self) -> str:
        return self._scheduler.request.queue_url

    @property
    def period(self) -> float:
        """Seconds between firings."""
        return self._scheduler.period

    @property
    def running(self) -> bool:
        return not self._task.done()

    def stop(self) -> None:
        """Halt future firings. A tick already in progress is allowed to finish."""
        self._scheduler.stop()

    async def join(self) -> None:
        """Wait for the poll loop to exit, including any in-flight tick."""
        await asyncio.shield(self._task)

    def get_stats(self) -> ListenStats:
        """Return a snapshot of the loop's counters."""
        return self._scheduler.stats.snapshot()


def _on_loop(loop: asyncio.AbstractEventLoop) -> bool:
    try:
        return asyncio.get_running_loop() is loop
    except RuntimeError:
        return False
