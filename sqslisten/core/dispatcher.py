"""Per-message handler dispatch and acknowledgment.

The Dispatcher runs every message of one receive result through the user
handler and then deletes it, one message at a time, whatever the handler
did. Failures on either side are logged and counted, never raised.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any

from sqslisten.core.errors import HandlerError, QueueError
from sqslisten.core.message import Message, ReceiveResult
from sqslisten.core.stats import ListenStats

if TYPE_CHECKING:
    from sqslisten.clients.base import QueueClient

Handler = Callable[[Message | None, QueueError | None], Awaitable[Any] | Any]
DeleteErrorCallback = Callable[[Message, QueueError], Any]


class Dispatcher:
    """Hands messages to the handler and acknowledges each one."""

    def __init__(
        self,
        client: "QueueClient",
        queue_url: str,
        handler: Handler,
        stats: ListenStats,
        log: logging.Logger,
        on_delete_error: DeleteErrorCallback | None = None,
    ) -> None:
        self.client = client
        self.queue_url = queue_url
        self.handler = handler
        self.stats = stats
        self.on_delete_error = on_delete_error
        self._log = log

    async def dispatch(self, result: ReceiveResult) -> None:
        """Handle then delete every message in ``result``, in order."""
        for message in result.messages:
            self.stats.messages_received += 1
            self._log.debug(
                "Dispatching message",
                extra={"queue_url": self.queue_url, "message_id": message.message_id},
            )
            await self._invoke_handler(message, None)
            await self._ack(message)

    async def report_error(self, error: QueueError) -> None:
        """Pass a receive failure to the handler. Nothing is deleted."""
        await self._invoke_handler(None, error)

    async def _invoke_handler(self, message: Message | None, error: QueueError | None) -> None:
        """Call the handler, awaiting it if async. Its outcome is discarded."""
        message_id = message.message_id if message is not None else None
        try:
            result = self.handler(message, error)
            if inspect.isawaitable(result):
                await result
        except HandlerError as e:
            self.stats.handler_errors += 1
            self._log.warning(
                f"Handler reported failure: {e}",
                extra={"queue_url": self.queue_url, "message_id": message_id, "error": str(e)},
            )
        except Exception as e:
            self.stats.handler_errors += 1
            self._log.error(
                f"Handler raised exception: {e}",
                exc_info=True,
                extra={"queue_url": self.queue_url, "message_id": message_id, "error": str(e)},
            )

    async def _ack(self, message: Message) -> None:
        if message.receipt_handle is None:
            self.stats.deletes_skipped += 1
            return

        try:
            await self.client.delete(self.queue_url, message.receipt_handle)
        except QueueError as e:
            self.stats.delete_errors += 1
            self._log.warning(
                f"Failed to delete message: {e}",
                extra={
                    "queue_url": self.queue_url,
                    "message_id": message.message_id,
                    "error": str(e),
                },
            )
            if self.on_delete_error is not None:
                self._report_delete_error(message, e)
            return

        self.stats.messages_deleted += 1

    def _report_delete_error(self, message: Message, error: QueueError) -> None:
        try:
            self.on_delete_error(message, error)
        except Exception as e:
            self._log.error(
                f"Delete error callback raised exception: {e}",
                extra={"queue_url": self.queue_url, "message_id": message.message_id},
            )
