"""In-memory queue client for development and testing."""

import asyncio
from collections import deque
from uuid import uuid4

from sqslisten.core.errors import QueueError
from sqslisten.core.message import Message, ReceiveMessageRequest, ReceiveResult


class InMemoryQueueClient:
    """QueueClient holding messages in process memory.

    Received messages move to an in-flight set until deleted; there is no
    visibility timeout, so an undeleted message is never redelivered. Each
    receive issues fresh receipt handles. Nothing is durable.

    Args:
        queue_url: The only queue this client serves.
        max_batch: Cap on messages per receive, like the service's limit of 10.
    """

    def __init__(self, queue_url: str = "memory://default", max_batch: int = 10) -> None:
        self.queue_url = queue_url
        self._max_batch = max_batch
        self._pending: deque[Message] = deque()
        self._in_flight: dict[str, Message] = {}
        self._available = asyncio.Event()

    def _check_queue(self, queue_url: str, operation: str) -> None:
        if queue_url != self.queue_url:
            raise QueueError(
                f"Queue does not exist: {queue_url}",
                operation=operation,
                code="AWS.SimpleQueueService.NonExistentQueue",
            )

    def send(self, body: str, attributes: dict[str, str] | None = None) -> Message:
        """Append a message to the queue and return it."""
        message = Message(message_id=str(uuid4()), body=body, attributes=attributes or {})
        self._pending.append(message)
        self._available.set()
        return message

    async def receive(self, request: ReceiveMessageRequest) -> ReceiveResult:
        """Return up to ``max_number_of_messages`` messages (default 1).

        When the queue is empty and the request sets a wait time, waits up
        to that many seconds for a message to arrive.
        """
        self._check_queue(request.queue_url, "ReceiveMessage")

        if not self._pending and request.wait_time_seconds:
            self._available.clear()
            try:
                await asyncio.wait_for(self._available.wait(), request.wait_time_seconds)
            except TimeoutError:
                pass

        limit = min(request.max_number_of_messages or 1, self._max_batch)
        received = []
        while self._pending and len(received) < limit:
            message = self._pending.popleft()
            handle = uuid4().hex
            delivered = message.model_copy(update={"receipt_handle": handle})
            self._in_flight[handle] = delivered
            received.append(delivered)
        return ReceiveResult(messages=received)

    async def delete(self, queue_url: str, receipt_handle: str) -> None:
        """Remove an in-flight message.

        Raises:
            QueueError: If the receipt handle is unknown or already deleted.
        """
        self._check_queue(queue_url, "DeleteMessage")
        if self._in_flight.pop(receipt_handle, None) is None:
            raise QueueError(
                f"Receipt handle is invalid: {receipt_handle}",
                operation="DeleteMessage",
                code="ReceiptHandleIsInvalid",
            )

    def qsize(self) -> int:
        """Number of messages waiting to be received."""
        return len(self._pending)

    @property
    def in_flight(self) -> int:
        """Number of received messages not yet deleted."""
        return len(self._in_flight)
