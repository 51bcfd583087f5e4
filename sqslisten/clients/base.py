"""QueueClient protocol.

The poll loop never talks to the queue service directly; every receive and
delete goes through a client implementing this protocol.
"""

from typing import Protocol

from sqslisten.core.message import ReceiveMessageRequest, ReceiveResult


class QueueClient(Protocol):
    """Protocol defining the queue operations the poll loop relies on.

    Implementations must raise ``QueueError`` for any failure; other
    exceptions are treated as bugs and only logged by the scheduler.
    """

    async def receive(self, request: ReceiveMessageRequest) -> ReceiveResult:
        """Fetch zero or more messages.

        Args:
            request: What to poll. Implementations must not mutate it.

        Returns:
            The messages in the order the service returned them.
        """
        ...

    async def delete(self, queue_url: str, receipt_handle: str) -> None:
        """Remove a received message from the queue.

        Args:
            queue_url: Queue the message was received from.
            receipt_handle: Receipt handle of the received message.
        """
        ...
