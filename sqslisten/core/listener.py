"""SQSListen: subscribe a handler to a queue.

    listener = SQSListen("us-east-1")
    handle = listener.listen(
        ReceiveMessageRequest(queue_url=url, wait_time_seconds=10),
        handler,
    )
    ...
    handle.stop()

Every received message is deleted after the handler returns, whether the
handler succeeded or not. Receive failures are passed to the handler as
``(None, error)``; delete failures are logged and otherwise swallowed.
"""

from typing import TYPE_CHECKING

import boto3
from botocore.config import Config

from sqslisten.clients.sqs import SQSClient
from sqslisten.core.dispatcher import DeleteErrorCallback, Dispatcher, Handler
from sqslisten.core.interval import poll_interval
from sqslisten.core.logging import configure_listener_logger
from sqslisten.core.message import ReceiveMessageRequest
from sqslisten.core.scheduler import ListenHandle, PollScheduler
from sqslisten.core.stats import ListenStats

if TYPE_CHECKING:
    from sqslisten.clients.base import QueueClient
    from sqslisten.config import ListenerSettings


class SQSListen:
    """Polling adapter turning a queue into a stream of handler calls."""

    def __init__(
        self,
        region: str | None = None,
        *,
        client: "QueueClient | None" = None,
    ) -> None:
        """Initialize the adapter. No queue is bound until ``listen``.

        Args:
            region: AWS region for the default SQS client.
            client: Any QueueClient to use instead of building an SQSClient.
        """
        self.client = client if client is not None else SQSClient(region)
        self.queue_url = ""
        self._log = configure_listener_logger()

    @classmethod
    def new_with(
        cls,
        session: boto3.session.Session,
        config: Config | None = None,
        region: str | None = None,
    ) -> "SQSListen":
        """Build an adapter from explicit client-construction parameters.

        Args:
            session: boto3 session providing credentials.
            config: botocore Config controlling request dispatch.
            region: AWS region.
        """
        return cls(client=SQSClient(region, session=session, config=config))

    @classmethod
    def from_settings(cls, settings: "ListenerSettings") -> "SQSListen":
        """Build an adapter from environment-driven settings."""
        listener = cls(
            client=SQSClient(settings.region, endpoint_url=settings.endpoint_url)
        )
        listener._log.setLevel(settings.log_level.upper())
        return listener

    def listen(
        self,
        request: ReceiveMessageRequest,
        handler: Handler,
        *,
        on_delete_error: DeleteErrorCallback | None = None,
    ) -> ListenHandle:
        """Start polling ``request.queue_url`` and return immediately.

        Must be called from a running event loop. Each call owns its own
        poll task; calling ``listen`` concurrently on one adapter is not
        supported.

        Args:
            request: What to poll. Forwarded unchanged on every tick.
            handler: Called as ``handler(message, None)`` for each message or
                ``handler(None, error)`` when a receive fails. May be async.
                Its return value is ignored.
            on_delete_error: Optional callback for delete failures, which are
                otherwise only logged.

        Returns:
            A handle whose ``stop()`` halts the poll loop.
        """
        self.queue_url = request.queue_url
        period = poll_interval(request)

        dispatcher = Dispatcher(
            client=self.client,
            queue_url=self.queue_url,
            handler=handler,
            stats=ListenStats(),
            log=self._log,
            on_delete_error=on_delete_error,
        )
        scheduler = PollScheduler(
            client=self.client,
            request=request,
            dispatcher=dispatcher,
            period=period,
            log=self._log,
        )
        handle = scheduler.start()

        self._log.info(
            f"Listening every {period}s",
            extra={"queue_url": self.queue_url},
        )
        return handle
