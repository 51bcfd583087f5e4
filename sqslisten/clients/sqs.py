"""Amazon SQS client built on boto3.

boto3 calls are blocking; they run in a worker thread through
``asyncio.to_thread`` so the event loop keeps running while a long poll is
in flight.
"""

import asyncio
import logging
from typing import Any

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from sqslisten.core.errors import QueueError
from sqslisten.core.message import ReceiveMessageRequest, ReceiveResult

logger = logging.getLogger("sqslisten.sqs")


def _queue_error(operation: str, error: Exception) -> QueueError:
    code = None
    if isinstance(error, ClientError):
        code = error.response.get("Error", {}).get("Code")
    return QueueError(str(error), operation=operation, code=code)


class SQSClient:
    """QueueClient backed by a boto3 SQS client."""

    def __init__(
        self,
        region_name: str | None = None,
        *,
        session: boto3.session.Session | None = None,
        config: Config | None = None,
        endpoint_url: str | None = None,
        client: Any = None,
    ) -> None:
        """Initialize the client.

        Args:
            region_name: AWS region. Falls back to the session's default.
            session: boto3 session supplying credentials. A fresh default
                session is used when omitted.
            config: botocore Config controlling timeouts, retries and pooling.
            endpoint_url: Alternate endpoint (LocalStack, ElasticMQ).
            client: Pre-built boto3 SQS client. Overrides all other arguments.
        """
        if client is None:
            session = session or boto3.session.Session()
            client = session.client(
                "sqs", region_name=region_name, config=config, endpoint_url=endpoint_url
            )
        self._sqs = client

    @property
    def region_name(self) -> str | None:
        return self._sqs.meta.region_name

    @property
    def sqs(self) -> Any:
        """The underlying boto3 client."""
        return self._sqs

    async def receive(self, request: ReceiveMessageRequest) -> ReceiveResult:
        params = request.to_api_params()
        try:
            response = await asyncio.to_thread(self._sqs.receive_message, **params)
        except (ClientError, BotoCoreError) as e:
            raise _queue_error("ReceiveMessage", e) from e
        return ReceiveResult.from_api(response)

    async def delete(self, queue_url: str, receipt_handle: str) -> None:
        try:
            await asyncio.to_thread(
                self._sqs.delete_message, QueueUrl=queue_url, ReceiptHandle=receipt_handle
            )
        except (ClientError, BotoCoreError) as e:
            raise _queue_error("DeleteMessage", e) from e
        logger.debug("Deleted message", extra={"queue_url": queue_url})
