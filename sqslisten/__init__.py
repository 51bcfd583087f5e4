"""sqslisten - Subscribe a handler to an Amazon SQS queue."""

from sqslisten.clients import InMemoryQueueClient, QueueClient, SQSClient
from sqslisten.config import ListenerSettings
from sqslisten.core import (
    DEFAULT_INTERVAL,
    HandlerError,
    ListenHandle,
    ListenStats,
    Message,
    QueueError,
    ReceiveMessageRequest,
    ReceiveResult,
    SQSListen,
    poll_interval,
)

__version__ = "0.1.0"

__all__ = [
    # Core
    "SQSListen",
    "ListenHandle",
    "ListenStats",
    "ReceiveMessageRequest",
    "ReceiveResult",
    "Message",
    "poll_interval",
    "DEFAULT_INTERVAL",
    # Errors
    "QueueError",
    "HandlerError",
    # Clients
    "QueueClient",
    "SQSClient",
    "InMemoryQueueClient",
    # Config
    "ListenerSettings",
    # Meta
    "__version__",
]
