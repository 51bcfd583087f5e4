"""Core components of sqslisten.

Types:
    ReceiveMessageRequest: Immutable description of what to poll.
    Message: One message returned by the queue service.
    ReceiveResult: The messages of one receive call.
    SQSListen: Adapter that starts poll loops.
    ListenHandle: Handle owning one running poll loop.
    ListenStats: Counters snapshot of a poll loop.

Internals:
    PollScheduler: Fixed-period, non-overlapping poll task.
    Dispatcher: Per-message handler call and delete.
    poll_interval: Period derived from the long-poll wait time.

Errors:
    QueueError: Raised by queue clients on receive/delete failure.
    HandlerError: Raised by handlers to report a failed message.
"""

from sqslisten.core.dispatcher import Dispatcher
from sqslisten.core.errors import HandlerError, QueueError
from sqslisten.core.interval import DEFAULT_INTERVAL, poll_interval
from sqslisten.core.listener import SQSListen
from sqslisten.core.message import Message, ReceiveMessageRequest, ReceiveResult
from sqslisten.core.scheduler import ListenHandle, PollScheduler
from sqslisten.core.stats import ListenStats

__all__ = [
    "ReceiveMessageRequest",
    "Message",
    "ReceiveResult",
    "SQSListen",
    "ListenHandle",
    "ListenStats",
    "PollScheduler",
    "Dispatcher",
    "poll_interval",
    "DEFAULT_INTERVAL",
    "QueueError",
    "HandlerError",
]
