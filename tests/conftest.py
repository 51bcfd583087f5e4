"""Pytest configuration, Hypothesis profiles and fake queue clients."""

import asyncio
import logging
from collections.abc import Callable

import pytest
from hypothesis import settings

from sqslisten.core.errors import QueueError
from sqslisten.core.message import Message, ReceiveMessageRequest, ReceiveResult
from sqslisten.core.stats import ListenStats

# Register Hypothesis profiles
settings.register_profile("ci", max_examples=100)
settings.register_profile("dev", max_examples=20)

# Load dev profile by default, CI can override via --hypothesis-profile=ci
settings.load_profile("dev")

QUEUE_URL = "https://sqs.us-east-1.amazonaws.com/123456789012/jobs"


class RecordingClient:
    """QueueClient that replays scripted receive outcomes and records calls.

    Each script item is a ReceiveResult to return or a QueueError to raise.
    Once the script runs out every receive returns an empty result.
    """

    def __init__(self, script=None, fail_deletes: bool = False, calls: list | None = None):
        self.script = list(script or [])
        self.fail_deletes = fail_deletes
        self.calls = calls if calls is not None else []
        self.requests: list[ReceiveMessageRequest] = []
        self.receive_delay = 0.0

    @property
    def receive_count(self) -> int:
        return sum(1 for c in self.calls if c[0] == "receive")

    @property
    def deletes(self) -> list[tuple]:
        return [c for c in self.calls if c[0] == "delete"]

    async def receive(self, request: ReceiveMessageRequest) -> ReceiveResult:
        self.calls.append(("receive",))
        self.requests.append(request)
        if self.receive_delay:
            await asyncio.sleep(self.receive_delay)
        if not self.script:
            return ReceiveResult()
        item = self.script.pop(0)
        if isinstance(item, QueueError):
            raise item
        return item

    async def delete(self, queue_url: str, receipt_handle: str) -> None:
        self.calls.append(("delete", queue_url, receipt_handle))
        if self.fail_deletes:
            raise QueueError("access denied", operation="DeleteMessage", code="AccessDenied")


class RecordingHandler:
    """Handler that records (message, error) pairs into a shared call list."""

    def __init__(self, calls: list, raises: Exception | None = None):
        self.calls = calls
        self.raises = raises
        self.invocations: list[tuple[Message | None, QueueError | None]] = []

    def __call__(self, message: Message | None, error: QueueError | None) -> None:
        self.invocations.append((message, error))
        if message is not None:
            self.calls.append(("handle", message.message_id))
        else:
            self.calls.append(("error", str(error)))
        if self.raises is not None:
            raise self.raises


def make_result(*pairs: tuple[str, str | None]) -> ReceiveResult:
    """Build a ReceiveResult from (message_id, receipt_handle) pairs."""
    return ReceiveResult(
        messages=[
            Message(message_id=mid, receipt_handle=rh, body=f"body-{mid}") for mid, rh in pairs
        ]
    )


async def wait_until(predicate: Callable[[], bool], timeout: float = 2.0) -> None:
    """Poll ``predicate`` until it holds or fail after ``timeout`` seconds."""
    loop = asyncio.get_running_loop()
    deadline = loop.time() + timeout
    while not predicate():
        if loop.time() > deadline:
            raise AssertionError("condition not met before timeout")
        await asyncio.sleep(0.005)


@pytest.fixture
def calls() -> list:
    return []


@pytest.fixture
def stats() -> ListenStats:
    return ListenStats()


@pytest.fixture
def log() -> logging.Logger:
    return logging.getLogger("sqslisten.tests")


@pytest.fixture
def request_() -> ReceiveMessageRequest:
    return ReceiveMessageRequest(queue_url=QUEUE_URL, wait_time_seconds=5)


@pytest.fixture
def aws_env(monkeypatch):
    """Fake credentials so boto3 never reaches for real ones."""
    monkeypatch.setenv("AWS_ACCESS_KEY_ID", "testing")
    monkeypatch.setenv("AWS_SECRET_ACCESS_KEY", "testing")
    monkeypatch.setenv("AWS_DEFAULT_REGION", "us-east-1")
