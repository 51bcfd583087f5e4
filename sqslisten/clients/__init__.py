"""Queue client implementations."""

from sqslisten.clients.base import QueueClient
from sqslisten.clients.inmemory import InMemoryQueueClient
from sqslisten.clients.sqs import SQSClient

__all__ = ["QueueClient", "InMemoryQueueClient", "SQSClient"]
