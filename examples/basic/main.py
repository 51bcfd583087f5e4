#!/usr/bin/env python3
"""
Basic listener - sqslisten demo

Polls a queue, prints every message and receive error, then stops.

Run modes:
  python main.py --queue-url https://sqs.us-east-1.amazonaws.com/123/jobs
  python main.py --seconds 30 --wait 10     # long poll, stop after 30s
  python main.py --local --count 5          # in-memory queue, no AWS needed
  SQSLISTEN_QUEUE_URL=... python main.py    # settings from the environment
"""

import argparse
import asyncio
import logging
import sys

from sqslisten import (
    InMemoryQueueClient,
    ListenerSettings,
    Message,
    QueueError,
    ReceiveMessageRequest,
    SQSListen,
)
from sqslisten.core.logging import get_logger

logging.basicConfig(level=logging.INFO, format="%(message)s", stream=sys.stderr)

log = get_logger("sqslisten.examples.basic")


def print_message(message: Message | None, error: QueueError | None) -> None:
    if message is not None:
        print(f"Message received: {message.message_id} {message.body!r}")
    if error is not None:
        print(f"Error received: {error}")


async def run(args: argparse.Namespace) -> int:
    settings = ListenerSettings()

    if args.local:
        client = InMemoryQueueClient()
        for i in range(args.count):
            client.send(f"hello #{i}")
        listener = SQSListen(client=client)
        request = ReceiveMessageRequest(
            queue_url=client.queue_url,
            wait_time_seconds=args.wait,
            max_number_of_messages=10,
        )
    else:
        if args.queue_url:
            settings = settings.model_copy(update={"queue_url": args.queue_url})
        if args.wait is not None:
            settings = settings.model_copy(update={"wait_time_seconds": args.wait})
        if not settings.queue_url:
            print("Error: pass --queue-url or set SQSLISTEN_QUEUE_URL", file=sys.stderr)
            return 2
        listener = SQSListen.from_settings(settings)
        request = settings.receive_request()

    handle = listener.listen(request, print_message)
    log.info("Listening", extra={"queue_url": request.queue_url, "seconds": args.seconds})

    try:
        await asyncio.sleep(args.seconds)
    finally:
        handle.stop()
        await handle.join()

    stats = handle.get_stats()
    print(
        f"\nTicks: {stats.ticks}  received: {stats.messages_received}  "
        f"deleted: {stats.messages_deleted}  receive errors: {stats.receive_errors}"
    )
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(description="Print messages from an SQS queue")
    parser.add_argument("--queue-url", help="Queue to poll (default: SQSLISTEN_QUEUE_URL)")
    parser.add_argument("--wait", type=int, default=None, help="Long-poll wait time in seconds")
    parser.add_argument("--seconds", type=float, default=10.0, help="How long to listen")
    parser.add_argument("--local", action="store_true", help="Use an in-memory queue")
    parser.add_argument("--count", type=int, default=3, help="Messages to seed with --local")
    args = parser.parse_args()

    try:
        sys.exit(asyncio.run(run(args)))
    except KeyboardInterrupt:
        print("\nInterrupted")


if __name__ == "__main__":
    main()
