"""Poll interval derived from the long-poll wait time."""

from sqslisten.core.message import ReceiveMessageRequest

# Seconds between polls when the request sets no wait time
DEFAULT_INTERVAL = 1


def poll_interval(request: ReceiveMessageRequest) -> int:
    """Return the polling period in seconds for ``request``.

    One second longer than the long-poll wait, so a poll is never scheduled
    before the service could have answered the previous one.
    """
    if request.wait_time_seconds is not None:
        return request.wait_time_seconds + 1
    return DEFAULT_INTERVAL
