"""Counters for a running poll loop."""

from dataclasses import dataclass, replace


@dataclass
class ListenStats:
    """Statistics from one listen call."""

    ticks: int = 0
    messages_received: int = 0
    receive_errors: int = 0
    handler_errors: int = 0
    messages_deleted: int = 0
    delete_errors: int = 0
    deletes_skipped: int = 0

    def snapshot(self) -> "ListenStats":
        """Return a copy that is safe to inspect while the loop keeps running."""
        return replace(self)
