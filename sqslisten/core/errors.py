"""Exceptions raised and reported by sqslisten."""


class QueueError(Exception):
    """Raised by a queue client when a receive or delete call fails.

    The underlying library exception, if any, is chained as ``__cause__``.

    Attributes:
        operation: Name of the failing queue operation (e.g. "ReceiveMessage").
        code: Service error code, when the service returned one.
    """

    def __init__(self, message: str, operation: str = "", code: str | None = None):
        self.operation = operation
        self.code = code
        super().__init__(message)

    def __str__(self) -> str:
        base = super().__str__()
        if self.code:
            return f"{self.operation} failed ({self.code}): {base}"
        if self.operation:
            return f"{self.operation} failed: {base}"
        return base


class HandlerError(Exception):
    """Raised by a message handler to report that it could not process a message.

    Handler failures are logged and counted; they never prevent the message
    from being deleted and never stop the poll loop.
    """

    pass
