"""JSON-RPC request ID generation."""

import threading


class RequestIDCounter:
    """Monotonic integer counter with an atomic fetch-and-add.

    Starts at ``start`` and hands out ``start + 1`` first. Safe to share
    between asyncio tasks and threads; uniqueness holds for the lifetime of
    the process only.
    """

    def __init__(self, start: int = 0) -> None:
        self._value = start
        self._lock = threading.Lock()

    def __call__(self) -> int:
        return self.next()

    def next(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    @property
    def value(self) -> int:
        """Last ID handed out (``start`` if none yet)."""
        with self._lock:
            return self._value


DEFAULT_REQUEST_COUNTER = RequestIDCounter()
"""Counter shared by every client that does not bring its own"""


def generate_request_id() -> int:
    """Next ID from the process-wide counter."""
    return DEFAULT_REQUEST_COUNTER.next()


__all__ = [
    "DEFAULT_REQUEST_COUNTER",
    "RequestIDCounter",
    "generate_request_id",
]
