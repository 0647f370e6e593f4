"""Exception hierarchy for JSON-RPC calls."""

from typing import Any


class RPCClientError(Exception):
    """Base class for every error raised by an RPC call."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class RPCTransportError(RPCClientError):
    """The HTTP exchange failed (connection, timeout, HTTP error status).

    The underlying httpx exception is available as ``__cause__``.
    """


class RPCResponseError(RPCClientError):
    """The node answered with a JSON-RPC error object."""

    def __init__(self, code: int, message: str, data: Any = None) -> None:
        self.code = code
        self.data = data
        super().__init__(message)

    def __str__(self) -> str:
        text = f"RPC error {self.code}: {self.message}"
        if self.data is not None:
            text += f" ({self.data})"
        return text


class RPCDecodeError(RPCClientError, ValueError):
    """The response body does not match the expected schema."""


__all__ = [
    "RPCClientError",
    "RPCDecodeError",
    "RPCResponseError",
    "RPCTransportError",
]
