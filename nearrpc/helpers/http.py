"""HTTP transport for JSON-RPC calls, with request/response dumps at DEBUG."""

import logging

from typing import Any

import httpx

from nearrpc.helpers.constants import CONNECTION_TIMEOUT, DEFAULT_TIMEOUT
from nearrpc.helpers.logging import get_logger


logger = get_logger(__name__)

REDACTED_HEADERS = frozenset({"authorization", "proxy-authorization", "x-api-key"})


def _format_headers(headers: httpx.Headers) -> str:
    lines = []
    for key, value in headers.items():
        shown = "<redacted>" if key.lower() in REDACTED_HEADERS else value
        lines.append(f"{key}: {shown}")
    return "\n".join(lines)


def dump_request(request: httpx.Request) -> str:
    """Render a request as method line, headers and body."""
    body = request.content.decode("utf-8", errors="replace")
    return f"{request.method} {request.url}\n{_format_headers(request.headers)}\n\n{body}"


def dump_response(response: httpx.Response, *, with_body: bool) -> str:
    """Render a response status line and headers, plus the body if asked."""
    text = (
        f"{response.http_version} {response.status_code} {response.reason_phrase}\n"
        f"{_format_headers(response.headers)}"
    )
    if with_body:
        text += "\n\n" + response.text
    return text


def _build_event_hooks(*, trace: bool) -> dict[str, list[Any]]:
    async def log_request(request: httpx.Request) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("JSON-RPC request\n%s", dump_request(request))

    async def log_response(response: httpx.Response) -> None:
        if not logger.isEnabledFor(logging.DEBUG):
            return
        if trace:
            # Event hooks run before the body is read
            await response.aread()
        logger.debug(
            "JSON-RPC response\n%s", dump_response(response, with_body=trace)
        )

    return {"request": [log_request], "response": [log_response]}


def create_http_client(
    timeout: float = DEFAULT_TIMEOUT, *, trace: bool = False, **kwargs: Any
) -> httpx.AsyncClient:
    """Create an httpx AsyncClient that logs every exchange at DEBUG level.

    Args:
        timeout: Default timeout in seconds (default: DEFAULT_TIMEOUT)
        trace: Also log response bodies (requests are always logged in full)
        **kwargs: Additional httpx.AsyncClient kwargs

    Returns:
        Configured AsyncClient instance

    Example:
        ```python
        from nearrpc.helpers.http import create_http_client

        async with create_http_client(timeout=60.0) as client:
            response = await client.post(url, json=payload)
        ```
    """
    return httpx.AsyncClient(
        timeout=httpx.Timeout(timeout, connect=min(timeout, CONNECTION_TIMEOUT)),
        event_hooks=_build_event_hooks(trace=trace),
        **kwargs,
    )


__all__ = [
    "create_http_client",
    "dump_request",
    "dump_response",
]
