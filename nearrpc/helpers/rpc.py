"""NEAR JSON-RPC client."""

import time

from types import TracebackType
from typing import Any, Self, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from nearrpc.blocks.models import BlockResult
from nearrpc.helpers.config import ClientConfig
from nearrpc.helpers.constants import DEFAULT_HEADERS
from nearrpc.helpers.errors import (
    RPCDecodeError,
    RPCResponseError,
    RPCTransportError,
)
from nearrpc.helpers.http import create_http_client
from nearrpc.helpers.logging import get_logger
from nearrpc.helpers.rpc_models import BlockRequest, JsonRpcRequest, JsonRpcResponse


logger = get_logger(__name__)

T = TypeVar("T", bound=BaseModel)


class RPCClient:
    """JSON-RPC client for a single node endpoint.

    One instance is meant to live for the whole process and can be shared by
    any number of concurrent tasks. The only state that changes between calls
    is the request-ID counter behind ``config.request_id_generator``.

    Example:
        ```python
        async with RPCClient("https://rpc.mainnet.near.org") as rpc:
            block = await rpc.get_block("9820214")
            print(block.header.height, len(block.chunks))
        ```
    """

    def __init__(
        self,
        rpc_url: str,
        config: ClientConfig | None = None,
        *,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        """Initialize RPC client.

        Args:
            rpc_url: Node JSON-RPC endpoint URL
            config: Headers, ID generator, timeout and tracing settings
            http_client: Transport to use instead of creating one. The caller
                keeps ownership: aclose() leaves it open.

        Raises:
            ValueError: If rpc_url is empty or None
        """
        if not rpc_url:
            msg = "RPC URL cannot be empty"
            raise ValueError(msg)

        self.rpc_url = rpc_url
        self.config = config or ClientConfig()
        self.headers = {**DEFAULT_HEADERS, **self.config.headers}

        self._owns_http_client = http_client is None
        self._http_client = http_client or create_http_client(
            self.config.timeout, trace=self.config.trace
        )

    @property
    def timeout(self) -> float:
        return self.config.timeout

    async def __aenter__(self) -> Self:
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Close the HTTP transport if this client created it."""
        if self._owns_http_client:
            await self._http_client.aclose()

    async def get_block(self, block_id: str) -> BlockResult:
        """Fetch a block by height or hash.

        Args:
            block_id: Block height or hash, as a string. The node validates it.

        Returns:
            Decoded block

        Raises:
            RPCTransportError: If the HTTP exchange fails
            RPCResponseError: If the node returns a JSON-RPC error
            RPCDecodeError: If the result does not match the block schema
        """
        request = BlockRequest.for_block_id(block_id, self._next_request_id())
        return await self._call_for(request, BlockResult)

    def _next_request_id(self) -> int:
        return self.config.request_id_generator()

    async def _call_for(self, request: JsonRpcRequest, output_model: type[T]) -> T:
        """Send ``request`` and decode its result into ``output_model``."""
        output_type = output_model.__name__
        extra = {"rpc_id": request.id, "rpc_method": request.method}

        message = "performing JSON-RPC call method=%s id=%d output=%s"
        args: list[Any] = [request.method, request.id, output_type]
        if self.config.trace:
            message += " params=%s"
            args.append(request.params)
        logger.info(message, *args, extra=extra)

        start_time = time.perf_counter()
        decoding_start: float | None = None
        try:
            response = await self._post(request)
            envelope = self._parse_envelope(response)
            decoding_start = time.perf_counter()
            return self._decode_result(request, envelope, output_model)
        finally:
            end_time = time.perf_counter()
            timings: dict[str, float] = {}
            if decoding_start is not None:
                timings["parsing"] = end_time - decoding_start
            timings["overall"] = end_time - start_time

            message = "performed JSON-RPC call method=%s id=%d"
            args = [request.method, request.id]
            for name, elapsed in timings.items():
                message += f" {name}=%.6fs"
                args.append(elapsed)
            logger.info(message, *args, extra={**extra, **timings})

    async def _post(self, request: JsonRpcRequest) -> httpx.Response:
        try:
            return await self._http_client.post(
                self.rpc_url,
                content=request.model_dump_json(),
                headers=self.headers,
                timeout=self.config.timeout,
            )
        except httpx.HTTPError as e:
            msg = f"{request.method} call to {self.rpc_url} failed: {e!r}"
            raise RPCTransportError(msg) from e

    def _raise_for_status(self, response: httpx.Response) -> None:
        try:
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            msg = f"HTTP {response.status_code} from {self.rpc_url}"
            raise RPCTransportError(msg) from e

    def _parse_envelope(self, response: httpx.Response) -> JsonRpcResponse:
        # A JSON-RPC error object wins over the HTTP status: nodes report
        # some errors with 4xx/5xx and a well-formed body
        try:
            payload = response.json()
        except ValueError as e:
            self._raise_for_status(response)
            msg = "Response body is not valid JSON"
            raise RPCDecodeError(msg) from e

        try:
            envelope = JsonRpcResponse.model_validate(payload)
        except ValidationError as e:
            self._raise_for_status(response)
            msg = "Response is not a JSON-RPC response object"
            raise RPCDecodeError(msg) from e

        if envelope.error is not None:
            raise RPCResponseError(
                envelope.error.code, envelope.error.message, envelope.error.data
            )

        self._raise_for_status(response)
        return envelope

    @staticmethod
    def _decode_result(
        request: JsonRpcRequest, envelope: JsonRpcResponse, output_model: type[T]
    ) -> T:
        if envelope.result is None:
            msg = f"{request.method} response has neither result nor error"
            raise RPCDecodeError(msg)

        try:
            return output_model.model_validate(envelope.result)
        except ValidationError as e:
            msg = (
                f"Cannot decode {request.method} result as {output_model.__name__}: "
                f"{e.error_count()} invalid field(s)"
            )
            raise RPCDecodeError(msg) from e


__all__ = ["RPCClient"]
