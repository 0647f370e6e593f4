"""Pydantic models for JSON-RPC requests and responses."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from nearrpc.helpers.constants import BLOCK_METHOD, JSONRPC_VERSION


class JsonRpcRequest(BaseModel):
    """JSON-RPC 2.0 request model."""

    jsonrpc: str = Field(default=JSONRPC_VERSION, description="JSON-RPC version")
    method: str = Field(..., description="Method name to call")
    params: list[Any] = Field(
        default_factory=list, description="Method parameters"
    )
    id: int = Field(..., description="Request ID")


class BlockRequest(JsonRpcRequest):
    """JSON-RPC request for block."""

    method: str = Field(default=BLOCK_METHOD, frozen=True)

    @classmethod
    def for_block_id(cls, block_id: str, request_id: int) -> "BlockRequest":
        return cls(params=[{"block_id": block_id}], id=request_id)


class JsonRpcErrorObject(BaseModel):
    """Error member of a JSON-RPC response."""

    code: int = Field(default=0, description="Error code")
    message: str = Field(default="", description="Short error description")
    data: Any = Field(default=None, description="Node-specific error details")

    model_config = ConfigDict(extra="allow")


class JsonRpcResponse(BaseModel):
    """JSON-RPC 2.0 response envelope with an undecoded result."""

    jsonrpc: str | None = Field(default=None, description="JSON-RPC version")
    id: int | str | None = Field(default=None, description="Request ID echoed back")
    result: Any = Field(default=None, description="Raw result payload")
    error: JsonRpcErrorObject | None = Field(default=None, description="Error object")


__all__ = [
    "BlockRequest",
    "JsonRpcErrorObject",
    "JsonRpcRequest",
    "JsonRpcResponse",
]
