"""Configuration management and environment variable utilities."""

import os

from collections.abc import Callable

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict, Field

from nearrpc.helpers.constants import (
    DEFAULT_TIMEOUT,
    NEAR_RPC_TIMEOUT_ENV,
    NEAR_RPC_TRACE_ENV,
    NEAR_RPC_URL_ENV,
)
from nearrpc.helpers.request_ids import generate_request_id


# Load environment variables from .env file
load_dotenv()

TRUTHY_VALUES = frozenset({"1", "true", "yes", "on"})


def get_required_env(key: str) -> str:
    """Get a required environment variable.

    Args:
        key: Environment variable name

    Returns:
        Environment variable value

    Raises:
        ValueError: If the environment variable is not set

    Example:
        ```python
        from nearrpc.helpers.config import get_required_env

        rpc_url = get_required_env("NEAR_RPC_URL")
        ```
    """
    value = os.getenv(key)
    if not value:
        msg = f"{key} environment variable is not set"
        raise ValueError(msg)
    return value


def get_optional_env(key: str, default: str | None = None) -> str | None:
    """Get an optional environment variable with a default value.

    Args:
        key: Environment variable name
        default: Default value if not set

    Returns:
        Environment variable value or default
    """
    return os.getenv(key, default)


def get_bool_env(key: str, *, default: bool = False) -> bool:
    """Read a boolean flag such as ``NEAR_RPC_TRACE=1``.

    Accepts 1/true/yes/on (any case) as true; anything else set is false.
    """
    value = os.getenv(key)
    if value is None or not value.strip():
        return default
    return value.strip().lower() in TRUTHY_VALUES


def get_near_rpc_url(rpc_url: str | None = None) -> str:
    """Get the node RPC URL from parameter or environment.

    Args:
        rpc_url: Optional RPC URL to use directly

    Returns:
        Node JSON-RPC endpoint URL

    Raises:
        ValueError: If RPC URL is not provided and NEAR_RPC_URL env var is not set

    Example:
        ```python
        from nearrpc.helpers.config import get_near_rpc_url

        # Get from environment
        rpc_url = get_near_rpc_url()

        # Or provide explicitly
        rpc_url = get_near_rpc_url("https://rpc.mainnet.near.org")
        ```
    """
    if rpc_url:
        return rpc_url

    try:
        return get_required_env(NEAR_RPC_URL_ENV)
    except ValueError as e:
        msg = f"NEAR RPC URL must be provided or set in {NEAR_RPC_URL_ENV}"
        raise ValueError(msg) from e


class ClientConfig(BaseModel):
    """Settings applied to an RPCClient at construction time.

    Each ``with_*`` method returns a new config with a single aspect changed,
    so settings compose left to right:

        config = ClientConfig().with_headers({"X-A": "1"}).with_timeout(5.0)
    """

    headers: dict[str, str] = Field(
        default_factory=dict, description="Extra HTTP headers sent with every call"
    )
    request_id_generator: Callable[[], int] = Field(
        default=generate_request_id,
        description="Returns the ID of the next request; must never repeat",
    )
    timeout: float = Field(
        default=DEFAULT_TIMEOUT, gt=0, description="HTTP timeout in seconds"
    )
    trace: bool = Field(
        default_factory=lambda: get_bool_env(NEAR_RPC_TRACE_ENV),
        description="Log full request parameters and response bodies",
    )

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from NEAR_RPC_TIMEOUT and NEAR_RPC_TRACE.

        Raises:
            ValueError: If NEAR_RPC_TIMEOUT is not a positive number
        """
        raw_timeout = get_optional_env(NEAR_RPC_TIMEOUT_ENV)
        if raw_timeout is None:
            return cls()
        return cls(timeout=float(raw_timeout))

    def with_headers(self, headers: dict[str, str]) -> "ClientConfig":
        """Merge headers into the current ones; new values win on conflict."""
        return self.model_copy(update={"headers": {**self.headers, **headers}})

    def with_request_id_generator(
        self, generator: Callable[[], int]
    ) -> "ClientConfig":
        return self.model_copy(update={"request_id_generator": generator})

    def with_timeout(self, timeout: float) -> "ClientConfig":
        if timeout <= 0:
            msg = "Timeout must be positive"
            raise ValueError(msg)
        return self.model_copy(update={"timeout": timeout})

    def with_trace(self, trace: bool = True) -> "ClientConfig":
        return self.model_copy(update={"trace": trace})


__all__ = [
    "ClientConfig",
    "get_bool_env",
    "get_near_rpc_url",
    "get_optional_env",
    "get_required_env",
]
