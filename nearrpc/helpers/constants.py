"""Common configuration constants used across the client."""

# JSON-RPC
JSONRPC_VERSION = "2.0"
"""Protocol version sent in every request envelope"""

BLOCK_METHOD = "block"
"""RPC method name for block queries"""

# HTTP and Network Constants
DEFAULT_TIMEOUT = 30.0
"""Default HTTP request timeout in seconds"""

CONNECTION_TIMEOUT = 3.0
"""Timeout for establishing connections"""

DEFAULT_HEADERS = {"Content-Type": "application/json"}
"""Headers sent with every JSON-RPC request"""

# Environment variables
NEAR_RPC_URL_ENV = "NEAR_RPC_URL"
"""Node endpoint URL"""

NEAR_RPC_TRACE_ENV = "NEAR_RPC_TRACE"
"""Enables full request/response bodies in logs"""

NEAR_RPC_TIMEOUT_ENV = "NEAR_RPC_TIMEOUT"
"""Overrides DEFAULT_TIMEOUT"""

NEAR_RPC_LOG_LEVEL_ENV = "NEAR_RPC_LOG_LEVEL"
"""Log level used by the command-line tool"""


__all__ = [
    "BLOCK_METHOD",
    "CONNECTION_TIMEOUT",
    "DEFAULT_HEADERS",
    "DEFAULT_TIMEOUT",
    "JSONRPC_VERSION",
    "NEAR_RPC_LOG_LEVEL_ENV",
    "NEAR_RPC_TIMEOUT_ENV",
    "NEAR_RPC_TRACE_ENV",
    "NEAR_RPC_URL_ENV",
]
