"""Pytest configuration and shared fixtures."""

import json
from pathlib import Path

import pytest

from typing import Any

from nearrpc.helpers.constants import (
    NEAR_RPC_TIMEOUT_ENV,
    NEAR_RPC_TRACE_ENV,
    NEAR_RPC_URL_ENV,
)
from nearrpc.helpers.request_ids import RequestIDCounter


FIXTURES_DIR = Path(__file__).parent / "fixtures"

TEST_RPC_URL = "https://rpc.testnet.example"


@pytest.fixture(autouse=True)
def clean_rpc_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep a developer's NEAR_RPC_* settings out of the tests."""
    for key in (NEAR_RPC_URL_ENV, NEAR_RPC_TRACE_ENV, NEAR_RPC_TIMEOUT_ENV):
        monkeypatch.delenv(key, raising=False)


@pytest.fixture
def rpc_url() -> str:
    return TEST_RPC_URL


@pytest.fixture
def block_payload() -> dict[str, Any]:
    """Result of ``block`` for height 123456, freshly parsed for each test."""
    return json.loads((FIXTURES_DIR / "block_123456.json").read_text())


@pytest.fixture
def request_counter() -> RequestIDCounter:
    """Counter private to one test, so IDs start at 1."""
    return RequestIDCounter()
