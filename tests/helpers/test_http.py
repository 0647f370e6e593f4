"""Tests for the logging HTTP transport."""

import logging

import pytest

from typing import TYPE_CHECKING

import httpx

from nearrpc.helpers.http import create_http_client, dump_request, dump_response


if TYPE_CHECKING:
    from pytest_httpx import HTTPXMock


HTTP_LOGGER = "nearrpc.helpers.http"


class TestCreateHttpClient:
    """Tests for create_http_client function."""

    @pytest.mark.asyncio
    async def test_returns_async_client_with_timeout(self) -> None:
        """Test the configured timeouts."""
        async with create_http_client(timeout=10.0) as client:
            assert isinstance(client, httpx.AsyncClient)
            assert client.timeout.read == 10.0
            assert client.timeout.connect == 3.0

    @pytest.mark.asyncio
    async def test_connect_timeout_capped_by_timeout(self) -> None:
        """Test that a short timeout also shortens connect."""
        async with create_http_client(timeout=1.0) as client:
            assert client.timeout.connect == 1.0

    @pytest.mark.asyncio
    async def test_no_debug_logs_at_info(
        self, httpx_mock: "HTTPXMock", caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that exchanges are not dumped unless DEBUG is on."""
        httpx_mock.add_response(json={"jsonrpc": "2.0", "id": 1, "result": {}})

        with caplog.at_level(logging.INFO, logger=HTTP_LOGGER):
            async with create_http_client() as client:
                await client.post("https://rpc.example", content=b"{}")

        assert not [r for r in caplog.records if r.name == HTTP_LOGGER]

    @pytest.mark.asyncio
    async def test_debug_logs_request_and_response_headers(
        self, httpx_mock: "HTTPXMock", caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test request dump with body and response dump without body."""
        httpx_mock.add_response(json={"jsonrpc": "2.0", "id": 7, "result": "secret-body"})

        with caplog.at_level(logging.DEBUG, logger=HTTP_LOGGER):
            async with create_http_client() as client:
                await client.post(
                    "https://rpc.example",
                    content=b'{"method":"block"}',
                    headers={"Authorization": "Bearer token123"},
                )

        messages = [r.getMessage() for r in caplog.records if r.name == HTTP_LOGGER]
        assert len(messages) == 2
        assert messages[0].startswith("JSON-RPC request\nPOST https://rpc.example")
        assert '{"method":"block"}' in messages[0]
        assert "token123" not in messages[0]
        assert "<redacted>" in messages[0]
        assert messages[1].startswith("JSON-RPC response\nHTTP/1.1 200 OK")
        assert "secret-body" not in messages[1]

    @pytest.mark.asyncio
    async def test_trace_logs_response_body(
        self, httpx_mock: "HTTPXMock", caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that tracing adds the response body."""
        httpx_mock.add_response(json={"jsonrpc": "2.0", "id": 7, "result": "full-body"})

        with caplog.at_level(logging.DEBUG, logger=HTTP_LOGGER):
            async with create_http_client(trace=True) as client:
                response = await client.post("https://rpc.example", content=b"{}")

        assert response.json()["result"] == "full-body"
        assert any("full-body" in r.getMessage() for r in caplog.records)


class TestDumps:
    """Tests for request/response rendering."""

    def test_dump_request(self) -> None:
        """Test request rendering."""
        request = httpx.Request(
            "POST",
            "https://rpc.example/",
            content=b'{"id":1}',
            headers={"X-Api-Key": "k", "X-Client": "nearrpc"},
        )

        text = dump_request(request)

        assert text.startswith("POST https://rpc.example/\n")
        assert "x-client: nearrpc" in text.lower()
        assert "x-api-key: <redacted>" in text.lower()
        assert text.endswith('{"id":1}')

    def test_dump_response_without_body(self) -> None:
        """Test response rendering without the body."""
        response = httpx.Response(404, text="missing")

        text = dump_response(response, with_body=False)

        assert "404 Not Found" in text
        assert "missing" not in text

    def test_dump_response_with_body(self) -> None:
        """Test response rendering with the body."""
        response = httpx.Response(200, text="hello")

        assert dump_response(response, with_body=True).endswith("\n\nhello")
