"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Tests for Transport Adapters.
"""

import json
from unittest.mock import MagicMock

import httpx
import pytest
import requests

from traduora.adapters import (
    ApiRequest,
    ApiResponse,
    AsyncHttpAdapter,
    AsyncMockAdapter,
    HttpAdapter,
    MockAdapter,
    json_response,
)
from traduora.exceptions import TransportError

REST_ROOT = "http://localhost:8080/api/v1/"


class TestApiResponse:
    def test_is_success(self):
        assert ApiResponse(status_code=201).is_success is True
        assert ApiResponse(status_code=301).is_success is False
        assert ApiResponse(status_code=401).is_success is False

    def test_text(self):
        assert ApiResponse(status_code=200, content=b'{"ok":true}').text == '{"ok":true}'

    def test_json_response_helper(self):
        response = json_response(201, {"data": {"id": "t1"}})
        assert json.loads(response.content) == {"data": {"id": "t1"}}
        assert response.headers["Content-Type"] == "application/json"
        assert json_response(204).content == b""


class TestMockAdapter:
    def test_send_returns_matched_response(self):
        expected = json_response(200, {"ok": True})
        adapter = MockAdapter(responses={("GET", "users/me"): expected})

        result = adapter.send(ApiRequest(method="GET", path="users/me"))

        assert result is expected

    def test_send_returns_404_for_unmocked(self):
        adapter = MockAdapter()
        result = adapter.send(ApiRequest(method="GET", path="unknown"))
        assert result.status_code == 404
        assert json.loads(result.content) == {"error": "not mocked"}

    def test_tracks_sent_requests(self):
        adapter = MockAdapter()
        adapter.send(ApiRequest(method="DELETE", path="users/me", headers={"X-Test": "1"}))
        assert len(adapter.sent_requests) == 1
        assert adapter.sent_requests[0].path == "users/me"

    def test_callable_result_sees_request(self):
        adapter = MockAdapter()
        adapter.add("POST", "echo", lambda request: ApiResponse(status_code=200, content=request.body))

        result = adapter.send(ApiRequest(method="POST", path="echo", body=b'{"value":1}'))

        assert result.content == b'{"value":1}'

    def test_exception_result_is_raised(self):
        adapter = MockAdapter({("GET", "locales"): TransportError("boom")})
        with pytest.raises(TransportError):
            adapter.send(ApiRequest(method="GET", path="locales"))

    def test_close(self):
        adapter = MockAdapter()
        adapter.close()
        assert adapter.closed is True

    @pytest.mark.asyncio
    async def test_async_mock(self):
        adapter = AsyncMockAdapter({("GET", "locales"): json_response(200, {"data": []})})
        result = await adapter.send(ApiRequest(method="GET", path="locales"))
        assert result.status_code == 200
        await adapter.aclose()
        assert adapter.closed is True


class TestHttpAdapter:
    def test_initialization(self):
        adapter = HttpAdapter(base_url="http://localhost:8080/api/v1")
        assert adapter.base_url == REST_ROOT
        adapter.close()

    def test_validate_certs_sets_session_verify(self):
        session = requests.Session()
        HttpAdapter(base_url=REST_ROOT, validate_certs=False, session=session)
        assert session.verify is False

    def test_send_resolves_path_against_root(self):
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        raw = MagicMock(status_code=200, headers={"Content-Type": "application/json"}, content=b'{"data":[]}')
        session.request.return_value = raw
        adapter = HttpAdapter(base_url=REST_ROOT, timeout=5, session=session)

        response = adapter.send(ApiRequest(
            method="GET",
            path="projects/p1/terms",
            headers={"Accept": "application/json"},
            params=[("locale", "en")],
        ))

        session.request.assert_called_once_with(
            method="GET",
            url="http://localhost:8080/api/v1/projects/p1/terms",
            headers={"Accept": "application/json"},
            data=None,
            params=[("locale", "en")],
            timeout=5,
        )
        assert response.status_code == 200
        assert response.content == b'{"data":[]}'
        assert response.elapsed_ms >= 0

    @pytest.mark.parametrize(
        "failure",
        [
            requests.exceptions.ConnectionError("refused"),
            requests.exceptions.Timeout("slow"),
            requests.exceptions.RequestException("other"),
        ],
    )
    def test_failures_become_transport_errors(self, failure):
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        session.request.side_effect = failure
        adapter = HttpAdapter(base_url=REST_ROOT, session=session)

        with pytest.raises(TransportError) as exc_info:
            adapter.send(ApiRequest(method="GET", path="locales"))

        assert exc_info.value.__cause__ is failure

    def test_close_closes_session(self):
        session = MagicMock(spec=requests.Session)
        session.headers = {}
        HttpAdapter(base_url=REST_ROOT, session=session).close()
        session.close.assert_called_once()


class TestAsyncHttpAdapter:
    @pytest.mark.asyncio
    async def test_send(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(201, json={"data": {"id": "t1", "value": "hello.world", "labels": []}})

        adapter = AsyncHttpAdapter(base_url=REST_ROOT, transport=httpx.MockTransport(handler))

        response = await adapter.send(ApiRequest(
            method="POST",
            path="projects/p1/terms",
            headers={"Content-Type": "application/json", "Authorization": "Bearer abc"},
            body=b'{"value":"hello.world"}',
        ))
        await adapter.aclose()

        assert response.status_code == 201
        assert json.loads(response.content)["data"]["value"] == "hello.world"
        assert str(seen[0].url) == "http://localhost:8080/api/v1/projects/p1/terms"
        assert seen[0].headers["Authorization"] == "Bearer abc"
        assert seen[0].content == b'{"value":"hello.world"}'

    @pytest.mark.asyncio
    async def test_query_params(self):
        seen = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json={"data": []})

        adapter = AsyncHttpAdapter(base_url=REST_ROOT, transport=httpx.MockTransport(handler))
        await adapter.send(ApiRequest(method="GET", path="locales", params=[("a", "1"), ("b", "2")]))
        await adapter.aclose()

        assert seen[0].url.params.multi_items() == [("a", "1"), ("b", "2")]

    @pytest.mark.asyncio
    async def test_connect_error_becomes_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("refused", request=request)

        adapter = AsyncHttpAdapter(base_url=REST_ROOT, transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError):
            await adapter.send(ApiRequest(method="GET", path="locales"))
        await adapter.aclose()

    @pytest.mark.asyncio
    async def test_timeout_becomes_transport_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("slow", request=request)

        adapter = AsyncHttpAdapter(base_url=REST_ROOT, transport=httpx.MockTransport(handler))

        with pytest.raises(TransportError, match="timeout"):
            await adapter.send(ApiRequest(method="GET", path="locales"))
        await adapter.aclose()
