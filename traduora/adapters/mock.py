"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Mock transport adapters for local testing.
"""

from __future__ import annotations

import json
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from traduora.adapters.base import ApiRequest, ApiResponse, AsyncBaseAdapter, BaseAdapter

MockResult = Union[ApiResponse, Exception, Callable[[ApiRequest], ApiResponse]]

DEFAULT_BASE_URL = "http://localhost:8080/api/v1/"


def json_response(status_code: int, body: Any = None, headers: Optional[Dict[str, str]] = None) -> ApiResponse:
    """Build an ``ApiResponse`` whose content is ``body`` encoded as JSON.

    A ``None`` body produces an empty response.
    """
    content = b"" if body is None else json.dumps(body).encode("utf-8")
    merged = {"Content-Type": "application/json"}
    merged.update(headers or {})
    return ApiResponse(status_code=status_code, headers=merged, content=content)


class _MockTable:
    """Response lookup and request recording shared by both mock adapters."""

    def __init__(self, responses: Optional[Dict[Tuple[str, str], MockResult]]) -> None:
        self._responses: Dict[Tuple[str, str], MockResult] = dict(responses or {})
        self._sent: List[ApiRequest] = []

    def add(self, method: str, path: str, result: MockResult) -> None:
        self._responses[(method.upper(), path)] = result

    def resolve(self, request: ApiRequest) -> ApiResponse:
        self._sent.append(request)
        result = self._responses.get((request.method.upper(), request.path))
        if result is None:
            return json_response(404, {"error": "not mocked"})
        if isinstance(result, Exception):
            raise result
        if callable(result):
            return result(request)
        return result

    @property
    def sent_requests(self) -> List[ApiRequest]:
        return list(self._sent)


class MockAdapter(BaseAdapter):
    """In-memory blocking adapter for unit tests.

    Args:
        responses: Mapping from ``(method, path)`` tuples to an
            ``ApiResponse``, an exception to raise, or a callable
            producing a response from the request.

    Example::

        adapter = MockAdapter({
            ("GET", "auth/providers"): json_response(200, {"data": []}),
        })
    """

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], MockResult]] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        super().__init__(base_url)
        self._table = _MockTable(responses)
        self.closed = False

    def add(self, method: str, path: str, result: MockResult) -> None:
        """Register (or replace) the result for ``method path``."""
        self._table.add(method, path, result)

    def send(self, request: ApiRequest) -> ApiResponse:
        return self._table.resolve(request)

    def close(self) -> None:
        self.closed = True

    @property
    def sent_requests(self) -> List[ApiRequest]:
        """All requests that have been sent through this adapter."""
        return self._table.sent_requests


class AsyncMockAdapter(AsyncBaseAdapter):
    """In-memory suspending adapter for unit tests. See ``MockAdapter``."""

    def __init__(
        self,
        responses: Optional[Dict[Tuple[str, str], MockResult]] = None,
        base_url: str = DEFAULT_BASE_URL,
    ) -> None:
        super().__init__(base_url)
        self._table = _MockTable(responses)
        self.closed = False

    def add(self, method: str, path: str, result: MockResult) -> None:
        self._table.add(method, path, result)

    async def send(self, request: ApiRequest) -> ApiResponse:
        return self._table.resolve(request)

    async def aclose(self) -> None:
        self.closed = True

    @property
    def sent_requests(self) -> List[ApiRequest]:
        return self._table.sent_requests
