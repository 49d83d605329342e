"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

HTTP/REST transport adapters (default).

``HttpAdapter`` blocks the calling thread using a ``requests.Session``;
``AsyncHttpAdapter`` suspends the calling task using ``httpx.AsyncClient``.
Neither retries: a failed round trip is reported once as ``TransportError``.
"""

from __future__ import annotations

import time
from typing import Optional

import httpx
import requests

from traduora.adapters.base import ApiRequest, ApiResponse, AsyncBaseAdapter, BaseAdapter
from traduora.exceptions import TransportError
from traduora.logging_config import get_logger

logger = get_logger(__name__)

USER_AGENT = "traduora-python"


class HttpAdapter(BaseAdapter):
    """Default blocking HTTP transport using ``requests.Session``.

    Args:
        base_url: REST root of the Traduora API
            (e.g. ``https://traduora.example.com/api/v1/``).
        timeout: Request timeout in seconds, None to wait forever.
        validate_certs: Verify TLS certificates. Disable only for
            self-signed development instances.
        session: Optional preconfigured session (proxies, custom CA bundle).
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30,
        validate_certs: bool = True,
        session: Optional[requests.Session] = None,
    ) -> None:
        super().__init__(base_url)
        self._timeout = timeout
        self._validate_certs = validate_certs
        self._session = session or requests.Session()
        self._session.verify = validate_certs
        self._session.headers.update({"User-Agent": USER_AGENT})

    def send(self, request: ApiRequest) -> ApiResponse:
        url = self.url_for(request)
        start = time.monotonic()

        try:
            resp = self._session.request(
                method=request.method,
                url=url,
                headers=request.headers,
                data=request.body,
                params=request.params or None,
                timeout=self._timeout,
            )
        except requests.exceptions.Timeout as e:
            logger.debug("transport_timeout", method=request.method, path=request.path)
            raise TransportError(f"Request timeout: {request.method} {url}: {e}") from e
        except requests.exceptions.ConnectionError as e:
            logger.debug("transport_connection_error", method=request.method, path=request.path)
            raise TransportError(f"Connection error: {request.method} {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.debug("transport_failure", method=request.method, path=request.path)
            raise TransportError(f"Request failed: {request.method} {url}: {e}") from e

        elapsed = (time.monotonic() - start) * 1000

        return ApiResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content or b"",
            elapsed_ms=round(elapsed, 2),
        )

    def close(self) -> None:
        self._session.close()


class AsyncHttpAdapter(AsyncBaseAdapter):
    """Default suspending HTTP transport using ``httpx.AsyncClient``.

    Args:
        base_url: REST root of the Traduora API.
        timeout: Request timeout in seconds, None to wait forever.
        validate_certs: Verify TLS certificates.
        transport: Optional ``httpx`` transport, e.g. ``httpx.MockTransport``.
    """

    def __init__(
        self,
        base_url: str,
        timeout: Optional[float] = 30,
        validate_certs: bool = True,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        super().__init__(base_url)
        self._timeout = timeout
        self._validate_certs = validate_certs
        self._client = httpx.AsyncClient(
            headers={"User-Agent": USER_AGENT},
            timeout=timeout,
            verify=validate_certs,
            transport=transport,
        )

    async def send(self, request: ApiRequest) -> ApiResponse:
        url = self.url_for(request)
        start = time.monotonic()

        try:
            resp = await self._client.request(
                method=request.method,
                url=url,
                headers=request.headers,
                content=request.body,
                params=request.params or None,
            )
        except httpx.TimeoutException as e:
            logger.debug("transport_timeout", method=request.method, path=request.path)
            raise TransportError(f"Request timeout: {request.method} {url}: {e}") from e
        except httpx.HTTPError as e:
            logger.debug("transport_failure", method=request.method, path=request.path)
            raise TransportError(f"Request failed: {request.method} {url}: {e}") from e

        elapsed = (time.monotonic() - start) * 1000

        return ApiResponse(
            status_code=resp.status_code,
            headers=dict(resp.headers),
            content=resp.content,
            elapsed_ms=round(elapsed, 2),
        )

    async def aclose(self) -> None:
        await self._client.aclose()
