"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Transport adapter base classes and data structures.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple
from urllib.parse import urljoin


@dataclass(frozen=True)
class ApiRequest:
    """Outbound request representation.

    ``path`` is relative to the REST root the adapter was built with
    (e.g. ``projects/{id}/terms``); ``body`` is already serialized.
    """
    method: str
    path: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[bytes] = None
    params: List[Tuple[str, str]] = field(default_factory=list)


@dataclass(frozen=True)
class ApiResponse:
    """Inbound response representation with the raw body."""
    status_code: int
    headers: Dict[str, str] = field(default_factory=dict)
    content: bytes = b""
    elapsed_ms: float = 0.0

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    @property
    def text(self) -> str:
        return self.content.decode("utf-8", errors="replace")


class _AdapterBase:
    """State shared by blocking and suspending adapters."""

    def __init__(self, base_url: str) -> None:
        # A trailing slash keeps urljoin from dropping the last segment
        self._base_url = base_url if base_url.endswith("/") else base_url + "/"

    @property
    def base_url(self) -> str:
        """REST root the request paths are resolved against."""
        return self._base_url

    def url_for(self, request: ApiRequest) -> str:
        return urljoin(self._base_url, request.path)


class BaseAdapter(_AdapterBase, ABC):
    """Abstract base for blocking transport adapters."""

    @abstractmethod
    def send(self, request: ApiRequest) -> ApiResponse:
        """Send a request and return the response.

        Raises:
            TransportError: On connection-level failures.
        """
        ...

    @abstractmethod
    def close(self) -> None:
        """Release adapter resources."""
        ...


class AsyncBaseAdapter(_AdapterBase, ABC):
    """Abstract base for suspending transport adapters."""

    @abstractmethod
    async def send(self, request: ApiRequest) -> ApiResponse:
        """Send a request and return the response.

        Raises:
            TransportError: On connection-level failures.
        """
        ...

    @abstractmethod
    async def aclose(self) -> None:
        """Release adapter resources."""
        ...
