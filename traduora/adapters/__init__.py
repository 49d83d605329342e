"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Transport Adapters.
"""

from traduora.adapters.base import ApiRequest, ApiResponse, AsyncBaseAdapter, BaseAdapter
from traduora.adapters.http import AsyncHttpAdapter, HttpAdapter
from traduora.adapters.mock import AsyncMockAdapter, MockAdapter, json_response

__all__ = [
    "ApiRequest",
    "ApiResponse",
    "AsyncBaseAdapter",
    "BaseAdapter",
    "AsyncHttpAdapter",
    "HttpAdapter",
    "AsyncMockAdapter",
    "MockAdapter",
    "json_response",
]
