"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Query engine.

Turns an endpoint value into a transport request, dispatches it through
the client's adapter and classifies the response:

* 2xx: the body is parsed as JSON (empty means ``null``) and decoded
  into the endpoint's model, otherwise ``DecodeError``.
* non-2xx with a ``{"message": ...}`` or ``{"error": ...}`` envelope:
  ``AuthError`` for 401/403 and for credential exchanges,
  ``ServerError`` for everything else.
* any other non-2xx: ``HttpError`` with the raw body.

The blocking and suspending paths share every step except dispatch.
"""

from __future__ import annotations

import functools
import json
from enum import Enum
from typing import TYPE_CHECKING, Any, Callable, Dict, Optional, Tuple, Type, TypeVar

from pydantic import TypeAdapter, ValidationError

from traduora.adapters.base import ApiRequest, ApiResponse
from traduora.api.common import Identifier
from traduora.exceptions import AuthError, DecodeError, HttpError, QueryError, ServerError
from traduora.logging_config import get_logger, log_api_request, log_authentication_failure

if TYPE_CHECKING:
    from traduora.endpoint import Endpoint

logger = get_logger(__name__)

T = TypeVar("T")

AUTH_STATUSES = frozenset({401, 403})


@functools.lru_cache(maxsize=None)
def _cached_type_adapter(tp: Any) -> TypeAdapter:
    return TypeAdapter(tp)


def type_adapter(tp: Any) -> TypeAdapter:
    """Return a (cached when possible) pydantic ``TypeAdapter`` for ``tp``."""
    if tp is None:
        tp = type(None)
    try:
        return _cached_type_adapter(tp)
    except TypeError:
        # unhashable type expressions
        return TypeAdapter(tp)


def type_name(tp: Any) -> str:
    if tp is None:
        return "None"
    return getattr(tp, "__name__", None) or repr(tp)


def _param_text(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Identifier):
        return value.value
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_request(endpoint: "Endpoint[Any]", client: Any) -> ApiRequest:
    """Prepare the transport request for ``endpoint`` on ``client``.

    Path, query and body are resolved first so that ``UrlError`` and
    ``EncodeError`` surface before the scope check. Nothing is sent.

    Raises:
        UrlError: If a path placeholder cannot be substituted.
        EncodeError: If the body cannot be serialized.
        AuthError: If the endpoint requires authentication and the client
            is unauthenticated.
    """
    method = endpoint.method()
    path = endpoint.endpoint()
    params = [(key, _param_text(value)) for key, value in endpoint.query_params() if value is not None]
    body = endpoint.body()

    headers: Dict[str, str] = {"Accept": "application/json"}
    if body is not None:
        content_type = endpoint.content_type()
        if content_type:
            headers["Content-Type"] = content_type

    if endpoint.requires_auth():
        scope = client.scope
        if not scope.is_authenticated:
            log_authentication_failure(
                logger,
                auth_method="bearer",
                reason="unauthenticated_client",
                endpoint=type(endpoint).__name__,
            )
            raise AuthError(f"{type(endpoint).__name__} requires an authenticated client")
        scope.set_header(headers)

    return ApiRequest(
        method=method.value,
        path=path,
        headers=headers,
        body=body,
        params=params,
    )


def _parse_json(raw_body: bytes) -> Any:
    if not raw_body.strip():
        return None
    return json.loads(raw_body)


def _error_message(envelope: Any) -> Tuple[Optional[str], Any]:
    """Extract the server message from an error envelope.

    Returns ``(None, None)`` when the body is not a recognizable envelope.
    """
    if not isinstance(envelope, dict):
        return None, None
    for key in ("message", "error"):
        value = envelope.get(key)
        if isinstance(value, str):
            return value, envelope
        if isinstance(value, dict):
            nested = value.get("message")
            if isinstance(nested, str):
                return nested, envelope
            return json.dumps(value), envelope
        if isinstance(value, list) and value:
            return "; ".join(str(item) for item in value), envelope
    return None, None


def classify_error(response: ApiResponse, auth_exchange: bool = False) -> QueryError:
    """Map a non-2xx response to the matching exception (not raised)."""
    raw_body = response.content
    try:
        envelope = _parse_json(raw_body)
    except ValueError:
        envelope = None

    message, details = _error_message(envelope)
    if message is None:
        return HttpError(response.status_code, raw_body)
    if auth_exchange or response.status_code in AUTH_STATUSES:
        return AuthError(message=message, status=response.status_code, raw_body=raw_body)
    return ServerError(response.status_code, message, raw_body=raw_body, details=details)


def process_response(
    response: ApiResponse,
    mapper: Callable[[Any], T],
    auth_exchange: bool = False,
    typename: str = "response",
) -> T:
    """Decode a successful response through ``mapper`` or raise the error.

    Raises:
        DecodeError: If a 2xx body is not JSON or does not fit the model.
        AuthError, ServerError, HttpError: For non-2xx responses.
    """
    if not response.is_success:
        raise classify_error(response, auth_exchange)

    raw_body = response.content
    try:
        data = _parse_json(raw_body)
    except ValueError as e:
        raise DecodeError(raw_body, e, typename) from e
    try:
        return mapper(data)
    except ValidationError as e:
        raise DecodeError(raw_body, e, typename) from e


def _log_outcome(endpoint: "Endpoint[Any]", request: ApiRequest, response: ApiResponse) -> None:
    log_api_request(
        logger,
        method=request.method,
        path=request.path,
        status_code=response.status_code,
        duration_ms=response.elapsed_ms,
        authenticated="Authorization" in request.headers,
        endpoint=type(endpoint).__name__,
    )
    if response.status_code in AUTH_STATUSES or (endpoint.auth_exchange and not response.is_success):
        log_authentication_failure(
            logger,
            auth_method="token_exchange" if endpoint.auth_exchange else "bearer",
            reason="rejected_by_server",
            status_code=response.status_code,
            endpoint=type(endpoint).__name__,
        )


def _require(client: Any, attribute: str, kind: str) -> Callable[[ApiRequest], Any]:
    dispatch = getattr(client, attribute, None)
    if dispatch is None:
        raise TypeError(f"{type(client).__name__} cannot run {kind} queries")
    return dispatch


def _run(endpoint: "Endpoint[Any]", client: Any, mapper: Callable[[Any], T], typename: str) -> T:
    dispatch = _require(client, "rest", "blocking")
    request = build_request(endpoint, client)
    response = dispatch(request)
    _log_outcome(endpoint, request, response)
    return process_response(response, mapper, endpoint.auth_exchange, typename)


async def _run_async(
    endpoint: "Endpoint[Any]", client: Any, mapper: Callable[[Any], T], typename: str
) -> T:
    dispatch = _require(client, "rest_async", "async")
    request = build_request(endpoint, client)
    response = await dispatch(request)
    _log_outcome(endpoint, request, response)
    return process_response(response, mapper, endpoint.auth_exchange, typename)


def execute(endpoint: "Endpoint[T]", client: Any) -> T:
    """Execute ``endpoint`` on a blocking client and decode its model."""
    return _run(endpoint, client, endpoint.map, endpoint.model_name())


async def execute_async(endpoint: "Endpoint[T]", client: Any) -> T:
    """Execute ``endpoint`` on an async client and decode its model."""
    return await _run_async(endpoint, client, endpoint.map, endpoint.model_name())


def _custom_mapper(model: Any) -> Callable[[Any], Any]:
    return type_adapter(model).validate_python


def execute_custom(endpoint: "Endpoint[Any]", client: Any, model: Type[T]) -> T:
    """Execute ``endpoint`` and decode the raw body into ``model``.

    The body is decoded as received; no ``data`` envelope is removed.
    """
    return _run(endpoint, client, _custom_mapper(model), type_name(model))


async def execute_custom_async(endpoint: "Endpoint[Any]", client: Any, model: Type[T]) -> T:
    """Async variant of ``execute_custom``."""
    return await _run_async(endpoint, client, _custom_mapper(model), type_name(model))
