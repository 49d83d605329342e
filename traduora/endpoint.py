"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Endpoint abstraction.

An endpoint is an immutable value describing one REST call: HTTP method,
path template with named placeholders, query parameters, optional JSON
body, the scope a client needs to call it and the type its response
decodes into. Everything about the request can be inspected without I/O::

    endpoint = CreateTerm(value="hello.world", project_id=project)
    endpoint.method()       # Method.POST
    endpoint.endpoint()     # "projects/b1001dd9-.../terms"
    endpoint.body()         # b'{"value":"hello.world"}'

Executing goes through the query engine, either as
``endpoint.query(client)`` / ``await endpoint.query_async(client)`` or via
``traduora.query.execute``.

Adding an endpoint never touches the engine: subclass ``BasicEndpoint``
(no authentication) or ``AuthenticatedEndpoint``, declare
``http_method``, ``path_template`` and ``model``, and override
``query_params``/``payload`` when needed.
"""

from __future__ import annotations

import json
import string
from datetime import date, datetime
from enum import Enum
from typing import (
    TYPE_CHECKING,
    Any,
    ClassVar,
    Dict,
    Generic,
    List,
    Mapping,
    Optional,
    Tuple,
    Type,
    TypeVar,
)
from urllib.parse import quote, urljoin

from pydantic import BaseModel

from traduora import query as _query
from traduora.api.common import Identifier, MimeTypes
from traduora.auth import Authenticated, Scope, Unauthenticated
from traduora.exceptions import EncodeError, UrlError

if TYPE_CHECKING:
    from traduora.client import AsyncTraduora, Traduora

T = TypeVar("T")
M = TypeVar("M")

_FORMATTER = string.Formatter()


class Method(str, Enum):
    """HTTP methods used by the Traduora API."""

    GET = "GET"
    POST = "POST"
    PATCH = "PATCH"
    DELETE = "DELETE"


def placeholders(template: str) -> List[str]:
    """Names of the ``{placeholders}`` in a path template, in order."""
    names = []
    for _, field_name, _, _ in _FORMATTER.parse(template):
        if field_name is None:
            continue
        if not field_name.isidentifier():
            raise UrlError(f"invalid placeholder '{{{field_name}}}' in path template {template!r}")
        names.append(field_name)
    return names


def _segment_text(value: Any) -> str:
    if isinstance(value, Identifier):
        return value.value
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def encode_segment(name: str, value: Any) -> str:
    """Percent-encode one placeholder value for use as a path segment.

    Raises:
        UrlError: If the value is missing, empty, a dot segment or contains
            control characters.
    """
    if value is None:
        raise UrlError(f"missing value for path placeholder '{name}'")
    text = _segment_text(value)
    if not text:
        raise UrlError(f"empty value for path placeholder '{name}'")
    if text in (".", ".."):
        raise UrlError(f"value {text!r} for path placeholder '{name}' is not URL-safe")
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in text):
        raise UrlError(f"value for path placeholder '{name}' contains control characters")
    return quote(text, safe="")


def _json_default(value: Any) -> Any:
    if isinstance(value, Identifier):
        return value.value
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def encode_json(payload: Any) -> bytes:
    """Serialize a request payload to compact JSON bytes.

    Raises:
        EncodeError: If the payload is not JSON serializable.
    """
    try:
        text = json.dumps(
            payload,
            default=_json_default,
            allow_nan=False,
            separators=(",", ":"),
        )
    except (TypeError, ValueError) as e:
        raise EncodeError(f"failed to serialize to JSON: {e}") from e
    return text.encode("utf-8")


class Endpoint(Generic[T]):
    """A trait providing the information needed for a single REST endpoint.

    Class attributes declared by concrete endpoints:
        http_method: The HTTP method.
        path_template: Path relative to the REST root with ``{name}``
            placeholders. Each placeholder is filled from the attribute of
            the same name unless ``path_params`` is overridden.
        access_control: Scope a client must have (``Authenticated`` or
            ``Unauthenticated``).
        model: Type the success body decodes into.
        envelope: Whether success bodies are wrapped in ``{"data": ...}``.
        auth_exchange: Whether this endpoint exchanges credentials for a
            token; every structured failure then is an ``AuthError``.
    """

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = ""
    access_control: ClassVar[Type[Scope]] = Authenticated
    model: ClassVar[Any] = None
    envelope: ClassVar[bool] = True
    auth_exchange: ClassVar[bool] = False

    # -- Request description -----------------------------------------------

    def method(self) -> Method:
        """The HTTP method to use for the endpoint."""
        return self.http_method

    def path_params(self) -> Mapping[str, Any]:
        """Values for the placeholders of ``path_template``."""
        return {name: getattr(self, name, None) for name in placeholders(self.path_template)}

    def endpoint(self) -> str:
        """The substituted path relative to the REST root.

        Raises:
            UrlError: If a placeholder has no usable value.
        """
        values = self.path_params()
        parts: List[str] = []
        for literal, field_name, _, _ in _FORMATTER.parse(self.path_template):
            parts.append(literal)
            if field_name is None:
                continue
            if field_name not in values:
                raise UrlError(
                    f"missing value for path placeholder '{field_name}' "
                    f"in {self.path_template!r}"
                )
            parts.append(encode_segment(field_name, values[field_name]))
        return "".join(parts)

    def path(self, base_url: str) -> str:
        """The full URL of this endpoint below ``base_url`` (the REST root)."""
        if not base_url.endswith("/"):
            base_url += "/"
        return urljoin(base_url, self.endpoint())

    def query_params(self) -> List[Tuple[str, Any]]:
        """Ordered query parameters. ``None`` values are not sent."""
        return []

    def payload(self) -> Optional[Any]:
        """JSON-compatible request payload, or None for no body."""
        return None

    def body(self) -> Optional[bytes]:
        """The serialized request body.

        Raises:
            EncodeError: If the payload cannot be serialized.
        """
        payload = self.payload()
        if payload is None:
            return None
        return encode_json(payload)

    def content_type(self) -> Optional[str]:
        """``Content-Type`` of the body, if there is one."""
        return MimeTypes.JSON

    def requires_auth(self) -> bool:
        """Whether executing this endpoint needs an authenticated client."""
        return issubclass(self.access_control, Authenticated)

    # -- Response mapping ----------------------------------------------------

    def map(self, data: Any) -> T:
        """Decode the parsed JSON body into the declared model.

        Envelope endpoints unwrap ``{"data": ...}`` when present.

        Raises:
            pydantic.ValidationError: If the shape does not match.
        """
        if self.envelope and isinstance(data, dict) and "data" in data:
            data = data["data"]
        return _query.type_adapter(self.model).validate_python(data)

    def model_name(self) -> str:
        return _query.type_name(self.model)


class BasicEndpoint(Endpoint[T]):
    """An endpoint callable by any client, authenticated or not."""

    access_control: ClassVar[Type[Scope]] = Unauthenticated

    def query(self, client: "Traduora[Any]") -> T:
        """Perform the query against the client.

        Raises:
            UrlError, EncodeError: If the request cannot be prepared.
            TransportError: If the request could not be sent.
            AuthError, ServerError, HttpError: If the server rejected it.
            DecodeError: If the returned JSON does not match the model.
        """
        return _query.execute(self, client)

    async def query_async(self, client: "AsyncTraduora[Any]") -> T:
        """Perform the query asynchronously against the client."""
        return await _query.execute_async(self, client)

    def query_custom(self, client: "Traduora[Any]", model: Type[M]) -> M:
        """Perform the query, decoding the raw body into ``model``.

        Useful to skip fields that are not needed or to read fields this
        library does not know yet.
        """
        return _query.execute_custom(self, client, model)

    async def query_custom_async(self, client: "AsyncTraduora[Any]", model: Type[M]) -> M:
        return await _query.execute_custom_async(self, client, model)


class AuthenticatedEndpoint(Endpoint[T]):
    """An endpoint that requires an authenticated client.

    The client parameter is typed ``Traduora[Authenticated]`` so a type
    checker rejects unauthenticated clients; at runtime the engine raises
    ``AuthError`` before sending anything.
    """

    access_control: ClassVar[Type[Scope]] = Authenticated

    def query(self, client: "Traduora[Authenticated]") -> T:
        """Perform the query against the authenticated client.

        Raises:
            AuthError: If the client is not authenticated or the server
                rejected the token.
            UrlError, EncodeError, TransportError, ServerError, HttpError,
            DecodeError: See ``BasicEndpoint.query``.
        """
        return _query.execute(self, client)

    async def query_async(self, client: "AsyncTraduora[Authenticated]") -> T:
        """Perform the query asynchronously against the authenticated client."""
        return await _query.execute_async(self, client)

    def query_custom(self, client: "Traduora[Authenticated]", model: Type[M]) -> M:
        """Perform the query, decoding the raw body into ``model``."""
        return _query.execute_custom(self, client, model)

    async def query_custom_async(self, client: "AsyncTraduora[Authenticated]", model: Type[M]) -> M:
        return await _query.execute_custom_async(self, client, model)


def coerce_fields(endpoint: Any, **kinds: Type[Identifier]) -> None:
    """Wrap plain-string fields of a frozen endpoint dataclass in identifiers.

    Called from ``__post_init__``. Raises ``TypeError`` when an identifier
    of another kind was passed.
    """
    for name, kind in kinds.items():
        value = getattr(endpoint, name)
        if value is not None:
            object.__setattr__(endpoint, name, kind.coerce(value))


def drop_none(items: Dict[str, Any]) -> Dict[str, Any]:
    """Copy of ``items`` without keys whose value is None."""
    return {key: value for key, value in items.items() if value is not None}
