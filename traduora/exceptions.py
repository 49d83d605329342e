"""
Exception hierarchy for the Traduora API client.

All custom exceptions inherit from TraduoraError base class.
"""

from typing import Any, Optional


class TraduoraError(Exception):
    """Base exception for all Traduora client errors."""
    pass


# Configuration Errors
class ConfigError(TraduoraError):
    """Raised when a client cannot be built from the given input.

    Covers malformed base URLs, empty access tokens and invalid
    configuration files. Never retried.
    """
    pass


# Query Errors
class QueryError(TraduoraError):
    """Base exception for failures while executing an endpoint."""
    pass


class UrlError(QueryError):
    """Raised when an endpoint path cannot be fully substituted."""
    pass


class EncodeError(QueryError):
    """Raised when a request body cannot be serialized to JSON."""
    pass


class TransportError(QueryError):
    """Raised on connection-level failures (DNS, TLS, timeout, reset)."""
    pass


def _preview(raw_body: bytes, limit: int = 200) -> str:
    text = raw_body.decode("utf-8", errors="replace")
    if len(text) > limit:
        return text[:limit] + "..."
    return text


class HttpError(QueryError):
    """
    Raised for a non-2xx response without a recognizable error envelope.

    Attributes:
        status: HTTP status code
        raw_body: Response body exactly as received
    """

    def __init__(self, status: int, raw_body: bytes = b"", message: Optional[str] = None):
        self.status = status
        self.raw_body = raw_body
        if message is None:
            message = f"traduora server responded with HTTP {status}"
            if raw_body:
                message += f": {_preview(raw_body)}"
        super().__init__(message)


class ServerError(HttpError):
    """
    Raised for a non-2xx response carrying a structured error envelope.

    Attributes:
        message: Message reported by the server
        details: The parsed error envelope
    """

    def __init__(
        self,
        status: int,
        message: str,
        raw_body: bytes = b"",
        details: Optional[Any] = None,
    ):
        self.message = message
        self.details = details
        super().__init__(status, raw_body, f"traduora server error {status}: {message}")


class AuthError(QueryError):
    """
    Raised when authentication is missing or rejected.

    ``status`` is None when the client refused the call locally because
    the endpoint requires an authenticated client.

    Attributes:
        status: HTTP status code, if a response was received
        message: Server-provided (or local) message
        raw_body: Response body exactly as received
    """

    def __init__(
        self,
        message: Optional[str] = None,
        status: Optional[int] = None,
        raw_body: bytes = b"",
    ):
        self.status = status
        self.message = message
        self.raw_body = raw_body
        if status is None:
            text = message or "authentication required"
        else:
            text = f"authentication failed with HTTP {status}"
            if message:
                text += f": {message}"
        super().__init__(text)


class DecodeError(QueryError):
    """
    Raised when a 2xx response body does not match the declared shape.

    Attributes:
        raw_body: Response body exactly as received
        cause: The underlying JSON or validation error
        typename: Name of the type that could not be decoded
    """

    def __init__(self, raw_body: bytes, cause: Exception, typename: str = "response"):
        self.raw_body = raw_body
        self.cause = cause
        self.typename = typename
        super().__init__(f"could not parse {typename} data from JSON: {cause}")
