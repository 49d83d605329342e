"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Permission levels.

A scope represents a particular permission level. There are two:

* ``Unauthenticated`` - only a small subset of endpoints is available.
* ``Authenticated`` - holds a bearer token and may call every endpoint.

Clients are generic over their scope (``Traduora[Authenticated]``), so a
type checker rejects auth-only endpoints on unauthenticated clients. The
query engine repeats the check at runtime and fails before any I/O.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Dict, Union

from traduora.api.common import BearerToken
from traduora.exceptions import ConfigError


class Scope(ABC):
    """Determines the permissions of a client."""

    @abstractmethod
    def set_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        """Add the appropriate authorization header, if any, to ``headers``."""
        ...

    @property
    @abstractmethod
    def is_authenticated(self) -> bool:
        ...


class Unauthenticated(Scope):
    """Client is not authenticated. Only public endpoints are reachable."""

    def set_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        return headers

    @property
    def is_authenticated(self) -> bool:
        return False

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Unauthenticated)

    def __hash__(self) -> int:
        return hash(Unauthenticated)

    def __repr__(self) -> str:
        return "Unauthenticated()"


class Authenticated(Scope):
    """Client is authenticated and has an access token.

    Raises:
        ConfigError: If the token is empty or cannot be sent as a header.
    """

    __slots__ = ("_token",)

    def __init__(self, token: Union[str, BearerToken]) -> None:
        token = BearerToken.coerce(token)
        if not token.value.strip():
            raise ConfigError("access token must not be empty")
        if any(ch in token.value for ch in "\r\n\0"):
            raise ConfigError("access token contains characters not allowed in a header")
        self._token = token

    @property
    def token(self) -> BearerToken:
        return self._token

    def set_header(self, headers: Dict[str, str]) -> Dict[str, str]:
        headers["Authorization"] = f"Bearer {self._token.value}"
        return headers

    @property
    def is_authenticated(self) -> bool:
        return True

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Authenticated) and other._token == self._token

    def __hash__(self) -> int:
        return hash(self._token)

    def __repr__(self) -> str:
        return "Authenticated(token='***')"
