"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Typed Python client for the Traduora translation management REST API.

Endpoints are immutable values executed against a client::

    from traduora import Login, Traduora
    from traduora.api.users import Me

    client = Traduora.login("https://traduora.example", Login.password(mail, password))
    print(Me().query(client).name)

Both a blocking (``Traduora``) and an async (``AsyncTraduora``) client are
provided. Endpoints that need a logged-in user only accept authenticated
clients.
"""

from traduora._version import __version__
from traduora.api.auth import Token
from traduora.auth import Authenticated, Scope, Unauthenticated
from traduora.client import AsyncTraduora, Traduora, TraduoraBuilder
from traduora.endpoint import AuthenticatedEndpoint, BasicEndpoint, Endpoint, Method
from traduora.exceptions import (
    AuthError,
    ConfigError,
    DecodeError,
    EncodeError,
    HttpError,
    QueryError,
    ServerError,
    TransportError,
    TraduoraError,
    UrlError,
)

# Credential exchange used by Traduora.login
Login = Token

__all__ = [
    "__version__",
    "AsyncTraduora",
    "AuthError",
    "Authenticated",
    "AuthenticatedEndpoint",
    "BasicEndpoint",
    "ConfigError",
    "DecodeError",
    "EncodeError",
    "Endpoint",
    "HttpError",
    "Login",
    "Method",
    "QueryError",
    "Scope",
    "ServerError",
    "Token",
    "TransportError",
    "Traduora",
    "TraduoraBuilder",
    "TraduoraError",
    "Unauthenticated",
    "UrlError",
]
