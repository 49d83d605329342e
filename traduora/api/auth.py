"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Authentication endpoints.

``Token`` (exported at package level as ``Login``) exchanges credentials
for an access token and is what ``Traduora.login`` uses under the hood.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional

from pydantic import ConfigDict

from traduora.api.common import ApiModel, BearerToken, UserId
from traduora.endpoint import AuthenticatedEndpoint, BasicEndpoint, Method


class AuthProvider(ApiModel):
    """A third-party login provider configured on the server."""

    slug: str
    client_id: str
    url: str
    redirect_url: str


@dataclass(frozen=True)
class Providers(BasicEndpoint[List[AuthProvider]]):
    """List available authentication providers.

    **Endpoint** ``GET /api/v1/auth/providers``
    """

    http_method: ClassVar[Method] = Method.GET
    path_template: ClassVar[str] = "auth/providers"
    model: ClassVar[Any] = List[AuthProvider]


class NewUser(ApiModel):
    """The account created by ``Signup``, including a ready-to-use token."""

    id: UserId
    name: str
    email: str
    access_token: BearerToken


@dataclass(frozen=True, repr=False)
class Signup(BasicEndpoint[NewUser]):
    """Create a new user account.

    **Endpoint** ``POST /api/v1/auth/signup``
    """

    name: str
    email: str
    password: str

    http_method: ClassVar[Method] = Method.POST
    path_template: ClassVar[str] = "auth/signup"
    model: ClassVar[Any] = NewUser

    def payload(self) -> Dict[str, Any]:
        return {"name": self.name, "email": self.email, "password": self.password}

    def __repr__(self) -> str:
        return f"Signup(name={self.name!r}, email={self.email!r}, password='***')"


class GrantType(str, Enum):
    PASSWORD = "password"
    CLIENT_CREDENTIALS = "client_credentials"
    REFRESH_TOKEN = "refresh_token"


class AccessToken(ApiModel):
    """Token returned by the token exchange.

    The token endpoint answers in snake_case and without a ``data``
    envelope, unlike the rest of the API.
    """

    model_config = ConfigDict(alias_generator=None, populate_by_name=True, frozen=True)

    access_token: BearerToken
    expires_in: Optional[str] = None
    token_type: str = "bearer"


@dataclass(frozen=True, repr=False)
class Token(BasicEndpoint[AccessToken]):
    """Exchange credentials for an access token.

    Build instances with one of the constructors::

        Token.password("tester@mail.example", "letmeinpls")
        Token.client_credentials("client-id", "client-secret")
        Token.refresh_token(previous_token)

    **Endpoint** ``POST /api/v1/auth/token``

    Attributes:
        grant_type: The OAuth2 grant.
        identity: Mail address or client id. Unused for refresh tokens.
        secret: Password, client secret or refresh token.
    """

    grant_type: GrantType
    identity: Optional[str]
    secret: str

    http_method: ClassVar[Method] = Method.POST
    path_template: ClassVar[str] = "auth/token"
    model: ClassVar[Any] = AccessToken
    envelope: ClassVar[bool] = False
    auth_exchange: ClassVar[bool] = True

    @classmethod
    def password(cls, mail: str, password: str) -> "Token":
        """Log in as a user with mail address and password."""
        return cls(GrantType.PASSWORD, mail, password)

    @classmethod
    def client_credentials(cls, client_id: str, client_secret: str) -> "Token":
        """Log in as a project client with its id and secret."""
        return cls(GrantType.CLIENT_CREDENTIALS, client_id, client_secret)

    @classmethod
    def refresh_token(cls, token: Any) -> "Token":
        """Exchange a previously issued token for a fresh one."""
        return cls(GrantType.REFRESH_TOKEN, None, str(token))

    def payload(self) -> Dict[str, Any]:
        if self.grant_type == GrantType.PASSWORD:
            return {
                "grant_type": self.grant_type.value,
                "username": self.identity,
                "password": self.secret,
            }
        if self.grant_type == GrantType.CLIENT_CREDENTIALS:
            return {
                "grant_type": self.grant_type.value,
                "client_id": self.identity,
                "client_secret": self.secret,
            }
        return {"grant_type": self.grant_type.value, "refresh_token": self.secret}

    def __repr__(self) -> str:
        return f"Token(grant_type={self.grant_type.value!r}, identity={self.identity!r}, secret='***')"


@dataclass(frozen=True, repr=False)
class ChangePassword(AuthenticatedEndpoint[None]):
    """Change the password of the logged in user.

    **Endpoint** ``POST /api/v1/auth/change-password``
    """

    old_password: str
    new_password: str

    http_method: ClassVar[Method] = Method.POST
    path_template: ClassVar[str] = "auth/change-password"
    model: ClassVar[Any] = None
    envelope: ClassVar[bool] = False

    def payload(self) -> Dict[str, Any]:
        return {"oldPassword": self.old_password, "newPassword": self.new_password}

    def __repr__(self) -> str:
        return "ChangePassword(old_password='***', new_password='***')"
