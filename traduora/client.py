"""
Copyright (C) 2026 Garudex Labs.  All Rights Reserved.
Traduora API client, a product of Garudex Labs

Traduora Client & Builder.

Provides two entry points to initialize a client:
    - ``Traduora.login(base_url, Login.password(...))`` and friends for the
      common cases
    - ``TraduoraBuilder(host).use_http().authenticate(...).build()`` for
      advanced configuration

Clients are generic over their scope. ``Traduora[Unauthenticated]`` can
only run public endpoints; ``Traduora[Authenticated]`` holds a bearer token
and can run all of them. The only ways to get an authenticated client are a
successful login or signup, or an explicitly injected token.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Generic, Optional, TypeVar, Union
from urllib.parse import urlsplit, urlunsplit

from traduora.adapters.base import ApiRequest, ApiResponse, AsyncBaseAdapter, BaseAdapter
from traduora.adapters.http import AsyncHttpAdapter, HttpAdapter
from traduora.api.auth import NewUser, Signup, Token
from traduora.api.common import BearerToken
from traduora.auth import Authenticated, Scope, Unauthenticated
from traduora.exceptions import AuthError, ConfigError, DecodeError, HttpError, QueryError
from traduora.logging_config import get_logger, log_authentication_failure

if TYPE_CHECKING:
    from traduora.config.settings import TraduoraConfig

logger = get_logger(__name__)

S = TypeVar("S", bound=Scope)

API_PREFIX = "api/v1/"
DEFAULT_TIMEOUT = 30.0


def validate_base_url(base_url: str) -> str:
    """Normalize ``base_url`` to ``scheme://host[:port][/path]`` without a trailing slash.

    Raises:
        ConfigError: If the URL is not an absolute http(s) URL with a host.
    """
    if not isinstance(base_url, str) or not base_url.strip():
        raise ConfigError("base_url must be a non-empty string")
    parts = urlsplit(base_url.strip())
    if parts.scheme not in ("http", "https"):
        raise ConfigError(f"base_url must use http or https, got {base_url!r}")
    if not parts.hostname:
        raise ConfigError(f"base_url has no host: {base_url!r}")
    if parts.query or parts.fragment:
        raise ConfigError(f"base_url must not carry a query or fragment: {base_url!r}")
    try:
        parts.port
    except ValueError as e:
        raise ConfigError(f"base_url has an invalid port: {base_url!r}") from e
    return urlunsplit((parts.scheme, parts.netloc, parts.path.rstrip("/"), "", ""))


def rest_url_for(base_url: str, api_prefix: str = API_PREFIX) -> str:
    """REST root below ``base_url``, always with a trailing slash.

    A base URL that already ends in the prefix is used as is.
    """
    prefix = api_prefix.strip("/")
    if not prefix or base_url.endswith("/" + prefix):
        return base_url + "/"
    return f"{base_url}/{prefix}/"


def _login_failure(error: QueryError, credentials: Token) -> AuthError:
    """Turn a failed credential exchange into the ``AuthError`` to raise."""
    if isinstance(error, HttpError):
        reason, status, message = "http_error", error.status, getattr(error, "message", None)
    else:
        reason, status, message = "invalid_token_response", None, f"invalid token response: {error}"
    log_authentication_failure(
        logger,
        auth_method=credentials.grant_type.value,
        reason=reason,
        status_code=status,
    )
    raw_body = getattr(error, "raw_body", b"")
    return AuthError(message=message, status=status, raw_body=raw_body)


def _scope_from_token(token: BearerToken, auth_method: str) -> Authenticated:
    """Scope for a token issued by the server. An unusable token is an ``AuthError``."""
    try:
        return Authenticated(token)
    except ConfigError as e:
        log_authentication_failure(logger, auth_method=auth_method, reason="unusable_token")
        raise AuthError(f"server returned an unusable access token: {e}") from e


class _ClientBase(Generic[S]):
    """State shared by the blocking and the async client."""

    def __init__(self, base_url: str, scope: S, api_prefix: str = API_PREFIX) -> None:
        self._base_url = validate_base_url(base_url)
        self._rest_url = rest_url_for(self._base_url, api_prefix)
        self._api_prefix = api_prefix
        self._scope = scope

    @property
    def base_url(self) -> str:
        """Server root, e.g. ``https://traduora.example``."""
        return self._base_url

    @property
    def rest_url(self) -> str:
        """REST root the endpoint paths are relative to."""
        return self._rest_url

    @property
    def scope(self) -> S:
        return self._scope

    @property
    def is_authenticated(self) -> bool:
        return self._scope.is_authenticated

    @property
    def bearer_token(self) -> BearerToken:
        """The access token of an authenticated client.

        Raises:
            AuthError: If the client is not authenticated.
        """
        if not isinstance(self._scope, Authenticated):
            raise AuthError("client is not authenticated")
        return self._scope.token

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self._base_url!r}, "
            f"authenticated={self.is_authenticated})"
        )


class Traduora(_ClientBase[S]):
    """Blocking client for the Traduora API.

    Quick start::

        client = Traduora.login("https://traduora.example", Login.password(mail, pw))
        me = Me().query(client)

    Args:
        base_url: Server root URL (scheme and host, optionally a path).
        scope: ``Unauthenticated()`` or ``Authenticated(token)``.
        adapter: Optional custom transport adapter. Defaults to an
            ``HttpAdapter`` on the REST root.
        timeout: Request timeout in seconds for the default adapter.
        validate_certs: Whether the default adapter verifies TLS.
        api_prefix: REST root below ``base_url``.
    """

    def __init__(
        self,
        base_url: str,
        scope: S,
        adapter: Optional[BaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> None:
        super().__init__(base_url, scope, api_prefix)
        if adapter is not None and not isinstance(adapter, BaseAdapter):
            raise ConfigError(f"Traduora needs a blocking adapter, got {type(adapter).__name__}")
        self._adapter = adapter or HttpAdapter(
            base_url=self._rest_url,
            timeout=timeout,
            validate_certs=validate_certs,
        )
        logger.debug("client_initialized", base_url=self._base_url, authenticated=self.is_authenticated)

    # -- Construction --------------------------------------------------------

    @classmethod
    def unauthenticated(
        cls,
        base_url: str,
        *,
        adapter: Optional[BaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "Traduora[Unauthenticated]":
        """Create a client that can only call public endpoints.

        Raises:
            ConfigError: If ``base_url`` is malformed.
        """
        return cls(base_url, Unauthenticated(), adapter, timeout, validate_certs, api_prefix)

    @classmethod
    def with_access_token(
        cls,
        base_url: str,
        token: Union[str, BearerToken],
        *,
        adapter: Optional[BaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "Traduora[Authenticated]":
        """Create an authenticated client from an existing token.

        The token is not checked; an invalid one surfaces as ``AuthError``
        on the first authenticated call.

        Raises:
            ConfigError: If ``base_url`` is malformed or the token is empty.
        """
        return cls(base_url, Authenticated(token), adapter, timeout, validate_certs, api_prefix)

    @classmethod
    def login(
        cls,
        base_url: str,
        credentials: Token,
        *,
        adapter: Optional[BaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "Traduora[Authenticated]":
        """Exchange ``credentials`` for a token and return an authenticated client.

        Raises:
            ConfigError: If ``base_url`` is malformed.
            AuthError: If the server rejected the credentials or returned
                no usable token.
            TransportError: If the server could not be reached.
        """
        client = cls.unauthenticated(
            base_url,
            adapter=adapter,
            timeout=timeout,
            validate_certs=validate_certs,
            api_prefix=api_prefix,
        )
        try:
            return client.authenticate(credentials)
        except Exception:
            if adapter is None:
                client.close()
            raise

    @classmethod
    def signup(
        cls,
        base_url: str,
        signup: Signup,
        *,
        adapter: Optional[BaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "Traduora[Authenticated]":
        """Create a user account and return a client logged in as that user."""
        client = cls.unauthenticated(
            base_url,
            adapter=adapter,
            timeout=timeout,
            validate_certs=validate_certs,
            api_prefix=api_prefix,
        )
        try:
            return client.register(signup)
        except Exception:
            if adapter is None:
                client.close()
            raise

    # -- Scope transitions ---------------------------------------------------

    def _derive(self, scope: Scope) -> "Traduora[Any]":
        return Traduora(self._base_url, scope, self._adapter, api_prefix=self._api_prefix)

    def authenticate(self, credentials: Token) -> "Traduora[Authenticated]":
        """Log in through this client's transport. ``self`` is left unchanged."""
        try:
            access = credentials.query(self)
        except AuthError:
            raise
        except (HttpError, DecodeError) as e:
            raise _login_failure(e, credentials) from e
        scope = _scope_from_token(access.access_token, credentials.grant_type.value)
        logger.debug("login_succeeded", grant_type=credentials.grant_type.value)
        return self._derive(scope)

    def register(self, signup: Signup) -> "Traduora[Authenticated]":
        """Sign up through this client's transport."""
        new_user: NewUser = signup.query(self)
        logger.debug("signup_succeeded", user_id=new_user.id.value)
        return self._derive(_scope_from_token(new_user.access_token, "signup"))

    def logout(self) -> "Traduora[Unauthenticated]":
        """Return an unauthenticated client sharing this client's transport.

        The token is only forgotten locally; the server keeps it valid until
        it expires.
        """
        return self._derive(Unauthenticated())

    # -- Transport -----------------------------------------------------------

    @property
    def adapter(self) -> BaseAdapter:
        return self._adapter

    def rest(self, request: ApiRequest) -> ApiResponse:
        """Send a prepared request through the adapter.

        Raises:
            TransportError: On connection-level failures.
        """
        return self._adapter.send(request)

    # -- Lifecycle -----------------------------------------------------------

    def close(self) -> None:
        """Release the transport. Clients derived from this one share it."""
        self._adapter.close()
        logger.debug("client_closed", base_url=self._base_url)

    def __enter__(self) -> "Traduora[S]":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncTraduora(_ClientBase[S]):
    """Async client for the Traduora API. Mirrors ``Traduora``.

    Quick start::

        async with await AsyncTraduora.login(url, Login.password(mail, pw)) as client:
            me = await Me().query_async(client)
    """

    def __init__(
        self,
        base_url: str,
        scope: S,
        adapter: Optional[AsyncBaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> None:
        super().__init__(base_url, scope, api_prefix)
        if adapter is not None and not isinstance(adapter, AsyncBaseAdapter):
            raise ConfigError(f"AsyncTraduora needs an async adapter, got {type(adapter).__name__}")
        self._adapter = adapter or AsyncHttpAdapter(
            base_url=self._rest_url,
            timeout=timeout,
            validate_certs=validate_certs,
        )
        logger.debug("async_client_initialized", base_url=self._base_url, authenticated=self.is_authenticated)

    @classmethod
    def unauthenticated(
        cls,
        base_url: str,
        *,
        adapter: Optional[AsyncBaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "AsyncTraduora[Unauthenticated]":
        return cls(base_url, Unauthenticated(), adapter, timeout, validate_certs, api_prefix)

    @classmethod
    def with_access_token(
        cls,
        base_url: str,
        token: Union[str, BearerToken],
        *,
        adapter: Optional[AsyncBaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "AsyncTraduora[Authenticated]":
        return cls(base_url, Authenticated(token), adapter, timeout, validate_certs, api_prefix)

    @classmethod
    async def login(
        cls,
        base_url: str,
        credentials: Token,
        *,
        adapter: Optional[AsyncBaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "AsyncTraduora[Authenticated]":
        """See ``Traduora.login``."""
        client = cls.unauthenticated(
            base_url,
            adapter=adapter,
            timeout=timeout,
            validate_certs=validate_certs,
            api_prefix=api_prefix,
        )
        try:
            return await client.authenticate(credentials)
        except Exception:
            if adapter is None:
                await client.aclose()
            raise

    @classmethod
    async def signup(
        cls,
        base_url: str,
        signup: Signup,
        *,
        adapter: Optional[AsyncBaseAdapter] = None,
        timeout: float = DEFAULT_TIMEOUT,
        validate_certs: bool = True,
        api_prefix: str = API_PREFIX,
    ) -> "AsyncTraduora[Authenticated]":
        client = cls.unauthenticated(
            base_url,
            adapter=adapter,
            timeout=timeout,
            validate_certs=validate_certs,
            api_prefix=api_prefix,
        )
        try:
            return await client.register(signup)
        except Exception:
            if adapter is None:
                await client.aclose()
            raise

    def _derive(self, scope: Scope) -> "AsyncTraduora[Any]":
        return AsyncTraduora(self._base_url, scope, self._adapter, api_prefix=self._api_prefix)

    async def authenticate(self, credentials: Token) -> "AsyncTraduora[Authenticated]":
        try:
            access = await credentials.query_async(self)
        except AuthError:
            raise
        except (HttpError, DecodeError) as e:
            raise _login_failure(e, credentials) from e
        scope = _scope_from_token(access.access_token, credentials.grant_type.value)
        logger.debug("login_succeeded", grant_type=credentials.grant_type.value)
        return self._derive(scope)

    async def register(self, signup: Signup) -> "AsyncTraduora[Authenticated]":
        new_user: NewUser = await signup.query_async(self)
        logger.debug("signup_succeeded", user_id=new_user.id.value)
        return self._derive(_scope_from_token(new_user.access_token, "signup"))

    def logout(self) -> "AsyncTraduora[Unauthenticated]":
        return self._derive(Unauthenticated())

    @property
    def adapter(self) -> AsyncBaseAdapter:
        return self._adapter

    async def rest_async(self, request: ApiRequest) -> ApiResponse:
        """Send a prepared request through the adapter."""
        return await self._adapter.send(request)

    async def aclose(self) -> None:
        await self._adapter.aclose()
        logger.debug("client_closed", base_url=self._base_url)

    async def __aenter__(self) -> "AsyncTraduora[S]":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


# ---------------------------------------------------------------------------
# TraduoraBuilder (advanced initialization)
# ---------------------------------------------------------------------------

class TraduoraBuilder:
    """Fluent builder for advanced client configuration.

    Example::

        client = (
            TraduoraBuilder("localhost:8080")
            .use_http()
            .validate_certs(False)
            .authenticate(Login.password("tester@mail.example", "letmeinpls"))
            .build()
        )

    Without ``authenticate`` or ``access_token`` the built client is
    unauthenticated.
    """

    def __init__(self, host: str) -> None:
        self._host = host
        self._use_http = False
        self._validate_certs = True
        self._timeout = DEFAULT_TIMEOUT
        self._api_prefix = API_PREFIX
        self._adapter: Optional[Union[BaseAdapter, AsyncBaseAdapter]] = None
        self._login: Optional[Token] = None
        self._token: Optional[Union[str, BearerToken]] = None

    @classmethod
    def from_config(cls, config: "TraduoraConfig") -> "TraduoraBuilder":
        """Create a builder from a loaded ``TraduoraConfig``."""
        server = config.server
        builder = (
            cls(server.host)
            .use_http(server.use_http)
            .validate_certs(server.validate_certs)
            .timeout(server.timeout)
            .api_prefix(server.api_prefix)
        )
        if config.credentials.access_token:
            builder.access_token(config.credentials.access_token)
        else:
            login = config.credentials.to_login()
            if login is not None:
                builder.authenticate(login)
        return builder

    def use_http(self, use_http: bool = True) -> "TraduoraBuilder":
        """Talk plain HTTP instead of HTTPS."""
        self._use_http = use_http
        return self

    def validate_certs(self, validate: bool = True) -> "TraduoraBuilder":
        """Enable or disable TLS certificate validation."""
        self._validate_certs = validate
        return self

    def timeout(self, seconds: float) -> "TraduoraBuilder":
        if seconds <= 0:
            raise ConfigError("timeout must be positive")
        self._timeout = seconds
        return self

    def api_prefix(self, prefix: str) -> "TraduoraBuilder":
        self._api_prefix = prefix
        return self

    def set_transport(self, adapter: Union[BaseAdapter, AsyncBaseAdapter]) -> "TraduoraBuilder":
        """Override the default HTTP adapter with a custom transport."""
        self._adapter = adapter
        return self

    def authenticate(self, login: Token) -> "TraduoraBuilder":
        """Log in with ``login`` when building."""
        self._login = login
        return self

    def access_token(self, token: Union[str, BearerToken]) -> "TraduoraBuilder":
        """Use an existing access token instead of logging in."""
        self._token = token
        return self

    def base_url(self) -> str:
        """The server root the built client will talk to."""
        if "://" in self._host:
            return self._host
        scheme = "http" if self._use_http else "https"
        return f"{scheme}://{self._host}"

    def _check(self) -> None:
        if self._login is not None and self._token is not None:
            raise ConfigError("authenticate() and access_token() are mutually exclusive")

    def build(self) -> Traduora[Any]:
        """Construct the blocking client, logging in if requested.

        Raises:
            ConfigError: If the configuration is inconsistent.
            AuthError, TransportError: If the login failed.
        """
        self._check()
        if self._adapter is not None and not isinstance(self._adapter, BaseAdapter):
            raise ConfigError("build() needs a blocking adapter; use build_async() instead")
        options = dict(
            adapter=self._adapter,
            timeout=self._timeout,
            validate_certs=self._validate_certs,
            api_prefix=self._api_prefix,
        )
        if self._login is not None:
            client: Traduora[Any] = Traduora.login(self.base_url(), self._login, **options)
        elif self._token is not None:
            client = Traduora.with_access_token(self.base_url(), self._token, **options)
        else:
            client = Traduora.unauthenticated(self.base_url(), **options)
        logger.debug(f"TraduoraBuilder: built client for {client.base_url}")
        return client

    async def build_async(self) -> AsyncTraduora[Any]:
        """Construct the async client, logging in if requested."""
        self._check()
        if self._adapter is not None and not isinstance(self._adapter, AsyncBaseAdapter):
            raise ConfigError("build_async() needs an async adapter; use build() instead")
        options = dict(
            adapter=self._adapter,
            timeout=self._timeout,
            validate_certs=self._validate_certs,
            api_prefix=self._api_prefix,
        )
        if self._login is not None:
            client: AsyncTraduora[Any] = await AsyncTraduora.login(self.base_url(), self._login, **options)
        elif self._token is not None:
            client = AsyncTraduora.with_access_token(self.base_url(), self._token, **options)
        else:
            client = AsyncTraduora.unauthenticated(self.base_url(), **options)
        logger.debug(f"TraduoraBuilder: built async client for {client.base_url}")
        return client
