"""
Configuration management for the Traduora API client.

Loads YAML configuration from file with sensible defaults and validation.
Supports environment variable substitution using ${ENV_VAR} syntax, which
keeps secrets such as passwords out of the file itself::

    server:
      host: localhost:8080
      use_http: true
    credentials:
      username: tester@mail.example
      password: ${TRADUORA_PASSWORD}
"""

import os
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Dict, Optional

import yaml

from traduora.exceptions import ConfigError
from traduora.logging_config import get_logger, setup_logging

if TYPE_CHECKING:
    from traduora.api.auth import Token

logger = get_logger(__name__)


def _expand_env_vars(value: Any) -> Any:
    """
    Recursively expand environment variables in configuration values.

    Supports ${ENV_VAR} syntax with optional default values: ${ENV_VAR:default}

    Args:
        value: Configuration value (string, dict, list, or other)

    Returns:
        Value with environment variables expanded

    Examples:
        "${TRADUORA_HOST}" -> value of TRADUORA_HOST env var
        "${TRADUORA_HOST:localhost:8080}" -> value of TRADUORA_HOST or "localhost:8080"
    """
    if isinstance(value, str):
        # Pattern matches ${VAR} or ${VAR:default}
        pattern = r'\$\{([^}:]+)(?::([^}]*))?\}'

        def replace_env_var(match):
            var_name = match.group(1)
            default_value = match.group(2) if match.group(2) is not None else ""
            return os.environ.get(var_name, default_value)

        return re.sub(pattern, replace_env_var, value)
    elif isinstance(value, dict):
        return {k: _expand_env_vars(v) for k, v in value.items()}
    elif isinstance(value, list):
        return [_expand_env_vars(item) for item in value]
    else:
        return value


def _to_bool(value: Any) -> bool:
    """Interpret YAML booleans and strings produced by env expansion."""
    if isinstance(value, bool):
        return value
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in ("1", "true", "yes", "on"):
            return True
        if lowered in ("0", "false", "no", "off", ""):
            return False
    raise ValueError(f"expected a boolean, got {value!r}")


@dataclass
class ServerConfig:
    """Where and how to reach the Traduora server."""

    host: str = "localhost:8080"
    use_http: bool = False
    validate_certs: bool = True
    timeout: float = 30.0
    api_prefix: str = "api/v1/"


@dataclass
class CredentialsConfig:
    """
    Credentials used to authenticate.

    At most one method may be configured: an access token, a refresh token,
    username and password, or client id and secret.
    """

    username: str = ""
    password: str = ""
    client_id: str = ""
    client_secret: str = ""
    refresh_token: str = ""
    access_token: str = ""

    def to_login(self) -> Optional["Token"]:
        """Build the token exchange for the configured grant, if any."""
        from traduora.api.auth import Token

        if self.username:
            return Token.password(self.username, self.password)
        if self.client_id:
            return Token.client_credentials(self.client_id, self.client_secret)
        if self.refresh_token:
            return Token.refresh_token(self.refresh_token)
        return None

    def __repr__(self) -> str:
        return (
            f"CredentialsConfig(username={self.username!r}, client_id={self.client_id!r}, "
            f"password='***', client_secret='***', refresh_token='***', access_token='***')"
        )


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    file: str = ""
    json_format: bool = True

    def apply(self) -> None:
        """Configure structlog and the root logger from this section."""
        setup_logging(
            level=self.level,
            log_file=Path(os.path.expanduser(self.file)) if self.file else None,
            json_format=self.json_format,
        )


@dataclass
class TraduoraConfig:
    """Main client configuration."""

    server: ServerConfig = field(default_factory=ServerConfig)
    credentials: CredentialsConfig = field(default_factory=CredentialsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


def get_default_config_path() -> str:
    """Get the default configuration file path."""
    return os.path.expanduser("~/.traduora/config.yaml")


def get_default_config() -> TraduoraConfig:
    """
    Get default configuration with sensible defaults.

    Returns:
        TraduoraConfig: Default configuration object (unauthenticated,
        HTTPS on localhost:8080)
    """
    return TraduoraConfig(
        server=ServerConfig(),
        credentials=CredentialsConfig(),
        logging=LoggingConfig(level="INFO", file="", json_format=True),
    )


def load_config(config_path: Optional[str] = None) -> TraduoraConfig:
    """
    Load configuration from YAML file with validation.

    If config file is not found, returns default configuration.
    If config file is malformed or invalid, raises ConfigError.

    Args:
        config_path: Path to configuration file. If None, uses default path.

    Returns:
        TraduoraConfig: Loaded and validated configuration

    Raises:
        ConfigError: If configuration is invalid or malformed
    """
    if config_path is None:
        config_path = get_default_config_path()

    # Expand user home directory
    config_path = os.path.expanduser(str(config_path))

    if not os.path.exists(config_path):
        logger.debug(f"Configuration file not found at {config_path}, using defaults")
        return get_default_config()

    try:
        with open(config_path, 'r') as f:
            config_data = yaml.safe_load(f)
        logger.debug(f"Loaded configuration from {config_path}")
    except yaml.YAMLError as e:
        logger.debug(f"Failed to parse YAML configuration file '{config_path}': {e}")
        raise ConfigError(
            f"Failed to parse YAML configuration file '{config_path}': {e}"
        ) from e
    except OSError as e:
        logger.debug(f"Failed to read configuration file '{config_path}': {e}")
        raise ConfigError(
            f"Failed to read configuration file '{config_path}': {e}"
        ) from e

    if config_data is None:
        logger.debug(f"Configuration file {config_path} is empty, using defaults")
        return get_default_config()

    if not isinstance(config_data, dict):
        raise ConfigError(f"Invalid configuration in '{config_path}': expected a mapping")

    config_data = _expand_env_vars(config_data)

    try:
        config = _build_config_from_dict(config_data)
    except (TypeError, ValueError) as e:
        logger.debug(f"Invalid configuration in '{config_path}': {e}")
        raise ConfigError(f"Invalid configuration in '{config_path}': {e}") from e

    _validate_config(config)
    logger.debug(f"Successfully loaded and validated configuration from {config_path}")
    return config


def _section(config_data: Dict[str, Any], name: str) -> Dict[str, Any]:
    section = config_data.get(name) or {}
    if not isinstance(section, dict):
        raise ValueError(f"section '{name}' must be a mapping")
    return section


def _build_config_from_dict(config_data: Dict[str, Any]) -> TraduoraConfig:
    """
    Build TraduoraConfig from dictionary.

    Args:
        config_data: Configuration dictionary with environment variables expanded

    Returns:
        TraduoraConfig: Configuration object
    """
    server_data = _section(config_data, "server")
    server = ServerConfig(
        host=str(server_data.get("host", ServerConfig.host)),
        use_http=_to_bool(server_data.get("use_http", ServerConfig.use_http)),
        validate_certs=_to_bool(server_data.get("validate_certs", ServerConfig.validate_certs)),
        timeout=float(server_data.get("timeout", ServerConfig.timeout)),
        api_prefix=str(server_data.get("api_prefix", ServerConfig.api_prefix)),
    )

    credentials_data = _section(config_data, "credentials")
    credentials = CredentialsConfig(
        **{
            key: str(value)
            for key, value in credentials_data.items()
            if value is not None
        }
    )

    logging_data = _section(config_data, "logging")
    logging = LoggingConfig(
        level=str(logging_data.get("level", LoggingConfig.level)),
        file=str(logging_data.get("file", LoggingConfig.file)),
        json_format=_to_bool(logging_data.get("json_format", LoggingConfig.json_format)),
    )

    return TraduoraConfig(server=server, credentials=credentials, logging=logging)


def _validate_config(config: TraduoraConfig) -> None:
    """
    Validate configuration values.

    Args:
        config: Configuration to validate

    Raises:
        ConfigError: If configuration is invalid
    """
    if not config.server.host.strip():
        logger.debug("Configuration validation failed: server host cannot be empty")
        raise ConfigError("server host cannot be empty")

    if config.server.timeout <= 0:
        raise ConfigError(f"timeout must be positive, got {config.server.timeout}")

    credentials = config.credentials
    methods = [
        name
        for name, configured in (
            ("access_token", bool(credentials.access_token)),
            ("refresh_token", bool(credentials.refresh_token)),
            ("username", bool(credentials.username)),
            ("client_id", bool(credentials.client_id)),
        )
        if configured
    ]
    if len(methods) > 1:
        raise ConfigError(
            f"only one authentication method may be configured, got {', '.join(methods)}"
        )
    if credentials.username and not credentials.password:
        raise ConfigError("password is required when username is set")
    if credentials.client_id and not credentials.client_secret:
        raise ConfigError("client_secret is required when client_id is set")

    # Validate logging level
    valid_log_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    if config.logging.level.upper() not in valid_log_levels:
        raise ConfigError(
            f"logging level must be one of {valid_log_levels}, "
            f"got '{config.logging.level}'"
        )
