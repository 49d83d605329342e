"""
Configuration management for the Traduora API client.

Handles loading and validation of configuration files.
"""

from traduora.config.settings import (
    CredentialsConfig,
    LoggingConfig,
    ServerConfig,
    TraduoraConfig,
    get_default_config,
    get_default_config_path,
    load_config,
)

__all__ = [
    "CredentialsConfig",
    "LoggingConfig",
    "ServerConfig",
    "TraduoraConfig",
    "get_default_config",
    "get_default_config_path",
    "load_config",
]
