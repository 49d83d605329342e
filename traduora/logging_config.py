"""
Logging configuration for the Traduora API client.

Provides centralized structured logging setup with JSON output for production
and human-readable output for development. Values bound with
``structlog.contextvars.bind_contextvars`` (a sync run id, say) are merged
into every event.

The library itself only emits debug events for request dispatch and warnings
for authentication failures. Calling ``setup_logging`` is left to the
application.
"""

import logging
import sys
from pathlib import Path
from typing import Any, Dict, Optional

import structlog


def setup_logging(
    level: str = "INFO",
    log_file: Optional[Path] = None,
    json_format: bool = True,
) -> None:
    """
    Configure structured logging for an application using the client.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_file: Optional path to log file. If None, logs only to stderr.
        json_format: If True, use JSON format. If False, use human-readable format.
    """
    numeric_level = getattr(logging, level.upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(numeric_level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.FileHandler(log_file)
        file_handler.setLevel(numeric_level)
        file_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(file_handler)
    else:
        stderr_handler = logging.StreamHandler(sys.stderr)
        stderr_handler.setLevel(numeric_level)
        stderr_handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.addHandler(stderr_handler)

    processors: list = [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]

    if json_format:
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.extend([
            structlog.dev.ConsoleRenderer(colors=True),
        ])

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger instance for a specific module.

    Args:
        name: Logger name (typically __name__ of the module).

    Returns:
        Structured logger instance.
    """
    if name == "traduora" or name.startswith("traduora."):
        return structlog.get_logger(name)
    return structlog.get_logger(f"traduora.{name}")


# Convenience functions for common logging patterns

def log_api_request(
    logger: structlog.stdlib.BoundLogger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    authenticated: bool = False,
    **kwargs: Any,
) -> None:
    """
    Log a completed REST API call.

    Args:
        logger: Logger instance
        method: HTTP method of the request
        path: Endpoint path relative to the REST root
        status_code: HTTP status code of the response
        duration_ms: Round trip duration in milliseconds
        authenticated: Whether a bearer token was attached
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "api_request",
        "method": method,
        "path": path,
        "status_code": status_code,
        "duration_ms": round(duration_ms, 2),
        "authenticated": authenticated,
    }
    log_data.update(kwargs)

    logger.debug("api_request", **log_data)


def log_authentication_failure(
    logger: structlog.stdlib.BoundLogger,
    auth_method: str,
    reason: str = "unknown",
    status_code: Optional[int] = None,
    **kwargs: Any,
) -> None:
    """
    Log an authentication failure.

    Args:
        logger: Logger instance
        auth_method: Authentication method used ("password", "client_credentials",
            "refresh_token", "bearer")
        reason: Reason for failure
        status_code: HTTP status code, if the server answered
        **kwargs: Additional context to log
    """
    log_data: Dict[str, Any] = {
        "event_type": "authentication_failure",
        "auth_method": auth_method,
        "reason": reason,
    }

    if status_code is not None:
        log_data["status_code"] = status_code

    log_data.update(kwargs)

    logger.warning("authentication_failure", **log_data)
