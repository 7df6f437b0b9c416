"""
Centralized logging configuration using structlog
"""

import base64
import logging
import secrets
import sys
import time
from collections.abc import Mapping
from contextvars import ContextVar
from typing import Any

import structlog
from fastapi import Request

# Context variables for request tracking
request_id_ctx: ContextVar[str | None] = ContextVar("request_id", default=None)
user_id_ctx: ContextVar[str | None] = ContextVar("user_id", default=None)

# Keys the host may place in a resolver context
KNOWN_CONTEXT_KEYS = (
    "project_id",
    "plugin_id",
    "cache",
    "user_id",
    "tenant_id",
    "request_id",
    "session_id",
    "application_id",
    "database",
    "config",
    "selectionSet",
    "variables",
)


class RequestContextFilter:
    """Add request context to log records."""

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:
        """Add request context to the event dict."""
        _ = logger, method_name

        request_id = request_id_ctx.get()
        user_id = user_id_ctx.get()

        if request_id:
            event_dict["request_id"] = request_id

        if user_id:
            event_dict["user_id"] = user_id

        return event_dict


def configure_logging(debug: bool = False) -> None:
    """Configure structlog with appropriate processors and formatters.

    Args:
        debug: If True, use human-readable console output. If False, use JSON.
    """
    log_level = logging.DEBUG if debug else logging.INFO

    logging.basicConfig(
        level=log_level,
        stream=sys.stdout,
        format="%(message)s",
        force=True,
    )

    processors = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_logger_name,
        structlog.stdlib.add_log_level,
        RequestContextFilter(),
        structlog.processors.TimeStamper(fmt="ISO", utc=True),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        structlog.processors.UnicodeDecoder(),
    ]

    if debug:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        logger_factory=structlog.stdlib.LoggerFactory(),
        context_class=dict,
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured structlog logger
    """
    return structlog.get_logger(name)


def generate_request_id() -> str:
    """Generate a compact request ID from a microsecond timestamp and randomness.

    Format: 14-character urlsafe base64 string (e.g., 'AAYbV3pGkQ3e1w')
    """
    timestamp_us = int(time.time() * 1_000_000)
    random_bytes = secrets.token_bytes(2)

    combined_bytes = timestamp_us.to_bytes(8, byteorder="big") + random_bytes
    return base64.urlsafe_b64encode(combined_bytes).decode("ascii").rstrip("=")


def set_request_context(request_id: str | None = None, user_id: str | None = None) -> None:
    """Set request context variables.

    Args:
        request_id: Request ID to set (generates one if None)
        user_id: User ID to set
    """
    if request_id is None:
        request_id = generate_request_id()

    request_id_ctx.set(request_id)
    if user_id is not None:
        user_id_ctx.set(user_id)


def clear_request_context() -> None:
    """Clear request context variables."""
    request_id_ctx.set(None)
    user_id_ctx.set(None)


def get_request_id() -> str | None:
    """Get the current request ID."""
    return request_id_ctx.get()


def get_user_id() -> str | None:
    """Get the current user ID."""
    return user_id_ctx.get()


def extract_user_id_from_request(request: Request) -> str | None:
    """Extract the user ID the host forwards with a request.

    The host authenticates callers itself and passes the resolved user in the
    ``X-User-Id`` header; the plugin never inspects credentials.
    """
    user_id = request.headers.get("x-user-id")
    return user_id or None


def log_context_values(logger: structlog.BoundLogger, context: Mapping[str, Any] | None) -> None:
    """Log every known host context key at debug level.

    Values are reported with their Python type so mismatches between what the
    host sends and what the resolvers expect are visible in the logs.
    """
    if not isinstance(context, Mapping):
        context = {}
    logger.debug("Context debug information", keys=len(context))
    for key in KNOWN_CONTEXT_KEYS:
        value = context.get(key)
        if value is None:
            logger.debug("Context value", key=key, value=None)
            continue
        logger.debug("Context value", key=key, value=value, value_type=type(value).__name__)
