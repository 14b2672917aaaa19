"""Structured logging configuration with structlog.

Production writes one JSON object per line; every other environment
uses the colored console renderer.

Log Entry Format:
    {
        "timestamp": "2026-01-01T00:00:00.000000Z",
        "level": "info",
        "event": "student_issued",
        "correlation_id": "uuid",
        "caller": "admin-0",
        "service": "StudentRegistryService",
        "component": "registry",
        "operation": "issue",
        "token_id": "2021/0001"
    }

Usage:
    from src.infrastructure.observability import configure_structlog

    configure_structlog(environment="production", log_level="INFO")
"""

import logging
import os
from typing import Any, cast

import structlog
from structlog.typing import Processor

from src.infrastructure.observability.request_context import current_request

# Environment variable read when no level is passed explicitly
LOG_LEVEL_ENV = "LOG_LEVEL"
DEFAULT_LOG_LEVEL = "INFO"


def resolve_log_level(level_name: str | None = None) -> int:
    """Map a level name to its logging constant.

    Args:
        level_name: e.g. "DEBUG". None reads LOG_LEVEL from the environment.

    Returns:
        The logging level integer; unknown names fall back to INFO.
    """
    if level_name is None:
        level_name = os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    level = logging.getLevelName(level_name.strip().upper())
    return level if isinstance(level, int) else logging.INFO


def request_context_processor(
    logger: Any, method_name: str, event_dict: dict[str, Any]
) -> dict[str, Any]:
    """Add the bound request's correlation_id and caller to a log entry.

    Values bound explicitly on the logger win. Entries logged outside a
    request are returned unchanged.
    """
    context = current_request()
    if context is None:
        return event_dict
    event_dict.setdefault("correlation_id", context.correlation_id)
    if context.caller is not None:
        event_dict.setdefault("caller", context.caller)
    return event_dict


def configure_structlog(
    environment: str = "production", log_level: str | None = None
) -> None:
    """Configure structlog for the registry process.

    Call once at startup, before the first log call.

    Args:
        environment: 'production' for JSON output, anything else for
            console output.
        log_level: Minimum level name. None reads LOG_LEVEL.
    """
    processors: list[Processor] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        cast(Processor, request_context_processor),
        structlog.processors.StackInfoRenderer(),
    ]

    if environment == "production":
        processors.append(structlog.processors.format_exc_info)
        processors.append(structlog.processors.JSONRenderer())
    else:
        processors.append(structlog.dev.ConsoleRenderer(colors=True))

    structlog.configure(
        processors=processors,
        wrapper_class=structlog.make_filtering_bound_logger(resolve_log_level(log_level)),
        context_class=dict,
        logger_factory=structlog.PrintLoggerFactory(),
        cache_logger_on_first_use=True,
    )

