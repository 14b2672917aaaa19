"""Observability infrastructure: structlog setup and request context.

Usage:
    from src.infrastructure.observability import bind_request, configure_structlog

    # At startup
    configure_structlog(environment="production")

    # Per request
    bind_request(request.headers.get("X-Correlation-ID"), caller)
"""

from src.infrastructure.observability.logging import (
    configure_structlog,
    request_context_processor,
    resolve_log_level,
)
from src.infrastructure.observability.request_context import (
    RequestContext,
    bind_request,
    clear_request,
    current_request,
)

__all__: list[str] = [
    "RequestContext",
    "bind_request",
    "clear_request",
    "configure_structlog",
    "current_request",
    "request_context_processor",
    "resolve_log_level",
]
