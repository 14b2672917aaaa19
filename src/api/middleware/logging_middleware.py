"""Request logging middleware.

For every HTTP request this middleware:
- Binds the request context (correlation ID from X-Correlation-ID or a
  new one, plus the caller address) for all log lines of the request
- Logs request start and end with timing
- Echoes the correlation ID in the response headers

Usage:
    from fastapi import FastAPI
    from src.api.middleware.logging_middleware import LoggingMiddleware

    app = FastAPI()
    app.add_middleware(LoggingMiddleware)
"""

import time
from typing import Awaitable, Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

from src.api.dependencies.registry import CALLER_HEADER
from src.infrastructure.observability.request_context import (
    bind_request,
    clear_request,
)

CORRELATION_HEADER = "X-Correlation-ID"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Binds the request context and logs each request.

    Registry services log inside the bound context, so their audit and
    rejection lines carry the request's correlation ID and caller.
    """

    async def dispatch(
        self, request: Request, call_next: Callable[[Request], Awaitable[Response]]
    ) -> Response:
        """Handle one request inside its logging context.

        Args:
            request: Incoming HTTP request.
            call_next: Next middleware or route handler.

        Returns:
            The response with the correlation ID header added.
        """
        context = bind_request(
            request.headers.get(CORRELATION_HEADER),
            request.headers.get(CALLER_HEADER),
        )
        log = structlog.get_logger().bind(method=request.method, path=request.url.path)

        log.info("request_started")
        start_time = time.perf_counter()

        try:
            response = await call_next(request)
        except Exception as exc:
            log.exception(
                "request_failed",
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
                error_type=type(exc).__name__,
            )
            raise
        else:
            log.info(
                "request_completed",
                status_code=response.status_code,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
        finally:
            clear_request()

        response.headers[CORRELATION_HEADER] = context.correlation_id
        return response
