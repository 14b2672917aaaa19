"""Per-request logging context for registry calls.

The API binds one RequestContext per HTTP request: the correlation ID
(taken from X-Correlation-ID or generated) and the calling address.
request_context_processor in observability.logging copies both onto
every log line emitted while the request is handled, so the rejection
and audit lines of a registry call can be traced back to the request
and caller that caused them.

Calls made outside a request (bootstrap, tests driving the service
directly) run with no context bound.
"""

from contextvars import ContextVar
from dataclasses import dataclass
from uuid import uuid4


@dataclass(frozen=True)
class RequestContext:
    """Identity of the request being handled.

    Attributes:
        correlation_id: Request correlation ID.
        caller: Address from the caller header, None when absent.
    """

    correlation_id: str
    caller: str | None = None


_request_context: ContextVar[RequestContext | None] = ContextVar(
    "registry_request_context", default=None
)


def bind_request(
    correlation_id: str | None = None, caller: str | None = None
) -> RequestContext:
    """Bind the context of a new request.

    Args:
        correlation_id: Incoming correlation ID; a UUID4 is generated
            when missing or blank.
        caller: Calling address, if the request named one.

    Returns:
        The bound RequestContext.
    """
    if not correlation_id or not correlation_id.strip():
        correlation_id = str(uuid4())
    context = RequestContext(correlation_id=correlation_id, caller=caller or None)
    _request_context.set(context)
    return context


def current_request() -> RequestContext | None:
    return _request_context.get()


def clear_request() -> None:
    """Unbind the request context once the response is sent."""
    _request_context.set(None)
