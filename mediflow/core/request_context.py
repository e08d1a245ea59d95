# ============================================================================
# SCOPE: CORE
# Description: Request-scoped context (correlation id, appointment id)
#              propagated through async calls with contextvars.
# ============================================================================
"""
RequestContext - per-request tracing data using Python's contextvars.

The request logging middleware sets the context at the start of each
request. Code running inside the request (services, the reminder
scheduler) reads it to tag its log lines, and the reminder scheduler
stores the correlation id on every reminder it arms so the eventual
delivery can be traced back to the request that scheduled it.

Usage:
    token = set_request_context(RequestContext(correlation_id="ab12cd34"))
    try:
        ...
    finally:
        reset_request_context(token)

    cid = get_correlation_id()  # "ab12cd34" or None outside a request
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass


@dataclass(frozen=True)
class RequestContext:
    """Tracing data of the request being handled."""

    correlation_id: str
    appointment_id: int | None = None


_request_context: ContextVar[RequestContext | None] = ContextVar("request_context", default=None)


def get_request_context() -> RequestContext | None:
    """Get the current request context, None outside a request."""
    return _request_context.get()


def get_correlation_id() -> str | None:
    """Convenience accessor for the current correlation id."""
    ctx = _request_context.get()
    return ctx.correlation_id if ctx else None


def set_request_context(context: RequestContext | None) -> Token:
    """Set the context for the current request. Returns a reset token."""
    return _request_context.set(context)


def reset_request_context(token: Token) -> None:
    """Restore the context that was active before `set_request_context`."""
    _request_context.reset(token)
