"""
Request-scoped context.

Holds the trace and user identifiers of the request being served.
A fresh RequestContext is installed per request by RequestContextMiddleware
and torn down when the response is sent. The context object itself is
shared by reference for the lifetime of the request, so a user id recorded
by an authentication dependency is visible to the error handlers and the
log filter.
"""

from contextvars import ContextVar, Token
from dataclasses import dataclass
from typing import Optional
from uuid import uuid4

ANONYMOUS_USER = "anonymous"
TRACE_HEADER = "X-Trace-Id"


@dataclass
class RequestContext:
    """Identifiers of one inbound request."""

    trace_id: str
    user_id: Optional[str] = None


_current: ContextVar[Optional[RequestContext]] = ContextVar(
    "request_context", default=None
)


def begin_request(trace_id: Optional[str] = None) -> tuple[RequestContext, Token]:
    """Install a new context. Pass the returned token to ``end_request``."""
    context = RequestContext(trace_id=trace_id or str(uuid4()))
    return context, _current.set(context)


def end_request(token: Token) -> None:
    _current.reset(token)


def get_trace_id() -> Optional[str]:
    """Return the current trace ID, or None outside of a request."""
    context = _current.get()
    return context.trace_id if context else None


def get_user_id() -> str:
    """Return the authenticated user id, or ``anonymous``."""
    context = _current.get()
    if context is None or not context.user_id:
        return ANONYMOUS_USER
    return context.user_id


def set_user_id(user_id: str) -> None:
    """Record the authenticated user on the current request, if any."""
    context = _current.get()
    if context is not None:
        context.user_id = user_id
