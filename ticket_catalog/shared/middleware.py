"""
Request context middleware.

Opens a RequestContext for every request, reusing the caller's
``X-Trace-Id`` when present, and echoes the trace id on the response.
Exceptions that no registered handler caught are rendered here as
``internal-error`` problem details, so the client never sees a
framework error page.
"""

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from ticket_catalog.shared.context import TRACE_HEADER, begin_request, end_request
from ticket_catalog.shared.errors.handlers import render_exception


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds trace and user ids to the request being served."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        context, token = begin_request(request.headers.get(TRACE_HEADER))
        try:
            try:
                response = await call_next(request)
            except Exception as exc:
                response = render_exception(request, exc)
            response.headers[TRACE_HEADER] = context.trace_id
            return response
        finally:
            end_request(token)
