"""
JSONPlaceholder Gateway - Request ID Middleware
=================================================

What:  Tags each inbound request with an ID and returns it as X-Request-ID.
Why:   Correlates the access log line, any forwarding failure log and the
       caller's own report of the request.
How:   Reuses a client-supplied X-Request-ID, otherwise generates a short
       uuid4; stores it in a ContextVar for the duration of the request.
"""

import uuid
from contextvars import ContextVar

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

REQUEST_ID_HEADER = "X-Request-ID"

# Coroutine-local: concurrent requests on one event loop each see their own ID
request_id_var: ContextVar[str] = ContextVar("request_id", default="")


class RequestIDMiddleware(BaseHTTPMiddleware):
    """Assigns a request ID, exposes it to loggers and echoes it on the response."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        # 8 hex chars is plenty for log correlation
        rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:8]
        # Not reset on exit: the catch-all error handler runs outside this
        # middleware and still needs the ID
        request_id_var.set(rid)
        request.state.request_id = rid

        response = await call_next(request)

        response.headers[REQUEST_ID_HEADER] = rid
        return response
