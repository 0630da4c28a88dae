"""
JSONPlaceholder Gateway - Access Logging Middleware
=====================================================

What:  One log line per request, pairing what the caller asked for with the
       upstream call it was forwarded to and the status the caller got back.
Why:   The gateway's only observable behavior is what it relays; the access
       log shows which upstream failures callers actually saw.
How:   Times the downstream call; forwarding routes leave their upstream
       target in request.state, which lives in the shared ASGI scope.

Example lines:
    GET /posts/1 200 84.2ms [1a2b3c4d] → GET https://jsonplaceholder.typicode.com/posts/1
    GET / 200 0.9ms [5e6f7a8b] → local

Level by status:
    5xx → ERROR    (upstream down or unexpected failure)
    4xx → WARNING  (usually relayed from upstream, e.g. 404)
    else → INFO

Request bodies are never logged.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.middleware.request_id import request_id_var

logger = logging.getLogger("gateway.access")

# Target shown for routes answered without an upstream call
LOCAL_TARGET = "local"


def level_for_status(status: int) -> int:
    if status >= 500:
        return logging.ERROR
    if status >= 400:
        return logging.WARNING
    return logging.INFO


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request once its response is ready."""

    # Health checks arrive every few seconds and would drown real traffic
    QUIET_PATHS = {"/health"}

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        if request.url.path in self.QUIET_PATHS:
            return await call_next(request)

        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000

        upstream_target = getattr(request.state, "upstream_target", LOCAL_TARGET)
        rid = request_id_var.get("")

        logger.log(
            level_for_status(response.status_code),
            "%s %s %d %.1fms [%s] → %s",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            rid,
            upstream_target,
            extra={
                "request_id": rid,
                "method": request.method,
                "path": request.url.path,
                "status": response.status_code,
                "duration_ms": round(elapsed_ms, 2),
                "upstream_target": upstream_target,
                "client_ip": request.client.host if request.client else "unknown",
            },
        )

        return response
