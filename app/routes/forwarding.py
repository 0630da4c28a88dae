"""
JSONPlaceholder Gateway - Forwarding Route Handlers
=====================================================

What:  Registers one endpoint per ForwardRoute in the catalog.
Why:   Every route has the same shape: build the upstream call, issue it,
       relay the result. One factory builds all of them.
How:   Each endpoint reads path values, query and body from the raw
       Request, calls the upstream client once, and answers with either the
       upstream body or an {"error", "message"} object.

Error handling:
    UpstreamError is caught here, inside each endpoint, and never reaches
    the global exception handlers. Status is the upstream's when one was
    received, else 500.
"""

import logging
from typing import Awaitable, Callable, Optional

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse, Response

from app.exceptions import UpstreamError
from app.middleware.request_id import request_id_var
from app.routes.catalog import FORWARD_ROUTES, ForwardRoute
from app.services.upstream import upstream_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Posts & Comments"])

# Sent when a body-carrying route receives no body at all
EMPTY_JSON_BODY = b"{}"


async def forward(route: ForwardRoute, request: Request) -> Response:
    """
    Forward one inbound request and translate the upstream result.

    Args:
        route:   Catalog entry matched by the router.
        request: The inbound request; path values are used verbatim.

    Returns:
        The upstream status (or the route's fixed success status) and body,
        or the error object on failure.
    """
    content: Optional[bytes] = None
    if route.has_body:
        content = await request.body() or EMPTY_JSON_BODY

    upstream_path = route.upstream_path(request.path_params)
    # Picked up by the access log
    request.state.upstream_target = f"{route.method} {upstream_client.base_url}{upstream_path}"

    try:
        result = await upstream_client.request(
            route.method,
            upstream_path,
            params=route.upstream_params(request.query_params),
            content=content,
        )
    except UpstreamError as e:
        logger.info(
            "[%s] %s: %s (status %d)",
            request_id_var.get(""),
            route.error_phrase,
            e.message,
            e.outbound_status,
        )
        return JSONResponse(
            status_code=e.outbound_status,
            content={"error": route.error_phrase, "message": e.message},
        )

    status_code = route.success_status or result.status_code
    # Empty upstream body (e.g. 204) is relayed empty, not as "null"
    if result.data is None:
        return Response(status_code=status_code)
    return JSONResponse(status_code=status_code, content=result.data)


def make_endpoint(route: ForwardRoute) -> Callable[[Request], Awaitable[Response]]:
    """Bind a catalog entry to a FastAPI endpoint function."""

    async def endpoint(request: Request) -> Response:
        return await forward(route, request)

    endpoint.__name__ = route.name
    endpoint.__doc__ = route.description
    return endpoint


for _route in FORWARD_ROUTES:
    router.add_api_route(
        _route.path,
        make_endpoint(_route),
        methods=[_route.method],
        name=_route.name,
        operation_id=_route.name,
        summary=_route.summary,
        description=_route.description,
        status_code=_route.documented_status,
        response_class=JSONResponse,
        responses=_route.openapi_responses(),
        openapi_extra=_route.openapi_extra(),
    )
