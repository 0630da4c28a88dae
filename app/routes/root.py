"""
JSONPlaceholder Gateway - Index Route
=======================================

What:  GET / returns a static description of the service.
Why:   Lets a caller discover the forwarding routes and the docs location
       without reading the OpenAPI document.
How:   Built from the route catalog; never contacts the upstream.
"""

from fastapi import APIRouter

from app.routes.catalog import endpoint_listing
from app.schemas.gateway import RootResponse

router = APIRouter(tags=["Info"])

SERVICE_NAME = "JSONPlaceholder Wrapper API"
DOCS_PATH = "/api-docs"


@router.get(
    "/",
    response_model=RootResponse,
    summary="List available routes",
    description="Returns the forwarding routes and where the API documentation lives.",
)
async def index() -> RootResponse:
    return RootResponse(
        message=SERVICE_NAME,
        documentation=DOCS_PATH,
        endpoints=endpoint_listing(),
    )
