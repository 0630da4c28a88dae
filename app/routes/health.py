"""
JSONPlaceholder Gateway - Health Check Route
==============================================

What:  Health check endpoint for monitoring and container health checks.
Why:   Orchestrators need to know the process is serving, and operators want
       to see whether the upstream is reachable.
How:   Checks the upstream with a lightweight GET and reports the result.

Status levels:
    - healthy:   upstream reachable (HTTP 200)
    - degraded:  upstream unreachable (HTTP 200; the gateway itself is up
                 and will answer forwarding routes with error bodies)
"""

import logging
import time

from fastapi import APIRouter

from app import __version__
from app.schemas.gateway import HealthResponse
from app.services.upstream import upstream_client

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Health"])

# Track when the service started for uptime reporting
_start_time = time.time()


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Service health check",
    description=(
        "Returns the health status of the gateway and whether the upstream "
        "service is reachable."
    ),
)
async def health_check() -> HealthResponse:
    reachable = await upstream_client.health_check()
    if not reachable:
        logger.warning("Health check: upstream %s unreachable", upstream_client.base_url)

    return HealthResponse(
        status="healthy" if reachable else "degraded",
        version=__version__,
        upstream="reachable" if reachable else "unreachable",
        uptime_seconds=round(time.time() - _start_time, 2),
    )
