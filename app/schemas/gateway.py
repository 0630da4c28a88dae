"""
JSONPlaceholder Gateway - Pydantic Schemas
============================================

What:  Pydantic models describing the gateway's own response shapes.
Why:   FastAPI renders them into the OpenAPI document served at /api-docs.
How:   Upstream payloads are relayed untouched and never validated against
       these models. PostPayload only documents the example request body.
"""

from typing import Dict

from pydantic import BaseModel, Field


class PostPayload(BaseModel):
    """Example post body. Forwarded verbatim; the upstream decides what is valid."""
    title: str = Field(description="Post title")
    body: str = Field(description="Post content")
    userId: int = Field(description="Author's user ID")


class ErrorResponse(BaseModel):
    """
    What:  Body returned when the upstream call fails.
    Who:   Every forwarding route, with the upstream status or 500.
    """
    error: str = Field(description="Short route-specific phrase, e.g. 'Failed to fetch posts'")
    message: str = Field(description="Description of the underlying failure")


class RootResponse(BaseModel):
    """What: Static index returned by GET /."""
    message: str = Field(description="Service name")
    documentation: str = Field(description="Path of the interactive API docs")
    endpoints: Dict[str, str] = Field(description="Available routes and what they do")


class HealthResponse(BaseModel):
    """
    What:  Health check response.
    Who:   Returned by GET /health for monitoring and container health checks.

    Status values:
        - healthy:  upstream answered
        - degraded: upstream unreachable; the gateway itself is up
    """
    status: str = Field(description="Overall status: healthy or degraded")
    version: str = Field(description="Gateway version")
    upstream: str = Field(description="Upstream status: reachable or unreachable")
    uptime_seconds: float = Field(description="Seconds since the process started")
