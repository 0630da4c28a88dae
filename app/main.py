"""
JSONPlaceholder Gateway - FastAPI Application Factory
=======================================================

What:  Creates and configures the FastAPI application instance.
Why:   Centralizes middleware registration, route mounting, documentation
       and lifecycle management in one place.
How:   Factory pattern: create_app() returns a configured FastAPI instance.
Who:   Called by uvicorn (uvicorn app.main:app) or by run().

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                   FastAPI App                       │
    │                                                     │
    │  Middleware:  Request ID → Access Log → CORS        │
    │                                                     │
    │  Routes:                                            │
    │    GET /            route listing (no upstream)     │
    │    GET /health      gateway + upstream status       │
    │    8 forwarding routes under /posts and /comments   │
    │                                                     │
    │  Docs:  Swagger UI at /api-docs                     │
    └─────────────────────────────────────────────────────┘
                              │ httpx
                              ▼
                     upstream REST service

Lifecycle:
    Startup:  configure logging, log the listening and docs URLs
    Shutdown: close the upstream connection pool
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app import __version__
from app.config import settings
from app.middleware.logging import RequestLoggingMiddleware
from app.middleware.request_id import REQUEST_ID_HEADER, RequestIDMiddleware, request_id_var
from app.routes import forwarding, health, root
from app.routes.root import DOCS_PATH, SERVICE_NAME
from app.services.upstream import upstream_client

logger = logging.getLogger(__name__)


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s
    Output: stdout (container runtimes capture it)
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Our own access log replaces uvicorn's; httpx logs every request at INFO
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)
    logging.getLogger("httpx").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Code before yield runs on startup, code after yield on shutdown."""
    setup_logging()
    logger.info("%s %s starting up", SERVICE_NAME, __version__)
    logger.info("Forwarding to %s", settings.upstream_base_url)
    logger.info("Server is running on %s", settings.public_url)
    logger.info("Swagger documentation available at %s%s", settings.public_url, DOCS_PATH)

    yield

    logger.info("Shutting down...")
    await upstream_client.aclose()
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def register_exception_handlers(app: FastAPI) -> None:
    """
    Register the catch-all handler for errors no route recovered from.

    Forwarding routes handle UpstreamError themselves, so anything reaching
    this handler is a bug. The stack trace is logged, never returned.
    """

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        # request.state lives in the ASGI scope, shared with the middleware
        rid = getattr(request.state, "request_id", "") or request_id_var.get("")
        logger.error("[%s] Unexpected error: %s", rid, str(exc), exc_info=True)
        return JSONResponse(
            status_code=500,
            content={
                "error": "internal_server_error",
                "message": "An unexpected error occurred.",
                "request_id": rid,
            },
            headers={REQUEST_ID_HEADER: rid} if rid else None,
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app() -> FastAPI:
    """
    Create and configure the FastAPI application.

    Returns: Fully configured FastAPI instance ready to receive requests.
    """
    app = FastAPI(
        title=SERVICE_NAME,
        description="A wrapper API for JSONPlaceholder service",
        version=__version__,
        servers=[{"url": settings.public_url, "description": "Development server"}],
        docs_url=DOCS_PATH,
        openapi_url=f"{DOCS_PATH}/openapi.json",
        redoc_url=None,
        lifespan=lifespan,
    )

    # ── Register Middleware ───────────────────────────────────────────────
    # Last added runs first: RequestID → Logging → CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"],
    )
    app.add_middleware(RequestLoggingMiddleware)
    app.add_middleware(RequestIDMiddleware)

    register_exception_handlers(app)

    # ── Register Routes ───────────────────────────────────────────────────
    app.include_router(root.router)
    app.include_router(health.router)
    app.include_router(forwarding.router)

    return app


app = create_app()


def run() -> None:
    """Serve the app with uvicorn on the configured host and port."""
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )
