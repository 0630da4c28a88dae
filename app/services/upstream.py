"""
JSONPlaceholder Gateway - Upstream HTTP Client
================================================

What:  Issues the single outbound HTTP call behind every forwarding route.
Why:   Keeps transport details (base URL, JSON decoding, failure mapping)
       out of the route handlers, which only relay results.
How:   One shared httpx.AsyncClient; every failure is converted into an
       UpstreamError before it leaves this module.
Who:   Instantiated once at import time; called by the forwarding routes
       and the health check.

Failure mapping:
    non-2xx response        → UpstreamError(status_code=<upstream status>)
    transport error         → UpstreamError(status_code=None)
    unbuildable URL         → UpstreamError(status_code=None)
    2xx with non-JSON body  → UpstreamError(status_code=None)

No timeout is configured here, so the httpx default applies. Nothing is
retried.
"""

import json
import logging
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import httpx

from app.config import settings
from app.exceptions import UpstreamError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamResult:
    """A successful upstream response: its status and decoded JSON body."""

    status_code: int
    data: Any


class UpstreamClient:
    """
    Thin async wrapper around httpx for the configured upstream service.

    The underlying AsyncClient is created on first use so that importing
    this module never opens sockets, and closed by aclose() at shutdown.
    """

    JSON_HEADERS = {"Content-Type": "application/json"}

    def __init__(self, base_url: Optional[str] = None):
        self.base_url = base_url or settings.upstream_base_url
        self._client: Optional[httpx.AsyncClient] = None

    @property
    def client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                base_url=self.base_url,
                follow_redirects=True,
            )
        return self._client

    async def aclose(self) -> None:
        """Close pooled connections. Safe to call more than once."""
        if self._client is not None:
            await self._client.aclose()
            self._client = None

    async def request(
        self,
        method: str,
        path: str,
        params: Optional[Mapping[str, str]] = None,
        content: Optional[bytes] = None,
    ) -> UpstreamResult:
        """
        Forward one call to the upstream and decode its JSON response.

        Args:
            method:  HTTP method, passed through unchanged.
            path:    Upstream path with parameters already substituted.
            params:  Query parameters to append (None or empty for none).
            content: Raw JSON request body, sent as-is.

        Returns:
            UpstreamResult with the upstream status and decoded body.
            An empty body decodes to None.

        Raises:
            UpstreamError: For every failure, see module docstring.
        """
        headers = self.JSON_HEADERS if content is not None else None

        try:
            response = await self.client.request(
                method,
                path,
                params=params or None,
                content=content,
                headers=headers,
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            message = str(e) or type(e).__name__
            logger.warning("%s %s failed: %s", method, path, message)
            raise UpstreamError(
                message=message,
                context={"method": method, "path": path, "error_type": type(e).__name__},
            ) from e

        if not response.is_success:
            logger.warning(
                "%s %s returned %d from upstream",
                method,
                path,
                response.status_code,
            )
            raise UpstreamError(
                message=f"Request failed with status code {response.status_code}",
                status_code=response.status_code,
                context={"method": method, "path": path},
            )

        if not response.content:
            return UpstreamResult(status_code=response.status_code, data=None)

        try:
            data = response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            logger.warning("%s %s returned a non-JSON body: %s", method, path, e)
            raise UpstreamError(
                message=f"Upstream response is not valid JSON: {e}",
                context={"method": method, "path": path},
            ) from e

        return UpstreamResult(status_code=response.status_code, data=data)

    async def health_check(self) -> bool:
        """
        Check that the upstream answers at all.

        Returns True for any response below 500. Never raises: health checks
        report status, they don't fail.
        """
        try:
            response = await self.client.get("/")
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Upstream health check failed: %s", str(e) or type(e).__name__)
            return False
        return response.status_code < 500


# Module-level singleton used by the routes
upstream_client = UpstreamClient()
