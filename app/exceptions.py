"""
JSONPlaceholder Gateway - Exception Hierarchy
===============================================

What:  Application-specific exceptions for the forwarding gateway.
Why:   Every upstream failure, whatever its cause, reaches the routes as one
       explicit type carrying an optional status code and a message, so each
       route performs the same status/body mapping.
Who:   Raised by the upstream client; caught by the forwarding routes.

Exception Hierarchy:
    GatewayError (base)
    └── UpstreamError   → upstream status, or 500 when none was received
"""

from typing import Any, Dict, Optional


class GatewayError(Exception):
    """
    Base exception for all gateway errors.

    Attributes:
        message:  Human-readable error description (returned to the client)
        context:  Additional debug info (logged, never returned)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class UpstreamError(GatewayError):
    """
    Raised when a forwarded call to the upstream service fails.

    What:    Covers non-2xx upstream responses, transport failures (DNS,
             connect, timeout) and success bodies that are not JSON.
    HTTP:    The upstream status when a response arrived, else 500.

    Example response body built from it by a route:
        {
            "error": "Failed to fetch post",
            "message": "Request failed with status code 404"
        }
    """

    DEFAULT_STATUS = 500

    def __init__(
        self,
        message: str = "Upstream request failed",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if status_code is not None:
            ctx["status_code"] = status_code
        super().__init__(message=message, context=ctx)
        self.status_code = status_code

    @property
    def outbound_status(self) -> int:
        """Status code the gateway answers with for this failure."""
        if self.status_code is None:
            return self.DEFAULT_STATUS
        return self.status_code
