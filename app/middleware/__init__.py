# Middleware package init
"""
JSONPlaceholder Gateway - Middleware Package
==============================================

Middleware Chain:
    Request → [Request ID] → [Access Log] → [CORS] → Route Handler

The request ID is set first so the access log line can carry it.
"""
