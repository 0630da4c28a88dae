"""
JSONPlaceholder Gateway - Application Package
===============================================

A stateless HTTP wrapper that forwards post and comment requests to a
single upstream REST service and relays the result.

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← catalog-driven forwarding
    ├─────────────────────────────────────┤
    │      Services (Upstream Client)     │  ← one httpx call per request
    ├─────────────────────────────────────┤
    │      Schemas (Documentation)        │  ← Pydantic, OpenAPI only
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"
