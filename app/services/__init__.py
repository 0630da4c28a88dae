# Services package init
"""
JSONPlaceholder Gateway - Services Layer
==========================================

What:  Outbound integrations used by the routes.

Service Inventory:
    - UpstreamClient: forwards one call to the upstream REST service and
      turns every failure into an UpstreamError
"""
