# Routes package init
"""
JSONPlaceholder Gateway - API Routes Package
==============================================

Route Inventory:
    - catalog.py:     declaration of the eight forwarding routes
    - forwarding.py:  one endpoint per catalog entry
    - root.py:        GET /        (route listing, no upstream call)
    - health.py:      GET /health  (service and upstream status)

Routes stay thin: they extract inputs from the request, call the upstream
client, and format the response.
"""
