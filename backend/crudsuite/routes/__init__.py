# Routes package init
"""
crudsuite — API Routes Package
================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - pages.py:     GET /                       (the app's HTML page)
    - health.py:    GET /health                 (database ping)
    - products.py:  /api/products               (inventory and storefront)
    - projects.py:  /api/projects[/.../tasks]   (projects app)

Routes stay thin: bodies arrive validated against a create-schema, stores
do the work, and exceptions become status codes in main.py.
"""
