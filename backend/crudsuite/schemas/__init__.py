# Schemas package init
"""
crudsuite — Pydantic Schemas
==============================

What:  API contracts for every resource: one create-schema per resource that
       declares its required fields, plus the response shapes.
How:   FastAPI validates request bodies against the create-schema once,
       before the route handler runs; failures become 400 responses.

Schema Inventory:
    - product.py:  inventory Product, storefront Product
    - project.py:  Project with embedded Task
    - common.py:   message, error and health responses
"""
