"""
crudsuite — Application Package Initializer
=============================================

What: Three small document-store web apps sharing one package:
      an inventory catalog, a project/task tracker and a storefront.
How:  Each app is a FastAPI instance built by `crudsuite.main.create_app`
      from the same layers, pointed at its own MongoDB database.

Architecture Note:

    ┌─────────────────────────────────────┐
    │     Pages (inline HTML/CSS/JS)      │  ← GET /, re-renders from JSON
    ├─────────────────────────────────────┤
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Stores)           │  ← collection access, sub-documents
    ├─────────────────────────────────────┤
    │        Schemas (Pydantic)           │  ← declarative required fields
    ├─────────────────────────────────────┤
    │      Database (Async MongoDB)       │  ← one client per process
    └─────────────────────────────────────┘
"""

__version__ = "1.0.0"

# App keys understood by create_app(), the CLI and Settings.database_for()
APP_KEYS = ("inventory", "projects", "storefront")
