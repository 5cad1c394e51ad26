"""
crudsuite — FastAPI Application Factory
=========================================

What:  Creates and configures the FastAPI application for one of the apps.
How:   Factory pattern: create_app(app_key) returns a configured FastAPI
       instance; crudsuite.apps.<app_key> holds the module-level instance
       uvicorn serves.

Application Architecture:
    ┌─────────────────────────────────────────────────────┐
    │                 FastAPI App (per key)               │
    │                                                     │
    │  Middleware:   Request ID → Logging → CORS          │
    │                                                     │
    │  Routes (all apps):   GET /       GET /health       │
    │  inventory:    /api/products (list, create, delete) │
    │  projects:     /api/projects (+ /tasks)             │
    │  storefront:   /api/products (list, create)         │
    │                                                     │
    │  Exception Handlers:                                │
    │  Validation→400 │ NotFound→404 │ Store→500 │ *→500  │
    └─────────────────────────────────────────────────────┘

Lifecycle:
    Startup:
    1. Initialize logging
    2. Open the MongoDB client, select the app's database
    3. Ping once; an unreachable server aborts startup (no retry)

    Shutdown:
    1. Close the MongoDB client
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Dict, List

from fastapi import APIRouter, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from crudsuite import APP_KEYS, __version__
from crudsuite.config import settings
from crudsuite.database import close_client, create_client, ping_database
from crudsuite.exceptions import (
    NotFoundError,
    StoreError,
    ValidationError,
)
from crudsuite.middleware.logging import RequestLoggingMiddleware
from crudsuite.middleware.request_id import RequestIDMiddleware, request_id_var
from crudsuite.routes import health, pages, products, projects

logger = logging.getLogger(__name__)

APP_TITLES = {
    "inventory": "Inventory Catalog",
    "projects": "Project Management Tool",
    "storefront": "Simple Storefront",
}

APP_ROUTERS: Dict[str, List[APIRouter]] = {
    "inventory": [products.inventory_router],
    "projects": [projects.router],
    "storefront": [products.storefront_router],
}


# ══════════════════════════════════════════════════════════════════════════
# Logging Configuration
# ══════════════════════════════════════════════════════════════════════════

def setup_logging() -> None:
    """
    Configure logging for the entire application.

    Format: %(asctime)s [%(levelname)s] %(name)s: %(message)s on stdout.
    Called once during app startup, before anything else logs.
    """
    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%dT%H:%M:%S",
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )

    # Reduce noise from third-party libraries
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("pymongo").setLevel(logging.WARNING)


# ══════════════════════════════════════════════════════════════════════════
# Application Lifespan (Startup & Shutdown)
# ══════════════════════════════════════════════════════════════════════════

@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    Open the MongoDB client on startup and close it on shutdown.

    The store is assumed to be running already. The single ping below is
    the only connectivity check: if it fails, the exception propagates and
    the server does not start.
    """
    setup_logging()
    app_key = app.state.app_key
    database_name = settings.database_for(app_key)
    logger.info("%s starting up (database '%s')", APP_TITLES[app_key], database_name)

    client = create_client()
    app.state.database = client[database_name]
    try:
        await ping_database(app.state.database)
    except Exception:
        logger.error("MongoDB at %s is not reachable; aborting startup", settings.mongodb_url)
        await close_client(client)
        raise

    logger.info("Server ready at http://%s:%d", settings.backend_host, settings.backend_port)

    yield

    logger.info("%s shutting down...", APP_TITLES[app_key])
    await close_client(client)
    logger.info("Shutdown complete.")


# ══════════════════════════════════════════════════════════════════════════
# Exception Handlers
# ══════════════════════════════════════════════════════════════════════════

def _error_response(status_code: int, error: str, message: str, details=None) -> JSONResponse:
    content = {"error": error, "message": message, "request_id": request_id_var.get("")}
    if details:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


def _from_request_validation(exc: RequestValidationError) -> ValidationError:
    """Collapses FastAPI's per-field error list into one ValidationError."""
    fields = []
    for err in exc.errors():
        if err.get("type") == "json_invalid":
            return ValidationError("Invalid JSON body")
        loc = [str(part) for part in err.get("loc", ()) if part != "body"]
        name = ".".join(loc) or "body"
        if name not in fields:
            fields.append(name)
    return ValidationError("Missing or invalid fields: " + ", ".join(fields), fields=fields)


def register_exception_handlers(app: FastAPI) -> None:
    """
    Map exception types to HTTP status codes and JSON error bodies.

    Handler hierarchy:
        RequestValidationError → 400, reported as one ValidationError
        NotFoundError          → 404
        StoreError             → 500, generic per-operation message
        Exception (fallback)   → 500, traceback logged server-side only
    """

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(request: Request, exc: RequestValidationError):
        error = _from_request_validation(exc)
        logger.warning("[%s] Validation error: %s", request_id_var.get(""), error.message)
        return _error_response(400, "validation_error", error.message, error.context)

    @app.exception_handler(NotFoundError)
    async def handle_not_found(request: Request, exc: NotFoundError):
        return _error_response(404, "not_found", exc.message)

    @app.exception_handler(StoreError)
    async def handle_store_error(request: Request, exc: StoreError):
        logger.error(
            "[%s] Store error: %s | Context: %s", request_id_var.get(""), exc.message, exc.context
        )
        return _error_response(500, "server_error", exc.message)

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception):
        logger.error(
            "[%s] Unexpected error: %s", request_id_var.get(""), str(exc), exc_info=True
        )
        return _error_response(
            500, "internal_server_error", "An unexpected error occurred. Please try again."
        )


# ══════════════════════════════════════════════════════════════════════════
# Application Factory
# ══════════════════════════════════════════════════════════════════════════

def create_app(app_key: str) -> FastAPI:
    """
    Create and configure the FastAPI application for `app_key`.

    Returns a fully configured FastAPI instance. The database handle is
    attached by the lifespan; tests override `get_database` instead.

    Raises:
        ValueError: unknown app key
    """
    if app_key not in APP_KEYS:
        raise ValueError(f"Unknown app '{app_key}'. Must be one of: {', '.join(APP_KEYS)}")

    app = FastAPI(
        title=APP_TITLES[app_key],
        version=__version__,
        lifespan=lifespan,
    )
    app.state.app_key = app_key

    # Middleware executes in reverse order of addition:
    # RequestID → Logging → CORS → route
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

    app.include_router(pages.router)
    app.include_router(health.router)
    for router in APP_ROUTERS[app_key]:
        app.include_router(router)

    return app
