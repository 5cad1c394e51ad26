"""
crudsuite — MongoDB Client Management
=======================================

What:  Async MongoDB client lifecycle, database lookup and FastAPI dependency.
Why:   Centralizes all database connection logic in one place.
How:   One `AsyncMongoClient` per process is opened in the app lifespan and
       stored on `app.state`; routes receive the app's database through the
       `get_database` dependency.
Who:   Used by route handlers via FastAPI's dependency injection system.
When:  Client is created at startup; databases are looked up per-request.

Architecture Decision:
    We use pymongo's native asyncio API (`AsyncMongoClient`) so a slow
    query doesn't block other requests on the event loop. Each operation
    is a single document command; nothing spans a transaction.
"""

import logging

from fastapi import Request
from pymongo import AsyncMongoClient
from pymongo.asynchronous.database import AsyncDatabase

from crudsuite.config import settings

logger = logging.getLogger(__name__)


# ── Client Lifecycle ──────────────────────────────────────────────────────
def create_client(url: str | None = None) -> AsyncMongoClient:
    """
    What:  Builds the process-wide async client.
    How:   The client connects lazily; `ping_database` forces a round trip.
    """
    return AsyncMongoClient(
        url or settings.mongodb_url,
        maxPoolSize=settings.mongodb_max_pool_size,
    )


async def ping_database(db: AsyncDatabase) -> None:
    """
    What:  Sends the `ping` admin command through the given database.
    When:  At startup (fail fast) and from the /health route.

    Raises:
        pymongo.errors.PyMongoError if the server is unreachable.
    """
    await db.command("ping")


async def close_client(client: AsyncMongoClient) -> None:
    """
    What:  Closes all pooled connections.
    When:  Called during application shutdown (lifespan handler).
    """
    await client.close()


# ── Database Dependency ───────────────────────────────────────────────────
def get_database(request: Request) -> AsyncDatabase:
    """
    FastAPI dependency returning the database of the app serving the request.

    The lifespan handler stores it on `app.state.database`. Tests replace
    this dependency through `app.dependency_overrides`.

    Example usage in a route:
        @router.get("/products")
        async def list_products(db: AsyncDatabase = Depends(get_database)):
            ...
    """
    return request.app.state.database
