"""
crudsuite — Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped, fresh per test):
    ├── mongo_db: in-memory MongoDB database (mongomock-motor), starts empty
    ├── failing_collection: AsyncMock collection whose every call raises
    ├── make_client: builds an HTTPX AsyncClient for one app key
    ├── inventory_client / projects_client / storefront_client
    └── sample_product / sample_catalog_item: valid create bodies

No test needs a running MongoDB server: the `get_database` dependency is
overridden with the in-memory database, and the lifespan (which pings the
real server) is not run by ASGITransport.
"""

import os
from unittest.mock import AsyncMock, MagicMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from mongomock_motor import AsyncMongoMockClient
from pymongo.errors import ServerSelectionTimeoutError

# Override settings for testing BEFORE any app imports
os.environ["MONGODB_URL"] = "mongodb://127.0.0.1:1"
os.environ["LOG_LEVEL"] = "WARNING"  # Reduce noise during tests

from crudsuite.database import get_database  # noqa: E402
from crudsuite.main import create_app  # noqa: E402


@pytest.fixture
def mongo_db():
    """
    Provides an empty in-memory database.

    What:    A mongomock-motor database with the same async collection API
             the stores use (insert_one, find, update_one, ...).
    Why:     Lets HTTP tests observe real state: what a POST creates, a
             following GET returns.
    """
    client = AsyncMongoMockClient()
    return client["crudsuite_test"]


@pytest.fixture
def failing_collection():
    """
    Provides a collection double whose every operation fails like a lost
    connection to the server.

    Usage:
        store = ResourceStore(failing_collection, resource="product")
        with pytest.raises(StoreError):
            await store.create(payload)
    """
    error = ServerSelectionTimeoutError("connection refused")
    collection = MagicMock()
    collection.name = "products"
    collection.find = MagicMock(side_effect=error)
    for method in ("insert_one", "delete_one", "find_one", "update_one", "find_one_and_update"):
        setattr(collection, method, AsyncMock(side_effect=error))
    return collection


@pytest.fixture
def make_client(mongo_db):
    """
    Factory fixture returning an AsyncClient bound to a fresh app.

    Usage:
        async with make_client("inventory") as client:
            response = await client.get("/api/products")

    Pass `database=` to use a different database double than `mongo_db`.
    """

    def _make(app_key: str, database=None) -> AsyncClient:
        app = create_app(app_key)
        db = mongo_db if database is None else database
        app.dependency_overrides[get_database] = lambda: db
        transport = ASGITransport(app=app)
        return AsyncClient(transport=transport, base_url="http://test")

    return _make


@pytest_asyncio.fixture
async def inventory_client(make_client):
    async with make_client("inventory") as client:
        yield client


@pytest_asyncio.fixture
async def projects_client(make_client):
    async with make_client("projects") as client:
        yield client


@pytest_asyncio.fixture
async def storefront_client(make_client):
    async with make_client("storefront") as client:
        yield client


@pytest.fixture
def sample_product():
    """Valid body for POST /api/products on the inventory app."""
    return {"name": "Pen", "price": 1.5, "image": "http://x/y.png"}


@pytest.fixture
def sample_catalog_item():
    """Valid body for POST /api/products on the storefront app."""
    return {
        "title": "Running Shirt",
        "description": "Breathable, quick-dry fabric.",
        "price": 24.99,
        "imageUrl": "http://x/shirt.png",
    }
