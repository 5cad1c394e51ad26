"""
crudsuite — Product Route Handlers
====================================

What:  /api/products for the inventory app and the storefront app.
How:   Each handler receives a body already validated against the
       resource's create-schema, delegates to ResourceStore and returns
       the result. Errors propagate to the global handlers in main.py.

Route Inventory:
    inventory_router
        GET    /api/products        list every product
        POST   /api/products        create {name, price, image}
        DELETE /api/products/{id}   delete (idempotent)
    storefront_router
        GET    /api/products        list every product
        POST   /api/products        create {title, description, price, imageUrl}
        (no delete: storefront products are immutable once created)
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, status
from pymongo.asynchronous.database import AsyncDatabase

from crudsuite.database import get_database
from crudsuite.schemas.common import ErrorResponse, MessageResponse
from crudsuite.schemas.product import (
    InventoryProduct,
    InventoryProductCreate,
    StorefrontProduct,
    StorefrontProductCreate,
)
from crudsuite.services.resource_store import ResourceStore

logger = logging.getLogger(__name__)

PRODUCTS_COLLECTION = "products"

ERROR_RESPONSES = {
    400: {"description": "Missing or invalid field", "model": ErrorResponse},
    500: {"description": "Store error", "model": ErrorResponse},
}


def get_product_store(db: AsyncDatabase = Depends(get_database)) -> ResourceStore:
    """Store over the `products` collection of the serving app's database."""
    return ResourceStore(db[PRODUCTS_COLLECTION], resource="product")


# ══════════════════════════════════════════════════════════════════════════
# Inventory
# ══════════════════════════════════════════════════════════════════════════

inventory_router = APIRouter(prefix="/api", tags=["Products"])


@inventory_router.get(
    "/products",
    response_model=List[InventoryProduct],
    responses={500: ERROR_RESPONSES[500]},
    summary="List all products",
)
async def list_inventory_products(
    store: ResourceStore = Depends(get_product_store),
) -> List[dict]:
    return await store.list_all()


@inventory_router.post(
    "/products",
    response_model=InventoryProduct,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Add a product",
)
async def create_inventory_product(
    payload: InventoryProductCreate,
    store: ResourceStore = Depends(get_product_store),
) -> dict:
    return await store.create(payload)


@inventory_router.delete(
    "/products/{product_id}",
    response_model=MessageResponse,
    responses={500: ERROR_RESPONSES[500]},
    summary="Delete a product",
    description="Deleting an id that does not exist still succeeds.",
)
async def delete_inventory_product(
    product_id: str,
    store: ResourceStore = Depends(get_product_store),
) -> MessageResponse:
    await store.delete_by_id(product_id)
    return MessageResponse(message="Deleted")


# ══════════════════════════════════════════════════════════════════════════
# Storefront
# ══════════════════════════════════════════════════════════════════════════

storefront_router = APIRouter(prefix="/api", tags=["Catalog"])


@storefront_router.get(
    "/products",
    response_model=List[StorefrontProduct],
    responses={500: ERROR_RESPONSES[500]},
    summary="List the catalog",
)
async def list_storefront_products(
    store: ResourceStore = Depends(get_product_store),
) -> List[dict]:
    return await store.list_all()


@storefront_router.post(
    "/products",
    response_model=StorefrontProduct,
    status_code=status.HTTP_201_CREATED,
    responses=ERROR_RESPONSES,
    summary="Add a catalog product (admin)",
)
async def create_storefront_product(
    payload: StorefrontProductCreate,
    store: ResourceStore = Depends(get_product_store),
) -> dict:
    return await store.create(payload)
