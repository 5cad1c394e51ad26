"""
crudsuite — Product Schemas
=============================

What:  Create and response models for the two product flavours.
Who:   inventory app (name/price/image, deletable) and storefront app
       (title/description/price/imageUrl, immutable once created).

Required-field rules live here and nowhere else:
    - every string field must be present and non-empty after stripping
    - price must be present, finite and strictly positive

Both collections are named "products" but live in different databases.
"""

from pydantic import BaseModel, ConfigDict, Field


# ══════════════════════════════════════════════════════════════════════════
# Inventory app
# ══════════════════════════════════════════════════════════════════════════


class InventoryProductCreate(BaseModel):
    """Body of POST /api/products on the inventory app."""
    model_config = ConfigDict(str_strip_whitespace=True)

    name: str = Field(..., min_length=1, description="Product name")
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Unit price, strictly positive")
    image: str = Field(..., min_length=1, description="Image URL")


class InventoryProduct(InventoryProductCreate):
    """Stored inventory product as returned by the API."""
    id: str = Field(description="Document id (ObjectId hex)")


# ══════════════════════════════════════════════════════════════════════════
# Storefront app
# ══════════════════════════════════════════════════════════════════════════


class StorefrontProductCreate(BaseModel):
    """
    Body of POST /api/products on the storefront app.

    The JSON key is `imageUrl`, and the document is stored under that key too.
    """
    model_config = ConfigDict(str_strip_whitespace=True, populate_by_name=True)

    title: str = Field(..., min_length=1, description="Product title")
    description: str = Field(..., min_length=1, description="Product description")
    price: float = Field(..., gt=0, allow_inf_nan=False, description="Unit price, strictly positive")
    image_url: str = Field(..., alias="imageUrl", min_length=1, description="Image URL")


class StorefrontProduct(StorefrontProductCreate):
    """Stored storefront product as returned by the API (serialized by alias)."""
    id: str = Field(description="Document id (ObjectId hex)")
