"""
crudsuite — Resource Store (Collection Access)
================================================

What:  Durable storage and retrieval of one root collection.
How:   Wraps an async MongoDB collection; converts driver failures into
       StoreError with a per-operation generic message.
Who:   Used by the product routes of the inventory and storefront apps,
       and extended by ProjectStore for embedded tasks.

Operations:
    list_all()        → every document, storage order, `_id` renamed to `id`
    create(payload)   → insert a validated schema instance, return the entity
    delete_by_id(id)  → remove; a missing or malformed id is a no-op

Identity handling:
    Documents keep MongoDB's ObjectId under `_id`. `serialize_document`
    converts every ObjectId (including those of embedded sub-documents) to
    its hex string under `id` on the way out.
"""

import logging
from typing import Any, Awaitable, Dict, List, Optional

from bson import ObjectId
from pydantic import BaseModel
from pymongo.asynchronous.collection import AsyncCollection
from pymongo.errors import PyMongoError

from crudsuite.exceptions import StoreError

logger = logging.getLogger(__name__)


def parse_object_id(value: str) -> Optional[ObjectId]:
    """Returns the ObjectId for a hex string, or None if it isn't one."""
    if not ObjectId.is_valid(value):
        return None
    return ObjectId(value)


def serialize_document(doc: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    """
    Converts a stored document into its API shape.

    `_id` becomes `id` (hex string); lists of sub-documents are converted
    the same way so embedded tasks come out with their own `id`.
    """
    if not doc:
        return doc
    out: Dict[str, Any] = {}
    for key, value in doc.items():
        if key == "_id":
            out["id"] = str(value) if isinstance(value, ObjectId) else value
        elif isinstance(value, list):
            out[key] = [
                serialize_document(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            out[key] = value
    return out


class ResourceStore:
    """
    Access layer for one root collection.

    Args:
        collection: the async collection holding the documents
        resource:   singular resource name used in log and error messages
        plural:     plural form used in "Failed to load <plural>"
    """

    def __init__(
        self,
        collection: AsyncCollection,
        resource: str,
        plural: Optional[str] = None,
    ):
        self.collection = collection
        self.resource = resource
        self.plural = plural or f"{resource}s"
    async def list_all(self) -> List[Dict[str, Any]]:
        """
        Returns every stored entity. No filtering, no sort: storage order.

        Raises:
            StoreError: the query failed (→ 500)
        """
        return await self._run(f"Failed to load {self.plural}", self._fetch_all())

    def to_document(self, payload: BaseModel) -> Dict[str, Any]:
        """Maps a create-schema instance to the document to insert."""
        return payload.model_dump(by_alias=True)

    async def create(self, payload: BaseModel) -> Dict[str, Any]:
        """
        Persists a validated create-schema instance.

        Required fields were checked by the schema before this call; the
        document is stored under the JSON keys (aliases, e.g. `imageUrl`).

        Returns:
            The stored entity including its generated `id`.

        Raises:
            StoreError: the insert failed (→ 500)
        """
        document = self.to_document(payload)
        result = await self._run(
            f"Failed to add {self.resource}", self.collection.insert_one(document)
        )

        document["_id"] = result.inserted_id
        logger.info("Created %s %s", self.resource, result.inserted_id)
        return serialize_document(document)

    async def delete_by_id(self, entity_id: str) -> None:
        """
        Removes the entity with the given id.

        Idempotent: a missing id, or one that is not a valid ObjectId,
        deletes nothing and still succeeds.

        Raises:
            StoreError: the delete command failed (→ 500)
        """
        oid = parse_object_id(entity_id)
        if oid is None:
            logger.debug("Ignoring delete of malformed %s id %r", self.resource, entity_id)
            return

        result = await self._run(
            f"Failed to delete {self.resource}", self.collection.delete_one({"_id": oid})
        )

        if result.deleted_count:
            logger.info("Deleted %s %s", self.resource, entity_id)
        else:
            logger.debug("Delete of unknown %s %s was a no-op", self.resource, entity_id)

    # ── Helpers ───────────────────────────────────────────────────────────

    async def _fetch_all(self) -> List[Dict[str, Any]]:
        return [serialize_document(doc) async for doc in self.collection.find({})]

    async def _run(self, failure: str, operation: Awaitable[Any]) -> Any:
        """
        Awaits a driver call, converting driver errors into StoreError.

        `failure` is the client-facing message; the driver error type is
        only logged and kept in the error context.
        """
        try:
            return await operation
        except PyMongoError as e:
            logger.error("%s: %s", failure, type(e).__name__)
            raise StoreError(
                message=failure,
                context={"collection": self.collection.name, "original_error": type(e).__name__},
            )
