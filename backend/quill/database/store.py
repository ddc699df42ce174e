"""
Document store adapter over a single MongoDB collection.

Translates driver errors into the Quill error taxonomy so services never
import pymongo themselves.
"""
import logging
from typing import Any, Optional

from motor.motor_asyncio import AsyncIOMotorCollection
from pymongo import ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from quill.core.errors import ConflictError, NotFoundError, StoreError

logger = logging.getLogger(__name__)


class DocumentStore:
    """CRUD over one collection whose documents share a `type` tag."""

    def __init__(self, collection: AsyncIOMotorCollection, kind: str):
        self.collection = collection
        self.kind = kind

    async def insert(self, document: dict[str, Any]) -> dict[str, Any]:
        """Insert a document that already carries its `_id`."""
        try:
            await self.collection.insert_one(document)
        except DuplicateKeyError as e:
            raise ConflictError(f"{self.kind} conflicts with an existing document") from e
        except PyMongoError as e:
            logger.error("Insert into %s failed: %s", self.collection.name, e)
            raise StoreError() from e
        return document

    async def get(self, doc_id: str) -> dict[str, Any]:
        """Fetch one document by id."""
        try:
            document = await self.collection.find_one({"_id": doc_id, "type": self.kind})
        except PyMongoError as e:
            logger.error("Lookup in %s failed: %s", self.collection.name, e)
            raise StoreError() from e
        if document is None:
            raise NotFoundError(f"{self.kind} {doc_id} not found")
        return document

    async def find(
        self, filter: dict[str, Any], limit: int = 0
    ) -> list[dict[str, Any]]:
        """Return documents of this kind matching `filter` (0 means no limit)."""
        query = {**filter, "type": self.kind}
        try:
            cursor = self.collection.find(query, limit=limit)
            return await cursor.to_list(length=None)
        except PyMongoError as e:
            logger.error("Query on %s failed: %s", self.collection.name, e)
            raise StoreError() from e

    async def list_all(self) -> list[dict[str, Any]]:
        return await self.find({})

    async def update_fields(
        self, doc_id: str, fields: dict[str, Any]
    ) -> dict[str, Any]:
        """Set the given top-level fields and return the updated document."""
        if not fields:
            return await self.get(doc_id)
        try:
            document: Optional[dict] = await self.collection.find_one_and_update(
                {"_id": doc_id, "type": self.kind},
                {"$set": fields},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise ConflictError(f"{self.kind} conflicts with an existing document") from e
        except PyMongoError as e:
            logger.error("Update in %s failed: %s", self.collection.name, e)
            raise StoreError() from e
        if document is None:
            raise NotFoundError(f"{self.kind} {doc_id} not found")
        return document

    async def remove(self, doc_id: str) -> None:
        try:
            result = await self.collection.delete_one({"_id": doc_id, "type": self.kind})
        except PyMongoError as e:
            logger.error("Delete from %s failed: %s", self.collection.name, e)
            raise StoreError() from e
        if result.deleted_count == 0:
            raise NotFoundError(f"{self.kind} {doc_id} not found")
