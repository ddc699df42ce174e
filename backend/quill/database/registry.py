"""
Index management.
Ensures collection indexes exist on startup.
"""
import logging

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

from quill.database.databases import content_db

logger = logging.getLogger(__name__)


async def create_indexes(db: AsyncIOMotorDatabase) -> None:
    """
    Create indexes for all content_db collections.

    The unique index on authors.username is what turns duplicate
    registrations into ConflictError.
    """
    for collection_name, indexes in content_db.Collections.INDEXES.items():
        collection = db[collection_name]
        for index_def in indexes:
            keys = index_def["keys"]
            kwargs = {k: v for k, v in index_def.items() if k != "keys"}
            try:
                await collection.create_index(keys, **kwargs)
            except PyMongoError as e:
                # Index might already exist with different options
                logger.warning(
                    "Could not create index %s on %s: %s", keys, collection_name, e
                )
