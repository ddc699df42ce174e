"""
Database connection management for MongoDB.
"""
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

from quill.config import Settings


def create_mongo_client(settings: Settings) -> AsyncIOMotorClient:
    """Create a MongoDB client. Motor connects lazily on first operation."""
    return AsyncIOMotorClient(settings.mongo_uri, uuidRepresentation="standard")


def get_database(client: AsyncIOMotorClient, settings: Settings) -> AsyncIOMotorDatabase:
    """Get the application database from a client."""
    return client[settings.mongo_db_name]
