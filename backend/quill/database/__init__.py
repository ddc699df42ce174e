"""
Database module - MongoDB connections, collection definitions and store adapter.
"""
from quill.database.connections import create_mongo_client, get_database
from quill.database.databases import content_db
from quill.database.registry import create_indexes
from quill.database.store import DocumentStore

__all__ = [
    "create_mongo_client",
    "get_database",
    "content_db",
    "create_indexes",
    "DocumentStore",
]
