"""
Database definitions and collection constants.
"""
from quill.database.databases import content_db

__all__ = ["content_db"]
