"""
API Routers module.
"""
from quill.routers import auth, health, query

__all__ = ["auth", "health", "query"]
