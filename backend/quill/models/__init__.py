"""
Pydantic models for database documents.
"""
from quill.models.author import Author
from quill.models.article import Article

__all__ = [
    "Author",
    "Article",
]
