"""
Content database configuration.
Stores authors (credentials) and their articles.
"""


class Collections:
    """Collection names in quill_db."""
    AUTHORS = "authors"
    ARTICLES = "articles"

    # Index definitions for each collection
    INDEXES = {
        "authors": [
            {"keys": [("username", 1)], "unique": True},
        ],
        "articles": [
            {"keys": [("author_id", 1)]},
            {"keys": [("created_at", -1)]},
        ],
    }
