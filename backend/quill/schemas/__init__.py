"""
Request and response schemas for API endpoints.
"""
from quill.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenClaims,
)
from quill.schemas.author import AuthorChanges, AuthorResponse
from quill.schemas.article import ArticleInput
from quill.schemas.graphql import GraphQLPayload

__all__ = [
    # Auth
    "ErrorResponse",
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "TokenClaims",
    # Author
    "AuthorChanges",
    "AuthorResponse",
    # Article
    "ArticleInput",
    # Query endpoint
    "GraphQLPayload",
]
