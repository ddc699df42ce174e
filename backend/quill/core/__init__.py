"""
Core module - Security primitives and the error taxonomy.
"""
from quill.core.errors import (
    AuthError,
    ConflictError,
    HashError,
    NotFoundError,
    QuillError,
    StoreError,
    ValidationError,
)
from quill.core.security import PasswordHasher, TokenIssuer, TokenVerifier

__all__ = [
    "AuthError",
    "ConflictError",
    "HashError",
    "NotFoundError",
    "QuillError",
    "StoreError",
    "ValidationError",
    "PasswordHasher",
    "TokenIssuer",
    "TokenVerifier",
]
