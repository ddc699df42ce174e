"""
Error taxonomy shared by services, resolvers and HTTP handlers.
"""
from typing import Any, Optional


class QuillError(Exception):
    """Base exception for all Quill errors."""

    status_code = 500
    code = "INTERNAL_ERROR"

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class ValidationError(QuillError):
    """Missing or malformed input, rejected before any side effect."""

    status_code = 400
    code = "VALIDATION_ERROR"


class AuthError(QuillError):
    """Bad credentials, or a missing, invalid or expired token."""

    status_code = 401
    code = "AUTH_ERROR"

    def __init__(self, message: str = "not authorized"):
        super().__init__(message)


class NotFoundError(QuillError):
    """Referenced document id is absent."""

    status_code = 404
    code = "NOT_FOUND"


class ConflictError(QuillError):
    """Uniqueness violation reported by the store."""

    status_code = 409
    code = "CONFLICT"


class StoreError(QuillError):
    """Underlying persistence failure. The cause is logged, never exposed."""

    code = "STORE_ERROR"

    def __init__(self, message: str = "store operation failed"):
        super().__init__(message)


class HashError(QuillError):
    """A stored value is not a hash produced by the configured scheme."""

    code = "HASH_ERROR"
