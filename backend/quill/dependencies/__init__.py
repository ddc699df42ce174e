"""
Dependencies for dependency injection in routes.
"""
from quill.dependencies.services import (
    get_credential_service,
    get_request_context,
    get_services,
)

__all__ = [
    "get_credential_service",
    "get_request_context",
    "get_services",
]
