"""
Dependencies for dependency injection in routes.
"""
from typing import Annotated, Optional

from fastapi import Depends, Query, Request

from quill.container import Services
from quill.services.credential_service import CredentialService
from quill.services.gate import RequestContext


def get_services(request: Request) -> Services:
    """The container the lifespan hook stored on the application."""
    return request.app.state.services


def get_credential_service(
    services: Annotated[Services, Depends(get_services)],
) -> CredentialService:
    return services.credentials


def get_request_context(
    token: Annotated[Optional[str], Query(description="JWT access token")] = None,
) -> RequestContext:
    """
    Build the per-request context.

    Token is passed as query parameter: ?token=xxx
    It is only verified later, by the resolvers that need an identity.
    """
    return RequestContext(token=token or None)
