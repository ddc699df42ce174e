"""
Authentication router for registration and login.
"""
from fastapi import APIRouter, Depends, status

from quill.dependencies.services import get_credential_service
from quill.schemas.auth import (
    ErrorResponse,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from quill.schemas.author import AuthorResponse
from quill.services.credential_service import CredentialService

router = APIRouter(tags=["Authentication"])


@router.post(
    "/register",
    response_model=AuthorResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new author",
    responses={
        400: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
    },
)
async def register(
    body: RegisterRequest,
    credential_service: CredentialService = Depends(get_credential_service),
):
    """
    Register a new author account.

    - **firstname**, **lastname**: required
    - **username**: required, must be unique
    - **password**: minimum 4 characters by default

    The response never contains the password hash.
    """
    author = await credential_service.register(body)
    return AuthorResponse(
        id=author.id,
        firstname=author.firstname,
        lastname=author.lastname,
        username=author.username,
        type=author.type,
    )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
    responses={
        400: {"model": ErrorResponse},
        401: {"model": ErrorResponse},
    },
)
async def login(
    body: LoginRequest,
    credential_service: CredentialService = Depends(get_credential_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    The token should be passed as a query parameter `token` to `/graphql`.
    """
    token = await credential_service.login(body)
    return LoginResponse(token=token)
