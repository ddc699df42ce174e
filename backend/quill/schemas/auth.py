"""
Authentication request/response schemas.
"""
from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegisterRequest(BaseModel):
    """
    Registration request body.

    Fields are optional at the schema level so that missing values reach
    CredentialService and are reported as a ValidationError. Unknown keys,
    including a client-supplied `id`, are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    firstname: Optional[str] = Field(None, description="Author first name")
    lastname: Optional[str] = Field(None, description="Author last name")
    username: Optional[str] = Field(None, description="Unique username")
    password: Optional[str] = Field(None, description="Plain text password")


class LoginRequest(BaseModel):
    """Login request body."""
    model_config = ConfigDict(extra="ignore")

    username: Optional[str] = Field(None, description="Username")
    password: Optional[str] = Field(None, description="Plain text password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    token: str = Field(..., description="JWT access token")


class ErrorResponse(BaseModel):
    """Body of every failed REST call."""
    message: str = Field(..., description="Human readable error message")


class TokenClaims(BaseModel):
    """Claims of a verified JWT, typed straight from the token payload."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    subject: str = Field(..., alias="sub", min_length=1, description="Author ID")
    issuer: str = Field(..., alias="iss", description="Token issuer")
    expires_at: datetime = Field(..., alias="exp", description="Expiration time")
    issued_at: Optional[datetime] = Field(None, alias="iat", description="Issued at time")
