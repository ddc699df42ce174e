"""
Author request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class AuthorResponse(BaseModel):
    """Author information response (excludes the password hash)."""
    id: str = Field(..., description="Author ID")
    firstname: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    username: str = Field(..., description="Username")
    type: str = Field(default="author", description="Document kind")


class AuthorChanges(BaseModel):
    """Partial update of an author; empty or missing fields are left alone."""
    model_config = ConfigDict(extra="ignore")

    id: str = Field(..., description="Author to update")
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
