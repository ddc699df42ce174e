"""
Author model for the authors collection.
"""
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Author(BaseModel):
    """
    Author document model for MongoDB quill_db.authors collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="UUID4 string assigned on registration")
    firstname: str = Field(..., description="First name")
    lastname: str = Field(..., description="Last name")
    username: str = Field(..., description="Unique username")
    hashed_password: str = Field(..., description="Bcrypt hashed password")
    type: Literal["author"] = Field(default="author", description="Document kind")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Account creation timestamp",
    )

    def to_document(self) -> dict:
        """Dump to the stored shape, keyed by `_id`."""
        return self.model_dump(by_alias=True)
