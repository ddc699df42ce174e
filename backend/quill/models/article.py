"""
Article model for the articles collection.
"""
from datetime import datetime, timezone
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field


class Article(BaseModel):
    """
    Article document model for MongoDB quill_db.articles collection.
    """
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(..., alias="_id", description="UUID4 string")
    title: str = Field(..., description="Article title")
    content: str = Field(..., description="Article body")
    author_id: str = Field(..., description="Author ID taken from a verified token")
    type: Literal["article"] = Field(default="article", description="Document kind")
    created_at: datetime = Field(
        default_factory=lambda: datetime.now(timezone.utc),
        description="Creation timestamp",
    )

    def to_document(self) -> dict:
        return self.model_dump(by_alias=True)
