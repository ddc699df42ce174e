"""
Article request schemas.
"""
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ArticleInput(BaseModel):
    """Fields a client may supply when creating an article."""
    model_config = ConfigDict(extra="ignore")

    title: Optional[str] = Field(None, description="Article title")
    content: Optional[str] = Field(None, description="Article body")
