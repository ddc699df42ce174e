"""
Query endpoint request schema.
"""
from typing import Any, Optional

from pydantic import BaseModel, Field


class GraphQLPayload(BaseModel):
    """Body of a POST /graphql request."""
    query: str = Field(..., description="GraphQL document")
    variables: Optional[dict[str, Any]] = Field(None, description="Variable values")
    operation_name: Optional[str] = Field(
        None,
        alias="operationName",
        description="Operation to run when the document holds several",
    )
