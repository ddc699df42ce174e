"""
Query/mutation router: the single GraphQL endpoint.
"""
import logging
from typing import Any

from fastapi import APIRouter, Depends
from graphql import GraphQLError, graphql

from quill.container import Services
from quill.core.errors import QuillError
from quill.dependencies.services import get_request_context, get_services
from quill.schemas.graphql import GraphQLPayload
from quill.services.gate import RequestContext

logger = logging.getLogger(__name__)

router = APIRouter(tags=["GraphQL"])


def format_error(error: GraphQLError) -> dict[str, Any]:
    """Render a GraphQL error with a stable `extensions.code`."""
    formatted = error.formatted
    original = error.original_error

    if original is None:
        # Syntax or validation error in the document itself
        code = "GRAPHQL_VALIDATION_FAILED"
    elif isinstance(original, QuillError):
        code = original.code
        formatted["message"] = original.message
    else:
        logger.error(
            "Unhandled error in resolver at %s",
            error.path,
            exc_info=(type(original), original, original.__traceback__),
        )
        code = "INTERNAL_ERROR"
        formatted["message"] = "An internal error occurred"

    formatted["extensions"] = {**formatted.get("extensions", {}), "code": code}
    return formatted


@router.post("/graphql", summary="Execute a GraphQL query or mutation")
async def execute(
    payload: GraphQLPayload,
    context: RequestContext = Depends(get_request_context),
    services: Services = Depends(get_services),
):
    """
    Run a query or mutation.

    Reads need no token. Mutations (`createArticle`, `updateAuthor`,
    `deleteAuthor`) require a valid token as query parameter: `?token=xxx`
    """
    result = await graphql(
        services.schema,
        payload.query,
        variable_values=payload.variables,
        operation_name=payload.operation_name,
        context_value=context,
    )

    response: dict[str, Any] = {"data": result.data}
    if result.errors:
        response["errors"] = [format_error(error) for error in result.errors]
    return response
