"""
Resolver interface shared by every schema field.
"""
from typing import Any, Protocol

from graphql import GraphQLResolveInfo

from quill.services.gate import RequestContext


class Resolver(Protocol):
    """One field of the schema, built once with its dependencies."""

    async def __call__(self, root: Any, info: GraphQLResolveInfo, **args: Any) -> Any:
        ...


def request_context(info: GraphQLResolveInfo) -> RequestContext:
    """The RequestContext the endpoint passed as `context_value`."""
    context = info.context
    if isinstance(context, RequestContext):
        return context
    return RequestContext()
