"""
Author query and mutation resolvers.
"""
from typing import Any

from graphql import GraphQLResolveInfo

from quill.models.author import Author
from quill.resolvers.base import request_context
from quill.schemas.author import AuthorChanges
from quill.services.credential_service import CredentialService
from quill.services.gate import Capability, ResolverGate


class ListAuthors:
    def __init__(self, credentials: CredentialService):
        self.credentials = credentials

    async def __call__(self, root: Any, info: GraphQLResolveInfo) -> list[Author]:
        return await self.credentials.list_authors()


class GetAuthor:
    def __init__(self, credentials: CredentialService):
        self.credentials = credentials

    async def __call__(self, root: Any, info: GraphQLResolveInfo, id: str) -> Author:
        return await self.credentials.get(id)


class UpdateAuthor:
    """updateAuthor(author: AuthorInput!): only the author themself may edit."""

    def __init__(self, credentials: CredentialService, gate: ResolverGate):
        self.credentials = credentials
        self.gate = gate

    async def __call__(
        self, root: Any, info: GraphQLResolveInfo, author: dict[str, Any]
    ) -> Author:
        changes = AuthorChanges.model_validate(author)
        self.gate.authorize_self(
            request_context(info), Capability.UPDATE_AUTHOR, changes.id
        )
        return await self.credentials.update(changes)


class DeleteAuthor:
    """deleteAuthor(id: String!): returns the removed id."""

    def __init__(self, credentials: CredentialService, gate: ResolverGate):
        self.credentials = credentials
        self.gate = gate

    async def __call__(self, root: Any, info: GraphQLResolveInfo, id: str) -> str:
        self.gate.authorize_self(request_context(info), Capability.DELETE_AUTHOR, id)
        return await self.credentials.remove(id)
