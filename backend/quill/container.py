"""
Service container built once at startup and shared by every request.
"""
from dataclasses import dataclass

from graphql import GraphQLSchema
from motor.motor_asyncio import AsyncIOMotorDatabase

from quill.config import Settings
from quill.core.security import PasswordHasher, TokenIssuer, TokenVerifier
from quill.database.databases import content_db
from quill.database.store import DocumentStore
from quill.resolvers.schema import build_schema
from quill.services.article_service import ArticleService
from quill.services.credential_service import CredentialService
from quill.services.gate import ResolverGate


@dataclass
class Services:
    settings: Settings
    database: AsyncIOMotorDatabase
    hasher: PasswordHasher
    issuer: TokenIssuer
    verifier: TokenVerifier
    credentials: CredentialService
    articles: ArticleService
    gate: ResolverGate
    schema: GraphQLSchema


def build_services(settings: Settings, database: AsyncIOMotorDatabase) -> Services:
    """Wire every service from explicit settings and a database handle."""
    hasher = PasswordHasher.from_settings(settings)
    issuer = TokenIssuer.from_settings(settings)
    verifier = TokenVerifier.from_settings(settings)

    credentials = CredentialService(
        authors=DocumentStore(database[content_db.Collections.AUTHORS], "author"),
        hasher=hasher,
        issuer=issuer,
        password_min_length=settings.password_min_length,
    )
    articles = ArticleService(
        DocumentStore(database[content_db.Collections.ARTICLES], "article")
    )
    gate = ResolverGate(verifier)

    return Services(
        settings=settings,
        database=database,
        hasher=hasher,
        issuer=issuer,
        verifier=verifier,
        credentials=credentials,
        articles=articles,
        gate=gate,
        schema=build_schema(credentials, articles, gate),
    )
