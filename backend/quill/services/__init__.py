"""
Business logic services.
"""
from quill.services.article_service import ArticleService
from quill.services.credential_service import CredentialService
from quill.services.gate import Capability, RequestContext, ResolverGate

__all__ = [
    "ArticleService",
    "CredentialService",
    "Capability",
    "RequestContext",
    "ResolverGate",
]
