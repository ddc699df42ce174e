"""
Identity gate for protected mutations.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from quill.core.errors import AuthError
from quill.core.security import TokenVerifier

logger = logging.getLogger(__name__)


class Capability(str, Enum):
    """Protected operations, named for the audit log."""
    CREATE_ARTICLE = "create_article"
    UPDATE_AUTHOR = "update_author"
    DELETE_AUTHOR = "delete_author"


@dataclass(frozen=True)
class RequestContext:
    """Per-request state, filled once when the request enters the API."""
    token: Optional[str] = None


class ResolverGate:
    """Turns a request's bearer token into a verified author id."""

    def __init__(self, verifier: TokenVerifier):
        self.verifier = verifier

    def authorize(self, context: RequestContext, capability: Capability) -> str:
        """
        Return the verified subject of the context's token.

        Protected resolvers call this before any write, so an AuthError
        leaves the store untouched.

        Raises:
            AuthError: If the token is missing, invalid or expired
        """
        token = getattr(context, "token", None)
        if not token:
            logger.warning("Denied %s: no token", capability.value)
            raise AuthError("invalid or expired token")

        try:
            claims = self.verifier.verify(token)
        except AuthError:
            logger.warning("Denied %s: token rejected", capability.value)
            raise

        logger.debug("Allowed %s for %s", capability.value, claims.subject)
        return claims.subject

    def authorize_self(
        self, context: RequestContext, capability: Capability, author_id: str
    ) -> str:
        """Like `authorize`, but the subject must also be `author_id`."""
        subject = self.authorize(context, capability)
        if subject != author_id:
            logger.warning("Denied %s: %s acting on %s", capability.value, subject, author_id)
            raise AuthError()
        return subject
