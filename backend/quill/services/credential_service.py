"""
Credential service for author registration, login and profile management.
"""
import logging
import uuid
from typing import Optional

from quill.core.errors import AuthError, HashError, ValidationError
from quill.core.security import MAX_PASSWORD_BYTES, PasswordHasher, TokenIssuer
from quill.database.store import DocumentStore
from quill.models.author import Author
from quill.schemas.auth import LoginRequest, RegisterRequest
from quill.schemas.author import AuthorChanges

logger = logging.getLogger(__name__)

LOGIN_FAILED = "invalid username or password"


class CredentialService:
    """Service for authentication and author operations."""

    def __init__(
        self,
        authors: DocumentStore,
        hasher: PasswordHasher,
        issuer: TokenIssuer,
        password_min_length: int = 4,
    ):
        """Initialize with the authors store and security primitives."""
        self.authors = authors
        self.hasher = hasher
        self.issuer = issuer
        self.password_min_length = password_min_length

    def _check_password(self, password: Optional[str]) -> str:
        if not password or len(password) < self.password_min_length:
            raise ValidationError(
                f"password must be at least {self.password_min_length} characters"
            )
        if "\x00" in password:
            raise ValidationError("password must not contain NUL characters")
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise ValidationError(f"password must be at most {MAX_PASSWORD_BYTES} bytes")
        return password

    async def register(self, request: RegisterRequest) -> Author:
        """
        Register a new author.

        Args:
            request: Registration request with names, username and password

        Returns:
            The stored Author

        Raises:
            ValidationError: If a required field is missing or the password is
                too short, too long or holds a NUL character
            ConflictError: If the username is already taken
        """
        missing = [
            name
            for name in ("firstname", "lastname", "username")
            if not getattr(request, name)
        ]
        if missing:
            raise ValidationError(
                f"missing required fields: {', '.join(missing)}",
                details={"fields": missing},
            )
        password = self._check_password(request.password)

        author = Author(
            id=str(uuid.uuid4()),
            firstname=request.firstname,
            lastname=request.lastname,
            username=request.username,
            hashed_password=self.hasher.hash(password),
        )
        await self.authors.insert(author.to_document())
        logger.info("Registered author %s", author.id)
        return author

    async def login(self, request: LoginRequest) -> str:
        """
        Authenticate an author and return a JWT token.

        Unknown usernames, ambiguous matches and wrong passwords all fail
        with the same AuthError after the same amount of hashing work.

        Raises:
            ValidationError: If username or password is missing
            AuthError: If the credentials do not match exactly one author
        """
        if not request.username or not request.password:
            raise ValidationError("username and password are required")

        matches = await self.authors.find({"username": request.username}, limit=2)
        if len(matches) != 1:
            self.hasher.dummy_verify()
            if matches:
                logger.error("Username %r matches %d authors", request.username, len(matches))
            raise AuthError(LOGIN_FAILED)

        author = Author.model_validate(matches[0])
        try:
            verified = self.hasher.verify(request.password, author.hashed_password)
        except HashError:
            logger.error("Author %s has an unreadable password hash", author.id)
            verified = False
        if not verified:
            raise AuthError(LOGIN_FAILED)

        return self.issuer.issue(author.id)

    async def get(self, author_id: str) -> Author:
        return Author.model_validate(await self.authors.get(author_id))

    async def list_authors(self) -> list[Author]:
        return [Author.model_validate(doc) for doc in await self.authors.list_all()]

    async def update(self, changes: AuthorChanges) -> Author:
        """
        Apply a partial profile update.

        Each non-empty field is set; a new password is validated and
        re-hashed before anything is written.

        Raises:
            ValidationError: If the new password is rejected
            NotFoundError: If the author does not exist
            ConflictError: If the new username is taken
        """
        fields = {}
        for name in ("firstname", "lastname", "username"):
            value = getattr(changes, name)
            if value:
                fields[name] = value
        if changes.password:
            fields["hashed_password"] = self.hasher.hash(
                self._check_password(changes.password)
            )

        document = await self.authors.update_fields(changes.id, fields)
        logger.info("Updated author %s (%s)", changes.id, ", ".join(sorted(fields)) or "no changes")
        return Author.model_validate(document)

    async def remove(self, author_id: str) -> str:
        await self.authors.remove(author_id)
        logger.info("Removed author %s", author_id)
        return author_id
