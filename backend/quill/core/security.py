"""
Security utilities for password hashing and JWT token management.
"""
import logging
from datetime import datetime, timedelta, timezone
from typing import Callable

from jose import JWTError, jwt
from passlib.context import CryptContext
from pydantic import ValidationError as PydanticValidationError

from quill.config import Settings
from quill.core.errors import AuthError, HashError, ValidationError
from quill.schemas.auth import TokenClaims

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]

# bcrypt only reads this many bytes of a secret.
MAX_PASSWORD_BYTES = 72


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


class PasswordHasher:
    """bcrypt hashing with a work factor fixed at construction."""

    def __init__(self, rounds: int = 10):
        self._context = CryptContext(
            schemes=["bcrypt"],
            deprecated="auto",
            bcrypt__rounds=rounds,
            bcrypt__truncate_error=True,
        )

    @classmethod
    def from_settings(cls, settings: Settings) -> "PasswordHasher":
        return cls(rounds=settings.bcrypt_rounds)

    @staticmethod
    def accepts(password: str) -> bool:
        """True if bcrypt can hash `password` without altering it."""
        return "\x00" not in password and len(password.encode("utf-8")) <= MAX_PASSWORD_BYTES

    def hash(self, password: str) -> str:
        """
        Hash a plain password using bcrypt.

        Args:
            password: The plain text password to hash

        Returns:
            Salted bcrypt hash string

        Raises:
            ValidationError: If the password holds a NUL byte or exceeds
                MAX_PASSWORD_BYTES once encoded
        """
        if not self.accepts(password):
            raise ValidationError(
                f"password must be at most {MAX_PASSWORD_BYTES} bytes and contain no NUL characters"
            )
        try:
            return self._context.hash(password)
        except ValueError as e:
            raise ValidationError("password cannot be hashed") from e

    def verify(self, password: str, hashed: str) -> bool:
        """
        Verify a plain password against a bcrypt hash.

        Args:
            password: The plain text password to verify
            hashed: A hash previously produced by `hash`

        Returns:
            True if password matches, False otherwise

        Raises:
            HashError: If `hashed` is not a bcrypt hash
        """
        # No stored hash came from such a password, and bcrypt would
        # compare only its first MAX_PASSWORD_BYTES bytes.
        if not self.accepts(password):
            self._context.dummy_verify()
            return False
        try:
            return self._context.verify(password, hashed)
        except (ValueError, TypeError) as e:
            raise HashError("stored password hash is malformed") from e

    def dummy_verify(self) -> None:
        """Spend the cost of one verification without a real hash."""
        self._context.dummy_verify()


class TokenIssuer:
    """Mints signed, time-bounded access tokens."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str,
        issuer: str,
        expires_delta: timedelta,
        clock: Clock = utcnow,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._issuer = issuer
        self._expires_delta = expires_delta
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = utcnow) -> "TokenIssuer":
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
            expires_delta=timedelta(minutes=settings.jwt_access_token_expire_minutes),
            clock=clock,
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self._expires_delta.total_seconds())

    def issue(self, subject: str) -> str:
        """
        Create a JWT access token for `subject`.

        Args:
            subject: Author ID the token asserts

        Returns:
            Encoded JWT token string
        """
        if not subject:
            raise ValueError("token subject must be a non-empty author id")

        now = self._clock().replace(microsecond=0)
        payload = {
            "sub": subject,
            "iss": self._issuer,
            "iat": now,
            "exp": now + self._expires_delta,
        }
        return jwt.encode(payload, self._secret_key, algorithm=self._algorithm)


class TokenVerifier:
    """
    Validates access tokens and recovers their claims.

    Every failure raises the same AuthError so callers cannot tell which
    check rejected the token.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str,
        issuer: str,
        clock: Clock = utcnow,
    ):
        self._secret_key = secret_key
        self._algorithms = [algorithm]
        self._issuer = issuer
        self._clock = clock

    @classmethod
    def from_settings(cls, settings: Settings, clock: Clock = utcnow) -> "TokenVerifier":
        return cls(
            secret_key=settings.jwt_secret_key,
            algorithm=settings.jwt_algorithm,
            issuer=settings.jwt_issuer,
            clock=clock,
        )

    def verify(self, token: str) -> TokenClaims:
        """
        Decode and validate a JWT token.

        Args:
            token: The JWT token string to validate

        Returns:
            Typed claims of a valid token

        Raises:
            AuthError: If the signature, algorithm, expiry or issuer is wrong
        """
        rejected = AuthError("invalid or expired token")

        # Expiry and issuer are checked below against the injected clock,
        # so jose only verifies the signature and claim presence here.
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=self._algorithms,
                options={
                    "verify_exp": False,
                    "verify_iss": False,
                    "verify_aud": False,
                    "require_exp": True,
                    "require_iss": True,
                    "require_sub": True,
                },
            )
            claims = TokenClaims.model_validate(payload)
        except (JWTError, PydanticValidationError) as e:
            logger.debug("Token rejected: %s", type(e).__name__)
            raise rejected from None

        if claims.expires_at <= self._clock():
            raise rejected
        if claims.issuer != self._issuer:
            raise rejected

        return claims
