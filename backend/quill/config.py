"""
Application configuration loaded from environment variables.
"""
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

HMAC_ALGORITHMS = ("HS256", "HS384", "HS512")


class Settings(BaseSettings):
    """Application settings from environment variables."""

    # MongoDB
    mongo_uri: str = "mongodb://mongodb:27017"
    mongo_db_name: str = "quill_db"

    # JWT Configuration
    jwt_secret_key: str = "CHANGE_ME_IN_PRODUCTION_USE_STRONG_SECRET"
    jwt_algorithm: str = "HS256"
    jwt_issuer: str = "quill-api"
    jwt_access_token_expire_minutes: int = 60

    # Credentials
    # bcrypt work factor; tests drop this to 4 (the bcrypt minimum)
    bcrypt_rounds: int = 10
    password_min_length: int = 4

    cors_origins: list[str] = ["http://localhost:3000"]
    log_level: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("jwt_algorithm")
    @classmethod
    def _require_hmac(cls, value: str) -> str:
        value = value.upper()
        if value not in HMAC_ALGORITHMS:
            raise ValueError(f"jwt_algorithm must be one of {', '.join(HMAC_ALGORITHMS)}")
        return value

    @field_validator("bcrypt_rounds")
    @classmethod
    def _check_rounds(cls, value: int) -> int:
        if not 4 <= value <= 31:
            raise ValueError("bcrypt_rounds must be between 4 and 31")
        return value


def load_settings(**overrides) -> Settings:
    """Build settings from the environment, with optional explicit overrides."""
    return Settings(**overrides)
