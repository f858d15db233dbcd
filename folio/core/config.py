"""Application configuration loaded from environment variables."""

from functools import lru_cache
from typing import Literal

from pydantic import SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "sqlite+pysqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
)


class Settings(BaseSettings):
    """Validated application settings from env and optional .env file."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    APP_ENV: Literal["dev", "prod"] = "dev"
    DEBUG: bool = False
    API_PREFIX: str = "/api"

    # Embedded SQLite file by default; Postgres also works for hosted setups
    DATABASE_URL: str = "sqlite:///./data.sqlite"

    # Admin bootstrap: the user is seeded once at startup if missing
    ADMIN_USERNAME: str = "admin"
    ADMIN_PASSWORD: SecretStr | None = None

    # Server-side sessions; the cookie only carries a signed opaque id
    SESSION_SECRET: SecretStr = SecretStr("change-me-in-secrets")
    SESSION_COOKIE_NAME: str = "folio.sid"
    SESSION_COOKIE_SECURE: bool = True
    SESSION_TTL_MINUTES: int = 1440

    # Single front-end origin allowed to read the API with credentials
    ALLOWED_ORIGIN: str = "http://localhost:3000"

    # Requests declaring a larger Content-Length are refused with 413
    MAX_BODY_BYTES: int = 1_048_576

    HOST: str = "0.0.0.0"
    PORT: int = 7860

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///./data.sqlite)"
            )
        return v.strip()

    @field_validator("ADMIN_USERNAME")
    @classmethod
    def validate_admin_username(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("ADMIN_USERNAME must be set and non-empty")
        if len(v.strip()) > 255:
            raise ValueError("ADMIN_USERNAME must be at most 255 characters")
        return v.strip()

    @field_validator("ADMIN_PASSWORD")
    @classmethod
    def validate_admin_password(cls, v: SecretStr | None) -> SecretStr | None:
        if v is None or not v.get_secret_value():
            return None
        return v

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("SESSION_SECRET must be set and non-empty")
        return v

    @field_validator("SESSION_COOKIE_NAME")
    @classmethod
    def validate_session_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_COOKIE_NAME must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_TTL_MINUTES")
    @classmethod
    def validate_session_ttl_minutes(cls, v: int) -> int:
        if v < 1 or v > 43200:
            raise ValueError(
                "SESSION_TTL_MINUTES must be between 1 and 43200 (1 min to 30 days)"
            )
        return v

    @field_validator("ALLOWED_ORIGIN")
    @classmethod
    def validate_allowed_origin(cls, v: str) -> str:
        s = v.strip().rstrip("/")
        if not (s.lower().startswith("http://") or s.lower().startswith("https://")):
            raise ValueError(
                "ALLOWED_ORIGIN must use http or https (e.g. https://example.com)"
            )
        return s

    @field_validator("MAX_BODY_BYTES")
    @classmethod
    def validate_max_body_bytes(cls, v: int) -> int:
        if v < 1024:
            raise ValueError("MAX_BODY_BYTES must be at least 1024")
        return v

    @field_validator("PORT")
    @classmethod
    def validate_port(cls, v: int) -> int:
        if v < 1 or v > 65535:
            raise ValueError("PORT must be between 1 and 65535")
        return v


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
