"""Application configuration loaded from environment variables."""

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import SecretStr, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Allowed URL schemes for DATABASE_URL (module-level so validators can use it).
VALID_DATABASE_URL_PREFIXES = (
    "sqlite://",
    "sqlite+pysqlite://",
    "postgresql://",
    "postgresql+psycopg2://",
    "postgres://",
    "postgres+psycopg2://",
)

# Development-only fallback; rejected when APP_ENV=prod.
DEFAULT_SESSION_SECRET = "change-me-in-production"

DEFAULT_PAGES_DIR = Path(__file__).resolve().parent.parent / "pages"


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
    LOG_LEVEL: str = "INFO"

    # SQLite file next to the process by default; Postgres URLs work as well
    DATABASE_URL: str = "sqlite:///./taskboard.db"

    # Session cookie: opaque session id wrapped in a signed JWT
    SESSION_SECRET: SecretStr = SecretStr(DEFAULT_SESSION_SECRET)
    SESSION_ALGORITHM: str = "HS256"
    SESSION_COOKIE_NAME: str = "taskboard_session"
    SESSION_EXPIRE_MINUTES: int = 1440
    SESSION_COOKIE_SECURE: bool = False

    # Bcrypt cost (rounds)
    BCRYPT_ROUNDS: int = 10

    # Directory with index.html and dashboard.html
    PAGES_DIR: Path = DEFAULT_PAGES_DIR

    @field_validator("DATABASE_URL")
    @classmethod
    def validate_database_url(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("DATABASE_URL must be set and non-empty")
        if not any(v.strip().startswith(prefix) for prefix in VALID_DATABASE_URL_PREFIXES):
            raise ValueError(
                "DATABASE_URL must be a SQLite or PostgreSQL URL (e.g. sqlite:///./taskboard.db)"
            )
        return v.strip()

    @field_validator("LOG_LEVEL")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        level = v.strip().upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError("LOG_LEVEL must be one of DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return level

    @field_validator("SESSION_SECRET")
    @classmethod
    def validate_session_secret(cls, v: SecretStr) -> SecretStr:
        if not v.get_secret_value() or not v.get_secret_value().strip():
            raise ValueError("SESSION_SECRET must be set and non-empty")
        return v

    @field_validator("SESSION_ALGORITHM")
    @classmethod
    def validate_session_algorithm(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_ALGORITHM must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_COOKIE_NAME")
    @classmethod
    def validate_session_cookie_name(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("SESSION_COOKIE_NAME must be set and non-empty")
        return v.strip()

    @field_validator("SESSION_EXPIRE_MINUTES")
    @classmethod
    def validate_session_expire_minutes(cls, v: int) -> int:
        if v < 1 or v > 10080:
            raise ValueError(
                "SESSION_EXPIRE_MINUTES must be between 1 and 10080 (1 min to 7 days)"
            )
        return v

    @field_validator("BCRYPT_ROUNDS")
    @classmethod
    def validate_bcrypt_rounds(cls, v: int) -> int:
        if v < 4 or v > 15:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 15")
        return v

    @model_validator(mode="after")
    def require_real_secret_in_prod(self) -> "Settings":
        if (
            self.APP_ENV == "prod"
            and self.SESSION_SECRET.get_secret_value() == DEFAULT_SESSION_SECRET
        ):
            raise ValueError("SESSION_SECRET must be supplied explicitly when APP_ENV=prod")
        return self


@lru_cache
def get_settings() -> Settings:
    """Return cached settings instance (safe to call from dependencies)."""
    return Settings()


settings = get_settings()
