"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process
    - mongodb_uri is normalized exactly once, at settings construction

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support (ADR: developer UX)
    - URI normalization as a field validator: the rest of the app only ever sees the
      normalized form
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from app.core.mongo_uri import normalize_mongo_uri

DEFAULT_MONGODB_URI = "mongodb://localhost:27017/nextjs_course"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    mongodb_uri: str = DEFAULT_MONGODB_URI

    @field_validator("mongodb_uri", mode="before")
    @classmethod
    def normalize_uri(cls, v: str | None) -> str:
        """Empty values fall back to the local default; credentials get encoded."""
        if not v:
            v = DEFAULT_MONGODB_URI
        return normalize_mongo_uri(v)

    mongodb_default_database: str = "nextjs_course"
    mongodb_server_selection_timeout_ms: int = 5000
    mongodb_app_name: str = "eventhub-api"

    # Persistence
    slug_conflict_retries: int = 3

    # Runtime — "development" logs URIs (masked) and exposes error detail
    environment: str = "production"

    # API
    cors_origins: list[str] = ["http://localhost:3000"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.environment.lower() == "development"


@lru_cache
def get_settings() -> Settings:
    return Settings()
