"""Application Configuration: environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (the default secret_key is dev-only)
    - get_settings() is cached (lru_cache), single instance per process
    - get_settings doubles as a FastAPI dependency so tests can override it
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

from bloglist.core.domain_types import LikesUpdatePolicy


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://bloglist:bloglist@db:5432/bloglist"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosted providers hand out postgres:// or postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str):
            for prefix in ("postgresql://", "postgres://"):
                if v.startswith(prefix):
                    return "postgresql+asyncpg://" + v[len(prefix):]
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    secret_key: str = "dev-secret-change-me"
    jwt_algorithm: str = "HS256"
    # None issues non-expiring tokens, matching the legacy client
    access_token_expire_minutes: int | None = None
    username_min_length: int = 3
    password_min_length: int = 3

    # Blogs
    likes_update_policy: LikesUpdatePolicy = LikesUpdatePolicy.OPEN
    # Legacy clients expect the rejected draft back as the 400 body
    echo_invalid_blog_draft: bool = False

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
