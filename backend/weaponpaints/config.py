"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - All secrets come from environment variables (never hardcoded)
    - get_settings() is cached (lru_cache) — single instance per process

Design Decisions:
    - pydantic-settings over raw os.environ: validation, type coercion, .env file support
    - Defaults provided for all non-secret settings: works out-of-the-box with docker-compose
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

_ASYNC_DRIVERS = {
    "postgresql://": "postgresql+asyncpg://",
    "mysql://": "mysql+aiomysql://",
}


def to_async_url(url: str) -> str:
    """Hosting providers hand out sync URLs; the engine needs an async driver."""
    for prefix, async_prefix in _ASYNC_DRIVERS.items():
        if url.startswith(prefix):
            return url.replace(prefix, async_prefix, 1)
    return url


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://weaponpaints:weaponpaints@db:5432/weaponpaints"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_database_url(cls, v: str) -> str:
        return to_async_url(v) if isinstance(v, str) else v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Identity forwarded by the authenticating gateway
    owner_header: str = "X-Steam-Id"

    # API
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
