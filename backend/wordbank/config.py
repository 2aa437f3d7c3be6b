"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Secrets (database password, admin token, pepper) come from the environment
    - get_settings() is cached (lru_cache): one instance per process
    - environment defaults to development; only "test" unlocks the reset endpoint
    - A blank TEST_ADMIN_TOKEN is the same as an unset one (gate stays closed)

Design Decisions:
    - pydantic-settings over raw os.environ: typed, validated, .env aware
    - Tests override get_settings through FastAPI dependency_overrides
"""

from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from wordbank.core.domain_types import Environment


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Deployment
    environment: Environment = Environment.DEVELOPMENT
    test_admin_token: str | None = None

    # Database
    database_url: str = "postgresql+asyncpg://wordbank:wordbank@db:5432/wordbank"
    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    session_ttl_minutes: int = 60 * 24
    password_pepper: str = ""

    # HTTP
    cors_origins: list[str] = ["http://localhost:3000"]

    # Logging
    log_level: str = "INFO"
    log_format: str = "json"

    @field_validator("database_url", mode="before")
    @classmethod
    def use_async_driver(cls, v: str) -> str:
        """Managed Postgres hands out postgresql://; the app needs asyncpg."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return "postgresql+asyncpg://" + v.removeprefix("postgresql://")
        return v

    @field_validator("test_admin_token", mode="before")
    @classmethod
    def blank_token_is_unset(cls, v: str | None) -> str | None:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @property
    def reset_route_enabled(self) -> bool:
        """Whether the testing router is mounted at all."""
        return self.environment is not Environment.PRODUCTION


@lru_cache
def get_settings() -> Settings:
    return Settings()
