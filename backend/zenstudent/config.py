"""Application Configuration - environment-driven settings via pydantic-settings.

Invariants:
    - Secrets come from environment variables or .env, never from code paths
    - get_settings() is cached (lru_cache): single instance per process
    - The placeholder JWT secret is accepted but flagged at startup

Design Decisions:
    - Defaults for every non-secret setting so docker-compose works out of the box
"""

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache

SERVICE_NAME = "zenstudent-api"
API_VERSION = "1.0.0"
PLACEHOLDER_JWT_SECRET = "insecure-dev-secret-change-me"


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False)

    # Database
    database_url: str = (
        "postgresql+asyncpg://zen:zen@db:5432/zenstudent"
    )

    @field_validator("database_url", mode="before")
    @classmethod
    def convert_postgres_url(cls, v: str) -> str:
        """Hosting platforms hand out postgresql:// but asyncpg needs postgresql+asyncpg://."""
        if isinstance(v, str) and v.startswith("postgresql://"):
            return v.replace("postgresql://", "postgresql+asyncpg://", 1)
        return v

    database_pool_size: int = 20
    database_max_overflow: int = 10

    # Auth
    jwt_secret: str = PLACEHOLDER_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_expiry_days: int = 7
    bcrypt_rounds: int = 10

    # Server
    host: str = "0.0.0.0"
    port: int = 5000
    cors_origins: list[str] = ["http://localhost:5173"]

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def uses_placeholder_secret(self) -> bool:
        return self.jwt_secret == PLACEHOLDER_JWT_SECRET


@lru_cache
def get_settings() -> Settings:
    return Settings()
