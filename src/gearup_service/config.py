from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    POSTGRES_USER: str
    POSTGRES_PASSWORD: str
    POSTGRES_DB: str
    DB_HOST: str = "localhost"
    DB_PORT: int = 5432

    DB_POOL_SIZE: int = 10
    DB_MAX_OVERFLOW: int = 20
    DB_POOL_RECYCLE: int = 300

    REDIS_URL: str = "redis://localhost:6379/0"

    CORS_ORIGINS: list[str] = ["*"]

    LOG_LEVEL: str = "info"

    CACHE_KEY_PREFIX: str = "gearup:"
    CACHE_DEFAULT_TTL_SECONDS: int = 15 * 60
    POST_CACHE_TTL_SECONDS: int = 60 * 60

    FEED_PAGE_SIZE: int = 10
    COMMENTS_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100
    # Reject undecodable cursors with 400 instead of serving the first page.
    CURSOR_STRICT: bool = False

    @property
    def database_url(self) -> str:
        return (
            f"postgresql+asyncpg://{self.POSTGRES_USER}:{self.POSTGRES_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.POSTGRES_DB}"
        )

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()  # type: ignore[call-arg]
