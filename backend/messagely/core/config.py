"""Application settings using environment variables."""
from __future__ import annotations

from functools import lru_cache
from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Environment-driven configuration for the messaging backend."""

    model_config = SettingsConfigDict(env_file=".env", case_sensitive=False, extra="ignore")

    MESSAGELY_DB_HOST: str = "localhost"
    MESSAGELY_DB_PORT: int = 3306
    MESSAGELY_DB_NAME: str = "messagely"
    MESSAGELY_DB_USER: str = "root"
    MESSAGELY_DB_PASSWORD: str = ""
    MESSAGELY_DB_CHARSET: str = "utf8mb4"

    # Full SQLAlchemy URL; takes precedence over the MESSAGELY_DB_* parts.
    DATABASE_URL: Optional[str] = None
    DB_CONNECT_TIMEOUT: int = 10
    DB_POOL_TIMEOUT: int = 30

    JWT_SECRET_KEY: str = "dev-secret-key-change-me-please-32b"
    JWT_ALGORITHM: str = "HS256"

    BCRYPT_WORK_FACTOR: int = 12

    CORS_ALLOW_ORIGINS: List[str] = ["*"]

    def sqlalchemy_url(self) -> str:
        """Build a SQLAlchemy URL for MySQL using pymysql driver."""
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"mysql+pymysql://{self.MESSAGELY_DB_USER}:{self.MESSAGELY_DB_PASSWORD}"
            f"@{self.MESSAGELY_DB_HOST}:{self.MESSAGELY_DB_PORT}/{self.MESSAGELY_DB_NAME}"
            f"?charset={self.MESSAGELY_DB_CHARSET}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Return a cached Settings instance to avoid re-parsing env."""
    return Settings()
