"""
Configuration settings for the inventory service.
"""

from functools import lru_cache
from typing import Optional

from dotenv import load_dotenv
from pydantic import ConfigDict
from pydantic_settings import BaseSettings

# Load environment variables from .env file
load_dotenv()


class Settings(BaseSettings):
    """Application settings."""

    # Environment
    ENVIRONMENT: str = "development"

    # Database
    DATABASE_URL: Optional[str] = None
    SQLITE_PATH: str = "robohub.db"
    DB_HOST: str = "localhost"
    DB_PORT: str = "5435"
    DB_USER: str = "postgres"
    DB_PASSWORD: str = "postgres"
    DB_NAME: str = "robohub"

    # Database Pool
    POOL_SIZE: int = 5
    MAX_OVERFLOW: int = 10
    POOL_TIMEOUT: int = 30
    POOL_RECYCLE: int = 1800

    # Schema evolution
    FORCE_DROP_TABLES: bool = False
    LOAD_SEED_DATA: bool = False

    # Pagination
    DEFAULT_PAGE_SIZE: int = 100

    # Logging
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    LOG_DIR: str = "logs"

    model_config = ConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="allow"
    )

    def database_url(self) -> str:
        """
        Resolve the SQLAlchemy URL for the configured environment.

        ``DATABASE_URL`` wins when set. Otherwise development uses a local
        SQLite file and every other environment builds an asyncpg URL from
        the ``DB_*`` settings.

        Returns:
            str: Async SQLAlchemy database URL
        """
        if self.DATABASE_URL:
            # Fix potential newline issues in .env file
            url = self.DATABASE_URL.split('\n')[0].strip()
            if url.startswith("sqlite:///"):
                url = url.replace("sqlite:///", "sqlite+aiosqlite:///", 1)
            elif url.startswith("postgresql://"):
                url = url.replace("postgresql://", "postgresql+asyncpg://", 1)
            return url

        if self.ENVIRONMENT.lower() == "development":
            return f"sqlite+aiosqlite:///{self.SQLITE_PATH}"

        return (
            f"postgresql+asyncpg://{self.DB_USER}:{self.DB_PASSWORD}"
            f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}"
        )


@lru_cache()
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
