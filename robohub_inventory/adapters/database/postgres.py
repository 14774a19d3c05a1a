"""
PostgreSQL database adapter.
"""

import logging

from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import AsyncAdaptedQueuePool

from robohub_inventory.adapters.database import DatabaseAdapter

logger = logging.getLogger(__name__)


class PostgresAdapter(DatabaseAdapter):
    """PostgreSQL database adapter backed by asyncpg and a connection pool."""

    def __init__(
        self,
        database_url: str,
        echo: bool = False,
        pool_size: int = 5,
        max_overflow: int = 10,
        pool_timeout: int = 30,
        pool_recycle: int = 1800,
    ):
        """Initialize the adapter.

        Args:
            database_url: postgresql+asyncpg:// URL
            echo: Log every SQL statement
            pool_size: Persistent connections kept in the pool
            max_overflow: Extra connections allowed under load
            pool_timeout: Seconds to wait for a free connection
            pool_recycle: Seconds after which a connection is replaced
        """
        super().__init__(database_url, echo=echo)
        self.pool_size = pool_size
        self.max_overflow = max_overflow
        self.pool_timeout = pool_timeout
        self.pool_recycle = pool_recycle

    @property
    def dialect_name(self) -> str:
        return "postgresql"

    def _create_engine(self) -> AsyncEngine:
        logger.info(
            f"Using QueuePool for PostgreSQL database "
            f"(size={self.pool_size}, max_overflow={self.max_overflow})"
        )
        return create_async_engine(
            self.database_url,
            echo=self.echo,
            poolclass=AsyncAdaptedQueuePool,
            pool_size=self.pool_size,
            max_overflow=self.max_overflow,
            pool_timeout=self.pool_timeout,
            pool_recycle=self.pool_recycle,
            pool_pre_ping=True,  # Verify connections before using them
        )

    def drop_table_statement(self, table_name: str) -> str:
        return f'DROP TABLE IF EXISTS "{table_name}" CASCADE'
