"""
Database adapters for seamless switching between SQLite and PostgreSQL.

An adapter owns the async engine and session factory for one database. It
is constructed explicitly at startup and handed to every repository, so no
module-level connection state exists anywhere in the package.
"""

import logging
from abc import ABC, abstractmethod
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncConnection, AsyncEngine, AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    def __init__(self, database_url: str, echo: bool = False):
        """Initialize the adapter.

        Args:
            database_url: Async SQLAlchemy URL
            echo: Log every SQL statement
        """
        self.database_url = database_url
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    @property
    @abstractmethod
    def dialect_name(self) -> str:
        """Name of the SQLAlchemy dialect this adapter talks to."""

    @abstractmethod
    def _create_engine(self) -> AsyncEngine:
        """Build the dialect-specific async engine."""

    @abstractmethod
    def drop_table_statement(self, table_name: str) -> str:
        """SQL that drops ``table_name`` if it exists, with any dependents."""

    async def init(self) -> None:
        """Create the engine and verify the database is reachable.

        Raises:
            SQLAlchemyError: If the database cannot be reached
        """
        self.engine = self._create_engine()
        self.session_factory = async_sessionmaker(
            bind=self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )
        try:
            async with self.engine.connect() as conn:
                await conn.execute(text("SELECT 1"))
        except Exception as e:
            logger.error(f"Error connecting to {self.dialect_name} database: {str(e)}")
            await self.close()
            raise
        logger.info(f"Connected to {self.dialect_name} database")

    async def close(self) -> None:
        """Close the database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info(f"Closed {self.dialect_name} database connection")

    def session(self) -> AsyncSession:
        """Get a new database session.

        Returns:
            AsyncSession: A session to be used as an async context manager

        Raises:
            RuntimeError: If init() has not been called
        """
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.session_factory()

    @asynccontextmanager
    async def begin(self) -> AsyncIterator[AsyncConnection]:
        """Open a connection inside a transaction, for schema work."""
        if not self.engine:
            raise RuntimeError("Database not initialized. Call init() first.")
        async with self.engine.begin() as conn:
            yield conn
