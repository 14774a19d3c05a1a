"""
SQLite database adapter implementation.

Used for development and tests through the aiosqlite driver.
"""

import logging

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool

from robohub_inventory.adapters.database import DatabaseAdapter

logger = logging.getLogger(__name__)


class SQLiteAdapter(DatabaseAdapter):
    """SQLite adapter implementation."""

    def __init__(self, database_url: str = "sqlite+aiosqlite:///robohub.db", echo: bool = False):
        super().__init__(database_url, echo=echo)

    @property
    def dialect_name(self) -> str:
        return "sqlite"

    def _create_engine(self) -> AsyncEngine:
        engine = create_async_engine(
            self.database_url,
            connect_args={"check_same_thread": False},
            poolclass=NullPool,  # Use NullPool for SQLite
            echo=self.echo,
        )

        @event.listens_for(engine.sync_engine, "connect", insert=True)
        def _enable_foreign_keys(dbapi_connection, connection_record):
            cursor = dbapi_connection.cursor()
            cursor.execute("PRAGMA foreign_keys=ON")
            cursor.close()

        logger.info("Using NullPool for SQLite database")
        return engine

    def drop_table_statement(self, table_name: str) -> str:
        return f'DROP TABLE IF EXISTS "{table_name}"'
