"""
Database adapter factory.

This module picks the adapter matching the configured database URL and
initializes it. Every call returns a new, caller-owned adapter.
"""

import logging
from typing import Optional

from robohub_inventory.adapters.database import DatabaseAdapter
from robohub_inventory.adapters.database.postgres import PostgresAdapter
from robohub_inventory.adapters.database.sqlite import SQLiteAdapter
from robohub_inventory.utils.config import Settings, get_settings

logger = logging.getLogger(__name__)


def build_adapter(settings: Optional[Settings] = None, database_url: Optional[str] = None) -> DatabaseAdapter:
    """Build, without connecting, the adapter for the configured database.

    Args:
        settings: Settings to read the URL and pool options from
        database_url: Explicit URL overriding the settings

    Returns:
        DatabaseAdapter: An uninitialized adapter

    Raises:
        ValueError: If the URL names an unsupported database
    """
    settings = settings or get_settings()
    url = database_url or settings.database_url()

    if url.startswith("sqlite"):
        logger.info("Using SQLite adapter")
        return SQLiteAdapter(url, echo=settings.DEBUG)
    if url.startswith("postgresql"):
        logger.info("Using PostgreSQL adapter")
        return PostgresAdapter(
            url,
            echo=settings.DEBUG,
            pool_size=settings.POOL_SIZE,
            max_overflow=settings.MAX_OVERFLOW,
            pool_timeout=settings.POOL_TIMEOUT,
            pool_recycle=settings.POOL_RECYCLE,
        )
    raise ValueError(f"Unsupported database URL: {url.split(':', 1)[0]}")


async def create_database(settings: Optional[Settings] = None, database_url: Optional[str] = None) -> DatabaseAdapter:
    """Build and connect the adapter for the configured database.

    Connection failures propagate; the caller treats them as fatal.

    Returns:
        DatabaseAdapter: A connected adapter owned by the caller
    """
    adapter = build_adapter(settings, database_url)
    await adapter.init()
    return adapter
