"""
Schema-evolution guard run once at process start.

The guard moves through three states:

* ``UNKNOWN``: nothing has been looked at yet.
* ``EVALUATED``: the store has been probed for the legacy table shape and,
  if it was found, the five inventory tables have been dropped.
* ``SYNCHRONIZED``: every table exists, missing columns have been added and
  seeding has been decided.

The legacy shape is a ``repositories`` table whose ``id`` column is an
integer. Dropping it discards every row in the inventory and cannot be
undone, so it is logged at WARNING and reported separately from the normal
additive sync.

Connection and schema failures propagate to the caller. A seed failure is
logged, recorded in the report and swallowed, because an empty inventory is
still usable.
"""

import enum
import logging
from dataclasses import dataclass, field
from typing import Awaitable, Callable, List, Optional

from alembic.autogenerate import compare_metadata
from alembic.migration import MigrationContext
from alembic.operations import Operations
from sqlalchemy import Column, Integer, inspect, text

from robohub_inventory.adapters.database import DatabaseAdapter
from robohub_inventory.database.seed import SeedSummary, load_seed_data
from robohub_inventory.models import Base, RepositoryModel
from robohub_inventory.repositories.inventory import RepoRepository

logger = logging.getLogger(__name__)

# Dependents first
DROP_ORDER = ("simulators", "datasets", "scenarios", "packages", "repositories")

SeedLoader = Callable[[DatabaseAdapter], Awaitable[SeedSummary]]


class SchemaState(enum.Enum):
    UNKNOWN = "unknown"
    EVALUATED = "evaluated"
    SYNCHRONIZED = "synchronized"


@dataclass
class MigrationReport:
    """What one guard run did to the store."""
    legacy_detected: bool = False
    dropped_tables: List[str] = field(default_factory=list)
    added_columns: List[str] = field(default_factory=list)
    seeded: bool = False
    seed_summary: Optional[SeedSummary] = None
    seed_error: Optional[str] = None

    @property
    def destructive(self) -> bool:
        return bool(self.dropped_tables)


def has_legacy_identifiers(sync_conn) -> bool:
    """Whether ``repositories.id`` exists and has an integer type."""
    inspector = inspect(sync_conn)
    if not inspector.has_table(RepositoryModel.__tablename__):
        return False
    for column in inspector.get_columns(RepositoryModel.__tablename__):
        if column["name"] == "id":
            return isinstance(column["type"], Integer)
    return False


def add_missing_columns(sync_conn) -> List[str]:
    """
    Add every model column the live tables lack.

    Only additive differences are applied. Everything else alembic reports
    (type changes, dropped columns, index changes, unknown tables) is logged
    and left alone.

    Returns:
        List[str]: ``table.column`` for every column added
    """
    context = MigrationContext.configure(sync_conn, opts={"compare_type": False})
    operations = Operations(context)
    added = []
    for diff in compare_metadata(context, Base.metadata):
        # Column modifications come back as lists of tuples
        kind = diff[0][0] if isinstance(diff, list) else diff[0]
        if kind != "add_column":
            logger.info(f"Skipping non-additive schema difference: {kind}")
            continue
        _, schema, table_name, column = diff
        operations.add_column(table_name, Column(column.name, column.type, nullable=True), schema=schema)
        added.append(f"{table_name}.{column.name}")
        logger.info(f"Added column {table_name}.{column.name}")
    return added


class SchemaGuard:
    """
    Bring the store to the current table shape and seed it when empty.

    Attributes:
        database (DatabaseAdapter): Connected store handle
        force_drop (bool): Treat the store as legacy without probing
        force_seed (bool): Seed even when repositories already exist
        state (SchemaState): Progress of the current run
    """

    def __init__(
        self,
        database: DatabaseAdapter,
        force_drop: bool = False,
        force_seed: bool = False,
        seed_loader: SeedLoader = load_seed_data,
    ):
        self.database = database
        self.force_drop = force_drop
        self.force_seed = force_seed
        self.seed_loader = seed_loader
        self.state = SchemaState.UNKNOWN

    async def run(self) -> MigrationReport:
        """
        Probe, drop if legacy, synchronize, then seed if needed.

        Returns:
            MigrationReport: Summary of the actions taken

        Raises:
            SQLAlchemyError: If the schema cannot be probed or synchronized
        """
        report = MigrationReport()

        await self._evaluate(report)
        self.state = SchemaState.EVALUATED

        report.added_columns = await self._synchronize()
        await self._maybe_seed(report)
        self.state = SchemaState.SYNCHRONIZED

        logger.info(
            f"Schema synchronized (legacy={report.legacy_detected}, "
            f"added_columns={len(report.added_columns)}, seeded={report.seeded})"
        )
        return report

    async def _evaluate(self, report: MigrationReport) -> None:
        if self.force_drop:
            logger.info("FORCE_DROP_TABLES is set, skipping legacy probe")
            report.legacy_detected = True
        else:
            async with self.database.begin() as conn:
                report.legacy_detected = await conn.run_sync(has_legacy_identifiers)

        if report.legacy_detected:
            report.dropped_tables = await self._drop_tables()

    async def _drop_tables(self) -> List[str]:
        logger.warning(
            f"Destructive migration: dropping tables {', '.join(DROP_ORDER)}. "
            "All existing inventory data will be lost."
        )
        async with self.database.begin() as conn:
            for table_name in DROP_ORDER:
                await conn.execute(text(self.database.drop_table_statement(table_name)))
                logger.warning(f"Dropped table {table_name}")
        return list(DROP_ORDER)

    async def _synchronize(self) -> List[str]:
        async with self.database.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
            return await conn.run_sync(add_missing_columns)

    async def _maybe_seed(self, report: MigrationReport) -> None:
        if not self.force_seed:
            existing = await RepoRepository(self.database).count()
            if existing > 0:
                logger.info(f"Found {existing} repositories, skipping seed data")
                return

        logger.info("Loading seed data")
        try:
            report.seed_summary = await self.seed_loader(self.database)
            report.seeded = True
        except Exception as e:
            logger.error(f"Failed to load seed data: {str(e)}", exc_info=True)
            report.seed_error = str(e)
