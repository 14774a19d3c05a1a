"""
Process startup for the inventory.

``startup`` connects to the configured database, runs the schema-evolution
guard and only then hands out the services, so no caller can reach a
repository before the schema and seed data are in place.

Running this module (or the ``robohub-inventory-migrate`` console script)
performs the same startup once, logs the migration report and exits.
"""

import asyncio
import logging
import sys
from dataclasses import dataclass
from typing import Optional

from robohub_inventory.adapters.database import DatabaseAdapter
from robohub_inventory.adapters.database.factory import create_database
from robohub_inventory.database.schema_guard import MigrationReport, SchemaGuard
from robohub_inventory.repositories.inventory import (
    DatasetRepository,
    PackageRepository,
    RepoRepository,
    ScenarioRepository,
    SimulatorRepository,
)
from robohub_inventory.services.inventory import (
    DatasetService,
    PackageService,
    RepositoryService,
    ScenarioService,
    SimulatorService,
)
from robohub_inventory.utils.config import Settings, get_settings
from robohub_inventory.utils.logger import setup_logging

logger = logging.getLogger(__name__)


@dataclass
class Inventory:
    """Everything a request handler needs, owned by the process."""
    database: DatabaseAdapter
    report: MigrationReport
    repositories: RepositoryService
    packages: PackageService
    scenarios: ScenarioService
    datasets: DatasetService
    simulators: SimulatorService

    async def close(self) -> None:
        await self.database.close()


async def startup(settings: Optional[Settings] = None, database_url: Optional[str] = None) -> Inventory:
    """
    Connect, migrate and build the services.

    Args:
        settings: Application settings; defaults to the cached settings
        database_url: Explicit URL overriding the settings

    Returns:
        Inventory: Services bound to one connected database handle

    Raises:
        SQLAlchemyError: If the database is unreachable or the schema cannot
            be synchronized
    """
    settings = settings or get_settings()
    database = await create_database(settings, database_url)
    try:
        guard = SchemaGuard(
            database,
            force_drop=settings.FORCE_DROP_TABLES,
            force_seed=settings.LOAD_SEED_DATA,
        )
        report = await guard.run()
    except BaseException:
        await database.close()
        raise

    page_size = settings.DEFAULT_PAGE_SIZE
    return Inventory(
        database=database,
        report=report,
        repositories=RepositoryService(RepoRepository(database), page_size),
        packages=PackageService(PackageRepository(database), page_size),
        scenarios=ScenarioService(ScenarioRepository(database), page_size),
        datasets=DatasetService(DatasetRepository(database), page_size),
        simulators=SimulatorService(SimulatorRepository(database), page_size),
    )


def log_report(report: MigrationReport) -> None:
    if report.destructive:
        logger.warning(f"Legacy schema replaced, dropped tables: {', '.join(report.dropped_tables)}")
    if report.added_columns:
        logger.info(f"Added columns: {', '.join(report.added_columns)}")
    if report.seeded:
        logger.info(f"Seed data: {report.seed_summary}")
    elif report.seed_error:
        logger.error(f"Seed data not loaded: {report.seed_error}")


async def _migrate(settings: Settings) -> MigrationReport:
    inventory = await startup(settings)
    try:
        return inventory.report
    finally:
        await inventory.close()


def main() -> int:
    """Console entry point: migrate the configured database once."""
    settings = get_settings()
    setup_logging(settings)
    try:
        report = asyncio.run(_migrate(settings))
    except Exception as e:
        logger.error(f"Startup failed: {str(e)}", exc_info=True)
        return 1
    log_report(report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
