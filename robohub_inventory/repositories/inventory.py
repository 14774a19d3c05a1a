"""
Repositories for the five inventory aggregates.

Each class binds the generic repository to one table, one entity type and
the codecs of that table's sub-document columns.
"""

import logging
from typing import Optional

from sqlalchemy import update

from robohub_inventory.exceptions import RecordNotFoundError
from robohub_inventory.models import DatasetModel, PackageModel, RepositoryModel, ScenarioModel, SimulatorModel
from robohub_inventory.models.custom_types import utcnow
from robohub_inventory.repositories.base import BaseRepository, is_identifier
from robohub_inventory.schemas.dataset import DATASET_SUBDOCUMENTS, Dataset
from robohub_inventory.schemas.package import PACKAGE_SUBDOCUMENTS, Package
from robohub_inventory.schemas.repository import REPOSITORY_SUBDOCUMENTS, Repository
from robohub_inventory.schemas.scenario import SCENARIO_SUBDOCUMENTS, Scenario
from robohub_inventory.schemas.simulator import Simulator

logger = logging.getLogger(__name__)


class RepoRepository(BaseRepository[Repository]):
    """Repository for code repository rows."""

    model = RepositoryModel
    entity = Repository
    subdocuments = REPOSITORY_SUBDOCUMENTS

    async def set_package_count(self, id: str, count: int, timeout: Optional[float] = None) -> None:
        """
        Persist the derived package count of one repository.

        Args:
            id (str): Repository identifier
            count (int): Number of packages whose repo_id is ``id``
            timeout (Optional[float]): Deadline in seconds

        Raises:
            RecordNotFoundError: If no repository has this identifier
        """
        await self._execute("set_package_count", self._set_package_count(id, count), timeout)

    async def _set_package_count(self, id: str, count: int) -> None:
        if not is_identifier(id):
            raise RecordNotFoundError(self.table_name, "id", id)
        async with self.database.session() as session:
            result = await session.execute(
                update(self.model)
                .where(self.model.id == id)
                .values(package_count=count, updated_at=utcnow())
            )
            if result.rowcount == 0:
                await session.rollback()
                raise RecordNotFoundError(self.table_name, "id", id)
            await session.commit()
        logger.debug(f"Set package_count={count} on repository {id}")


class PackageRepository(BaseRepository[Package]):
    """Repository for package rows."""

    model = PackageModel
    entity = Package
    subdocuments = PACKAGE_SUBDOCUMENTS

    async def count_by_repo(self, repo_id: str, timeout: Optional[float] = None) -> int:
        """Number of packages referencing the given repository."""
        return await self.count(timeout=timeout, repo_id=repo_id)


class ScenarioRepository(BaseRepository[Scenario]):
    """Repository for scenario rows."""

    model = ScenarioModel
    entity = Scenario
    subdocuments = SCENARIO_SUBDOCUMENTS


class DatasetRepository(BaseRepository[Dataset]):
    """Repository for dataset rows."""

    model = DatasetModel
    entity = Dataset
    subdocuments = DATASET_SUBDOCUMENTS


class SimulatorRepository(BaseRepository[Simulator]):
    """Repository for simulator rows; the config document needs no codec."""

    model = SimulatorModel
    entity = Simulator
