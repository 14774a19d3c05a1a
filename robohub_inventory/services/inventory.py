"""
Services for the five inventory aggregates.
"""

from robohub_inventory.exceptions import (
    DatasetNotFoundError,
    InvalidInputError,
    PackageNotFoundError,
    RepositoryNotFoundError,
    ScenarioNotFoundError,
    SimulatorNotFoundError,
)
from robohub_inventory.services.base import BaseService
from robohub_inventory.schemas.dataset import Dataset
from robohub_inventory.schemas.package import Package
from robohub_inventory.schemas.repository import Repository
from robohub_inventory.schemas.scenario import Scenario
from robohub_inventory.schemas.simulator import Simulator


class RepositoryService(BaseService[Repository]):
    not_found_error = RepositoryNotFoundError

    def validate(self, entity: Repository) -> None:
        super().validate(entity)
        if not entity.url:
            raise InvalidInputError("url", "must not be empty")


class PackageService(BaseService[Package]):
    not_found_error = PackageNotFoundError

    def validate(self, entity: Package) -> None:
        super().validate(entity)
        if not entity.latest_version:
            raise InvalidInputError("latest_version", "must not be empty")


class ScenarioService(BaseService[Scenario]):
    not_found_error = ScenarioNotFoundError


class DatasetService(BaseService[Dataset]):
    not_found_error = DatasetNotFoundError


class SimulatorService(BaseService[Simulator]):
    not_found_error = SimulatorNotFoundError
