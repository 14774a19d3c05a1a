"""
Service layer for the inventory aggregates.
"""

from robohub_inventory.services.base import DEFAULT_PAGE_SIZE, BaseService
from robohub_inventory.services.inventory import (
    DatasetService,
    PackageService,
    RepositoryService,
    ScenarioService,
    SimulatorService,
)

__all__ = [
    'DEFAULT_PAGE_SIZE',
    'BaseService',
    'DatasetService',
    'PackageService',
    'RepositoryService',
    'ScenarioService',
    'SimulatorService',
]
