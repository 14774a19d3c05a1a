"""
This package contains repository implementations for database operations.

Repositories provide a clean abstraction layer for database access,
implementing the repository pattern to separate business logic from
data access concerns.
"""

from robohub_inventory.repositories.base import BaseRepository
from robohub_inventory.repositories.inventory import (
    DatasetRepository,
    PackageRepository,
    RepoRepository,
    ScenarioRepository,
    SimulatorRepository,
)

__all__ = [
    'BaseRepository',
    'DatasetRepository',
    'PackageRepository',
    'RepoRepository',
    'ScenarioRepository',
    'SimulatorRepository',
]
