"""
Pytest configuration and fixtures for testing.

This module provides shared fixtures for all tests. Every test that touches
storage gets its own SQLite file under ``tmp_path``. The SQLite adapter opens
a new connection per session, so ``:memory:`` databases cannot be shared.
"""

import uuid
from datetime import datetime, timedelta, timezone

import pytest
import pytest_asyncio

from robohub_inventory.adapters.database import DatabaseAdapter
from robohub_inventory.adapters.database.sqlite import SQLiteAdapter
from robohub_inventory.models import Base
from robohub_inventory.repositories import (
    DatasetRepository,
    PackageRepository,
    RepoRepository,
    ScenarioRepository,
    SimulatorRepository,
)
from robohub_inventory.schemas import LatestCommit, Owner, Package, Repository, ValidationStatus
from robohub_inventory.services import (
    DatasetService,
    PackageService,
    RepositoryService,
    ScenarioService,
    SimulatorService,
)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


@pytest.fixture
def database_url(tmp_path) -> str:
    """URL of a fresh SQLite file for this test."""
    return f"sqlite+aiosqlite:///{tmp_path / 'inventory.db'}"


@pytest_asyncio.fixture
async def empty_database(database_url) -> DatabaseAdapter:
    """A connected adapter over a database with no tables."""
    adapter = SQLiteAdapter(database_url)
    await adapter.init()
    yield adapter
    await adapter.close()


@pytest_asyncio.fixture
async def database(empty_database) -> DatabaseAdapter:
    """A connected adapter with every inventory table created."""
    async with empty_database.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return empty_database


@pytest.fixture
def repo_repository(database) -> RepoRepository:
    return RepoRepository(database)


@pytest.fixture
def package_repository(database) -> PackageRepository:
    return PackageRepository(database)


@pytest.fixture
def scenario_repository(database) -> ScenarioRepository:
    return ScenarioRepository(database)


@pytest.fixture
def dataset_repository(database) -> DatasetRepository:
    return DatasetRepository(database)


@pytest.fixture
def simulator_repository(database) -> SimulatorRepository:
    return SimulatorRepository(database)


@pytest.fixture
def repository_service(repo_repository) -> RepositoryService:
    return RepositoryService(repo_repository)


@pytest.fixture
def package_service(package_repository) -> PackageService:
    return PackageService(package_repository)


@pytest.fixture
def scenario_service(scenario_repository) -> ScenarioService:
    return ScenarioService(scenario_repository)


@pytest.fixture
def dataset_service(dataset_repository) -> DatasetService:
    return DatasetService(dataset_repository)


@pytest.fixture
def simulator_service(simulator_repository) -> SimulatorService:
    return SimulatorService(simulator_repository)


@pytest.fixture
def make_repository():
    """Factory for valid, unsaved repositories."""
    def _make(name: str = "ros-planning/navigation2", minutes: int = 0, **overrides) -> Repository:
        fields = dict(
            name=name,
            provider="github",
            url=f"https://github.com/{name}",
            description="Test repository",
            sync_status="synced",
            latest_commit=LatestCommit(hash="abc123", message="Initial commit", author="Jane Doe"),
            tags=["ros2", "test"],
            owner=Owner(id="user-001", name="ros-planning"),
            created_at=BASE_TIME + timedelta(minutes=minutes),
        )
        fields.update(overrides)
        return Repository(**fields)
    return _make


@pytest.fixture
def make_package():
    """Factory for valid, unsaved packages."""
    def _make(name: str = "nav2_planner", repo: Repository = None, **overrides) -> Package:
        fields = dict(
            name=name,
            display_name=name.replace("_", " ").title(),
            repo_id=repo.id if repo else str(uuid.uuid4()),
            repo_name=repo.name if repo else "",
            latest_version="1.0.0",
            versions=["1.0.0"],
            validation_status=ValidationStatus(status="pass", pass_rate=90.0),
        )
        fields.update(overrides)
        return Package(**fields)
    return _make
