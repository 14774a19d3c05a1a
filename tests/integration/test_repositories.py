"""
Integration tests for the generic repository against SQLite.

These tests verify that:
1. Sub-documents survive a write-then-read cycle through real rows
2. Names are unique per table
3. Listing is ordered by creation time and paginates without gaps
4. Update never touches id, name or created_at
5. Delete is idempotent
6. Deadlines and cancellation abort the store call
"""

import asyncio
import uuid
from datetime import datetime, timedelta, timezone

import pytest
from sqlalchemy import select, update

from robohub_inventory.exceptions import (
    CorruptSubdocumentError,
    DuplicateNameError,
    InvalidInputError,
    OperationCanceledError,
    RecordNotFoundError,
    StorageError,
)
from robohub_inventory.models import PackageModel, RepositoryModel, ScenarioModel
from robohub_inventory.schemas import (
    DataSplit,
    Dataset,
    DatasetSchema,
    Dependency,
    LastRun,
    Owner,
    PreviewAssets,
    RequiredInput,
    Scenario,
    Simulator,
    SuccessCriterion,
    Topic,
    ValidationStatus,
)


@pytest.mark.asyncio
async def test_create_assigns_id_and_timestamps(repo_repository, make_repository):
    created = await repo_repository.create(make_repository(created_at=None))

    assert uuid.UUID(created.id)
    assert created.created_at is not None
    assert created.updated_at >= created.created_at


@pytest.mark.asyncio
async def test_create_keeps_supplied_id(repo_repository, make_repository):
    repo_id = str(uuid.uuid4())

    await repo_repository.create(make_repository(id=repo_id))
    stored = await repo_repository.get_by_id(repo_id)

    assert stored.id == repo_id


@pytest.mark.asyncio
async def test_repository_round_trip(repo_repository, make_repository):
    """Every field of a repository comes back as it was written."""
    repo = make_repository(
        webhook_status="active",
        webhook_id="hook-1",
        auto_sync=True,
        last_synced=datetime(2024, 2, 3, 4, 5, tzinfo=timezone.utc),
        owner=Owner(id="user-001", name="ros-planning", avatar_url="https://example.com/a.png"),
    )

    created = await repo_repository.create(repo)
    stored = await repo_repository.get_by_id(created.id)

    assert stored == created
    assert stored.latest_commit.message == "Initial commit"
    assert stored.owner.avatar_url == "https://example.com/a.png"
    assert stored.last_synced.tzinfo is not None


@pytest.mark.asyncio
async def test_package_round_trip_keeps_absent_fields_absent(package_repository, make_package):
    created = await package_repository.create(make_package())

    stored = await package_repository.get_by_id(created.id)

    assert stored.last_run is None
    assert stored.documentation is None
    assert stored.license is None
    assert stored.dependencies == []
    assert stored.validation_status == ValidationStatus(status="pass", pass_rate=90.0)


@pytest.mark.asyncio
async def test_package_round_trip_with_every_subdocument(package_repository, make_package):
    package = make_package(
        last_run=LastRun(status="fail", run_at=datetime(2024, 3, 1, tzinfo=timezone.utc), scenario_id="s-1"),
        dependencies=[Dependency(name="nav2_core", version="1.1.9")],
        license="Apache-2.0",
    )

    created = await package_repository.create(package)
    stored = await package_repository.get_by_name(created.name)

    assert stored.last_run == package.last_run
    assert stored.dependencies == package.dependencies
    assert stored.license == "Apache-2.0"


@pytest.mark.asyncio
async def test_out_of_range_pass_rate_is_stored_as_is(package_repository, make_package):
    created = await package_repository.create(make_package(validation_status=ValidationStatus(pass_rate=150.0)))

    stored = await package_repository.get_by_id(created.id)

    assert stored.validation_status.pass_rate == 150.0


@pytest.mark.asyncio
async def test_scenario_round_trip(scenario_repository):
    scenario = Scenario(
        name="Warehouse Navigation Basic",
        difficulty="easy",
        required_inputs=[RequiredInput(name="goal_pose", type="geometry_msgs/PoseStamped")],
        success_criteria=[SuccessCriterion(name="Success Rate", threshold=">90%", unit="percentage")],
        what_it_tests=["Path planning"],
        owner=Owner(id="robohub-001", name="RoboHub Team"),
    )

    created = await scenario_repository.create(scenario)
    stored = await scenario_repository.get_by_id(created.id)

    assert stored.required_inputs == scenario.required_inputs
    assert stored.success_criteria == scenario.success_criteria
    assert stored.what_it_tests == ["Path planning"]
    assert stored.owner.name == "RoboHub Team"


@pytest.mark.asyncio
async def test_dataset_round_trip(dataset_repository):
    dataset = Dataset(
        name="Warehouse Navigation Dataset v1",
        size_gb=15.5,
        preview_assets=PreviewAssets(sample_frames=["a.png", "b.png"]),
        data_schema=DatasetSchema(
            topics=[Topic(name="/scan", message_type="sensor_msgs/LaserScan", frequency="10Hz")],
            data_splits=[DataSplit(name="train", percentage=80)],
        ),
    )

    created = await dataset_repository.create(dataset)
    stored = await dataset_repository.get_by_id(created.id)

    assert stored.size_gb == 15.5
    assert stored.preview_assets == dataset.preview_assets
    assert stored.preview_assets.thumbnail_url is None
    assert stored.data_schema == dataset.data_schema


@pytest.mark.asyncio
async def test_dataset_without_subdocuments(dataset_repository):
    created = await dataset_repository.create(Dataset(name="Indoor Object Recognition"))

    stored = await dataset_repository.get_by_id(created.id)

    assert stored.preview_assets is None
    assert stored.data_schema is None
    assert stored.avg_rating is None


@pytest.mark.asyncio
async def test_simulator_config_round_trip(simulator_repository):
    config = {"physics_engine": "ODE", "real_time_factor": 1.0, "plugins": ["ros_bridge"]}

    created = await simulator_repository.create(Simulator(name="Gazebo Classic", type="gazebo", config=config))
    stored = await simulator_repository.get_by_id(created.id)

    assert stored.config == config


@pytest.mark.asyncio
async def test_duplicate_name_rejected(repo_repository, make_repository):
    await repo_repository.create(make_repository())

    with pytest.raises(DuplicateNameError):
        await repo_repository.create(make_repository())

    assert await repo_repository.count() == 1


@pytest.mark.asyncio
async def test_get_missing_raises_record_not_found(repo_repository):
    with pytest.raises(RecordNotFoundError):
        await repo_repository.get_by_id(str(uuid.uuid4()))
    with pytest.raises(RecordNotFoundError):
        await repo_repository.get_by_id("not-a-uuid")
    with pytest.raises(RecordNotFoundError):
        await repo_repository.get_by_name("nobody/nothing")


@pytest.mark.asyncio
async def test_list_paginates_most_recent_first(repo_repository, make_repository):
    """Two pages over three rows: newest two, then the oldest, no overlap."""
    oldest = await repo_repository.create(make_repository("org/one", minutes=0))
    middle = await repo_repository.create(make_repository("org/two", minutes=1))
    newest = await repo_repository.create(make_repository("org/three", minutes=2))

    first_page = await repo_repository.list(limit=2, offset=0)
    second_page = await repo_repository.list(limit=2, offset=2)

    assert [r.id for r in first_page] == [newest.id, middle.id]
    assert [r.id for r in second_page] == [oldest.id]


@pytest.mark.asyncio
async def test_list_without_limit_returns_everything(repo_repository, make_repository):
    for i in range(3):
        await repo_repository.create(make_repository(f"org/repo-{i}", minutes=i))

    assert len(await repo_repository.list(limit=0)) == 3
    assert len(await repo_repository.list(limit=10, offset=-5)) == 3
    assert await repo_repository.list(limit=10, offset=3) == []


@pytest.mark.asyncio
async def test_update_keeps_immutable_fields(repo_repository, make_repository):
    created = await repo_repository.create(make_repository())
    changed = created.model_copy(update={
        "name": "someone/else",
        "created_at": created.created_at + timedelta(days=30),
        "description": "Updated description",
        "tags": ["updated"],
        "owner": Owner(id="user-002", name="new-owner"),
    })

    updated = await repo_repository.update(changed)
    stored = await repo_repository.get_by_id(created.id)

    assert updated == stored
    assert stored.name == created.name
    assert stored.created_at == created.created_at
    assert stored.description == "Updated description"
    assert stored.tags == ["updated"]
    assert stored.owner.name == "new-owner"
    assert stored.updated_at >= created.updated_at


@pytest.mark.asyncio
async def test_update_missing_raises_record_not_found(repo_repository, make_repository):
    with pytest.raises(RecordNotFoundError):
        await repo_repository.update(make_repository(id=str(uuid.uuid4())))


@pytest.mark.asyncio
async def test_delete_is_idempotent(repo_repository, make_repository):
    created = await repo_repository.create(make_repository())

    await repo_repository.delete(created.id)
    await repo_repository.delete(created.id)
    await repo_repository.delete("not-a-uuid")

    assert await repo_repository.count() == 0


@pytest.mark.asyncio
async def test_corrupt_subdocument_propagates(database, repo_repository, make_repository):
    created = await repo_repository.create(make_repository())
    async with database.session() as session:
        await session.execute(
            update(RepositoryModel).where(RepositoryModel.id == created.id).values(owner="{not json")
        )
        await session.commit()

    with pytest.raises(CorruptSubdocumentError):
        await repo_repository.get_by_id(created.id)


@pytest.mark.asyncio
async def test_null_subdocument_column_reads_as_zero_value(database, package_repository, make_package):
    created = await package_repository.create(make_package())
    async with database.session() as session:
        await session.execute(
            update(PackageModel)
            .where(PackageModel.id == created.id)
            .values(validation_status=None, owner=None, tags=None)
        )
        await session.commit()

    stored = await package_repository.get_by_id(created.id)

    assert stored.validation_status == ValidationStatus()
    assert stored.owner == Owner()
    assert stored.tags == []


@pytest.mark.asyncio
async def test_count_by_repo(package_repository, make_package, make_repository):
    repo = make_repository(id=str(uuid.uuid4()))
    await package_repository.create(make_package("pkg_a", repo))
    await package_repository.create(make_package("pkg_b", repo))
    await package_repository.create(make_package("pkg_c"))

    assert await package_repository.count_by_repo(repo.id) == 2
    assert await package_repository.count_by_repo(str(uuid.uuid4())) == 0


@pytest.mark.asyncio
async def test_set_package_count(repo_repository, make_repository):
    created = await repo_repository.create(make_repository())

    await repo_repository.set_package_count(created.id, 7)

    assert (await repo_repository.get_by_id(created.id)).package_count == 7
    with pytest.raises(RecordNotFoundError):
        await repo_repository.set_package_count(str(uuid.uuid4()), 1)


@pytest.mark.asyncio
async def test_expired_deadline_raises_operation_canceled(repo_repository):
    async def slow_get(id):
        await asyncio.sleep(1)

    repo_repository._get_by_id = slow_get

    with pytest.raises(OperationCanceledError) as exc_info:
        await repo_repository.get_by_id(str(uuid.uuid4()), timeout=0.01)

    assert exc_info.value.details["operation"] == "repositories.get_by_id"


@pytest.mark.asyncio
async def test_task_cancellation_propagates(repo_repository):
    started = asyncio.Event()

    async def slow_list(limit, offset):
        started.set()
        await asyncio.sleep(1)

    repo_repository._list = slow_list
    task = asyncio.create_task(repo_repository.list(10, timeout=5))
    await started.wait()
    task.cancel()

    with pytest.raises(asyncio.CancelledError):
        await task


@pytest.mark.asyncio
async def test_deadline_not_hit_returns_normally(repo_repository, make_repository):
    created = await repo_repository.create(make_repository(), timeout=5)

    assert (await repo_repository.get_by_id(created.id, timeout=5)).id == created.id


@pytest.mark.asyncio
async def test_create_rejects_malformed_id(repo_repository, make_repository):
    with pytest.raises(InvalidInputError):
        await repo_repository.create(make_repository(id="repo-1"))

    assert await repo_repository.count() == 0


@pytest.mark.asyncio
async def test_stored_tags_have_no_repeats(database, repo_repository, make_repository):
    """Entities built with model_copy skip validation; the stored column is still a set."""
    created = await repo_repository.create(
        make_repository().model_copy(update={"tags": ["ros2", "nav", "ros2"]})
    )
    await repo_repository.update(created.model_copy(update={"tags": ["a", "b", "a", "b"]}))

    async with database.session() as session:
        stored_tags = await session.scalar(select(RepositoryModel.tags).where(RepositoryModel.id == created.id))

    assert created.tags == ["ros2", "nav"]
    assert stored_tags == ["a", "b"]


@pytest.mark.asyncio
async def test_out_of_vocabulary_column_raises_storage_error(database, scenario_repository):
    created = await scenario_repository.create(Scenario(name="Warehouse Navigation Basic", difficulty="easy"))
    async with database.session() as session:
        await session.execute(
            update(ScenarioModel).where(ScenarioModel.id == created.id).values(difficulty="impossible")
        )
        await session.commit()

    with pytest.raises(StorageError):
        await scenario_repository.get_by_id(created.id)
