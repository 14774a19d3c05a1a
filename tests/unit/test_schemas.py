"""
Unit tests for the aggregate models.
"""

import pytest
from pydantic import ValidationError

from robohub_inventory.schemas import Dataset, DatasetSchema, Package, Repository, Scenario, Simulator, ValidationStatus


def test_tags_behave_as_a_set():
    repo = Repository(name="org/repo", tags=["ros2", "nav", "ros2", "nav", "perception"])

    assert repo.tags == ["ros2", "nav", "perception"]


def test_repository_defaults():
    repo = Repository(name="org/repo")

    assert repo.id is None
    assert repo.default_branch == "main"
    assert repo.visibility == "public"
    assert repo.sync_status == "needs_attention"
    assert repo.webhook_status == "inactive"
    assert repo.package_count == 0
    assert repo.owner.name == ""


def test_entities_accept_camel_case_input():
    package = Package.model_validate({
        "name": "nav2_planner",
        "displayName": "Nav2 Planner",
        "latestVersion": "1.1.9",
        "validationStatus": {"status": "fail", "passRate": 12.5},
    })

    assert package.display_name == "Nav2 Planner"
    assert package.validation_status == ValidationStatus(status="fail", pass_rate=12.5)


def test_dataset_json_keys():
    """Dataset exposes its schema as ``schema`` and its size as ``sizeGB``."""
    dataset = Dataset(name="warehouse", size_gb=15.5, data_schema=DatasetSchema())

    dumped = dataset.model_dump(by_alias=True)

    assert dumped["sizeGB"] == 15.5
    assert "schema" in dumped
    assert Dataset.model_validate(dumped).data_schema == DatasetSchema()


def test_pass_rate_range_is_not_enforced():
    """Percentages outside 0-100 are accepted as-is."""
    assert ValidationStatus(pass_rate=150.0).pass_rate == 150.0
    assert Scenario(name="s", average_pass_rate=-5).average_pass_rate == -5


@pytest.mark.parametrize("status", ["passed", "ok", ""])
def test_run_status_is_restricted(status):
    with pytest.raises(ValidationError):
        ValidationStatus(status=status)


def test_difficulty_is_restricted():
    with pytest.raises(ValidationError):
        Scenario(name="s", difficulty="impossible")


def test_simulator_config_is_free_form():
    config = {"physics_engine": "ODE", "nested": {"steps": [1, 2, 3]}, "headless": True}

    assert Simulator(name="gazebo", config=config).config == config
