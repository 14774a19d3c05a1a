"""
Unit tests for the sub-document codecs.
"""

import json
from datetime import datetime, timezone

import pytest

from robohub_inventory.exceptions import CorruptSubdocumentError
from robohub_inventory.schemas.codec import decode_all, encode_all
from robohub_inventory.schemas.common import OWNER_CODEC, Owner
from robohub_inventory.schemas.dataset import DATASET_SCHEMA_CODEC, DataSplit, DatasetSchema, Topic
from robohub_inventory.schemas.package import (
    DEPENDENCIES_CODEC,
    LAST_RUN_CODEC,
    VALIDATION_STATUS_CODEC,
    Dependency,
    LastRun,
    ValidationStatus,
)
from robohub_inventory.schemas.repository import LATEST_COMMIT_CODEC, LatestCommit


def test_document_uses_camel_case_keys():
    """Encoded sub-documents use the platform's camelCase JSON keys."""
    raw = VALIDATION_STATUS_CODEC.encode(ValidationStatus(status="pass", pass_rate=95.5))

    assert json.loads(raw) == {"status": "pass", "passRate": 95.5}


def test_document_omits_absent_optional_fields():
    raw = OWNER_CODEC.encode(Owner(id="user-001", name="ros-planning"))

    assert "avatarUrl" not in json.loads(raw)
    assert OWNER_CODEC.decode(raw).avatar_url is None


def test_document_null_decodes_to_default_instance():
    assert OWNER_CODEC.decode(None) == Owner()
    assert LATEST_COMMIT_CODEC.decode(None) == LatestCommit()


def test_document_keeps_timestamps():
    commit = LatestCommit(
        hash="a1b2c3",
        message="Add planner",
        author="John Doe",
        date=datetime(2024, 5, 1, 8, 30, tzinfo=timezone.utc),
        url="https://example.com/commit/a1b2c3",
    )

    assert LATEST_COMMIT_CODEC.decode(LATEST_COMMIT_CODEC.encode(commit)) == commit


def test_optional_none_is_stored_as_null():
    assert LAST_RUN_CODEC.encode(None) is None
    assert LAST_RUN_CODEC.decode(None) is None


def test_optional_present_value_survives():
    run = LastRun(status="fail", scenario_id="scenario-1")

    assert LAST_RUN_CODEC.decode(LAST_RUN_CODEC.encode(run)) == run


def test_sequence_empty_list_is_stored_as_null():
    """An empty list and a NULL column mean the same thing."""
    assert DEPENDENCIES_CODEC.encode([]) is None
    assert DEPENDENCIES_CODEC.decode(None) == []


def test_sequence_keeps_order():
    deps = [Dependency(name="nav2_core", version="1.1.9"), Dependency(name="nav2_util", version="1.1.9")]

    decoded = DEPENDENCIES_CODEC.decode(DEPENDENCIES_CODEC.encode(deps))

    assert [d.name for d in decoded] == ["nav2_core", "nav2_util"]


def test_nested_optional_list_stays_absent():
    """A schema without data splits does not come back with an empty list."""
    schema = DatasetSchema(topics=[Topic(name="/scan", message_type="sensor_msgs/LaserScan")])

    raw = DATASET_SCHEMA_CODEC.encode(schema)
    decoded = DATASET_SCHEMA_CODEC.decode(raw)

    assert "dataSplits" not in json.loads(raw)
    assert decoded.data_splits is None
    assert decoded.topics[0].message_type == "sensor_msgs/LaserScan"


def test_nested_list_survives():
    schema = DatasetSchema(data_splits=[DataSplit(name="train", percentage=80), DataSplit(name="val", percentage=20)])

    assert DATASET_SCHEMA_CODEC.decode(DATASET_SCHEMA_CODEC.encode(schema)) == schema


@pytest.mark.parametrize("raw", ["not json", '{"passRate": "high"}', "[1, 2]"])
def test_malformed_text_raises_corrupt_subdocument(raw):
    with pytest.raises(CorruptSubdocumentError) as exc_info:
        VALIDATION_STATUS_CODEC.decode(raw)

    assert exc_info.value.details["subdocument"] == "ValidationStatus"


def test_encode_all_only_touches_codec_fields():
    values = {"name": "pkg", "owner": Owner(name="me"), "dependencies": []}
    codecs = {"owner": OWNER_CODEC, "dependencies": DEPENDENCIES_CODEC}

    encoded = encode_all(codecs, values)

    assert encoded["name"] == "pkg"
    assert json.loads(encoded["owner"]) == {"id": "", "name": "me"}
    assert encoded["dependencies"] is None
    assert isinstance(values["owner"], Owner)


def test_decode_all_fills_zero_values():
    codecs = {"owner": OWNER_CODEC, "dependencies": DEPENDENCIES_CODEC, "last_run": LAST_RUN_CODEC}

    decoded = decode_all(codecs, {"owner": None, "dependencies": None, "last_run": None})

    assert decoded == {"owner": Owner(), "dependencies": [], "last_run": None}
