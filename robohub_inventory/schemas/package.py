"""
Pydantic models for software packages.
"""

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import Field

from robohub_inventory.schemas.codec import document, optional, sequence
from robohub_inventory.schemas.common import OWNER_CODEC, Entity, Owner, SubDocument

RunStatus = Literal["pass", "fail", "pending"]


class ValidationStatus(SubDocument):
    """Result of the latest validation run; pass_rate is 0-100 by convention only"""
    last_validated: Optional[datetime] = None
    status: RunStatus = "pending"
    pass_rate: float = 0.0


class LastRun(SubDocument):
    status: RunStatus = "pending"
    run_at: Optional[datetime] = None
    scenario_id: str = ""


class Dependency(SubDocument):
    name: str
    version: str = ""


class Package(Entity):
    """
    A software package built from a repository.

    ``repo_id`` points at a Repository; ``repo_name`` is a denormalized copy
    of that repository's name.
    """
    display_name: str = ""
    description: str = ""
    documentation: Optional[str] = None

    repo_id: str = ""
    repo_name: str = ""
    path: str = ""

    types: List[str] = Field(default_factory=list)
    latest_version: str = ""
    versions: List[str] = Field(default_factory=list)
    keywords: List[str] = Field(default_factory=list)

    validation_status: ValidationStatus = Field(default_factory=ValidationStatus)

    linked_scenarios_count: int = 0
    linked_datasets_count: int = 0
    used_in_collections_count: int = 0

    owner: Owner = Field(default_factory=Owner)
    last_run: Optional[LastRun] = None
    license: Optional[str] = None
    dependencies: List[Dependency] = Field(default_factory=list)


VALIDATION_STATUS_CODEC = document(ValidationStatus)
LAST_RUN_CODEC = optional(LastRun)
DEPENDENCIES_CODEC = sequence(Dependency, "dependencies")

PACKAGE_SUBDOCUMENTS = {
    "validation_status": VALIDATION_STATUS_CODEC,
    "owner": OWNER_CODEC,
    "last_run": LAST_RUN_CODEC,
    "dependencies": DEPENDENCIES_CODEC,
}
