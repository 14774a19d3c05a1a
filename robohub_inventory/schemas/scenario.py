"""
Pydantic models for test scenarios.
"""

from typing import List, Literal, Optional

from pydantic import Field

from robohub_inventory.schemas.codec import sequence
from robohub_inventory.schemas.common import OWNER_CODEC, Entity, Owner, SubDocument

Difficulty = Literal["easy", "medium", "hard"]


class RequiredInput(SubDocument):
    name: str
    type: str = ""
    description: str = ""


class SuccessCriterion(SubDocument):
    name: str
    description: str = ""
    threshold: str = ""
    unit: str = ""


class Scenario(Entity):
    """A test scenario packages are validated against"""
    slug: Optional[str] = None
    description: str = ""
    detailed_description: Optional[str] = None

    category: str = ""  # "navigation" | "perception" | "localization" | "planning"
    difficulty: Difficulty = "easy"
    maintained_by: str = ""  # "RoboHub" | "Community" | "Partner"
    verified: bool = False

    what_it_tests: List[str] = Field(default_factory=list)
    why_it_matters: str = ""
    real_world_analogs: List[str] = Field(default_factory=list)
    domain: str = ""  # "indoor" | "outdoor" | "urban" | "warehouse" | "mixed"

    supported_simulators: List[str] = Field(default_factory=list)
    recommended_datasets: List[str] = Field(default_factory=list)
    required_inputs: List[RequiredInput] = Field(default_factory=list)

    success_criteria: List[SuccessCriterion] = Field(default_factory=list)
    pass_definition: str = ""

    weekly_run_count: int = 0
    monthly_run_count: int = 0
    used_by_packages_count: int = 0
    used_by_stacks_count: int = 0
    average_pass_rate: float = 0.0

    owner: Owner = Field(default_factory=Owner)
    version: str = ""


REQUIRED_INPUTS_CODEC = sequence(RequiredInput, "required inputs")
SUCCESS_CRITERIA_CODEC = sequence(SuccessCriterion, "success criteria")

SCENARIO_SUBDOCUMENTS = {
    "required_inputs": REQUIRED_INPUTS_CODEC,
    "success_criteria": SUCCESS_CRITERIA_CODEC,
    "owner": OWNER_CODEC,
}
