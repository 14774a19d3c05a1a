from sqlalchemy import Boolean, Column, Float, Integer, JSON, String, Text

from robohub_inventory.models.base import Base
from robohub_inventory.models.custom_types import UTCDateTime, UUIDType


class ScenarioModel(Base):
    """
    Table for test scenarios.

    Attributes:
        id (str): Primary key, UUID text
        name (str): Unique scenario name
        difficulty (str): "easy" | "medium" | "hard"
        required_inputs (str): Encoded list of required inputs, NULL when empty
        success_criteria (str): Encoded list of success criteria, NULL when empty
        average_pass_rate (float): 0-100 by convention
    """
    __tablename__ = "scenarios"

    id = Column(UUIDType, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    slug = Column(String, index=True)
    description = Column(String)
    detailed_description = Column(Text)

    # Classification
    category = Column(String, nullable=False)
    difficulty = Column(String, nullable=False)
    maintained_by = Column(String, nullable=False)
    verified = Column(Boolean, default=False)

    # Content
    what_it_tests = Column(JSON)
    why_it_matters = Column(String)
    real_world_analogs = Column(JSON)
    domain = Column(String)

    supported_simulators = Column(JSON)
    recommended_datasets = Column(JSON)
    required_inputs = Column(Text)

    success_criteria = Column(Text)
    pass_definition = Column(Text)

    # Statistics
    weekly_run_count = Column(Integer, default=0)
    monthly_run_count = Column(Integer, default=0)
    used_by_packages_count = Column(Integer, default=0)
    used_by_stacks_count = Column(Integer, default=0)
    average_pass_rate = Column(Float, default=0)

    tags = Column(JSON)
    owner = Column(Text)
    version = Column(String)

    created_at = Column(UTCDateTime, nullable=False, index=True)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<Scenario {self.name}>"
