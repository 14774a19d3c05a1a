"""
Pydantic models for simulators.
"""

from typing import Any, Dict

from pydantic import Field

from robohub_inventory.schemas.common import Entity


class Simulator(Entity):
    """A simulation environment; ``config`` is an opaque JSON document"""
    description: str = ""
    type: str = ""  # e.g. "gazebo", "unity", "custom"
    version: str = ""
    config: Dict[str, Any] = Field(default_factory=dict)
