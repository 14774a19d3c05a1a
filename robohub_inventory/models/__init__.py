"""
This package contains the database models for the inventory tables.
"""

from robohub_inventory.models.base import Base
from robohub_inventory.models.repository import RepositoryModel
from robohub_inventory.models.package import PackageModel
from robohub_inventory.models.scenario import ScenarioModel
from robohub_inventory.models.dataset import DatasetModel
from robohub_inventory.models.simulator import SimulatorModel

__all__ = ['Base', 'RepositoryModel', 'PackageModel', 'ScenarioModel', 'DatasetModel', 'SimulatorModel']
