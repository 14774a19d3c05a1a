"""
Pydantic models for the inventory aggregates and their sub-documents.
"""

from robohub_inventory.schemas.common import Entity, Owner, SubDocument
from robohub_inventory.schemas.repository import LatestCommit, Repository
from robohub_inventory.schemas.package import Dependency, LastRun, Package, ValidationStatus
from robohub_inventory.schemas.scenario import RequiredInput, Scenario, SuccessCriterion
from robohub_inventory.schemas.dataset import DataSplit, Dataset, DatasetSchema, PreviewAssets, Topic
from robohub_inventory.schemas.simulator import Simulator

__all__ = [
    'Entity', 'Owner', 'SubDocument',
    'LatestCommit', 'Repository',
    'Dependency', 'LastRun', 'Package', 'ValidationStatus',
    'RequiredInput', 'Scenario', 'SuccessCriterion',
    'DataSplit', 'Dataset', 'DatasetSchema', 'PreviewAssets', 'Topic',
    'Simulator',
]
