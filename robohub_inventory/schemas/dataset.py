"""
Pydantic models for datasets.
"""

from typing import List, Optional

from pydantic import Field

from robohub_inventory.schemas.codec import optional
from robohub_inventory.schemas.common import Entity, SubDocument


class PreviewAssets(SubDocument):
    thumbnail_url: Optional[str] = None
    sample_frames: List[str] = Field(default_factory=list)
    video_preview: Optional[str] = None


class Topic(SubDocument):
    """A ROS topic recorded in the dataset"""
    name: str
    message_type: str = ""
    frequency: str = ""
    description: str = ""


class DataSplit(SubDocument):
    name: str
    percentage: float = 0.0
    description: str = ""


class DatasetSchema(SubDocument):
    topics: List[Topic] = Field(default_factory=list)
    data_splits: Optional[List[DataSplit]] = None


class Dataset(Entity):
    """
    A recorded or synthetic dataset.

    ``data_schema`` is exposed as ``schema`` in JSON; the attribute name
    avoids clashing with ``BaseModel`` internals.
    """
    slug: Optional[str] = None
    description: str = ""
    detailed_description: Optional[str] = None

    type: str = ""  # "autonomous-driving" | "robotics" | "indoor-mapping" | "synthetic"
    modality: str = ""  # "camera" | "lidar" | "radar" | "imu" | "gps" | "multimodal"
    format: str = ""  # "rosbag2" | "bag" | "parquet" | "custom"
    license: str = ""

    whats_inside: List[str] = Field(default_factory=list)
    usage_notes: Optional[str] = None

    size_gb: float = Field(default=0.0, alias="sizeGB")
    samples_count: int = 0
    sequences_count: Optional[int] = None
    duration: Optional[int] = None  # seconds

    supported_scenarios: List[str] = Field(default_factory=list)
    robotics_platforms: List[str] = Field(default_factory=list)

    source: str = ""  # "uploaded" | "external_link" | "partner"
    owner_type: str = ""  # "user" | "organization"
    owner_id: str = ""
    owner_name: str = ""
    visibility: str = "public"

    preview_assets: Optional[PreviewAssets] = None
    data_schema: Optional[DatasetSchema] = Field(default=None, alias="schema")

    download_count: int = 0
    used_in_runs: int = 0
    avg_rating: Optional[float] = None
    rating_count: Optional[int] = None


PREVIEW_ASSETS_CODEC = optional(PreviewAssets)
DATASET_SCHEMA_CODEC = optional(DatasetSchema)

DATASET_SUBDOCUMENTS = {
    "preview_assets": PREVIEW_ASSETS_CODEC,
    "data_schema": DATASET_SCHEMA_CODEC,
}
