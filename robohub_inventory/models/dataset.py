from sqlalchemy import Column, Float, Integer, JSON, String, Text

from robohub_inventory.models.base import Base
from robohub_inventory.models.custom_types import UTCDateTime, UUIDType


class DatasetModel(Base):
    """
    Table for recorded or synthetic datasets.

    Attributes:
        id (str): Primary key, UUID text
        name (str): Unique dataset name
        size_gb (float): Dataset size in gigabytes
        duration (int): Recording length in seconds
        preview_assets (str): Encoded PreviewAssets sub-document, NULL when absent
        data_schema (str): Encoded DatasetSchema sub-document, NULL when absent
    """
    __tablename__ = "datasets"

    id = Column(UUIDType, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    slug = Column(String, index=True)
    description = Column(String)
    detailed_description = Column(Text)

    # Classification
    type = Column(String, nullable=False)
    modality = Column(String, nullable=False)
    format = Column(String, nullable=False)
    license = Column(String, nullable=False)

    # Content
    tags = Column(JSON)
    whats_inside = Column(JSON)
    usage_notes = Column(Text)

    # Data information
    size_gb = Column(Float)
    samples_count = Column(Integer)
    sequences_count = Column(Integer)
    duration = Column(Integer)

    supported_scenarios = Column(JSON)
    robotics_platforms = Column(JSON)

    # Ownership
    source = Column(String, nullable=False)
    owner_type = Column(String, nullable=False)
    owner_id = Column(String, nullable=False, index=True)
    owner_name = Column(String)
    visibility = Column(String, nullable=False, default="public")

    preview_assets = Column(Text)
    data_schema = Column(Text)

    # Statistics
    download_count = Column(Integer, default=0)
    used_in_runs = Column(Integer, default=0)
    avg_rating = Column(Float)
    rating_count = Column(Integer)

    created_at = Column(UTCDateTime, nullable=False, index=True)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<Dataset {self.name}>"
