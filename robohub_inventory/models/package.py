from sqlalchemy import Column, Integer, JSON, String, Text

from robohub_inventory.models.base import Base
from robohub_inventory.models.custom_types import UTCDateTime, UUIDType


class PackageModel(Base):
    """
    Table for software packages published from a repository.

    ``repo_id`` is indexed but deliberately has no foreign key: deleting a
    repository leaves its packages in place.

    Attributes:
        id (str): Primary key, UUID text
        name (str): Unique package name
        repo_id (str): Identifier of the owning repository
        repo_name (str): Denormalized "org/repo" name of the owning repository
        validation_status (str): Encoded ValidationStatus sub-document
        last_run (str): Encoded LastRun sub-document, NULL when never run
        dependencies (str): Encoded dependency list, NULL when empty
    """
    __tablename__ = "packages"

    id = Column(UUIDType, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    display_name = Column(String)
    description = Column(String)
    documentation = Column(Text)

    # Repository information
    repo_id = Column(String, index=True)
    repo_name = Column(String)
    path = Column(String)

    types = Column(JSON)
    latest_version = Column(String)
    versions = Column(JSON)
    tags = Column(JSON)
    keywords = Column(JSON)

    validation_status = Column(Text)

    linked_scenarios_count = Column(Integer, default=0)
    linked_datasets_count = Column(Integer, default=0)
    used_in_collections_count = Column(Integer, default=0)

    owner = Column(Text)
    last_run = Column(Text)
    license = Column(String)
    dependencies = Column(Text)

    created_at = Column(UTCDateTime, nullable=False, index=True)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<Package {self.name}>"
