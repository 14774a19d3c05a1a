from sqlalchemy import Boolean, Column, Integer, JSON, String, Text

from robohub_inventory.models.base import Base
from robohub_inventory.models.custom_types import UTCDateTime, UUIDType


class RepositoryModel(Base):
    """
    Table for code repositories tracked by the catalog.

    Attributes:
        id (str): Primary key, UUID text
        name (str): Unique "org/repo" name
        provider (str): "github" | "gitlab" | "bitbucket"
        url (str): Full repository URL
        latest_commit (str): Encoded LatestCommit sub-document
        owner (str): Encoded Owner sub-document
        tags (JSON): List of tag strings
        package_count (int): Derived count of packages pointing at this repository
    """
    __tablename__ = "repositories"

    id = Column(UUIDType, primary_key=True)
    name = Column(String, unique=True, nullable=False)
    provider = Column(String, nullable=False)
    url = Column(String, nullable=False)
    description = Column(String)
    default_branch = Column(String, nullable=False, default="main")
    visibility = Column(String, nullable=False, default="public")

    # Sync information
    last_synced = Column(UTCDateTime)
    sync_status = Column(String, nullable=False, default="needs_attention")
    auto_sync = Column(Boolean, default=False)
    latest_commit = Column(Text)

    # Webhook configuration
    webhook_status = Column(String, default="inactive")
    webhook_id = Column(String)

    tags = Column(JSON)
    package_count = Column(Integer, default=0)
    owner = Column(Text)

    created_at = Column(UTCDateTime, nullable=False, index=True)
    updated_at = Column(UTCDateTime, nullable=False)

    def __repr__(self):
        return f"<Repository {self.name}>"
