"""
Pydantic models for code repositories.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from robohub_inventory.schemas.codec import document
from robohub_inventory.schemas.common import OWNER_CODEC, Entity, Owner, SubDocument


class LatestCommit(SubDocument):
    """Most recent commit seen on the default branch"""
    hash: str = ""
    message: str = ""
    author: str = ""
    date: Optional[datetime] = None
    url: str = ""


class Repository(Entity):
    """
    A code repository tracked by the catalog.

    ``package_count`` is derived from the packages table and only recomputed
    by the seed loader.
    """
    provider: str = ""  # "github" | "gitlab" | "bitbucket"
    url: str = ""
    description: Optional[str] = None
    default_branch: str = "main"
    visibility: str = "public"  # "public" | "private"

    last_synced: Optional[datetime] = None
    sync_status: str = "needs_attention"  # "synced" | "syncing" | "needs_attention" | "error"
    auto_sync: bool = False
    latest_commit: LatestCommit = Field(default_factory=LatestCommit)

    webhook_status: str = "inactive"  # "active" | "inactive" | "error"
    webhook_id: Optional[str] = None

    package_count: int = 0
    owner: Owner = Field(default_factory=Owner)


LATEST_COMMIT_CODEC = document(LatestCommit)

REPOSITORY_SUBDOCUMENTS = {
    "latest_commit": LATEST_COMMIT_CODEC,
    "owner": OWNER_CODEC,
}
