"""
Shared pieces of the inventory aggregates.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from robohub_inventory.schemas.codec import document


def unique_tags(tags: List[str]) -> List[str]:
    """Drop repeated tags, keeping the first occurrence of each."""
    return list(dict.fromkeys(tags))


class SubDocument(BaseModel):
    """Base model for structured values stored inside a single column."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class Owner(SubDocument):
    """Owner of a repository, package or scenario"""
    id: str = ""
    name: str = ""
    avatar_url: Optional[str] = None


class Entity(BaseModel):
    """
    Fields every aggregate carries.

    ``id`` is assigned by the repository on create when left empty. ``tags``
    behaves as a set: duplicates are dropped, first occurrence wins.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[str] = None
    name: str = ""
    tags: List[str] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @field_validator("tags")
    @classmethod
    def dedupe_tags(cls, tags: List[str]) -> List[str]:
        return unique_tags(tags)


OWNER_CODEC = document(Owner)
