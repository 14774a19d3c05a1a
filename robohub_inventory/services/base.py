"""
Base service wrapping one repository.

The service is the only surface the HTTP layer calls. It validates entities
before they reach storage and turns storage misses into the aggregate's own
not-found error. Every other error from the repository propagates as-is.
"""

import logging
from typing import Generic, List, Optional, Type, TypeVar

from robohub_inventory.exceptions import EntityNotFoundError, InvalidInputError, RecordNotFoundError
from robohub_inventory.repositories.base import BaseRepository, is_identifier
from robohub_inventory.schemas.common import Entity

E = TypeVar('E', bound=Entity)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 100


class BaseService(Generic[E]):
    """
    Generic CRUD service.

    Subclasses set ``not_found_error`` and extend ``validate`` with their
    required fields.
    """

    not_found_error: Type[EntityNotFoundError] = EntityNotFoundError

    def __init__(self, repository: BaseRepository[E], default_page_size: int = DEFAULT_PAGE_SIZE):
        """
        Initialize the service.

        Args:
            repository: Repository for this aggregate
            default_page_size: Page size used when list() gets limit <= 0
        """
        self.repository = repository
        self.default_page_size = default_page_size

    def validate(self, entity: E) -> None:
        """
        Check required fields before any storage call.

        Raises:
            InvalidInputError: If a required field is missing or malformed
        """
        if not entity.name or not entity.name.strip():
            raise InvalidInputError("name", "must not be empty")
        if entity.id is not None and not is_identifier(entity.id):
            raise InvalidInputError("id", "must be a UUID")

    async def create(self, entity: E, timeout: Optional[float] = None) -> E:
        self.validate(entity)
        created = await self.repository.create(entity, timeout=timeout)
        logger.info(f"Created {self.not_found_error.entity} {created.name} ({created.id})")
        return created

    async def get_by_id(self, id: str, timeout: Optional[float] = None) -> E:
        try:
            return await self.repository.get_by_id(id, timeout=timeout)
        except RecordNotFoundError as e:
            raise self.not_found_error(id) from e

    async def get_by_name(self, name: str, timeout: Optional[float] = None) -> E:
        try:
            return await self.repository.get_by_name(name, timeout=timeout)
        except RecordNotFoundError as e:
            raise self.not_found_error(name) from e

    async def list(self, limit: int = 0, offset: int = 0, timeout: Optional[float] = None) -> List[E]:
        """
        Get a page of entities, most recent first.

        Args:
            limit: Page size; zero or less means the default page size
            offset: Entities to skip
            timeout: Deadline in seconds
        """
        if limit <= 0:
            limit = self.default_page_size
        return await self.repository.list(limit, offset, timeout=timeout)

    async def update(self, entity: E, timeout: Optional[float] = None) -> E:
        """
        Replace an existing entity. Its name and creation time are kept.

        Raises:
            InvalidInputError: If validation fails or the id is missing
            EntityNotFoundError: If no entity has this id
        """
        if not entity.id:
            raise InvalidInputError("id", "is required for update")
        self.validate(entity)
        try:
            return await self.repository.update(entity, timeout=timeout)
        except RecordNotFoundError as e:
            raise self.not_found_error(entity.id) from e

    async def delete(self, id: str, timeout: Optional[float] = None) -> None:
        await self.repository.delete(id, timeout=timeout)
        logger.info(f"Deleted {self.not_found_error.entity} {id}")
