"""
Base repository pattern implementation for the inventory tables.

One generic repository serves all five aggregates. A subclass only names
its SQLAlchemy model, its pydantic entity and the codecs of its
sub-document columns; the CRUD logic, pagination and error classification
live here.

Every public operation is a coroutine and accepts an optional ``timeout``
in seconds. When it expires the store call is abandoned and
``OperationCanceledError`` is raised. Cancelling the calling task
propagates ``asyncio.CancelledError`` unchanged.
"""

import asyncio
import logging
import uuid
from typing import Any, Awaitable, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from pydantic import ValidationError
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from robohub_inventory.adapters.database import DatabaseAdapter
from robohub_inventory.exceptions import (
    DuplicateNameError,
    InvalidInputError,
    OperationCanceledError,
    RecordNotFoundError,
    StorageError,
)
from robohub_inventory.models.base import Base
from robohub_inventory.models.custom_types import utcnow
from robohub_inventory.schemas.codec import SubdocumentCodec, decode_all, encode_all
from robohub_inventory.schemas.common import Entity, unique_tags

E = TypeVar('E', bound=Entity)
R = TypeVar('R')

logger = logging.getLogger(__name__)

# Never touched by update()
IMMUTABLE_FIELDS = frozenset({"id", "name", "created_at"})


def is_identifier(value: Any) -> bool:
    """Whether ``value`` is usable as a row identifier (UUID text)."""
    if not isinstance(value, str) or not value:
        return False
    try:
        uuid.UUID(value)
    except ValueError:
        return False
    return True


def canonical_identifier(value: str) -> str:
    """Lowercase, hyphenated UUID text, the form the id column stores."""
    return str(uuid.UUID(value))


class BaseRepository(Generic[E]):
    """
    Generic repository for one aggregate.

    Attributes:
        database (DatabaseAdapter): Store handle shared by all repositories
        model (Type[Base]): SQLAlchemy model class
        entity (Type[E]): Pydantic entity class
        subdocuments (Dict[str, SubdocumentCodec]): Codec per encoded column
    """

    model: Type[Base]
    entity: Type[E]
    subdocuments: Dict[str, SubdocumentCodec] = {}

    def __init__(self, database: DatabaseAdapter):
        """
        Initialize the repository with a store handle.

        Args:
            database (DatabaseAdapter): Connected database adapter
        """
        self.database = database

    @property
    def table_name(self) -> str:
        return self.model.__tablename__

    def _column_names(self) -> List[str]:
        return [column.key for column in self.model.__table__.columns]

    def _to_row(self, entity: E) -> Dict[str, Any]:
        """Column values for ``entity`` with sub-documents encoded."""
        values = {name: getattr(entity, name) for name in self._column_names()}
        if values.get("tags"):
            values["tags"] = unique_tags(values["tags"])
        return encode_all(self.subdocuments, values)

    def _to_entity(self, record: Base) -> E:
        """
        Rebuild an entity from a row.

        NULL columns fall back to the entity defaults, except sub-document
        columns, which decode to their zero value.

        Raises:
            CorruptSubdocumentError: If an encoded column cannot be decoded
            StorageError: If a plain column holds a value the entity rejects
        """
        values = {name: getattr(record, name) for name in self._column_names()}
        values = decode_all(self.subdocuments, values)
        try:
            return self.entity.model_validate(
                {name: value for name, value in values.items() if value is not None}
            )
        except ValidationError as e:
            logger.error(f"Unreadable {self.table_name} row {record.id}: {str(e)}")
            raise StorageError(f"{self.table_name} read of {record.id}", str(e)) from e

    async def _execute(self, operation: str, call: Awaitable[R], timeout: Optional[float]) -> R:
        """
        Await a store call, applying the deadline and classifying failures.

        Args:
            operation (str): Operation name for error messages
            call (Awaitable): The coroutine doing the work
            timeout (Optional[float]): Deadline in seconds

        Returns:
            Whatever ``call`` returns

        Raises:
            OperationCanceledError: If the deadline expires
            StorageError: For any SQLAlchemy failure not classified by ``call``
        """
        try:
            if timeout is None:
                return await call
            return await asyncio.wait_for(call, timeout)
        except asyncio.TimeoutError as e:
            if timeout is None:
                raise
            logger.warning(f"{self.table_name}.{operation} timed out after {timeout}s")
            raise OperationCanceledError(f"{self.table_name}.{operation}", timeout) from e
        except SQLAlchemyError as e:
            logger.error(f"Database error in {self.table_name}.{operation}: {str(e)}")
            raise StorageError(f"{self.table_name}.{operation}", str(e)) from e

    async def create(self, entity: E, timeout: Optional[float] = None) -> E:
        """
        Insert a new row.

        A missing id is generated and a supplied one is stored in canonical
        UUID form; ``created_at`` defaults to now and ``updated_at`` is
        always now. Repeated tags are dropped.

        Args:
            entity (E): Entity to insert
            timeout (Optional[float]): Deadline in seconds

        Returns:
            E: The stored entity, with id and timestamps filled in

        Raises:
            InvalidInputError: If a supplied id is not a UUID
            DuplicateNameError: If another row already has this name
        """
        return await self._execute("create", self._create(entity), timeout)

    async def _create(self, entity: E) -> E:
        if entity.id is not None and not is_identifier(entity.id):
            raise InvalidInputError("id", "must be a UUID")
        now = utcnow()
        entity = entity.model_copy(update={
            "id": canonical_identifier(entity.id) if entity.id else str(uuid.uuid4()),
            "tags": unique_tags(entity.tags),
            "created_at": entity.created_at or now,
            "updated_at": now,
        })
        async with self.database.session() as session:
            session.add(self.model(**self._to_row(entity)))
            try:
                await session.commit()
            except IntegrityError as e:
                await session.rollback()
                if await self._name_taken(session, entity.name):
                    raise DuplicateNameError(self.table_name, entity.name) from e
                raise
        logger.debug(f"Created {self.table_name} row {entity.id}")
        return entity

    async def _name_taken(self, session, name: str) -> bool:
        count = await session.scalar(
            select(func.count()).select_from(self.model).where(self.model.name == name)
        )
        return bool(count)

    async def get_by_id(self, id: str, timeout: Optional[float] = None) -> E:
        """
        Get a row by identifier.

        Raises:
            RecordNotFoundError: If no row has this identifier
        """
        return await self._execute("get_by_id", self._get_by_id(id), timeout)

    async def _get_by_id(self, id: str) -> E:
        if not is_identifier(id):
            raise RecordNotFoundError(self.table_name, "id", id)
        async with self.database.session() as session:
            record = await session.get(self.model, id)
            if record is None:
                raise RecordNotFoundError(self.table_name, "id", id)
            return self._to_entity(record)

    async def get_by_name(self, name: str, timeout: Optional[float] = None) -> E:
        """
        Get a row by its unique name.

        Raises:
            RecordNotFoundError: If no row has this name
        """
        return await self._execute("get_by_name", self._get_by_name(name), timeout)

    async def _get_by_name(self, name: str) -> E:
        async with self.database.session() as session:
            result = await session.execute(select(self.model).where(self.model.name == name))
            record = result.scalar_one_or_none()
            if record is None:
                raise RecordNotFoundError(self.table_name, "name", name)
            return self._to_entity(record)

    async def list(self, limit: int, offset: int = 0, timeout: Optional[float] = None) -> List[E]:
        """
        Get a page of rows, most recently created first.

        Args:
            limit (int): Maximum number of rows; zero or less means no limit
            offset (int): Rows to skip; negative values are treated as zero
            timeout (Optional[float]): Deadline in seconds

        Returns:
            List[E]: Entities ordered by creation time descending
        """
        return await self._execute("list", self._list(limit, offset), timeout)

    async def _list(self, limit: int, offset: int) -> List[E]:
        stmt = (
            select(self.model)
            .order_by(self.model.created_at.desc(), self.model.name)
            .offset(max(offset, 0))
        )
        if limit > 0:
            stmt = stmt.limit(limit)
        async with self.database.session() as session:
            result = await session.execute(stmt)
            return [self._to_entity(record) for record in result.scalars().all()]

    async def update(self, entity: E, timeout: Optional[float] = None) -> E:
        """
        Replace every mutable field of an existing row.

        ``id``, ``name`` and ``created_at`` keep their stored values;
        ``updated_at`` is set to now.

        Returns:
            E: The entity as stored after the update

        Raises:
            RecordNotFoundError: If no row has the entity's identifier
        """
        return await self._execute("update", self._update(entity), timeout)

    async def _update(self, entity: E) -> E:
        if not is_identifier(entity.id):
            raise RecordNotFoundError(self.table_name, "id", entity.id)
        async with self.database.session() as session:
            record = await session.get(self.model, entity.id)
            if record is None:
                raise RecordNotFoundError(self.table_name, "id", entity.id)
            for key, value in self._to_row(entity).items():
                if key not in IMMUTABLE_FIELDS:
                    setattr(record, key, value)
            record.updated_at = utcnow()
            await session.commit()
            return self._to_entity(record)

    async def delete(self, id: str, timeout: Optional[float] = None) -> None:
        """
        Delete a row by identifier. Deleting a missing row is not an error.
        """
        await self._execute("delete", self._delete(id), timeout)

    async def _delete(self, id: str) -> None:
        if not is_identifier(id):
            return
        async with self.database.session() as session:
            await session.execute(delete(self.model).where(self.model.id == id))
            await session.commit()

    async def count(self, timeout: Optional[float] = None, **filters: Any) -> int:
        """
        Count rows whose columns equal the given values.

        Args:
            timeout (Optional[float]): Deadline in seconds
            **filters: Column name to required value

        Returns:
            int: Number of matching rows
        """
        return await self._execute("count", self._count(filters), timeout)

    async def _count(self, filters: Dict[str, Any]) -> int:
        stmt = select(func.count()).select_from(self.model)
        for key, value in filters.items():
            stmt = stmt.where(getattr(self.model, key) == value)
        async with self.database.session() as session:
            return await session.scalar(stmt)
