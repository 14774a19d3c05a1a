"""
Custom SQLAlchemy types for database compatibility across different database engines.

These types behave the same on SQLite and PostgreSQL so the repositories
never have to look at the dialect.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.types import DateTime, String, TypeDecorator


class UUIDType(TypeDecorator):
    """
    Platform-independent UUID identifier exposed to Python as text.

    This type automatically adapts to the database being used:
    - For PostgreSQL: Uses the native UUID type
    - For other databases (SQLite, MySQL, etc.): Uses String(36)

    Identifiers are opaque strings to the rest of the code base, so values
    are bound and returned as canonical lowercase UUID text.

    Usage:
        ```python
        from robohub_inventory.models.custom_types import UUIDType

        class MyModel(Base):
            __tablename__ = "my_table"

            id = Column(UUIDType, primary_key=True)
        ```
    """

    impl = String
    cache_ok = True

    def load_dialect_impl(self, dialect):
        """
        Return a dialect-specific implementation for this type.

        Args:
            dialect: The SQLAlchemy dialect being used

        Returns:
            A dialect-specific type descriptor (UUID for PostgreSQL, String for others)
        """
        if dialect.name == 'postgresql':
            return dialect.type_descriptor(UUID(as_uuid=False))
        return dialect.type_descriptor(String(36))

    def process_bind_param(self, value, dialect):
        """
        Normalize the identifier before it is bound to a statement.

        Args:
            value: uuid.UUID or UUID text
            dialect: The SQLAlchemy dialect being used

        Returns:
            Canonical UUID text, or None
        """
        if value is None:
            return value
        if isinstance(value, uuid.UUID):
            return str(value)
        return str(uuid.UUID(str(value)))

    def process_result_value(self, value, dialect):
        """
        Return the stored identifier as text.

        Args:
            value: The database value (str or uuid.UUID depending on driver)
            dialect: The SQLAlchemy dialect being used

        Returns:
            str or None
        """
        if value is None:
            return value
        return str(value)


class UTCDateTime(TypeDecorator):
    """
    Timezone-aware UTC timestamp on every backend.

    SQLite has no timezone storage, so values are stored as naive UTC and
    re-tagged with UTC when loaded. Naive values written by callers are
    assumed to already be UTC.
    """

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        else:
            value = value.astimezone(timezone.utc)
        if dialect.name == 'sqlite':
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return value
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)
