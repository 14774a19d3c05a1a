"""
Custom exceptions for the inventory core.

Storage-level errors are raised by the repositories; the services translate
record misses into the aggregate-specific not-found errors below. Each class
carries an ``http_status`` hint for the HTTP layer that calls the services.
"""

from typing import Any, Dict, Optional


class InventoryError(Exception):
    """Base exception for all inventory errors."""

    http_status = 500

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class InvalidInputError(InventoryError):
    """Raised when an entity fails validation before reaching storage."""

    http_status = 400

    def __init__(self, field: str, reason: str):
        super().__init__(
            message=f"Invalid {field}: {reason}",
            details={"field": field, "reason": reason},
        )
        self.field = field


class RecordNotFoundError(InventoryError):
    """Raised by a repository when no row matches the lookup."""

    http_status = 404

    def __init__(self, table: str, key: str, value: Any):
        super().__init__(
            message=f"No row in {table} with {key}={value!r}",
            details={"table": table, "key": key, "value": value},
        )


class EntityNotFoundError(InventoryError):
    """Base class for the public, aggregate-specific not-found errors."""

    http_status = 404
    entity = "entity"

    def __init__(self, lookup: Any):
        super().__init__(
            message=f"{self.entity} not found: {lookup}",
            details={"lookup": lookup},
        )


class RepositoryNotFoundError(EntityNotFoundError):
    entity = "repository"


class PackageNotFoundError(EntityNotFoundError):
    entity = "package"


class ScenarioNotFoundError(EntityNotFoundError):
    entity = "scenario"


class DatasetNotFoundError(EntityNotFoundError):
    entity = "dataset"


class SimulatorNotFoundError(EntityNotFoundError):
    entity = "simulator"


class DuplicateNameError(InventoryError):
    """Raised when the unique-name constraint rejects a create."""

    def __init__(self, table: str, name: str):
        super().__init__(
            message=f"{table} already contains a row named {name!r}",
            details={"table": table, "name": name},
        )


class CorruptSubdocumentError(InventoryError):
    """Raised when a stored sub-document cannot be decoded."""

    def __init__(self, subdocument: str, reason: str):
        super().__init__(
            message=f"Stored {subdocument} is corrupt: {reason}",
            details={"subdocument": subdocument, "reason": reason},
        )


class OperationCanceledError(InventoryError):
    """Raised when a store call is aborted because its deadline expired."""

    http_status = 503

    def __init__(self, operation: str, timeout: float):
        super().__init__(
            message=f"{operation} exceeded its {timeout}s deadline",
            details={"operation": operation, "timeout": timeout},
        )


class StorageError(InventoryError):
    """Raised for any unclassified failure of the relational store."""

    def __init__(self, operation: str, reason: str):
        super().__init__(
            message=f"Storage failure during {operation}: {reason}",
            details={"operation": operation, "reason": reason},
        )
