"""Data source exceptions.

Transport and service failures raised by the vendor SDKs are not wrapped here;
they reach the caller unchanged.
"""

from typing import Any, Optional


class DataSourceError(Exception):
    """Base class for data source errors."""


class EntityNotFoundError(DataSourceError):
    """Raised when a single-entity read targets an identifier that does not exist."""

    def __init__(self, entity_type: str, entity_id: str) -> None:
        super().__init__(f"{entity_type} {entity_id} not found")
        self.entity_type = entity_type
        self.entity_id = entity_id


class InvalidFilterError(DataSourceError):
    """Raised when a filter predicate cannot be compiled."""

    def __init__(self, name: str, pattern: str, reason: str) -> None:
        super().__init__(f"Invalid regex {pattern!r} in filter on {name!r}: {reason}")
        self.name = name
        self.pattern = pattern


class DataSourceValidationError(DataSourceError):
    """Raised when data source arguments fail validation."""

    def __init__(self, message: str, errors: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.errors = errors or {}


class DataSourceConfigurationError(DataSourceError):
    """Raised when configuration cannot be loaded or is invalid."""
