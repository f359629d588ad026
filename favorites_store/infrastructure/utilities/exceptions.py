"""
Custom exceptions for the favorites store

Store-level failures (constraint violations, connection problems) are not
wrapped: they reach the caller as the SQLAlchemy errors they are.
"""

from favorites_store.domain.exceptions import (
    EntityIdentityError,
    FavoritesStoreError,
    ReadOnlyCollectionError,
)
from favorites_store.infrastructure.utilities.constants import ErrorCodes

__all__ = [
    "DatabaseOperationError",
    "EntityIdentityError",
    "EntityNotFoundError",
    "FavoritesStoreError",
    "ReadOnlyCollectionError",
]


class EntityNotFoundError(FavoritesStoreError):
    """A persisted entity has no matching row"""

    def __init__(self, entity_name: str, entity_id: int):
        super().__init__(
            f"{entity_name} with id {entity_id} not found",
            ErrorCodes.ENTITY_NOT_FOUND,
        )
        self.entity_name = entity_name
        self.entity_id = entity_id


class DatabaseOperationError(FavoritesStoreError):
    """Schema management failed"""

    def __init__(self, message: str, operation: str = None):
        super().__init__(message, ErrorCodes.DATABASE_ERROR)
        self.operation = operation
