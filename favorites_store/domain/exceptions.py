"""
Domain exceptions

Raised by the entities and the relationship component without touching the
store. The infrastructure error taxonomy builds on FavoritesStoreError.
"""


class FavoritesStoreError(Exception):
    """Base exception for the favorites store"""

    def __init__(self, message: str, error_code: str = None):
        super().__init__(message)
        self.message = message
        self.error_code = error_code or "GENERAL_ERROR"


class ReadOnlyCollectionError(FavoritesStoreError, TypeError):
    """A read-only relationship view was asked to change"""

    def __init__(self, operation: str):
        super().__init__(
            f"Cannot {operation} a read-only collection; "
            "use FavoriteProducts to change favorites",
            "READ_ONLY_COLLECTION",
        )
        self.operation = operation


class EntityIdentityError(FavoritesStoreError):
    """An entity identifier was assigned twice"""

    def __init__(self, entity_name: str, current_id: int, new_id: int):
        super().__init__(
            f"{entity_name} already has id {current_id}, refusing to assign {new_id}",
            "ENTITY_IDENTITY_ERROR",
        )
        self.entity_name = entity_name
        self.current_id = current_id
        self.new_id = new_id
