"""
Constants for the favorites store

Centralizes pool sizes, thresholds and error codes used across the
infrastructure layer.
"""

from typing import Final


class DatabaseSettings:
    """Database connection pool settings"""

    POOL_RECYCLE_SECONDS: Final[int] = 3600  # 1 hour
    CONNECTION_TIMEOUT_SECONDS: Final[int] = 30

    # Production settings
    PRODUCTION_POOL_SIZE: Final[int] = 20
    PRODUCTION_MAX_OVERFLOW: Final[int] = 30

    # Development settings
    DEVELOPMENT_POOL_SIZE: Final[int] = 5
    DEVELOPMENT_MAX_OVERFLOW: Final[int] = 10


class PerformanceSettings:
    """Performance monitoring thresholds"""

    SLOW_QUERY_THRESHOLD_MS: Final[int] = 1000
    MAX_LOGGED_STATEMENT_LENGTH: Final[int] = 200
    MAX_LOGGED_PARAMETERS_LENGTH: Final[int] = 100


class SchemaSettings:
    """Table names and column sizes"""

    CUSTOMER_TABLE: Final[str] = "customer"
    PRODUCT_TABLE: Final[str] = "product"
    FAVORITES_TABLE: Final[str] = "customer_favorite_product"

    USERNAME_LENGTH: Final[int] = 100
    NAME_LENGTH: Final[int] = 255
    CODE_LENGTH: Final[int] = 100
    CATEGORY_LENGTH: Final[int] = 50

    PRICE_PRECISION: Final[int] = 12
    PRICE_SCALE: Final[int] = 2


class SearchSettings:
    """Global search settings"""

    LIKE_ESCAPE_CHAR: Final[str] = "\\"


class ErrorCodes:
    """Standardized error codes"""

    GENERAL_ERROR: Final[str] = "GENERAL_ERROR"
    DATABASE_ERROR: Final[str] = "DATABASE_ERROR"
    READ_ONLY_COLLECTION: Final[str] = "READ_ONLY_COLLECTION"
    ENTITY_IDENTITY_ERROR: Final[str] = "ENTITY_IDENTITY_ERROR"
    ENTITY_NOT_FOUND: Final[str] = "ENTITY_NOT_FOUND"
