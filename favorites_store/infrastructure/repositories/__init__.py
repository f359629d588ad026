"""
SQLAlchemy repository implementations
"""

from .sqlalchemy_customer_repository import SQLAlchemyCustomerRepository
from .sqlalchemy_product_repository import SQLAlchemyProductRepository

__all__ = [
    "SQLAlchemyCustomerRepository",
    "SQLAlchemyProductRepository",
]
