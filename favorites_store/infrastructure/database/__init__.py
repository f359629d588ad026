"""
Database Infrastructure

Contains SQLAlchemy models and engine/session management.
"""

from .models import Base
from .models import Customer as CustomerModel
from .models import Product as ProductModel
from .models import customer_favorite_product
from .operations import DatabaseManager, get_db_manager, get_session, init_db, set_db_manager

__all__ = [
    "Base",
    "CustomerModel",
    "ProductModel",
    "customer_favorite_product",
    "DatabaseManager",
    "init_db",
    "get_db_manager",
    "get_session",
    "set_db_manager",
]
