"""
Test configuration and fixtures for the favorites store
"""

import os
from decimal import Decimal
from unittest.mock import patch

import pytest

from favorites_store.domain.entities.customer_entity import Customer
from favorites_store.domain.entities.favorites import FavoriteProducts
from favorites_store.domain.entities.product_entity import Product, ProductCategory
from favorites_store.infrastructure.configuration.config import Settings, reset_config
from favorites_store.infrastructure.database.operations import DatabaseManager, set_db_manager
from favorites_store.infrastructure.repositories.sqlalchemy_customer_repository import (
    SQLAlchemyCustomerRepository,
)
from favorites_store.infrastructure.repositories.sqlalchemy_product_repository import (
    SQLAlchemyProductRepository,
)


@pytest.fixture(autouse=True)
def mock_env():
    """Mock environment variables for testing"""
    test_env = {
        "DATABASE_URL": "sqlite://",
        "ENVIRONMENT": "test",
        "LOG_LEVEL": "DEBUG",
    }

    with patch.dict(os.environ, test_env, clear=True):
        reset_config()
        yield test_env
    reset_config()


@pytest.fixture
def store_settings():
    """Settings pointing at a private in-memory database"""
    return Settings(database_url="sqlite://", environment="test", _env_file=None)


@pytest.fixture
def db_manager(store_settings):
    """In-memory database installed as the global manager"""
    manager = DatabaseManager(store_settings)
    manager.create_tables()
    set_db_manager(manager)
    try:
        yield manager
    finally:
        set_db_manager(None)
        manager.drop_tables()
        manager.close()


@pytest.fixture
def customer_repository(db_manager):
    return SQLAlchemyCustomerRepository()


@pytest.fixture
def product_repository(db_manager):
    return SQLAlchemyProductRepository()


@pytest.fixture
def customers(customer_repository):
    """user1 and user2 active, user3 inactive"""
    return [
        customer_repository.save(Customer("user1", "First", "User")),
        customer_repository.save(Customer("user2", "Second", "User")),
        customer_repository.save(Customer("user3", "Third", "User", active=False)),
    ]


@pytest.fixture
def products(product_repository):
    """Two phones and one product matching "com" only through its name"""
    return [
        product_repository.save(
            Product("product1", "Smartphone", Decimal("499.99"), ProductCategory.PHONES)
        ),
        product_repository.save(
            Product("product2", "Flip handset", Decimal("89.50"), ProductCategory.PHONES)
        ),
        product_repository.save(Product("product3", "Commodore keyboard", None, None)),
    ]


@pytest.fixture
def customer_favorites(customers, products, customer_repository):
    """Customer 1 favorites product 3, then product 1"""
    favorites = FavoriteProducts()
    favorites.add_favorite_product(customers[0], products[2])
    favorites.add_favorite_product(customers[0], products[0])
    customer_repository.save_favorites(customers[0], favorites)
    return favorites
