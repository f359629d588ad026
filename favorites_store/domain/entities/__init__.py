"""
Domain entities package

Customers, products and the favorites relationship between them.
"""

from .customer_entity import Customer
from .entity import Entity
from .favorites import FavoriteProducts, ReadOnlyView
from .product_entity import Product, ProductCategory

__all__ = [
    "Customer",
    "Entity",
    "FavoriteProducts",
    "Product",
    "ProductCategory",
    "ReadOnlyView",
]
