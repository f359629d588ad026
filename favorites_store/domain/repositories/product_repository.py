"""
Product repository interface

Defines the contract for product data access operations.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List, Optional

from ..entities.product_entity import Product, ProductCategory


class ProductRepository(ABC):
    """Repository interface for product operations"""

    @abstractmethod
    def save(self, product: Product) -> Product:
        """Save product"""

    @abstractmethod
    def find_by_id(self, product_id: int) -> Optional[Product]:
        """Find product by ID"""

    @abstractmethod
    def find_by_code(self, code: str) -> Optional[Product]:
        """Find product by code"""

    @abstractmethod
    def find_all(self) -> List[Product]:
        """Find all products"""

    @abstractmethod
    def find_in_stock(self) -> List[Product]:
        """Find products that are in stock"""

    @abstractmethod
    def find_by_category(self, category: ProductCategory) -> List[Product]:
        """Find products by category"""

    @abstractmethod
    def find_by_global_search(self, search: str) -> List[Product]:
        """
        Find products whose code, name or category name contains the term

        Matching is case-insensitive and an empty term matches every product.
        """

    @abstractmethod
    def find_favorite_by_customer_id(self, customer_id: int) -> List[Product]:
        """Products favorited by the customer, ascending by product ID"""

    @abstractmethod
    def set_out_of_stock_by_ids(self, product_ids: Iterable[int]) -> int:
        """
        Mark the given products out of stock in a single statement

        Returns:
            Number of rows updated; unknown IDs are ignored
        """

    @abstractmethod
    def delete(self, product_id: int) -> bool:
        """Delete product"""

    @abstractmethod
    def count(self) -> int:
        """Number of stored products"""
