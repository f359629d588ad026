"""
Customer Repository interface

Defines the contract for customer data access operations.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from ..entities.customer_entity import Customer
from ..entities.favorites import FavoriteProducts


class CustomerRepository(ABC):
    """
    Abstract repository interface for Customer entities

    Infrastructure layer provides concrete implementations.
    """

    @abstractmethod
    def save(self, customer: Customer) -> Customer:
        """
        Save or update a customer

        Args:
            customer: The customer entity to save

        Returns:
            The same customer, carrying its store-assigned ID
        """

    @abstractmethod
    def find_by_id(self, customer_id: int) -> Optional[Customer]:
        """
        Find a customer by their ID

        Args:
            customer_id: The customer's unique identifier

        Returns:
            The customer if found, None otherwise
        """

    @abstractmethod
    def find_by_username(self, username: str) -> Optional[Customer]:
        """Find a customer by username"""

    @abstractmethod
    def find_all(self) -> List[Customer]:
        """All customers in creation order"""

    @abstractmethod
    def find_all_active(self) -> List[Customer]:
        """
        Find every active customer

        Returns:
            Active customers in creation order
        """

    @abstractmethod
    def delete(self, customer_id: int) -> bool:
        """
        Delete a customer and its favorite links

        Returns:
            True if a customer was deleted, False if none matched
        """

    @abstractmethod
    def count(self) -> int:
        """Number of stored customers"""

    @abstractmethod
    def load_favorites(
        self, customer: Customer, favorites: FavoriteProducts
    ) -> FavoriteProducts:
        """
        Fetch the customer's favorite products into a relationship component

        Args:
            customer: A persisted customer
            favorites: The component to fill; the customer's current links
                in it are replaced

        Returns:
            The same component, for chaining
        """

    @abstractmethod
    def save_favorites(self, customer: Customer, favorites: FavoriteProducts) -> None:
        """
        Persist the customer's side of the relationship

        Replaces the stored links of the customer with the links recorded in
        the component, duplicates included.
        """
