"""
Favorite products relationship

FavoriteProducts plays the part of the customer_favorite_product join table
in memory. It owns one ordered collection per side of the relationship and
changes both in the same call, so a customer lists a product among its
favorites exactly when the product lists that customer. Entities never hold
references to each other.
"""

from collections.abc import Sequence
from typing import Dict, Iterable, List, Tuple

from favorites_store.domain.entities.customer_entity import Customer
from favorites_store.domain.entities.product_entity import Product
from favorites_store.domain.exceptions import ReadOnlyCollectionError


class ReadOnlyView(Sequence):
    """Live, read-only view over one side of the relationship"""

    def __init__(self, items: list):
        self._items = items

    def __getitem__(self, index):
        return self._items[index]

    def __len__(self) -> int:
        return len(self._items)

    def __eq__(self, other) -> bool:
        if isinstance(other, (ReadOnlyView, list, tuple)):
            return list(self) == list(other)
        return NotImplemented

    def __repr__(self) -> str:
        return f"ReadOnlyView({self._items!r})"

    def _reject(self, operation: str):
        raise ReadOnlyCollectionError(operation)

    def __setitem__(self, index, value):
        self._reject("assign to")

    def __delitem__(self, index):
        self._reject("delete from")

    def __iadd__(self, other):
        self._reject("extend")

    def append(self, item):
        self._reject("append to")

    def extend(self, items):
        self._reject("extend")

    def insert(self, index, item):
        self._reject("insert into")

    def remove(self, item):
        self._reject("remove from")

    def pop(self, index=-1):
        self._reject("pop from")

    def clear(self):
        self._reject("clear")

    def sort(self, *args, **kwargs):
        self._reject("sort")

    def reverse(self):
        self._reject("reverse")


class FavoriteProducts:
    """Keeps the customer/product favorites relationship symmetric"""

    def __init__(self):
        self._products_by_customer: Dict[Customer, List[Product]] = {}
        self._customers_by_product: Dict[Product, List[Customer]] = {}

    def add_favorite_product(self, customer: Customer, product: Product) -> None:
        """
        Add product to the customer's favorites and the customer to the
        product's customers.

        Adding the same pair twice records it twice on both sides.
        """
        self._products_by_customer.setdefault(customer, []).append(product)
        self._customers_by_product.setdefault(product, []).append(customer)

    def remove_favorite_product(self, customer: Customer, product: Product) -> None:
        """Remove one occurrence of the pair from both sides, if present"""
        products = self._products_by_customer.get(customer)
        if not products or product not in products:
            return
        products.remove(product)
        self._customers_by_product[product].remove(customer)

    def get_favorite_products(self, customer: Customer) -> ReadOnlyView:
        return ReadOnlyView(self._products_by_customer.setdefault(customer, []))

    def get_customers(self, product: Product) -> ReadOnlyView:
        return ReadOnlyView(self._customers_by_product.setdefault(product, []))

    def is_favorite(self, customer: Customer, product: Product) -> bool:
        return product in self._products_by_customer.get(customer, [])

    def replace_favorite_products(
        self, customer: Customer, products: Iterable[Product]
    ) -> None:
        """Drop the customer's current favorites and record the given ones"""
        for product in list(self._products_by_customer.get(customer, [])):
            self.remove_favorite_product(customer, product)
        for product in products:
            self.add_favorite_product(customer, product)

    def pairs(self) -> List[Tuple[Customer, Product]]:
        """All (customer, product) links, grouped by customer in insertion order"""
        return [
            (customer, product)
            for customer, products in self._products_by_customer.items()
            for product in products
        ]

    def __len__(self) -> int:
        return sum(len(products) for products in self._products_by_customer.values())

    def __repr__(self) -> str:
        return f"FavoriteProducts(links={len(self)})"
