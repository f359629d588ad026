# pylint: disable=too-many-instance-attributes
"""
Product Entity and its category
"""

from dataclasses import dataclass, field
from decimal import Decimal
from enum import Enum
from typing import Optional

from favorites_store.domain.entities.entity import Entity
from favorites_store.domain.value_objects.entity_id import TRANSIENT, EntityId


class ProductCategory(Enum):
    """Closed set of product categories, stored by member name"""

    PHONES = "PHONES"

    @classmethod
    def from_name(cls, name: str) -> "ProductCategory":
        """Look a category up by its stored name"""
        try:
            return cls[name]
        except KeyError:
            raise ValueError(f"Unknown product category: {name}") from None


@dataclass(eq=False)
class Product(Entity):
    """Product domain entity"""

    code: str
    name: str
    price: Optional[Decimal]
    category: Optional[ProductCategory]
    in_stock: bool = True
    identity: EntityId = field(default=TRANSIENT, kw_only=True)

    def __post_init__(self):
        """Normalize price and category; required columns are checked by the store"""
        if self.price is not None and not isinstance(self.price, Decimal):
            self.price = Decimal(str(self.price))

        if isinstance(self.category, str):
            self.category = ProductCategory.from_name(self.category)

    def mark_out_of_stock(self) -> None:
        self.in_stock = False

    def restock(self) -> None:
        self.in_stock = True

    def __str__(self) -> str:
        return f"Product(id={self.identity}, code={self.code})"

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "id": self.id,
            "code": self.code,
            "name": self.name,
            "price": str(self.price) if self.price is not None else None,
            "in_stock": self.in_stock,
            "category": self.category.name if self.category else None,
        }
