"""
Customer domain entity

Favorite products are not held on the customer; they are read and changed
through FavoriteProducts.
"""

from dataclasses import dataclass, field

from favorites_store.domain.entities.entity import Entity
from favorites_store.domain.value_objects.entity_id import TRANSIENT, EntityId


@dataclass(eq=False)
class Customer(Entity):
    """Customer domain entity"""

    username: str
    first_name: str
    last_name: str
    active: bool = True
    identity: EntityId = field(default=TRANSIENT, kw_only=True)

    def activate(self) -> None:
        self.active = True

    def deactivate(self) -> None:
        self.active = False

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    def __str__(self) -> str:
        return f"Customer(id={self.identity}, username={self.username})"

    def to_dict(self) -> dict:
        """Convert to dictionary representation"""
        return {
            "id": self.id,
            "username": self.username,
            "first_name": self.first_name,
            "last_name": self.last_name,
            "active": self.active,
        }
