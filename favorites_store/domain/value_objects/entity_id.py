"""
Entity identity value objects

An entity is either Transient (never stored) or Persisted with the surrogate
identifier the store assigned on creation.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Transient:
    """Identity of an entity that has not been stored yet"""

    @property
    def value(self) -> Optional[int]:
        return None

    def __str__(self) -> str:
        return "transient"


@dataclass(frozen=True)
class Persisted:
    """Identity assigned by the store"""

    value: int

    def __post_init__(self):
        """Validate the identifier"""
        if isinstance(self.value, bool) or not isinstance(self.value, int) or self.value <= 0:
            raise ValueError("Entity ID must be a positive integer")

    def __str__(self) -> str:
        return str(self.value)

    def __int__(self) -> int:
        return self.value


EntityId = Union[Transient, Persisted]

TRANSIENT = Transient()
