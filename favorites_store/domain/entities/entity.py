"""
Base class for persisted domain entities

Equality is identity-based: two entities are equal only when both carry a
store-assigned identifier of the same entity type and the identifiers match.
A transient entity equals nothing but itself. The hash depends on the entity
type alone so that it survives identifier assignment while the entity sits
in a set or dict key.
"""

from typing import Optional

from favorites_store.domain.value_objects.entity_id import EntityId, Persisted, Transient
from favorites_store.domain.exceptions import EntityIdentityError


class Entity:
    """Mixin giving dataclass entities their identity semantics"""

    identity: EntityId

    @property
    def id(self) -> Optional[int]:
        """Store-assigned identifier, or None while transient"""
        return self.identity.value

    @property
    def is_persisted(self) -> bool:
        return isinstance(self.identity, Persisted)

    def mark_persisted(self, entity_id: int) -> None:
        """Record the identifier assigned by the store"""
        if isinstance(self.identity, Persisted):
            if self.identity.value != entity_id:
                raise EntityIdentityError(
                    type(self).__name__, self.identity.value, entity_id
                )
            return
        self.identity = Persisted(entity_id)

    def __eq__(self, other) -> bool:
        if self is other:
            return True
        if type(other) is not type(self):
            return False
        if isinstance(self.identity, Transient) or isinstance(other.identity, Transient):
            return False
        return self.identity == other.identity

    def __hash__(self) -> int:
        return hash(type(self))
