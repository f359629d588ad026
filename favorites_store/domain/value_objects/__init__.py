"""
Domain value objects package

Contains immutable value objects that represent concepts in the business domain.
"""

from .entity_id import TRANSIENT, EntityId, Persisted, Transient

__all__ = [
    "EntityId",
    "Persisted",
    "Transient",
    "TRANSIENT",
]
