"""Systems: game logic that owns and processes a set of entities."""

from __future__ import annotations

from abc import ABC, abstractmethod

from .entity import Entity


class System(ABC):
    """Owns entities and updates them once per tick.

    Entity identifiers start at 1, are handed out in order and are never
    reused while the system lives.
    """

    def __init__(self) -> None:
        self._next_entity_id = 1
        self._entities: dict[int, Entity] = {}

    def initialize(self) -> bool:
        """Prepare the system; return ``False`` if it cannot run."""
        return True

    @abstractmethod
    def tick(self, delta: float) -> None:
        """Advance the system by ``delta`` seconds."""

    def shutdown(self) -> None:
        """Release whatever the system holds."""

    @property
    def entities(self) -> dict[int, Entity]:
        """The system's entities, keyed by identifier."""
        return self._entities

    def has_entity(self, entity_id: int) -> bool:
        """Tell whether an entity with this identifier exists."""
        return entity_id in self._entities

    def get_entity(self, entity_id: int) -> Entity | None:
        """Return the entity with this identifier, or ``None``."""
        return self._entities.get(entity_id)

    def add_entity(self) -> Entity:
        """Create a new entity with the next identifier and return it."""
        entity = Entity(self._next_entity_id)
        self._next_entity_id += 1
        self._entities[entity.id] = entity
        return entity

    def remove_entity(self, entity_id: int) -> bool:
        """Delete the entity; return whether it existed."""
        return self._entities.pop(entity_id, None) is not None