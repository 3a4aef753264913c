"""Entities: identified holders of at most one component per type."""

from __future__ import annotations

from typing import Any, TypeVar, cast

from .component import Component

C = TypeVar("C", bound=Component)


def _check_component_type(component_type: object) -> None:
    if not (isinstance(component_type, type) and issubclass(component_type, Component)):
        raise TypeError(f"{component_type!r} is not a Component subclass")


class Entity:
    """An identifier with components attached, keyed by their exact type."""

    def __init__(self, entity_id: int) -> None:
        self._id = entity_id
        self._components: dict[type[Component], Component] = {}

    @property
    def id(self) -> int:
        """The entity's identifier, unique within its system."""
        return self._id

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self._components)
        return f"Entity(id={self._id}, components=[{names}])"

    def get_component(self, component_type: type[C]) -> C | None:
        """Return the attached component of this type, or ``None``."""
        _check_component_type(component_type)
        return cast("C | None", self._components.get(component_type))

    def has_component(self, component_type: type[Component]) -> bool:
        """Tell whether a component of this type is attached."""
        _check_component_type(component_type)
        return component_type in self._components

    def add_component(self, component_type: type[C], *args: Any, **kwargs: Any) -> C:
        """Create a component from the arguments, attach it and return it.

        Raises ``ValueError`` if a component of this type is already attached.
        """
        _check_component_type(component_type)
        if component_type in self._components:
            raise ValueError(
                f"entity {self._id} already has a {component_type.__name__} component"
            )
        component = component_type(*args, **kwargs)
        component.owner = self
        self._components[component_type] = component
        return component

    def remove_component(self, component_type: type[Component]) -> bool:
        """Detach the component of this type; return whether one was attached."""
        _check_component_type(component_type)
        component = self._components.pop(component_type, None)
        if component is None:
            return False
        component.owner = None
        return True