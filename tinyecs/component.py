"""Base type for data attached to entities."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from .entity import Entity


class Component:
    """Plain data attached to an entity.

    Components hold no behaviour of their own; systems act on them.
    ``owner`` refers to the entity the component is attached to, or is
    ``None`` while it is detached. The base class cannot be created on
    its own: subclass it (dataclasses work well) to define real data.
    """

    owner: Entity | None = None

    def __new__(cls, *args: Any, **kwargs: Any) -> Component:
        if cls is Component:
            raise TypeError("Component is a base class; instantiate a subclass")
        return super().__new__(cls)