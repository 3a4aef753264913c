"""The world: registry and driver of systems."""

from __future__ import annotations

from types import TracebackType
from typing import Any, TypeVar, cast

from .system import System

S = TypeVar("S", bound=System)


def _check_system_type(system_type: object) -> None:
    if not (isinstance(system_type, type) and issubclass(system_type, System)):
        raise TypeError(f"{system_type!r} is not a System subclass")


class World:
    """Holds at most one system of each type and runs them together.

    Used as a context manager, the world shuts its systems down on exit.
    """

    def __init__(self) -> None:
        self._systems: dict[type[System], System] = {}

    def __enter__(self) -> World:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.shutdown()

    def initialize(self) -> bool:
        """Initialize systems in order, stopping at the first that fails.

        Returns whether every system initialized.
        """
        return all(system.initialize() for system in self._systems.values())

    def tick(self, delta: float) -> None:
        """Advance every system by ``delta`` seconds."""
        for system in list(self._systems.values()):
            system.tick(delta)

    def shutdown(self) -> None:
        """Shut every system down and forget them all."""
        for system in self._systems.values():
            system.shutdown()
        self._systems.clear()

    def has_system(self, system_type: type[System]) -> bool:
        """Tell whether a system of this type is registered."""
        _check_system_type(system_type)
        return system_type in self._systems

    def get_system(self, system_type: type[S]) -> S | None:
        """Return the registered system of this type, or ``None``."""
        _check_system_type(system_type)
        return cast("S | None", self._systems.get(system_type))

    def add_system(self, system_type: type[S], *args: Any, **kwargs: Any) -> S:
        """Create a system from the arguments, register it and return it.

        Raises ``ValueError`` if a system of this type is already registered.
        """
        _check_system_type(system_type)
        if system_type in self._systems:
            raise ValueError(f"a {system_type.__name__} is already registered")
        system = system_type(*args, **kwargs)
        self._systems[system_type] = system
        return system

    def remove_system(self, system_type: type[System]) -> bool:
        """Shut down and unregister the system; return whether it existed."""
        _check_system_type(system_type)
        system = self._systems.pop(system_type, None)
        if system is None:
            return False
        system.shutdown()
        return True