"""Common components used by the demo systems."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

from ..component import Component


@dataclass
class Position(Component):
    """Coordinates in the 2D world."""

    x: float = 0.0
    y: float = 0.0


@dataclass
class Velocity(Component):
    """Movement in units per second along each axis."""

    dx: float = 0.0
    dy: float = 0.0


@dataclass
class Health(Component):
    """Current and maximum hit points; starts at full health."""

    max_health: int = 100
    current_health: int = field(init=False)

    def __post_init__(self) -> None:
        self.current_health = self.max_health

    def is_alive(self) -> bool:
        """Tell whether any health remains."""
        return self.current_health > 0

    def health_percentage(self) -> float:
        """Current health as a fraction of the maximum."""
        return self.current_health / self.max_health


@dataclass
class Renderable(Component):
    """How an entity is drawn: a symbol, a colour and visibility."""

    symbol: str = "?"
    color: str = "white"
    visible: bool = True


@dataclass
class Name(Component):
    """A display name for an entity."""

    name: str = "Unnamed"


class AIState(Enum):
    """States of the demo AI state machine."""

    IDLE = auto()
    PATROLLING = auto()
    CHASING = auto()
    ATTACKING = auto()


@dataclass
class AI(Component):
    """State, target and patrol route of an autonomous entity."""

    detection_range: float = 5.0
    current_state: AIState = AIState.IDLE
    target_entity_id: int = 0
    patrol_points: list[Position] = field(default_factory=list)
    current_patrol_index: int = 0


@dataclass
class Timer(Component):
    """Elapsed time towards a duration, optionally removing its entity."""

    duration: float = 1.0
    auto_remove: bool = False
    elapsed_time: float = field(default=0.0, init=False)

    def is_finished(self) -> bool:
        """Tell whether the duration has been reached."""
        return self.elapsed_time >= self.duration

    def progress(self) -> float:
        """Fraction of the duration elapsed, capped at 1."""
        return min(self.elapsed_time / self.duration, 1.0)