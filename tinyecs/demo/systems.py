"""Demo systems acting on the demo components."""

from __future__ import annotations

import math
import subprocess
import sys
from typing import TextIO

from ..system import System
from .components import AI, AIState, Health, Name, Position, Renderable, Timer, Velocity


def _round_half_away(value: float) -> int:
    return int(math.copysign(math.floor(abs(value) + 0.5), value))


def _distance(dx: float, dy: float) -> float:
    return math.sqrt(dx * dx + dy * dy)


class MovementSystem(System):
    """Moves every entity that has both a position and a velocity."""

    def tick(self, delta: float) -> None:
        for entity in self.entities.values():
            pos = entity.get_component(Position)
            vel = entity.get_component(Velocity)
            if pos is not None and vel is not None:
                pos.x += vel.dx * delta
                pos.y += vel.dy * delta


class RenderSystem(System):
    """Draws visible entities on a character grid and lists named ones."""

    WORLD_WIDTH = 80
    WORLD_HEIGHT = 20

    def __init__(self, stream: TextIO | None = None, clear_screen: bool = True) -> None:
        super().__init__()
        self._stream = stream
        self._clear_screen = clear_screen

    def render(self) -> str:
        """Return the grid followed by the entity listing."""
        grid = [["."] * self.WORLD_WIDTH for _ in range(self.WORLD_HEIGHT)]
        for entity in self.entities.values():
            pos = entity.get_component(Position)
            renderable = entity.get_component(Renderable)
            if pos is None or renderable is None or not renderable.visible:
                continue
            x = _round_half_away(pos.x)
            y = _round_half_away(pos.y)
            if 0 <= x < self.WORLD_WIDTH and 0 <= y < self.WORLD_HEIGHT:
                grid[y][x] = renderable.symbol

        lines = ["".join(row) + "\n" for row in grid]
        lines.append("\nEntities:\n")
        for entity in self.entities.values():
            name = entity.get_component(Name)
            pos = entity.get_component(Position)
            if name is None or pos is None:
                continue
            line = f"{name.name} at ({pos.x:g}, {pos.y:g})"
            health = entity.get_component(Health)
            if health is not None:
                line += f" HP: {health.current_health}/{health.max_health}"
            lines.append(line + "\n")
        return "".join(lines)

    def tick(self, delta: float) -> None:
        if self._clear_screen:
            subprocess.run("clear || cls", shell=True, check=False)
        stream = self._stream if self._stream is not None else sys.stdout
        stream.write(self.render())


class HealthSystem(System):
    """Regenerates health and removes entities whose health is gone."""

    def __init__(self, health_regen_rate: float = 1.0, stream: TextIO | None = None) -> None:
        super().__init__()
        self.health_regen_rate = health_regen_rate
        self._stream = stream

    def tick(self, delta: float) -> None:
        dead: list[int] = []
        for entity_id, entity in self.entities.items():
            health = entity.get_component(Health)
            if health is None:
                continue
            if 0 < health.current_health < health.max_health:
                health.current_health = min(
                    health.max_health,
                    health.current_health + int(self.health_regen_rate * delta),
                )
            if not health.is_alive():
                dead.append(entity_id)

        stream = self._stream if self._stream is not None else sys.stdout
        for entity_id in dead:
            entity = self.get_entity(entity_id)
            if entity is not None:
                name = entity.get_component(Name)
                if name is not None:
                    stream.write(f"{name.name} has died!\n")
            self.remove_entity(entity_id)


class AISystem(System):
    """Runs a small idle/patrol/chase/attack state machine."""

    PATROL_SPEED = 10.0
    CHASE_SPEED = 15.0
    ATTACK_RANGE = 2.0
    DAMAGE_PER_SECOND = 50.0

    def tick(self, delta: float) -> None:
        for entity in list(self.entities.values()):
            ai = entity.get_component(AI)
            pos = entity.get_component(Position)
            vel = entity.get_component(Velocity)
            if ai is None or pos is None or vel is None:
                continue
            if ai.current_state is AIState.IDLE:
                self._idle(ai, vel)
            elif ai.current_state is AIState.PATROLLING:
                self._patrol(ai, pos, vel)
            elif ai.current_state is AIState.CHASING:
                self._chase(ai, pos, vel)
            elif ai.current_state is AIState.ATTACKING:
                self._attack(ai, pos, vel, delta)

    @staticmethod
    def _idle(ai: AI, vel: Velocity) -> None:
        vel.dx = vel.dy = 0.0
        if ai.patrol_points:
            ai.current_state = AIState.PATROLLING

    def _patrol(self, ai: AI, pos: Position, vel: Velocity) -> None:
        if not ai.patrol_points:
            ai.current_state = AIState.IDLE
            return
        target = ai.patrol_points[ai.current_patrol_index]
        dx = target.x - pos.x
        dy = target.y - pos.y
        distance = _distance(dx, dy)
        if distance < 1.0:
            ai.current_patrol_index = (ai.current_patrol_index + 1) % len(ai.patrol_points)
        else:
            vel.dx = dx / distance * self.PATROL_SPEED
            vel.dy = dy / distance * self.PATROL_SPEED

    def _chase(self, ai: AI, pos: Position, vel: Velocity) -> None:
        target = self.get_entity(ai.target_entity_id)
        target_pos = target.get_component(Position) if target is not None else None
        if target_pos is None:
            ai.current_state = AIState.IDLE
            return
        dx = target_pos.x - pos.x
        dy = target_pos.y - pos.y
        distance = _distance(dx, dy)
        if distance > ai.detection_range:
            ai.current_state = AIState.PATROLLING
            vel.dx = vel.dy = 0.0
        elif distance < self.ATTACK_RANGE:
            ai.current_state = AIState.ATTACKING
        else:
            vel.dx = dx / distance * self.CHASE_SPEED
            vel.dy = dy / distance * self.CHASE_SPEED

    def _attack(self, ai: AI, pos: Position, vel: Velocity, delta: float) -> None:
        vel.dx = vel.dy = 0.0
        target = self.get_entity(ai.target_entity_id)
        if target is None:
            ai.current_state = AIState.IDLE
            return
        target_health = target.get_component(Health)
        target_pos = target.get_component(Position)
        if target_health is None or target_pos is None:
            return
        distance = _distance(target_pos.x - pos.x, target_pos.y - pos.y)
        if distance <= self.ATTACK_RANGE:
            target_health.current_health -= int(self.DAMAGE_PER_SECOND * delta)
            if target_health.current_health <= 0:
                ai.current_state = AIState.IDLE
        else:
            ai.current_state = AIState.CHASING


class TimerSystem(System):
    """Advances timers and removes entities whose auto-remove timer ran out."""

    def tick(self, delta: float) -> None:
        finished: list[int] = []
        for entity_id, entity in self.entities.items():
            timer = entity.get_component(Timer)
            if timer is None:
                continue
            timer.elapsed_time += delta
            if timer.is_finished() and timer.auto_remove:
                finished.append(entity_id)
        for entity_id in finished:
            self.remove_entity(entity_id)