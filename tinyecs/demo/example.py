"""A short walk through the framework: systems, entities and components."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

from ..entity import Entity
from ..world import World
from .components import Health, Name, Position, Velocity
from .systems import MovementSystem

TIME_STEP = 1.0
STEPS = 3


def _positioned(system: MovementSystem) -> list[tuple[Entity, Name, Position]]:
    """Entities that carry both a name and a position, in creation order."""
    found = []
    for entity in system.entities.values():
        name = entity.get_component(Name)
        pos = entity.get_component(Position)
        if name is not None and pos is not None:
            found.append((entity, name, pos))
    return found


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="tinyecs-example",
        description="Run a small movement simulation and print each step.",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the example and print its progress; return the exit status."""
    _parse_args(argv)
    print("=== Simple ECS Example ===\n")

    with World() as world:
        movement = world.add_system(MovementSystem)

        if not world.initialize():
            print("Failed to initialize world!")
            return 1
        print("World initialized successfully!\n")

        print("Creating entities...")
        moving = movement.add_entity()
        moving.add_component(Name, "Moving Box")
        moving.add_component(Position, 0.0, 0.0)
        moving.add_component(Velocity, 2.0, 1.0)

        static = movement.add_entity()
        static.add_component(Name, "Static Block")
        static.add_component(Position, 5.0, 3.0)

        healthy = movement.add_entity()
        healthy.add_component(Name, "Health Demo")
        healthy.add_component(Position, 10.0, 5.0)
        healthy.add_component(Health, 50)

        print(f"Created {len(movement.entities)} entities.\n")

        print("=== Initial State ===")
        for entity, name, pos in _positioned(movement):
            line = f"{name.name} at ({pos.x:g}, {pos.y:g})"
            vel = entity.get_component(Velocity)
            if vel is not None:
                line += f" moving at ({vel.dx:g}, {vel.dy:g})"
            health = entity.get_component(Health)
            if health is not None:
                line += f" with {health.current_health} HP"
            print(line)

        print("\n=== Running Simulation ===")
        for step in range(1, STEPS + 1):
            print(f"\n--- Step {step} ---")
            world.tick(TIME_STEP)
            for _, name, pos in _positioned(movement):
                print(f"{name.name} now at ({pos.x:g}, {pos.y:g})")

        print("\n=== Component Manipulation ===")
        static.add_component(Velocity, -1.0, 0.5)
        print("Added velocity to Static Block")

        moving_vel = moving.get_component(Velocity)
        if moving_vel is not None:
            moving_vel.dx = -moving_vel.dx
            moving_vel.dy = -moving_vel.dy
            print("Reversed Moving Box velocity")

        print("\n--- Final Step ---")
        world.tick(TIME_STEP)
        for _, name, pos in _positioned(movement):
            print(f"{name.name} final position: ({pos.x:g}, {pos.y:g})")

        print("\n=== Component Removal ===")
        removed = moving.remove_component(Velocity)
        print(f"Removed velocity from Moving Box: {'Success' if removed else 'Failed'}")
        has_velocity = moving.get_component(Velocity) is not None
        print(f"Moving Box has velocity: {'Yes' if has_velocity else 'No'}")

    print("\n=== Example Complete ===")
    print("This example demonstrated:")
    print("- World and system creation")
    print("- Entity creation and component attachment")
    print("- System processing (movement updates)")
    print("- Component querying and manipulation")
    print("- Component removal\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())