# tinyecs

A small entity-component-system (ECS) framework.

- `tinyecs.world.World` holds at most one system of each type. It initializes, ticks and shuts down its systems in the order they were registered. When used as a context manager, it shuts its systems down on exit.
- `tinyecs.system.System` is an abstract base class that owns its entities. Entity ids start at 1, are given out in order, and are never reused. Subclasses implement `tick(delta)`. They may also override `initialize()`, which returns `True` by default, and `shutdown()`.
- `tinyecs.entity.Entity` holds at most one component of each exact type. Its `id` property gives its identifier.
- `tinyecs.component.Component` is the base for plain data. It cannot be instantiated on its own. `owner` is the entity the component is attached to, or `None` once the component is removed.

## Installation

```
pip install .
```

## Usage

```python
from tinyecs.world import World
from tinyecs.demo.components import Name, Position, Velocity
from tinyecs.demo.systems import MovementSystem

with World() as world:
    movement = world.add_system(MovementSystem)
    world.initialize()

    box = movement.add_entity()
    box.add_component(Name, "Moving Box")
    box.add_component(Position, 0.0, 0.0)
    box.add_component(Velocity, 2.0, 1.0)

    world.tick(1.0)
    pos = box.get_component(Position)
    print(pos.x, pos.y)  # 2.0 1.0

    box.remove_component(Velocity)
    print(box.has_component(Velocity))  # False
```

### Adding and looking up

- `Entity.add_component(type, *args, **kwargs)` builds the component from the given arguments, attaches it and returns it.
- `World.add_system(type, *args, **kwargs)` builds the system from the given arguments, registers it and returns it.
- Adding a second component or system of a type that is already present raises `ValueError`.
- Passing a type that is not a `Component` or `System` subclass raises `TypeError`.

### Querying and removing

- `get_component`, `get_entity` and `get_system` return `None` when nothing matches.
- `remove_component`, `remove_entity` and `remove_system` return whether something was removed.
- `remove_system` calls the system's `shutdown()` first.
- `System.entities` is the dict of the system's entities, keyed by id.

## Demo

`tinyecs.demo.components` provides these components:

- `Position`, `Velocity` and `Name`.
- `Health`, with `is_alive()` and `health_percentage()`.
- `Renderable`.
- `AI`, whose states are the values of the `AIState` enum.
- `Timer`, with `is_finished()` and `progress()`.

`tinyecs.demo.systems` provides these systems:

- `MovementSystem` adds velocity × delta to the position.
- `RenderSystem(stream=None, clear_screen=True)` draws visible entities on an 80×20 character grid and then lists the named ones.
  - `render()` returns that text.
  - `tick()` writes the text to the stream, or to standard output if no stream is given.
  - When `clear_screen` is true, `tick()` first runs the shell command `clear || cls`.
- `HealthSystem(health_regen_rate=1.0, stream=None)` regenerates health. It removes entities whose health is gone and reports named ones as having died.
- `AISystem` runs an idle / patrol / chase / attack state machine.
- `TimerSystem` advances timers and removes entities whose auto-remove timer has finished.

To run the walkthrough example, which moves a few entities and prints each step:

```
tinyecs-example
```

## What it does not do

- Each entity belongs to exactly one system. There is no query across systems.
- There is no game loop. Call `World.tick` yourself with the elapsed time.
- The only command is the walkthrough above. No interactive or rendered demo is provided.

## Tests

```
pip install .[test]
pytest
```