import pytest

from tinyecs.demo.components import (
    AI,
    AIState,
    Health,
    Name,
    Position,
    Renderable,
    Timer,
    Velocity,
)
from tinyecs.entity import Entity


def test_position_and_velocity_defaults():
    assert (Position().x, Position().y) == (0.0, 0.0)
    assert (Velocity().dx, Velocity().dy) == (0.0, 0.0)


def test_position_keeps_arguments():
    pos = Position(3.5, -2.0)
    assert (pos.x, pos.y) == (3.5, -2.0)


def test_health_starts_full():
    health = Health(50)
    assert health.current_health == 50
    assert health.max_health == 50
    assert Health().max_health == 100


def test_health_alive_and_percentage():
    health = Health(100)
    assert health.is_alive()
    assert health.health_percentage() == 1.0
    health.current_health = 50
    assert health.health_percentage() == 0.5
    health.current_health = 0
    assert not health.is_alive()
    health.current_health = -5
    assert not health.is_alive()


def test_renderable_defaults():
    r = Renderable()
    assert (r.symbol, r.color, r.visible) == ("?", "white", True)


def test_name_default():
    assert Name().name == "Unnamed"
    assert Name("Moving Box").name == "Moving Box"


def test_ai_defaults():
    ai = AI()
    assert ai.detection_range == 5.0
    assert ai.current_state is AIState.IDLE
    assert ai.target_entity_id == 0
    assert ai.patrol_points == []
    assert ai.current_patrol_index == 0


def test_ai_patrol_points_not_shared():
    first, second = AI(), AI()
    first.patrol_points.append(Position(1.0, 1.0))
    assert second.patrol_points == []


def test_timer_progress_and_finish():
    timer = Timer(2.0)
    assert timer.elapsed_time == 0.0
    assert not timer.is_finished()
    assert timer.progress() == 0.0
    timer.elapsed_time = 2.0
    assert timer.is_finished()
    assert timer.progress() == 1.0
    timer.elapsed_time = 10.0
    assert timer.progress() == 1.0


def test_timer_defaults():
    timer = Timer()
    assert timer.duration == 1.0
    assert timer.auto_remove is False


@pytest.mark.parametrize("component_type", [Position, Velocity, Health, Renderable, Name, AI, Timer])
def test_components_attach_to_entity(component_type):
    entity = Entity(7)
    component = entity.add_component(component_type)
    assert component.owner is entity
    assert entity.get_component(component_type) is component
    assert entity.remove_component(component_type) is True
    assert component.owner is None