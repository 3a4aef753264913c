from dataclasses import dataclass

import pytest

from tinyecs.component import Component
from tinyecs.entity import Entity


@dataclass
class Position(Component):
    x: float = 0.0
    y: float = 0.0


@dataclass
class Tag(Component):
    text: str = ""


class SpecialPosition(Position):
    pass


class NotAComponent:
    pass


def test_id_is_the_one_given():
    assert Entity(42).id == 42


def test_missing_component_is_none():
    entity = Entity(1)
    assert entity.get_component(Position) is None
    assert entity.has_component(Position) is False


def test_add_component_passes_arguments():
    entity = Entity(1)
    pos = entity.add_component(Position, 2.5, y=-1.5)
    assert (pos.x, pos.y) == (2.5, -1.5)


def test_get_returns_the_attached_instance():
    entity = Entity(1)
    pos = entity.add_component(Position, 1.0, 2.0)
    assert entity.get_component(Position) is pos
    assert entity.has_component(Position) is True


def test_mutations_are_visible_through_get():
    entity = Entity(1)
    entity.add_component(Position, 1.0, 2.0)
    entity.get_component(Position).x = 9.0
    assert entity.get_component(Position).x == 9.0


def test_duplicate_component_raises_and_keeps_original():
    entity = Entity(1)
    original = entity.add_component(Position, 1.0, 2.0)
    with pytest.raises(ValueError):
        entity.add_component(Position, 3.0, 4.0)
    assert entity.get_component(Position) is original


def test_different_types_coexist():
    entity = Entity(1)
    pos = entity.add_component(Position)
    tag = entity.add_component(Tag, "box")
    assert entity.get_component(Position) is pos
    assert entity.get_component(Tag) is tag


def test_components_are_keyed_by_exact_type():
    entity = Entity(1)
    special = entity.add_component(SpecialPosition, 1.0, 1.0)
    assert entity.get_component(Position) is None
    assert entity.get_component(SpecialPosition) is special
    base = entity.add_component(Position)
    assert entity.get_component(Position) is base


def test_remove_component_reports_presence():
    entity = Entity(1)
    entity.add_component(Tag, "x")
    assert entity.remove_component(Tag) is True
    assert entity.remove_component(Tag) is False
    assert entity.has_component(Tag) is False


def test_remove_clears_owner():
    entity = Entity(1)
    tag = entity.add_component(Tag, "x")
    assert tag.owner is entity
    entity.remove_component(Tag)
    assert tag.owner is None


def test_component_can_be_added_again_after_removal():
    entity = Entity(1)
    first = entity.add_component(Tag, "a")
    entity.remove_component(Tag)
    second = entity.add_component(Tag, "b")
    assert second is not first
    assert entity.get_component(Tag).text == "b"


@pytest.mark.parametrize("method", ["get_component", "has_component", "remove_component"])
@pytest.mark.parametrize("bad_type", [NotAComponent, int, "Position"])
def test_non_component_types_are_rejected(method, bad_type):
    entity = Entity(1)
    pos = entity.add_component(Position, 1.0, 2.0)
    with pytest.raises(TypeError):
        getattr(entity, method)(bad_type)
    assert entity.get_component(Position) is pos
    assert pos.owner is entity


def test_add_non_component_type_is_rejected():
    entity = Entity(1)
    with pytest.raises(TypeError):
        entity.add_component(NotAComponent)
    assert entity.has_component(Position) is False