import math

import pytest

from scrapyard.components import (
    BoxCollider2DComponent,
    ColorComponent,
    LookAtPositionComponent,
    PositionComponent,
    RotationComponent,
    SelectedComponent,
)
from scrapyard.game_state import GameState
from scrapyard.look_at import look_at_position, update_focus_point
from scrapyard.vector_utils import Vec2, Vec3, get_box_corners


def _state():
    state = GameState()
    for component_type in (
        LookAtPositionComponent,
        SelectedComponent,
        PositionComponent,
        RotationComponent,
        BoxCollider2DComponent,
        ColorComponent,
    ):
        state.register_map(component_type)
    return state


def _add_entity(state, center, size, focus, selected=True):
    builder = (
        state.create_entity()
        .with_component(PositionComponent(Vec3(center.x, center.y, 0.0)))
        .with_component(RotationComponent(Vec3(0.0, 0.0, 0.0)))
        .with_component(
            BoxCollider2DComponent(
                size=size, position=center, corners=get_box_corners(center, size)
            )
        )
        .with_component(LookAtPositionComponent(focus))
    )
    if selected:
        builder.with_component(
            SelectedComponent((0.5, 0.5, 0.5, 0.5), (0.0, 0.0, 0.0, 0.0))
        )
    return builder.build()


def test_update_focus_point_sets_every_component():
    state = _state()
    first = _add_entity(state, Vec2(0.0, 0.0), Vec2(2.0, 2.0), Vec2(1.0, 1.0))
    second = _add_entity(state, Vec2(5.0, 5.0), Vec2(2.0, 2.0), Vec2(-1.0, 3.0))
    target = Vec2(7.0, -2.0)
    update_focus_point(state, target)
    assert state.get(LookAtPositionComponent, first).focus_point == target
    assert state.get(LookAtPositionComponent, second).focus_point == target


def test_selected_entity_faces_focus_point():
    state = _state()
    entity = _add_entity(state, Vec2(0.0, 0.0), Vec2(20.0, 20.0), Vec2(0.0, 10.0))
    look_at_position(state)
    rotation = state.get(RotationComponent, entity).rotation
    assert rotation.x == 0.0
    assert rotation.y == 0.0
    assert rotation.z == pytest.approx(math.pi / 2)


def test_square_collider_rotated_quarter_turn_keeps_corner_set():
    state = _state()
    center = Vec2(3.0, 4.0)
    size = Vec2(20.0, 20.0)
    entity = _add_entity(state, center, size, Vec2(3.0, 50.0))
    look_at_position(state)
    corners = state.get(BoxCollider2DComponent, entity).corners
    expected = get_box_corners(center, size)
    assert len(corners) == 4
    for corner in corners:
        assert any(
            corner.x == pytest.approx(point.x) and corner.y == pytest.approx(point.y)
            for point in expected
        )


def test_rotated_corners_stay_at_same_distance_from_center():
    state = _state()
    center = Vec2(1.0, -2.0)
    size = Vec2(30.0, 10.0)
    entity = _add_entity(state, center, size, Vec2(8.0, 9.0))
    look_at_position(state)
    collider = state.get(BoxCollider2DComponent, entity)
    half_diagonal = (size * 0.5).magnitude()
    for corner in collider.corners:
        assert (corner - center).magnitude() == pytest.approx(half_diagonal)
    assert collider.position == center


def test_unselected_entity_is_left_alone():
    state = _state()
    center = Vec2(0.0, 0.0)
    size = Vec2(10.0, 10.0)
    entity = _add_entity(state, center, size, Vec2(5.0, 5.0), selected=False)
    look_at_position(state)
    assert state.get(RotationComponent, entity).rotation == Vec3(0.0, 0.0, 0.0)
    assert state.get(BoxCollider2DComponent, entity).corners == get_box_corners(center, size)


def test_selected_entity_without_position_raises():
    state = _state()
    (
        state.create_entity()
        .with_component(LookAtPositionComponent(Vec2(1.0, 1.0)))
        .with_component(SelectedComponent((0.5, 0.5, 0.5, 0.5), (0.0, 0.0, 0.0, 0.0)))
        .build()
    )
    with pytest.raises(LookupError):
        look_at_position(state)