import pytest

from scrapyard.components import BoxCollider2DComponent, PositionComponent, VelocityComponent
from scrapyard.game_state import GameState
from scrapyard.position_update import update_positions
from scrapyard.vector_utils import Vec2, Vec3


def _state():
    state = GameState()
    for component_type in (VelocityComponent, PositionComponent, BoxCollider2DComponent):
        state.register_map(component_type)
    return state


def _add(state, position, velocity, collider=True):
    builder = (
        state.create_entity()
        .with_component(PositionComponent(position))
        .with_component(VelocityComponent(velocity))
    )
    if collider:
        builder.with_component(
            BoxCollider2DComponent(size=Vec2(2.0, 2.0), position=Vec2(position.x, position.y))
        )
    return builder.build()


def test_axis_aligned_velocity_moves_by_velocity():
    state = _state()
    entity = _add(state, Vec3(1.0, 2.0, 0.0), Vec3(5.0, 0.0, 0.0))
    update_positions(state)
    position = state.get(PositionComponent, entity).position
    assert position.x == pytest.approx(6.0)
    assert position.y == pytest.approx(2.0)
    collider = state.get(BoxCollider2DComponent, entity)
    assert collider.position.x == pytest.approx(position.x)
    assert collider.position.y == pytest.approx(position.y)


def test_velocity_is_damped():
    state = _state()
    velocity = Vec3(3.0, -4.0, 0.0)
    entity = _add(state, Vec3(0.0, 0.0, 0.0), velocity)
    update_positions(state)
    damped = state.get(VelocityComponent, entity).velocity
    assert damped.x == pytest.approx(velocity.x * 0.8)
    assert damped.y == pytest.approx(velocity.y * 0.8)
    assert damped.z == velocity.z


def test_diagonal_velocity_keeps_direction_signs():
    state = _state()
    entity = _add(state, Vec3(0.0, 0.0, 0.0), Vec3(-3.0, 4.0, 0.0))
    update_positions(state)
    position = state.get(PositionComponent, entity).position
    assert position.x < 0.0
    assert position.y > 0.0
    assert position.z == 0.0


def test_zero_velocity_leaves_position_unchanged():
    state = _state()
    start = Vec3(7.0, -1.0, 2.0)
    entity = _add(state, start, Vec3(0.0, 0.0, 0.0))
    update_positions(state)
    assert state.get(PositionComponent, entity).position == start
    assert state.get(VelocityComponent, entity).velocity == Vec3(0.0, 0.0, 0.0)


def test_entity_without_collider_still_moves():
    state = _state()
    entity = _add(state, Vec3(0.0, 0.0, 0.0), Vec3(0.0, -2.0, 0.0), collider=False)
    update_positions(state)
    assert state.get(PositionComponent, entity).position.y == pytest.approx(-2.0)


def test_repeated_updates_slow_down():
    state = _state()
    entity = _add(state, Vec3(0.0, 0.0, 0.0), Vec3(10.0, 0.0, 0.0))
    steps = []
    previous = 0.0
    for _ in range(3):
        update_positions(state)
        current = state.get(PositionComponent, entity).position.x
        steps.append(current - previous)
        previous = current
    assert steps[0] > steps[1] > steps[2] > 0.0


def test_missing_position_raises():
    state = _state()
    state.create_entity().with_component(VelocityComponent(Vec3(1.0, 0.0, 0.0))).build()
    with pytest.raises(LookupError):
        update_positions(state)