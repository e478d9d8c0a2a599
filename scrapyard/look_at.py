"""Turning selected entities to face a focus point."""

from __future__ import annotations

from typing import TypeVar

from scrapyard.components import (
    BoxCollider2DComponent,
    LookAtPositionComponent,
    PositionComponent,
    RotationComponent,
    SelectedComponent,
)
from scrapyard.game_state import GameState
from scrapyard.generational_index import GenerationalIndex
from scrapyard.vector_utils import (
    Vec2,
    Vec3,
    get_box_corners,
    get_rotated_corners,
    get_rotation_angle_2,
)

T = TypeVar("T")


def _require(state: GameState, component_type: type[T], index: GenerationalIndex) -> T:
    component = state.get(component_type, index)
    if component is None:
        raise LookupError(
            f"entity {index.index} (generation {index.generation}) "
            f"has no {component_type.__name__}"
        )
    return component


def look_at_position(state: GameState) -> None:
    """Rotate every selected entity, and its collider, to face its focus point."""
    for entry in state.get_map(LookAtPositionComponent):
        owner = entry.owned_entity
        if state.get(SelectedComponent, owner) is None:
            continue

        position = _require(state, PositionComponent, owner).position
        angle = get_rotation_angle_2(Vec2(position.x, position.y), entry.value.focus_point)

        _require(state, RotationComponent, owner).rotation = Vec3(0.0, 0.0, angle)

        collider = _require(state, BoxCollider2DComponent, owner)
        corners = get_box_corners(collider.position, collider.size)
        collider.corners = get_rotated_corners(corners, collider.position, angle)


def update_focus_point(state: GameState, focus_point: Vec2) -> None:
    """Point every look-at component at ``focus_point``."""
    for entry in state.get_map(LookAtPositionComponent):
        entry.value.focus_point = focus_point