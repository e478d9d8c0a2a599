"""Selection highlighting, deselection and dragging of selected entities."""

from __future__ import annotations

from typing import TypeVar

from scrapyard.components import (
    BoxCollider2DComponent,
    ColorComponent,
    PositionComponent,
    RotationComponent,
    SelectedComponent,
)
from scrapyard.game_state import GameState
from scrapyard.generational_index import GenerationalIndex
from scrapyard.vector_utils import Vec2, Vec3, get_box_corners, get_rotated_corners

T = TypeVar("T")


def _require(state: GameState, component_type: type[T], index: GenerationalIndex) -> T:
    component = state.get(component_type, index)
    if component is None:
        raise LookupError(
            f"entity {index.index} (generation {index.generation}) "
            f"has no {component_type.__name__}"
        )
    return component


def highlight_selected(state: GameState) -> None:
    """Paint the first selected entity in its selection colour."""
    selected = state.get_map(SelectedComponent).entries
    if not selected:
        return
    first = selected[0]
    _require(state, ColorComponent, first.owned_entity).color = first.value.selected_color


def deselect_all(state: GameState) -> None:
    """Restore the original colour of every selected entity and clear the selection."""
    owners = [entry.owned_entity for entry in state.get_map(SelectedComponent)]
    for owner in owners:
        selected = _require(state, SelectedComponent, owner)
        _require(state, ColorComponent, owner).color = selected.origin_color
        state.remove_component(SelectedComponent, owner)


def deselect_single(state: GameState, index: GenerationalIndex) -> None:
    """Deselect one entity, falling back to a transparent black colour if it was not selected."""
    selected = state.get(SelectedComponent, index)
    origin_color = selected.origin_color if selected is not None else (0.0, 0.0, 0.0, 0.0)
    _require(state, ColorComponent, index).color = origin_color
    state.remove_component(SelectedComponent, index)


def follow_mouse(state: GameState, cursor: Vec2) -> None:
    """Move every selected entity (and its collider) to the cursor plus its grab offset."""
    cursor_pos = Vec3(cursor.x, cursor.y, 0.0)
    for entry in list(state.get_map(SelectedComponent)):
        owner = entry.owned_entity
        offset = entry.value.cursor_offset
        target = cursor_pos + Vec3(offset.x, offset.y, 0.0)

        _require(state, PositionComponent, owner).position = target
        angle = _require(state, RotationComponent, owner).rotation.z

        collider = _require(state, BoxCollider2DComponent, owner)
        coords = Vec2(target.x, target.y)
        corners = get_box_corners(coords, collider.size)
        collider.corners = get_rotated_corners(corners, collider.position, angle)
        collider.position = coords