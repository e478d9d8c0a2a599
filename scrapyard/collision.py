"""Separating-axis picking of box colliders under a point."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from scrapyard.components import BoxCollider2DComponent, ColorComponent, SelectedComponent
from scrapyard.game_state import GameState
from scrapyard.selection import deselect_all
from scrapyard.vector_utils import Vec2, get_direction_2d, get_projection_2d

_SELECTED_COLOR = (0.7, 0.7, 0.7, 0.5)


@dataclass(frozen=True)
class SatShape:
    """Extent of a shape projected onto two axes."""

    first_axis_min: float
    first_axis_max: float
    second_axis_min: float
    second_axis_max: float


@dataclass(frozen=True)
class SatCollisions:
    """Projected extents of the two shapes being tested against each other."""

    shape_one: SatShape
    shape_two: SatShape

    def overlaps(self) -> bool:
        """True if the extents overlap strictly on both axes."""
        one, two = self.shape_one, self.shape_two
        first = one.first_axis_max > two.first_axis_min and one.first_axis_min < two.first_axis_max
        second = (
            one.second_axis_max > two.second_axis_min
            and one.second_axis_min < two.second_axis_max
        )
        return first and second


def run_box_collider_check(state: GameState, point: Vec2) -> None:
    """Run the collision check once for every registered box collider."""
    for _ in range(len(state.get_map(BoxCollider2DComponent))):
        check_sat_collision(state, point)


def check_sat_collision(state: GameState, collision_point: Vec2) -> None:
    """Select the first collider containing ``collision_point``, deselecting everything else."""
    for entry in list(state.get_map(BoxCollider2DComponent)):
        collider = entry.value
        owner = entry.owned_entity
        normals = get_normals(collider.corners)
        collided = get_sat_projections([collision_point], collider.corners, normals).overlaps()

        distance = collision_point.magnitude()
        direction = collision_point / distance
        offset = collider.position - direction * distance

        deselect_all(state)

        if collided:
            color = state.get(ColorComponent, owner)
            if color is None:
                raise LookupError(
                    f"entity {owner.index} (generation {owner.generation}) has no ColorComponent"
                )
            state.add_component_to(
                SelectedComponent(
                    selected_color=_SELECTED_COLOR,
                    origin_color=color.color,
                    cursor_offset=offset,
                ),
                owner,
            )
            break


def get_normals(corners: Sequence[Vec2]) -> list[Vec2]:
    """The two edge normals of a box given in ``get_box_corners`` order."""
    edge_y = get_direction_2d(corners[1], corners[0])
    edge_x = get_direction_2d(corners[1], corners[3])
    return [Vec2(-edge_y.y, edge_y.x), Vec2(edge_x.y, -edge_x.x)]


def get_sat_projections(
    shape_one_corners: Sequence[Vec2],
    shape_two_corners: Sequence[Vec2],
    axes: Sequence[Vec2],
) -> SatCollisions:
    """Project both shapes onto the two axes."""
    return SatCollisions(
        shape_one=get_corner_projections(shape_one_corners, axes),
        shape_two=get_corner_projections(shape_two_corners, axes),
    )


def get_corner_projections(corners: Sequence[Vec2], axes: Sequence[Vec2]) -> SatShape:
    """Minimum and maximum extent of ``corners`` along the first two ``axes``."""
    first_axis, second_axis = axes[0], axes[1]
    projected_first = [get_projection_2d(corner, first_axis) for corner in corners]
    projected_second = [get_projection_2d(corner, second_axis) for corner in corners]
    return SatShape(
        first_axis_min=get_min(projected_first, first_axis),
        first_axis_max=get_max(projected_first, first_axis),
        second_axis_min=get_min(projected_second, second_axis),
        second_axis_max=get_max(projected_second, second_axis),
    )


def get_min(corners: Sequence[Vec2], axis: Vec2) -> float:
    """Smallest dot product of a corner with ``axis``."""
    if not corners:
        raise ValueError("at least one corner is required")
    return min(corner.dot(axis) for corner in corners)


def get_max(corners: Sequence[Vec2], axis: Vec2) -> float:
    """Largest dot product of a corner with ``axis``."""
    if not corners:
        raise ValueError("at least one corner is required")
    return max(corner.dot(axis) for corner in corners)