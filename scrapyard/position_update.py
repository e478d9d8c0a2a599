"""Moving entities by their velocity, with damping."""

from __future__ import annotations

from scrapyard.components import BoxCollider2DComponent, PositionComponent, VelocityComponent
from scrapyard.game_state import GameState
from scrapyard.vector_utils import Vec2, Vec3

_DAMPING = 0.2


def update_positions(state: GameState) -> None:
    """Move each entity with a velocity, drag its collider along and damp the velocity."""
    for entry in state.get_map(VelocityComponent):
        owner = entry.owned_entity
        current = entry.value.velocity

        change = Vec3()
        if current.magnitude() > 0.0:
            unit = current.normalize()
            change = Vec3(unit.x * abs(current.x), unit.y * abs(current.y), 0.0)

        entry.value.velocity = current - Vec3(current.x * _DAMPING, current.y * _DAMPING, 0.0)

        position = state.get(PositionComponent, owner)
        if position is None:
            raise LookupError(
                f"entity {owner.index} (generation {owner.generation}) has no PositionComponent"
            )
        position.position = position.position + change

        collider = state.get(BoxCollider2DComponent, owner)
        if collider is not None:
            collider.position = collider.position + Vec2(change.x, change.y)