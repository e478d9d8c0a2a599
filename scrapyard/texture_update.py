"""Applies pending texture opacity changes."""

from __future__ import annotations

from scrapyard.components import TextureMixComponent, TextureUpdateComponent
from scrapyard.game_state import GameState


def update_textures(state: GameState) -> None:
    """Add each pending opacity change to the entity's texture mix and reset it."""
    for entry in state.get_map(TextureUpdateComponent):
        change = entry.value.opacity_change
        entry.value.opacity_change = 0.0
        mix = state.get(TextureMixComponent, entry.owned_entity)
        if mix is not None:
            mix.opacity += change