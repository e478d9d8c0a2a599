import pytest

from scrapyard.components import TextureMixComponent, TextureUpdateComponent
from scrapyard.game_state import GameState
from scrapyard.texture_update import update_textures


def _state():
    state = GameState()
    state.register_map(TextureMixComponent)
    state.register_map(TextureUpdateComponent)
    return state


def test_change_is_applied_and_consumed():
    state = _state()
    entity = (
        state.create_entity()
        .with_component(TextureMixComponent(opacity=0.25))
        .with_component(TextureUpdateComponent(opacity_change=0.5))
        .build()
    )
    update_textures(state)
    assert state.get(TextureMixComponent, entity).opacity == pytest.approx(0.75)
    assert state.get(TextureUpdateComponent, entity).opacity_change == 0.0


def test_second_update_does_not_reapply():
    state = _state()
    entity = (
        state.create_entity()
        .with_component(TextureMixComponent(opacity=0.0))
        .with_component(TextureUpdateComponent(opacity_change=0.5))
        .build()
    )
    update_textures(state)
    update_textures(state)
    assert state.get(TextureMixComponent, entity).opacity == pytest.approx(0.5)


def test_update_without_mix_only_resets_change():
    state = _state()
    entity = (
        state.create_entity().with_component(TextureUpdateComponent(opacity_change=0.5)).build()
    )
    update_textures(state)
    assert state.get(TextureUpdateComponent, entity).opacity_change == 0.0
    assert state.get(TextureMixComponent, entity) is None


def test_each_entity_gets_its_own_change():
    state = _state()
    first = (
        state.create_entity()
        .with_component(TextureMixComponent(opacity=0.0))
        .with_component(TextureUpdateComponent(opacity_change=0.5))
        .build()
    )
    second = (
        state.create_entity()
        .with_component(TextureMixComponent(opacity=1.0))
        .with_component(TextureUpdateComponent(opacity_change=-0.25))
        .build()
    )
    update_textures(state)
    assert state.get(TextureMixComponent, first).opacity == pytest.approx(0.5)
    assert state.get(TextureMixComponent, second).opacity == pytest.approx(0.75)