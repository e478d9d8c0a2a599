import numpy as np

from scrapyard.components import (
    BoxCollider2DComponent,
    Components,
    OrthographicCameraComponent,
    PositionComponent,
    SelectedComponent,
    Texture,
    TextureMixComponent,
    TextureUpdateComponent,
    VelocityComponent,
)
from scrapyard.vector_utils import Vec2, Vec3, get_box_corners


def test_component_kinds_are_distinct():
    members = list(Components)
    assert [Components(member.value) for member in members] == members
    assert len(set(members)) == len(members)
    assert members[-1] is Components.NA


def test_texture_mix_defaults_are_independent():
    first = TextureMixComponent()
    second = TextureMixComponent()
    first.textures.append(Texture("Texture1", 7, 0, 33984))
    assert second.textures == []
    assert first.opacity == second.opacity == 0.0


def test_position_can_be_advanced_by_velocity():
    pos = PositionComponent(Vec3(1.0, 2.0, 0.0))
    vel = VelocityComponent(Vec3(0.5, -1.0, 0.0))
    pos.position += vel.velocity
    assert pos.position == Vec3(1.0, 2.0, 0.0) + Vec3(0.5, -1.0, 0.0)


def test_velocity_defaults_to_rest():
    assert VelocityComponent().velocity.magnitude() == 0.0
    assert TextureUpdateComponent().opacity_change == 0.0


def test_box_collider_holds_corners():
    center = Vec2(3.0, 4.0)
    size = Vec2(2.0, 2.0)
    collider = BoxCollider2DComponent(size=size, position=center, corners=get_box_corners(center, size))
    assert len(collider.corners) == 4
    assert collider.corners == get_box_corners(collider.position, collider.size)


def test_selected_component_keeps_original_color():
    selected = SelectedComponent((0.5, 0.5, 0.5, 0.5), (1.0, 1.0, 1.0, 0.0))
    assert selected.origin_color == (1.0, 1.0, 1.0, 0.0)
    assert selected.cursor_offset == Vec2()


def test_camera_defaults_to_identity_matrices():
    camera = OrthographicCameraComponent(Vec2(1280.0, 720.0))
    assert np.array_equal(camera.view, np.identity(4))
    assert np.array_equal(camera.projection, np.identity(4))
    other = OrthographicCameraComponent(Vec2(1280.0, 720.0))
    assert camera.view is not other.view