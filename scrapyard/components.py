"""Component data types attached to entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto

import numpy as np

from scrapyard.vector_utils import Vec2, Vec3

Color = tuple[float, float, float, float]


class Components(Enum):
    """Kinds of components known to the engine."""

    POSITION = auto()
    VELOCITY = auto()
    SCALE = auto()
    ROTATION = auto()
    COLOR = auto()
    RENDER = auto()
    TEXTURE = auto()
    TEXTURE_UPDATE = auto()
    ORTHOGRAPHIC = auto()
    BOX_COLLIDER_2D = auto()
    SELECTED = auto()
    NA = auto()


@dataclass
class PositionComponent:
    """The entity's position in world space."""

    position: Vec3


@dataclass
class VelocityComponent:
    """Velocity added to the position each frame."""

    velocity: Vec3 = field(default_factory=Vec3)


@dataclass
class RotationComponent:
    """Current rotation as a scaled axis (angles in radians)."""

    rotation: Vec3 = field(default_factory=Vec3)


@dataclass
class RotationUpdateComponent:
    """A rotation to apply around ``axis`` by ``angle`` radians."""

    axis: Vec3
    angle: float


@dataclass
class ScaleComponent:
    scale: Vec3


@dataclass
class ColorComponent:
    color: Color


@dataclass
class RenderComponent:
    """Handles of the shader program and vertex array used to draw the entity."""

    shader_program: int
    vertex_array_object: int


@dataclass
class Texture:
    """A single bound texture and the uniform it is exposed through."""

    uniform_name: str
    texture_id: int
    number: int
    active_texture_enum: int


@dataclass
class TextureMixComponent:
    """Textures blended on top of each other with a shared opacity."""

    textures: list[Texture] = field(default_factory=list)
    opacity: float = 0.0


@dataclass
class TextureUpdateComponent:
    """Pending change of texture opacity, consumed each frame."""

    opacity_change: float = 0.0


@dataclass(eq=False)
class OrthographicCameraComponent:
    """An orthographic camera: viewport dimensions plus view and projection matrices."""

    dimensions: Vec2
    view: np.ndarray = field(default_factory=lambda: np.identity(4))
    projection: np.ndarray = field(default_factory=lambda: np.identity(4))


@dataclass
class BoxCollider2DComponent:
    """An oriented 2D box used for picking."""

    size: Vec2
    position: Vec2
    corners: list[Vec2] = field(default_factory=list)


@dataclass
class SelectedComponent:
    """Marks an entity as selected and remembers how to restore it."""

    selected_color: Color
    origin_color: Color
    cursor_offset: Vec2 = field(default_factory=Vec2)


@dataclass
class LookAtPositionComponent:
    """A point the entity turns to face."""

    focus_point: Vec2