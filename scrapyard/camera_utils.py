"""Camera matrices and conversion of screen coordinates into world space."""

from __future__ import annotations

import numpy as np

from scrapyard.components import OrthographicCameraComponent
from scrapyard.vector_utils import Vec2, Vec3


def translation_matrix(offset: Vec3) -> np.ndarray:
    """A 4x4 homogeneous matrix that translates by ``offset``."""
    matrix = np.identity(4)
    matrix[:3, 3] = tuple(offset)
    return matrix


def orthographic_matrix(
    left: float, right: float, bottom: float, top: float, znear: float, zfar: float
) -> np.ndarray:
    """A right-handed orthographic projection mapping the given box onto the unit cube."""
    if left == right:
        raise ValueError("the left and right clipping planes must differ")
    if bottom == top:
        raise ValueError("the bottom and top clipping planes must differ")
    if znear == zfar:
        raise ValueError("the near and far clipping planes must differ")
    matrix = np.identity(4)
    matrix[0, 0] = 2.0 / (right - left)
    matrix[1, 1] = 2.0 / (top - bottom)
    matrix[2, 2] = -2.0 / (zfar - znear)
    matrix[0, 3] = -(right + left) / (right - left)
    matrix[1, 3] = -(top + bottom) / (top - bottom)
    matrix[2, 3] = -(zfar + znear) / (zfar - znear)
    return matrix


def create_orthographic_camera(
    width: float, height: float, position: Vec3 = Vec3(0.0, 0.0, -1.0)
) -> OrthographicCameraComponent:
    """An orthographic camera centred on the origin covering ``width`` x ``height`` units."""
    half_width = width / 2.0
    half_height = height / 2.0
    return OrthographicCameraComponent(
        dimensions=Vec2(float(width), float(height)),
        view=translation_matrix(position),
        projection=orthographic_matrix(
            -half_width, half_width, -half_height, half_height, 1.0, -1.0
        ),
    )


def ortho_screen_to_world_coordinates(
    camera: OrthographicCameraComponent, coordinates: Vec2
) -> Vec2:
    """Convert a pixel position (origin top-left) into world coordinates."""
    clicked = np.array(
        [
            (coordinates.x / camera.dimensions.x) * 2.0 - 1.0,
            (coordinates.y / camera.dimensions.y) * 2.0 - 1.0,
            0.5,
            1.0,
        ]
    )
    try:
        inverse = np.linalg.inv(camera.projection @ camera.view)
    except np.linalg.LinAlgError as exc:
        raise ValueError("the camera's projection-view matrix is not invertible") from exc
    world = inverse @ clicked
    return Vec2(float(world[0]), -float(world[1]))