"""Vertex and index data for the built-in shapes."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class VertexInformation:
    """One or more vertex arrays with their matching index arrays."""

    vertices: list[list[float]] = field(default_factory=list)
    indices: list[list[int]] = field(default_factory=list)


def create_square() -> VertexInformation:
    """Two slanted bars, a peak and a crossbar, positions only (x, y, z)."""
    vertices = [
        0.0, 0.5, 0.0,
        -0.3, -0.5, 0.0,
        -0.4, -0.5, 0.0,
        -0.1, 0.5, 0.0,
        0.1, 0.5, 0.0,
        0.3, -0.5, 0.0,
        0.4, -0.5, 0.0,
        0.0, 0.84, 0.0,
        0.12, 0.1, 0.0,
        -0.15, 0.0, 0.0,
        -0.12, 0.1, 0.0,
        0.15, 0.0, 0.0,
    ]
    indices = [
        0, 1, 3,
        1, 2, 3,
        0, 4, 5,
        5, 6, 4,
        3, 4, 7,
        8, 9, 10,
        11, 8, 9,
    ]
    return VertexInformation(vertices=[vertices], indices=[indices])


def create_triangle_quad() -> VertexInformation:
    """A unit quad with a colour per vertex (x, y, z, r, g, b)."""
    vertices = [
        0.5, 0.5, 0.0, 1.0, 0.0, 0.0,
        0.5, -0.5, 0.0, 0.0, 1.0, 0.0,
        -0.5, -0.5, 0.0, 0.0, 0.0, 1.0,
        -0.5, 0.5, 0.0, 0.5, 0.2, 0.0,
    ]
    indices = [
        0, 1, 3,
        1, 2, 3,
    ]
    return VertexInformation(vertices=[vertices], indices=[indices])


_LEFT_TRIANGLE = [
    0.0, 0.0, 0.0,
    -0.25, 0.5, 0.0,
    -0.5, 0.0, 0.0,
]

_RIGHT_TRIANGLE = [
    0.0, 0.0, 0.0,
    0.25, 0.5, 0.0,
    0.5, 0.0, 0.0,
]


def create_two_triangles() -> VertexInformation:
    """Two triangles sharing a vertex, each in its own vertex array."""
    return VertexInformation(
        vertices=[list(_LEFT_TRIANGLE), list(_RIGHT_TRIANGLE)],
        indices=[[0]],
    )


def create_two_triangles_single_array() -> VertexInformation:
    """The same two triangles packed into a single vertex array."""
    return VertexInformation(
        vertices=[_LEFT_TRIANGLE + _RIGHT_TRIANGLE],
        indices=[[0]],
    )


def create_quad() -> VertexInformation:
    """The textured quad every entity is drawn with (x, y, z, u, v)."""
    vertices = [
        1.0, 1.0, 0.0, 1.0, 1.0,
        1.0, -1.0, 0.0, 1.0, 0.0,
        -1.0, -1.0, 0.0, 0.0, 0.0,
        -1.0, 1.0, 0.0, 0.0, 1.0,
    ]
    indices = [
        0, 1, 3,
        1, 2, 3,
    ]
    return VertexInformation(vertices=[vertices], indices=[indices])


def whitespace_buffer(length: int) -> bytes:
    """A buffer of ``length`` spaces, used to receive an info log."""
    if length < 0:
        raise ValueError("length must not be negative")
    return b" " * length