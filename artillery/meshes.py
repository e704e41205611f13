"""Flat-coloured 2D meshes for the scene's shapes and terrain."""

from __future__ import annotations

import enum
import math
from collections.abc import Sequence
from dataclasses import dataclass

from artillery.terrain import generate_height_map

Color = tuple[float, float, float]
Position = tuple[float, float, float]

_FIELD_COLOR: Color = (0.5, 0.32, 0.2)
_FIELD_BASE_SAMPLES = 200
_FIELD_REFINEMENT = 10
_ELLIPSE_STEPS = 36


class DrawMode(enum.Enum):
    """How a mesh's indices are assembled into primitives."""

    TRIANGLES = "triangles"
    TRIANGLE_FAN = "triangle_fan"
    LINES = "lines"


@dataclass(frozen=True)
class Mesh:
    """Named vertex positions, index list, colour and primitive mode."""

    name: str
    vertices: tuple[Position, ...]
    indices: tuple[int, ...]
    color: Color
    draw_mode: DrawMode = DrawMode.TRIANGLES

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "vertices",
            tuple(tuple(float(c) for c in v) for v in self.vertices),
        )
        object.__setattr__(self, "indices", tuple(int(i) for i in self.indices))
        object.__setattr__(self, "color", tuple(float(c) for c in self.color))
        if any(len(v) != 3 for v in self.vertices):
            raise ValueError("vertices must have three coordinates")
        if len(self.color) != 3:
            raise ValueError("color must have three components")
        count = len(self.vertices)
        if any(not 0 <= i < count for i in self.indices):
            raise ValueError("index refers to a missing vertex")


def _vec(x: float, y: float) -> Position:
    return (float(x), float(y), 0.0)


def create_field(
    width: float, height: float, height_map: Sequence[float] | None = None
) -> tuple[Mesh, list[float]]:
    """Build the terrain mesh, generating a height map when none is given."""
    heights = list(height_map) if height_map else generate_height_map(width, height)
    column = width / _FIELD_BASE_SAMPLES / _FIELD_REFINEMENT

    vertices: list[Position] = []
    for i, top in enumerate(heights):
        vertices.append(_vec(i * column, top))
        vertices.append(_vec(i * column, 0.0))

    indices: list[int] = []
    for i in range(len(heights) - 1):
        top, bottom = 2 * i, 2 * i + 1
        next_top, next_bottom = 2 * (i + 1), 2 * (i + 1) + 1
        indices += [top, bottom, next_top, bottom, next_bottom, next_top]

    mesh = Mesh("field", tuple(vertices), tuple(indices), _FIELD_COLOR)
    return mesh, heights


def create_trapezoid(
    name: str, width: float, height: float, top_width: float, color: Color
) -> Mesh:
    """Trapezoid standing on the origin, base ``width``, top ``top_width``."""
    vertices = (
        _vec(-width / 2, 0),
        _vec(width / 2, 0),
        _vec(top_width / 2, height),
        _vec(-top_width / 2, height),
    )
    return Mesh(name, vertices, (0, 1, 2, 2, 3, 0), color)


def _fan(name: str, radius: float, segments: int, sweep: float, color: Color) -> Mesh:
    if segments < 1:
        raise ValueError("segments must be at least 1")
    rim = [
        _vec(radius * math.cos(theta), radius * math.sin(theta))
        for theta in (sweep * i / segments for i in range(segments + 1))
    ]
    indices = [k for i in range(1, segments + 1) for k in (0, i, i + 1)]
    return Mesh(name, (_vec(0, 0), *rim), tuple(indices), color)


def create_semicircle(name: str, radius: float, segments: int, color: Color) -> Mesh:
    """Upper half-disc centred on the origin."""
    return _fan(name, radius, segments, math.pi, color)


def create_rectangle(name: str, width: float, height: float, color: Color) -> Mesh:
    """Rectangle centred horizontally on the origin, rising to ``height``."""
    vertices = (
        _vec(-width / 2, 0),
        _vec(width / 2, 0),
        _vec(width / 2, height),
        _vec(-width / 2, height),
    )
    return Mesh(name, vertices, (0, 1, 2, 2, 3, 0), color)


def create_circle(name: str, radius: float, segments: int, color: Color) -> Mesh:
    """Full disc centred on the origin."""
    return _fan(name, radius, segments, 2 * math.pi, color)


def create_line(name: str, color: Color) -> Mesh:
    """Unit segment from the origin along the x axis."""
    return Mesh(name, (_vec(0, 0), _vec(1, 0)), (0, 1), color)


def create_ellipse(name: str, radius_x: float, radius_y: float, color: Color) -> Mesh:
    """Ellipse outline drawn as a triangle fan."""
    step = 2 * math.pi / _ELLIPSE_STEPS
    vertices = tuple(
        _vec(radius_x * math.cos(i * step), radius_y * math.sin(i * step))
        for i in range(_ELLIPSE_STEPS + 1)
    )
    return Mesh(
        name,
        vertices,
        tuple(range(len(vertices))),
        color,
        DrawMode.TRIANGLE_FAN,
    )


def create_diamond(name: str, width: float, height: float, color: Color) -> Mesh:
    """Rhombus centred on the origin."""
    vertices = (
        _vec(0, height / 2),
        _vec(width / 2, 0),
        _vec(0, -height / 2),
        _vec(-width / 2, 0),
    )
    return Mesh(name, vertices, (0, 1, 2, 2, 3, 0), color)