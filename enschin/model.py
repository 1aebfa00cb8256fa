"""Renderable models and their collision shapes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Sequence, Tuple

from .vectors import Vec2f
from .vertex_layout import VertexBufferLayout

__all__ = [
    "DEFAULT_TEX_COORDS",
    "DEFAULT_INDICES",
    "ShapeType",
    "Shape",
    "Model",
    "generate_vertices_tex",
]

DEFAULT_TEX_COORDS: Tuple[float, ...] = (
    0.0, 0.0,  # bottom left
    1.0, 0.0,  # bottom right
    1.0, 1.0,  # top right
    0.0, 1.0,  # top left
)

DEFAULT_INDICES: Tuple[int, ...] = (0, 1, 2, 2, 3, 0)


class ShapeType(Enum):
    POLYGON = auto()
    CHAIN = auto()
    CIRCLE = auto()


@dataclass(frozen=True)
class Shape:
    """Collision shape: a polygon, a closed chain or a circle."""

    type: ShapeType
    vertices: Tuple[Vec2f, ...] = ()
    radius: float = 0.0


def generate_vertices_tex(size: Vec2f) -> list[float]:
    """Interleaved position and texture coordinates of a centred rectangle."""
    hx = size.x / 2.0
    hy = size.y / 2.0
    return [
        -hx, -hy, 0.0, 0.0,
        hx, -hy, 1.0, 0.0,
        hx, hy, 1.0, 1.0,
        -hx, hy, 0.0, 1.0,
    ]


def _corners(buffer: Sequence[float]) -> Tuple[Vec2f, ...]:
    return tuple(Vec2f(x, y) for x, y in zip(buffer[0::4], buffer[1::4]))


def _standard_layout() -> VertexBufferLayout:
    layout = VertexBufferLayout()
    layout.add_float(2)
    layout.add_float(2)
    return layout


class Model:
    """Vertex data, draw order and collision shape of a drawable object.

    ``buffer`` holds four floats per vertex: x, y, u, v.
    """

    def __init__(
        self,
        buffer: Sequence[float],
        chain: bool = False,
        indices: Sequence[int] = DEFAULT_INDICES,
    ) -> None:
        data = tuple(float(v) for v in buffer)
        if len(data) % 4:
            raise ValueError("vertex buffer needs four floats per vertex")
        corners = _corners(data)
        if len(corners) < 3:
            raise ValueError(f"a model needs at least 3 vertices, got {len(corners)}")
        if chain:
            shape = Shape(ShapeType.CHAIN, tuple(reversed(corners)))
        else:
            shape = Shape(ShapeType.POLYGON, corners)
        self._setup(data, corners, len(corners), indices, shape)

    def _setup(
        self,
        buffer: Tuple[float, ...],
        vertices: Tuple[Vec2f, ...],
        amount_of_vertices: int,
        indices: Sequence[int],
        shape: Shape,
    ) -> None:
        self.buffer = buffer
        self.vertices = vertices
        self.amount_of_vertices = amount_of_vertices
        self.indices = tuple(int(i) for i in indices)
        self.shape = shape
        self.layout = _standard_layout()

    @property
    def amount_of_indices(self) -> int:
        return len(self.indices)

    @classmethod
    def from_size(cls, size: Vec2f) -> "Model":
        """Rectangle of the given width and height, centred on the origin."""
        buffer = tuple(generate_vertices_tex(size))
        corners = _corners(buffer)
        model = cls.__new__(cls)
        model._setup(buffer, corners, 4, DEFAULT_INDICES, Shape(ShapeType.POLYGON, corners))
        return model

    @classmethod
    def from_radius(cls, radius: float) -> "Model":
        """Circle drawn on a square quad that encloses it."""
        buffer = tuple(generate_vertices_tex(Vec2f(radius * 2, radius * 2)))
        model = cls.__new__(cls)
        model._setup(buffer, (), 6, DEFAULT_INDICES, Shape(ShapeType.CIRCLE, radius=float(radius)))
        return model