"""Terrain strips cut into quadrilateral ground models."""

from __future__ import annotations

from typing import List, Sequence, Tuple

from .model import Model
from .vectors import Vec2f

__all__ = ["TerrainDefinition"]


class TerrainDefinition:
    """Ground made of quads between consecutive pairs of strip points.

    ``vertices`` holds x, y coordinates; the points come in pairs and each
    pair is joined with the next one into a quad. Every quad becomes a
    model centred on its own mean, whose position is kept in ``centers``.
    """

    def __init__(self, vertices: Sequence[float], amount_of_vertices: int) -> None:
        if amount_of_vertices < 2:
            raise ValueError(f"a terrain needs at least 2 vertices, got {amount_of_vertices}")
        used = (amount_of_vertices // 2) * 2
        coords = [float(v) for v in vertices]
        points = [Vec2f(x, y) for x, y in zip(coords[0::2], coords[1::2])]
        if len(points) < used:
            raise ValueError(f"expected {used} points, got {len(points)}")
        points = points[:used]
        pairs = list(zip(points[0::2], points[1::2]))

        models: List[Model] = []
        centers: List[Vec2f] = []
        for (first, second), (third, fourth) in zip(pairs, pairs[1:]):
            quad = (second, fourth, third, first)
            center = (quad[0] + quad[1] + quad[2] + quad[3]) / 4.0
            local = [p - center for p in quad]
            buffer = [
                local[0].x, local[0].y, 0.0, 0.0,
                local[1].x, local[1].y, 1.0, 0.0,
                local[2].x, local[2].y, 1.0, 1.0,
                local[3].x, local[3].y, 0.0, 1.0,
            ]
            models.append(Model(buffer))
            centers.append(center)

        self.models: Tuple[Model, ...] = tuple(models)
        self.centers: Tuple[Vec2f, ...] = tuple(centers)

    @property
    def amount_of_models(self) -> int:
        return len(self.models)