"""Projection and view matrix state used when drawing a scene."""

from __future__ import annotations

from typing import List

from . import matrix
from .vectors import Vec2f, Vec3f

__all__ = ["Renderer"]

_EYE = Vec3f(0.0, 0.0, -3.0)
_CENTER = Vec3f(0.0, 0.0, 0.0)
_UP = Vec3f(0.0, 1.0, 0.0)
_NEAR = 3.0
_FAR = 7.0


class Renderer:
    """Holds the projection, view and combined matrices of a scene.

    Transformations accumulate on the view matrix: every translation or
    rotation has to be undone by its inverse after drawing.
    """

    def __init__(self, fov: float, ratio: float) -> None:
        self.fov = 0.0
        self.ratio = 0.0
        self.proj: List[float] = [0.0] * 16
        self.view: List[float] = [0.0] * 16
        self.mvp: List[float] = [0.0] * 16
        self.reset_projection(fov, ratio)
        self.reset_matrix()

    def _update_mvp(self) -> None:
        self.mvp = matrix.multiply(self.view, self.proj)

    def reset_projection(self, fov: float, ratio: float) -> None:
        """Rebuild the projection for a new field of view or aspect ratio."""
        self.fov = fov
        self.ratio = ratio
        self.proj = matrix.frustum(ratio * fov, -ratio * fov, -fov, fov, _NEAR, _FAR)

    def reset_matrix(self) -> None:
        """Restore the view to look at the origin with no transformation."""
        self.view = matrix.set_look_at(_EYE, _CENTER, _UP)
        self._update_mvp()

    def translate(self, pos: Vec2f) -> None:
        """Translate the view relative to its current position."""
        self.view = matrix.translate(self.view, pos)
        self._update_mvp()

    def rotate(self, angle: float) -> None:
        """Rotate the view by ``angle`` radians relative to its current rotation."""
        self.view = matrix.rotate(self.view, angle)
        self._update_mvp()

    def scale(self, scaling: Vec2f) -> None:
        """Scale the view on the x and y axes."""
        self.view = matrix.scale(self.view, Vec3f(scaling.x, scaling.y, 0.0))
        self._update_mvp()