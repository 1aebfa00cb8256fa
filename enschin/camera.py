"""Camera that follows a target or sits at a fixed position."""

from __future__ import annotations

from enum import Enum, auto
from typing import Any, Optional, Protocol

from .vectors import Vec2f, Vec2i

__all__ = ["CameraMode", "Camera"]


class CameraMode(Enum):
    BODY = auto()
    POSITION = auto()


class _Translatable(Protocol):
    def translate(self, pos: Vec2f) -> None: ...


class Camera:
    """Tracks either a target object (anything with ``position``) or a point.

    The field of view is kept between ``min_fov`` and ``max_fov``.
    """

    def __init__(self, target: Optional[Any] = None, position: Optional[Vec2f] = None) -> None:
        self.target = target
        self._position = position if position is not None else Vec2f(0.0, 0.0)
        self.mode = CameraMode.BODY if target is not None else CameraMode.POSITION
        self.dimension = Vec2f()
        self.fov = 0.0
        self.ratio = 0.0
        self.min_fov = 2.0
        self.max_fov = 100.0
        self.fading = False

    @property
    def position(self) -> Vec2f:
        """Where the camera currently looks."""
        if self.mode is CameraMode.BODY:
            return self.target.position
        return self._position

    def update(self, renderer: _Translatable) -> None:
        """Move the renderer's view so that the camera position is centred."""
        if self.mode is CameraMode.BODY:
            self._position = self.target.position
        renderer.translate(-self._position)

    def reset(self, renderer: _Translatable) -> None:
        """Undo the translation applied by :meth:`update`."""
        renderer.translate(self._position)

    def _clamp(self, fov: float) -> float:
        if fov > self.max_fov:
            return self.max_fov
        if fov < self.min_fov:
            return self.min_fov
        return fov

    def _apply(self, window_size: Vec2i, fov: float) -> None:
        self.fov = self._clamp(fov)
        self.ratio = window_size.x / float(window_size.y)
        self.dimension = Vec2f(self.ratio, self.fov)

    def set_fov(self, window_size: Vec2i, new_fov: float) -> None:
        """Set the field of view and recompute the aspect ratio."""
        self._apply(window_size, new_fov)

    def increase_fov(self, window_size: Vec2i, amount: float) -> None:
        """Change the field of view by ``amount`` and recompute the aspect ratio."""
        self._apply(window_size, self.fov + amount)

    def set_target(self, target: Any) -> None:
        """Follow ``target`` from now on."""
        self.target = target
        self.mode = CameraMode.BODY

    def set_position(self, position: Vec2f) -> None:
        """Stay at a fixed ``position`` from now on."""
        self._position = position
        self.mode = CameraMode.POSITION