"""Conversion of cursor positions from window pixels to world units."""

from __future__ import annotations

from .vectors import Vec2f

__all__ = ["translate_mouse_position"]


def translate_mouse_position(
    units: float, mouse_x: float, mouse_y: float, window_w: int, window_h: int
) -> Vec2f:
    """Map a window pixel position to view coordinates.

    ``units`` is the distance from the centre to the top of the view; the
    horizontal axis is stretched by the window's aspect ratio and y points up.
    """
    return Vec2f(
        (mouse_x / window_w * 2.0 * units - units) * (window_w / float(window_h)),
        -mouse_y / window_h * 2.0 * units + units,
    )