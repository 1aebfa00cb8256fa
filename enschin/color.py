"""Colours and point lights."""

from __future__ import annotations

from dataclasses import dataclass, field

from .vectors import Vec2f

__all__ = ["Color", "Light"]


@dataclass
class Color:
    """RGBA colour; every channel lies between 0.0 and 1.0."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 0.0

    def invert(self) -> None:
        """Invert the colour in place, leaving alpha untouched.

        Green and blue are derived from the already inverted red channel.
        """
        self.r = 1.0 - self.r
        self.g = 1.0 - self.r
        self.b = 1.0 - self.r


@dataclass
class Light:
    """A light with a colour, a radius (its strength) and a position."""

    radius: float = 0.0
    light_color: Color = field(default_factory=Color)
    pos: Vec2f = field(default_factory=Vec2f)