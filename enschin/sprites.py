"""Sprite sheets and single sprites loaded from image files."""

from __future__ import annotations

from typing import Tuple

from PIL import Image

from .vectors import Vec2i

__all__ = ["SpriteSheet", "Sprite"]


def _load_rgba(path: str) -> Image.Image:
    """Load an image as RGBA with its rows flipped so that y points up."""
    with Image.open(path) as img:
        return img.convert("RGBA").transpose(Image.Transpose.FLIP_TOP_BOTTOM)


class SpriteSheet:
    """An image cut into equally sized textures, played at ``fps`` frames per second.

    Textures are ordered row by row from the bottom of the image, left to right.
    Tiles at the right or top edge that do not fit completely are still cut.
    """

    def __init__(self, file_path: str, sprite_size: Vec2i, fps: int) -> None:
        if sprite_size.x <= 0 or sprite_size.y <= 0:
            raise ValueError(f"sprite size must be positive, got {sprite_size}")
        sheet = _load_rgba(file_path)
        width, height = sheet.size
        self.fps = fps
        self.sprite_size = sprite_size
        self.textures: Tuple[Image.Image, ...] = tuple(
            sheet.crop((x, y, x + sprite_size.x, y + sprite_size.y))
            for y in range(0, height, sprite_size.y)
            for x in range(0, width, sprite_size.x)
        )

    @property
    def amount_of_sprites(self) -> int:
        return len(self.textures)

    def texture(self, index: int = 0) -> Image.Image:
        """Return the texture at ``index``."""
        return self.textures[index]


class Sprite(SpriteSheet):
    """A single texture made from a whole image."""

    def __init__(self, file_path: str) -> None:
        image = _load_rgba(file_path)
        self.fps = 0
        self.sprite_size = Vec2i(*image.size)
        self.textures = (image,)