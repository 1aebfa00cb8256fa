"""Spatial partitioning of game objects into a grid of chunks."""

from __future__ import annotations

from typing import Any, List

from .camera import Camera, CameraMode
from .vectors import Vec2f, Vec2i

__all__ = ["Chunk", "ChunkManager"]


class Chunk:
    """One grid cell holding the game objects that lie inside it.

    Game objects are expected to provide ``position``, ``alive``,
    ``current_chunk``, ``update(ctx)`` and ``render(ctx)``.
    """

    def __init__(self, matrix_position: Vec2i = Vec2i(0, 0)) -> None:
        self.matrix_position = matrix_position
        self.game_objects: List[Any] = []

    def is_inside(self, obj: Any, chunk_size: Vec2i) -> bool:
        """Whether ``obj`` lies within this chunk for the given chunk size."""
        left = self.matrix_position.x * chunk_size.x - chunk_size.x / 2.0
        bottom = self.matrix_position.y * chunk_size.y - chunk_size.y / 2.0
        pos = obj.position
        return (
            left <= pos.x < left + chunk_size.x
            and bottom <= pos.y < bottom + chunk_size.y
        )

    def add(self, obj: Any) -> None:
        self.game_objects.append(obj)

    def update(self, ctx: Any) -> None:
        """Update every object, drop dead ones and hand leaving ones to the level."""
        pending = self.game_objects
        self.game_objects = []
        chunk_size = ctx.level.chunk_manager.chunk_size
        for obj in pending:
            obj.update(ctx)
            if not obj.alive:
                continue
            if self.is_inside(obj, chunk_size):
                self.game_objects.append(obj)
            else:
                ctx.level.add_game_object(obj)

    def render(self, ctx: Any) -> None:
        for obj in self.game_objects:
            obj.render(ctx)


class ChunkManager:
    """A grid of chunks reaching ``left``, ``right``, ``bottom`` and ``top``
    chunks away from the central one.

    Positions that fall outside the grid map to the ``outside`` chunk.
    """

    def __init__(
        self,
        left: int,
        right: int,
        bottom: int,
        top: int,
        chunk_size: Vec2i,
        updates: Vec2i = Vec2i(1, 1),
    ) -> None:
        if min(left, right, bottom, top) < 0:
            raise ValueError("chunk extents must not be negative")
        if chunk_size.x <= 0 or chunk_size.y <= 0:
            raise ValueError(f"chunk size must be positive, got {chunk_size}")
        self.left = left
        self.right = right
        self.bottom = bottom
        self.top = top
        self.chunk_size = chunk_size
        self.updates = updates
        self.amount_of_chunks = Vec2i(1 + left + right, 1 + bottom + top)
        self.chunks: List[Chunk] = [
            Chunk(Vec2i(x - left, y - bottom))
            for y in range(self.amount_of_chunks.y)
            for x in range(self.amount_of_chunks.x)
        ]
        self.outside = Chunk()

    @property
    def total_chunks(self) -> int:
        return len(self.chunks)

    def _by_index(self, index: int) -> Chunk:
        if 0 <= index < len(self.chunks):
            return self.chunks[index]
        return self.outside

    def chunk_at(self, coords: Vec2f) -> Chunk:
        """The chunk that holds the world coordinates ``coords``."""
        size = self.chunk_size
        column = int((coords.x - size.x) / size.x + self.amount_of_chunks.x / 2.0)
        row = int((coords.y - size.y) / size.y + self.amount_of_chunks.y / 2.0)
        return self._by_index(row * self.amount_of_chunks.x + column)

    def chunk_at_matrix(self, matrix_position: Vec2i) -> Chunk:
        """The chunk at a grid position relative to the central chunk."""
        index = (
            self.total_chunks // 2
            + matrix_position.y * self.amount_of_chunks.x
            + matrix_position.x
        )
        return self._by_index(index)

    def add_game_object(self, obj: Any) -> None:
        """Place ``obj`` in the chunk at its position."""
        chunk = self.chunk_at(obj.position)
        chunk.add(obj)
        obj.current_chunk = chunk

    def main_chunk(self, camera: Camera) -> Chunk:
        """The chunk the camera currently looks at."""
        if camera.mode is CameraMode.BODY:
            return camera.target.current_chunk
        return self.chunk_at(camera.position)

    def update(self, ctx: Any) -> None:
        self.main_chunk(ctx.camera).update(ctx)

    def render(self, ctx: Any) -> None:
        self.main_chunk(ctx.camera).render(ctx)