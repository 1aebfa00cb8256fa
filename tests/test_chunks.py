from dataclasses import dataclass, field
from typing import Any, List

import pytest

from enschin.camera import Camera
from enschin.chunks import Chunk, ChunkManager
from enschin.vectors import Vec2f, Vec2i


class FakeObject:
    def __init__(self, position):
        self.position = position
        self.alive = True
        self.current_chunk = None
        self.updates = 0

    def update(self, ctx):
        self.updates += 1

    def render(self, ctx):
        ctx.rendered.append(self)


class FakeLevel:
    def __init__(self, manager):
        self.chunk_manager = manager
        self.added: List[Any] = []

    def add_game_object(self, obj):
        self.added.append(obj)
        self.chunk_manager.add_game_object(obj)


@dataclass
class Ctx:
    level: Any
    camera: Any = None
    rendered: List[Any] = field(default_factory=list)


def make_manager():
    return ChunkManager(1, 1, 1, 1, Vec2i(10, 10))


def test_total_chunks_and_layout():
    m = make_manager()
    assert m.total_chunks == 9
    assert m.amount_of_chunks == Vec2i(3, 3)
    assert m.chunk_at_matrix(Vec2i(0, 0)).matrix_position == Vec2i(0, 0)
    assert m.chunk_at_matrix(Vec2i(-1, -1)).matrix_position == Vec2i(-1, -1)


def test_matrix_lookup_round_trip():
    m = make_manager()
    for chunk in m.chunks:
        assert m.chunk_at_matrix(chunk.matrix_position) is chunk


def test_far_coordinates_map_to_outside():
    m = make_manager()
    assert m.chunk_at(Vec2f(1000.0, 1000.0)) is m.outside
    assert m.chunk_at_matrix(Vec2i(50, 50)) is m.outside


def test_invalid_sizes_rejected():
    with pytest.raises(ValueError):
        ChunkManager(1, 1, 1, 1, Vec2i(0, 10))
    with pytest.raises(ValueError):
        ChunkManager(-1, 1, 1, 1, Vec2i(10, 10))


def test_add_game_object_sets_current_chunk():
    m = make_manager()
    obj = FakeObject(Vec2f(0.0, 0.0))
    m.add_game_object(obj)
    assert obj.current_chunk is m.chunk_at(obj.position)
    assert obj in obj.current_chunk.game_objects


def test_is_inside_boundaries():
    chunk = Chunk(Vec2i(0, 0))
    size = Vec2i(10, 10)
    assert chunk.is_inside(FakeObject(Vec2f(0.0, 0.0)), size)
    assert chunk.is_inside(FakeObject(Vec2f(4.9, -5.0)), size)
    assert not chunk.is_inside(FakeObject(Vec2f(5.0, 0.0)), size)


def test_update_drops_dead_and_moves_leaving_objects():
    m = make_manager()
    level = FakeLevel(m)
    chunk = Chunk(Vec2i(0, 0))
    staying = FakeObject(Vec2f(1.0, 1.0))
    dead = FakeObject(Vec2f(1.0, 1.0))
    dead.alive = False
    leaving = FakeObject(Vec2f(1000.0, 1000.0))
    for obj in (staying, dead, leaving):
        chunk.add(obj)
    chunk.update(Ctx(level))
    assert chunk.game_objects == [staying]
    assert level.added == [leaving]
    assert leaving.current_chunk is m.outside
    assert all(o.updates == 1 for o in (staying, dead, leaving))


def test_main_chunk_follows_target():
    m = make_manager()
    obj = FakeObject(Vec2f(0.0, 0.0))
    m.add_game_object(obj)
    camera = Camera(target=obj)
    assert m.main_chunk(camera) is obj.current_chunk


def test_main_chunk_by_position():
    m = make_manager()
    camera = Camera(position=Vec2f(1000.0, 1000.0))
    assert m.main_chunk(camera) is m.outside


def test_update_and_render_only_touch_main_chunk():
    m = make_manager()
    level = FakeLevel(m)
    target = FakeObject(Vec2f(0.0, 0.0))
    m.add_game_object(target)
    other = FakeObject(Vec2f(1000.0, 1000.0))
    m.add_game_object(other)
    ctx = Ctx(level, camera=Camera(target=target))
    m.render(ctx)
    assert target in ctx.rendered
    assert other not in ctx.rendered
    m.update(ctx)
    assert other.updates == 0
    assert target.updates == 1