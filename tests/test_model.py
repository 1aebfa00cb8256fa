import pytest

from enschin.model import (
    DEFAULT_INDICES,
    DEFAULT_TEX_COORDS,
    Model,
    ShapeType,
    generate_vertices_tex,
)
from enschin.vectors import Vec2f
from enschin.vertex_layout import ElementType

SQUARE = [
    0, 0, 0, 0,
    1, 0, 1, 0,
    1, 1, 1, 1,
    0, 1, 0, 1,
]


def _tex(buffer):
    return [c for pair in zip(buffer[2::4], buffer[3::4]) for c in pair]


def test_generate_vertices_tex_layout():
    buf = generate_vertices_tex(Vec2f(2.0, 4.0))
    assert len(buf) == 16
    assert tuple(_tex(buf)) == DEFAULT_TEX_COORDS
    assert buf[0:2] == [-1.0, -2.0]
    assert buf[8:10] == [-buf[0], -buf[1]]


def test_generated_rectangle_is_centred():
    buf = generate_vertices_tex(Vec2f(3.0, 5.0))
    xs = buf[0::4]
    ys = buf[1::4]
    assert sum(xs) == 0.0
    assert sum(ys) == 0.0
    assert max(xs) - min(xs) == 3.0
    assert max(ys) - min(ys) == 5.0


def test_polygon_from_buffer():
    model = Model(SQUARE)
    assert model.vertices == (Vec2f(0, 0), Vec2f(1, 0), Vec2f(1, 1), Vec2f(0, 1))
    assert model.shape.type is ShapeType.POLYGON
    assert model.shape.vertices == model.vertices
    assert model.indices == DEFAULT_INDICES
    assert model.amount_of_vertices == 4
    assert model.amount_of_indices == 6


def test_chain_reverses_collision_vertices():
    model = Model(SQUARE, chain=True)
    assert model.shape.type is ShapeType.CHAIN
    assert model.shape.vertices == tuple(reversed(model.vertices))


def test_custom_indices():
    model = Model(SQUARE[:12], indices=[0, 1, 2])
    assert model.indices == (0, 1, 2)
    assert model.amount_of_indices == 3
    assert model.amount_of_vertices == 3


def test_layout_is_position_and_texture():
    model = Model(SQUARE)
    assert [(e.type, e.count) for e in model.layout.elements] == [
        (ElementType.FLOAT, 2),
        (ElementType.FLOAT, 2),
    ]
    assert model.layout.stride == 16


def test_from_size():
    size = Vec2f(2.0, 4.0)
    model = Model.from_size(size)
    assert model.buffer == tuple(generate_vertices_tex(size))
    assert model.shape.type is ShapeType.POLYGON
    assert model.shape.vertices == model.vertices
    assert len(model.vertices) == 4
    assert model.indices == DEFAULT_INDICES


def test_from_radius():
    model = Model.from_radius(1.5)
    assert model.shape.type is ShapeType.CIRCLE
    assert model.shape.radius == 1.5
    assert model.buffer == tuple(generate_vertices_tex(Vec2f(3.0, 3.0)))
    assert model.vertices == ()


def test_buffer_must_hold_whole_vertices():
    with pytest.raises(ValueError):
        Model([0.0] * 5)


def test_too_few_vertices():
    with pytest.raises(ValueError):
        Model(SQUARE[:8])