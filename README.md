# enschin

The core of a small 2D game engine. It holds the parts that need no graphics context:
vector and 4x4 matrix math, a camera with field-of-view limits, timers, models with
collision shapes, terrain definitions, sprite sheets, a JSON resource loader, a grid of
world chunks and mapping of input events to keys and mouse buttons.

## Install

```
pip install .
```

Install with the test extra to run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `enschin.vectors`: frozen dataclasses `Vec2f`, `Vec2i`, `Vec3f` and `Vec3i`. They add,
  subtract, multiply and divide component-wise or by a scalar, negate, iterate over their
  components, and print as `{x, y}`. The integer vectors divide with truncation toward
  zero. `NULL_VEC2` is `Vec2f(0, 0)`.
- `enschin.color`: `Color` (RGBA channels from 0.0 to 1.0, with `invert()`, which leaves
  alpha alone and derives green and blue from the inverted red) and `Light` (radius,
  colour and position).
- `enschin.timer`: `Timer`. `update(delta_time)` advances it; `value` wraps back to the
  start value when it passes the end value, and `triggered` says whether the last update
  wrapped. `take()` returns True once the running total has passed the end value, and
  resets that total. `Timer.start_all()`, `Timer.stop_all()` and `Timer.is_active_all()`
  manage a flag shared by all timers.
- `enschin.matrix`: helpers for column-major 4x4 matrices held as flat sequences of 16
  floats. `multiply`, `translate`, `rotate`, `set_rotate`, `scale`, `frustum`, `ortho` and
  `set_look_at` return new lists; `length` gives a vector's length; `format_matrix` and
  `format_flat` render a matrix as text. A sequence of the wrong size raises `ValueError`.
- `enschin.camera`: `Camera` and `CameraMode`. A camera follows a target (anything with a
  `position`) or stays at a fixed position. `set_fov` and `increase_fov` clamp the field
  of view between `min_fov` and `max_fov` and recompute the aspect ratio from the window
  size. `update(renderer)` and `reset(renderer)` translate a renderer's view to and from
  the camera position.
- `enschin.mouse`: `translate_mouse_position`, which turns a window pixel position into
  view coordinates.
- `enschin.keys`: the `Key`, `Mod`, `MouseButton` and `GamepadButton` code enums.
- `enschin.vertex_layout`: `VertexBufferLayout`, `VertexBufferElement` and `ElementType`,
  describing vertex attributes and the stride they add up to.
- `enschin.model`: `Model`, `Shape`, `ShapeType` and `generate_vertices_tex`. A model
  holds interleaved `x, y, u, v` vertex data, draw indices and a collision shape (polygon,
  closed chain or circle). `Model.from_size` and `Model.from_radius` build rectangles and
  circles.
- `enschin.terrain`: `TerrainDefinition`, which joins consecutive pairs of strip points
  into quad models, each centred on its own mean, with the centres kept in `centers`.
- `enschin.sprites`: `SpriteSheet` and `Sprite`, which load an image with Pillow, flip it
  so y points up and cut it into frames (`texture(index)`).
- `enschin.resources`: `CommonResources`, which loads colours, models, terrains, sprite
  sheets and sprites from JSON manifests and hands them out through `get_color`,
  `get_model`, `get_terrain`, `get_sprite_sheet` and `get_sprite`. A name already loaded
  keeps its first definition; an unknown name raises `KeyError`.
- `enschin.renderer`: `Renderer`, which holds the projection, view and combined `mvp`
  matrices and updates them through `reset_projection`, `reset_matrix`, `translate`,
  `rotate` and `scale`.
- `enschin.chunks`: `Chunk` and `ChunkManager`, which split the world into a grid of
  chunks, place game objects by position, update and render the chunk the camera looks
  at, and send positions outside the grid to an `outside` chunk.
- `enschin.input`: `Input`, `Keyboard`, `Mapping` and `MappingType`. Events are named in
  a JSON file and bound to key or mouse button codes; `Input.update` takes a
  `poll(mapping_type, code)` callable, the cursor position in pixels, the window size and
  the field of view.

## Example

```python
from enschin.vectors import Vec2f, Vec2i
from enschin.camera import Camera
from enschin.timer import Timer

camera = Camera(position=Vec2f(0, 0))
camera.set_fov(Vec2i(800, 600), 5.0)
camera.increase_fov(Vec2i(800, 600), 1000)  # clamped to camera.max_fov

jump = Timer(0, 0.25)
jump.update(0.3)
if jump.take():
    print("jump ready")
```

## What it does not do

The package opens no window and draws nothing: `Renderer` only keeps matrices, and
sprites are Pillow images rather than GPU textures. There is no physics simulation, no
game loop and no device polling of its own; game objects, the level and the source of
key and mouse state are supplied by the caller.