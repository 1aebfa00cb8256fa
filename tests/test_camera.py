from dataclasses import dataclass, field

import pytest

from enschin.camera import Camera, CameraMode
from enschin.vectors import Vec2f, Vec2i


@dataclass
class Target:
    position: Vec2f


@dataclass
class RecordingRenderer:
    moves: list = field(default_factory=list)

    def translate(self, pos):
        self.moves.append(pos)


def test_default_camera_uses_position_mode():
    cam = Camera()
    assert cam.mode is CameraMode.POSITION
    assert cam.position == Vec2f(0, 0)


def test_camera_with_target_follows_it():
    target = Target(Vec2f(3, 4))
    cam = Camera(target)
    assert cam.mode is CameraMode.BODY
    target.position = Vec2f(5, 6)
    assert cam.position == Vec2f(5, 6)


def test_set_fov_within_limits():
    cam = Camera()
    cam.set_fov(Vec2i(800, 600), 5.0)
    assert cam.fov == 5.0
    assert cam.ratio == pytest.approx(800 / 600)
    assert cam.dimension == Vec2f(cam.ratio, 5.0)


def test_set_fov_clamps_to_max_and_min():
    cam = Camera()
    cam.set_fov(Vec2i(800, 600), 1000.0)
    assert cam.fov == cam.max_fov == 100.0
    cam.set_fov(Vec2i(800, 600), 0.5)
    assert cam.fov == cam.min_fov == 2.0


def test_increase_fov_adds_and_clamps():
    cam = Camera()
    cam.set_fov(Vec2i(100, 100), 10.0)
    cam.increase_fov(Vec2i(100, 100), 2.5)
    assert cam.fov == 12.5
    cam.increase_fov(Vec2i(100, 100), -50.0)
    assert cam.fov == cam.min_fov
    cam.increase_fov(Vec2i(100, 100), 500.0)
    assert cam.fov == cam.max_fov


def test_custom_limits_respected():
    cam = Camera()
    cam.max_fov = 20.0
    cam.set_fov(Vec2i(10, 10), 30.0)
    assert cam.fov == 20.0


def test_update_and_reset_in_position_mode():
    cam = Camera(position=Vec2f(2, -1))
    renderer = RecordingRenderer()
    cam.update(renderer)
    cam.reset(renderer)
    assert renderer.moves == [Vec2f(-2, 1), Vec2f(2, -1)]


def test_update_in_body_mode_uses_target_position():
    cam = Camera(Target(Vec2f(7, 8)))
    renderer = RecordingRenderer()
    cam.update(renderer)
    cam.reset(renderer)
    assert renderer.moves == [Vec2f(-7, -8), Vec2f(7, 8)]


def test_switching_between_modes():
    cam = Camera()
    cam.set_target(Target(Vec2f(1, 1)))
    assert cam.mode is CameraMode.BODY
    assert cam.position == Vec2f(1, 1)
    cam.set_position(Vec2f(4, 2))
    assert cam.mode is CameraMode.POSITION
    assert cam.position == Vec2f(4, 2)