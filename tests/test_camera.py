import math

import numpy as np
import pytest

from sandengine.camera import Camera, create_camera
from sandengine.transforms import perspective


class FakeControls:
    def __init__(self, keys=(), cursor=(0.0, 0.0)):
        self.keys = set(keys)
        self.cursor = cursor

    def key_pressed(self, key):
        return key in self.keys

    def cursor_pos(self):
        return self.cursor


def test_create_camera_defaults():
    cam = create_camera(60.0, (1280, 720))
    assert np.array_equal(cam.pos, np.zeros(3))
    assert np.array_equal(cam.front, [0.0, 0.0, -1.0])
    assert np.array_equal(cam.view, np.identity(4))
    assert cam.first_mouse is True
    assert np.allclose(cam.proj, perspective(math.radians(60.0), 1280 / 720, 0.1, 100.0))


def test_update_puts_camera_position_at_view_origin():
    cam = create_camera(60.0, (800, 600))
    cam.pos = np.array([1.0, 2.0, 3.0])
    cam.update()
    p = cam.view @ np.append(cam.pos, 1.0)
    assert np.allclose(p[:3], 0.0)
    ahead = cam.view @ np.append(cam.pos + cam.front, 1.0)
    assert ahead[2] == pytest.approx(-1.0)


def test_first_mouse_sample_causes_no_turn():
    cam = Camera()
    cam.fly_controller(0.1, FakeControls(cursor=(400.0, 300.0)))
    assert cam.first_mouse is False
    assert cam.yaw == 0.0 and cam.pitch == 0.0
    assert (cam.last_x, cam.last_y) == (400.0, 300.0)
    assert np.allclose(cam.front, [1.0, 0.0, 0.0])


def test_forward_movement_uses_previous_front():
    cam = Camera(speed=2.0)
    cam.fly_controller(0.5, FakeControls(keys={"w"}))
    assert np.allclose(cam.pos, [0.0, 0.0, -1.0])


def test_forward_and_backward_cancel():
    cam = Camera(speed=3.0)
    cam.fly_controller(1.0, FakeControls(keys={"w", "s"}))
    assert np.allclose(cam.pos, 0.0)


def test_strafe_right_and_left():
    cam = Camera(speed=1.0)
    cam.fly_controller(1.0, FakeControls(keys={"d"}))
    assert np.allclose(cam.pos, [1.0, 0.0, 0.0])
    both = Camera(speed=1.0)
    both.fly_controller(1.0, FakeControls(keys={"a", "d"}))
    assert np.allclose(both.pos, 0.0)


def test_vertical_movement():
    cam = Camera(speed=4.0)
    cam.fly_controller(0.25, FakeControls(keys={"e"}))
    assert np.allclose(cam.pos, [0.0, 1.0, 0.0])
    cam.fly_controller(0.25, FakeControls(keys={"q"}))
    assert np.allclose(cam.pos, 0.0)


def test_pitch_is_clamped():
    cam = Camera()
    controls = FakeControls(cursor=(0.0, 0.0))
    cam.fly_controller(0.0, controls)
    controls.cursor = (0.0, -5000.0)
    cam.fly_controller(0.0, controls)
    assert cam.pitch == 89.0
    controls.cursor = (0.0, 10000.0)
    cam.fly_controller(0.0, controls)
    assert cam.pitch == -89.0


def test_yaw_turn_rotates_front():
    cam = Camera()
    controls = FakeControls(cursor=(0.0, 0.0))
    cam.fly_controller(0.0, controls)
    controls.cursor = (900.0, 0.0)
    cam.fly_controller(0.0, controls)
    assert cam.yaw == pytest.approx(90.0)
    assert np.allclose(cam.front, [0.0, 0.0, 1.0], atol=1e-9)


def test_front_stays_unit_length():
    cam = Camera()
    controls = FakeControls(cursor=(10.0, 20.0))
    for x, y in [(35.0, -12.0), (-80.0, 44.0), (123.0, 7.0)]:
        controls.cursor = (x, y)
        cam.fly_controller(0.016, controls)
        assert np.linalg.norm(cam.front) == pytest.approx(1.0)