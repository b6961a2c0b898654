"""Fly-through camera with keyboard movement and mouse look."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Protocol

import numpy as np

from .transforms import look_at, normalize, perspective

UP = np.array([0.0, 1.0, 0.0])
MOUSE_SENSITIVITY = 0.1
PITCH_LIMIT = 89.0
NEAR_PLANE = 0.1
FAR_PLANE = 100.0


class Controls(Protocol):
    """Input source queried by :meth:`Camera.fly_controller`."""

    def key_pressed(self, key: str) -> bool: ...

    def cursor_pos(self) -> tuple[float, float]: ...


@dataclass(eq=False)
class Camera:
    """Camera state: matrices, position, orientation and mouse tracking."""

    view: np.ndarray = field(default_factory=lambda: np.identity(4))
    proj: np.ndarray = field(default_factory=lambda: np.identity(4))
    pos: np.ndarray = field(default_factory=lambda: np.zeros(3))
    speed: float = 0.0
    front: np.ndarray = field(default_factory=lambda: np.array([0.0, 0.0, -1.0]))
    first_mouse: bool = True
    last_x: float = 0.0
    last_y: float = 0.0
    yaw: float = 0.0
    pitch: float = 0.0

    def update(self) -> None:
        """Recompute the view matrix from position and facing."""
        self.view = look_at(self.pos, self.pos + self.front, UP)

    def fly_controller(self, dt: float, controls: Controls) -> None:
        """Move with W/S/A/D/E/Q and turn with the mouse.

        Movement uses the facing from before this call's mouse update.
        """
        step = self.speed * dt
        right = normalize(np.cross(self.front, UP))

        if controls.key_pressed("w"):
            self.pos = self.pos + self.front * step
        if controls.key_pressed("s"):
            self.pos = self.pos - self.front * step
        if controls.key_pressed("d"):
            self.pos = self.pos + right * step
        if controls.key_pressed("a"):
            self.pos = self.pos - right * step
        if controls.key_pressed("e"):
            self.pos = self.pos + UP * step
        if controls.key_pressed("q"):
            self.pos = self.pos - UP * step

        mouse_x, mouse_y = controls.cursor_pos()
        if self.first_mouse:
            self.last_x, self.last_y = mouse_x, mouse_y
            self.first_mouse = False

        x_offset = (mouse_x - self.last_x) * MOUSE_SENSITIVITY
        y_offset = (self.last_y - mouse_y) * MOUSE_SENSITIVITY
        self.last_x, self.last_y = mouse_x, mouse_y

        self.yaw += x_offset
        self.pitch = min(max(self.pitch + y_offset, -PITCH_LIMIT), PITCH_LIMIT)

        yaw = math.radians(self.yaw)
        pitch = math.radians(self.pitch)
        direction = np.array(
            [
                math.cos(yaw) * math.cos(pitch),
                math.sin(pitch),
                math.sin(yaw) * math.cos(pitch),
            ]
        )
        self.front = normalize(direction)


def create_camera(fov: float, size) -> Camera:
    """Create a camera at the origin; ``fov`` is in degrees, ``size`` is (w, h)."""
    width, height = size
    proj = perspective(math.radians(fov), width / height, NEAR_PLANE, FAR_PLANE)
    return Camera(proj=proj)