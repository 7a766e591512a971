"""First-person fly camera with keyboard movement and mouse look."""

from __future__ import annotations

import math
from collections.abc import Collection
from enum import Enum, auto

from badgl.mathx import Mat4, Vec3, clamp, radians

WORLD_UP = Vec3(0.0, 1.0, 0.0)
PITCH_LIMIT = 89.0


class Key(Enum):
    """Keys the camera reacts to."""

    W = auto()
    S = auto()
    A = auto()
    D = auto()
    SPACE = auto()
    LEFT_CONTROL = auto()


class Camera:
    """Camera holding its view and projection matrices."""

    def __init__(self, pos: Vec3, pitch: float, yaw: float, speed: float,
                 sensitivity: float) -> None:
        self.pos = pos
        self.pitch = pitch
        self.yaw = yaw
        self.speed = speed
        self.sensitivity = sensitivity
        self.last_cursor_x = 0.0
        self.last_cursor_y = 0.0

        self.fov: float | None = None
        self.aspect_ratio: float | None = None
        self.znear: float | None = None
        self.zfar: float | None = None
        self.projection = Mat4.identity()

        self.dir = Vec3(0.0, 0.0, 0.0)
        self.right = Vec3(0.0, 0.0, 0.0)
        self.view = Mat4.identity()
        self.update_view()

    def update_view(self) -> None:
        """Recompute direction, right vector and view matrix from pitch and yaw."""
        yaw = radians(self.yaw)
        pitch = radians(self.pitch)
        self.dir = Vec3(
            math.cos(yaw) * math.cos(pitch),
            math.sin(pitch),
            math.sin(yaw) * math.cos(pitch),
        ).normalized()
        self.right = self.dir.cross(WORLD_UP).normalized()
        self.view = Mat4.look_at(self.pos, self.dir, self.right)

    def update_projection(self, fov: float, aspect_ratio: float, znear: float,
                          zfar: float) -> None:
        """Set the perspective projection parameters and rebuild the matrix."""
        self.fov = fov
        self.aspect_ratio = aspect_ratio
        self.znear = znear
        self.zfar = zfar
        self.projection = Mat4.perspective_fov(fov, aspect_ratio, znear, zfar)

    def update(self, width: int, height: int, delta_time: float,
               pressed: Collection[Key] = (), cursor: tuple[float, float] = (0.0, 0.0),
               mouse_enabled: bool = False) -> None:
        """Advance one frame from window size, held keys and cursor position."""
        if height == 0:
            raise ValueError("window height must not be zero")
        aspect_ratio = width / height
        if aspect_ratio != self.aspect_ratio:
            if self.fov is None:
                self.aspect_ratio = aspect_ratio
            else:
                self.update_projection(self.fov, aspect_ratio, self.znear, self.zfar)

        step = self.speed * delta_time
        flat_dir = Vec3(self.dir.x, 0.0, self.dir.z).normalized()
        flat_right = Vec3(self.right.x, 0.0, self.right.z).normalized()

        moves = {
            Key.W: flat_dir,
            Key.S: flat_dir.scale(-1.0),
            Key.A: flat_right.scale(-1.0),
            Key.D: flat_right,
            Key.SPACE: WORLD_UP,
            Key.LEFT_CONTROL: WORLD_UP.scale(-1.0),
        }
        for key, direction in moves.items():
            if key in pressed:
                self.pos = self.pos + direction.scale(step)

        cursor_x, cursor_y = cursor
        if mouse_enabled:
            self.yaw += self.sensitivity * (cursor_x - self.last_cursor_x)
            self.pitch += self.sensitivity * (self.last_cursor_y - cursor_y)
            self.pitch = clamp(self.pitch, -PITCH_LIMIT, PITCH_LIMIT)
        self.last_cursor_x = cursor_x
        self.last_cursor_y = cursor_y

        self.update_view()