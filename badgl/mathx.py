"""Small vector and 4x4 matrix maths for OpenGL-style rendering.

Matrices are stored column-major, matching the memory layout OpenGL expects.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Sequence

PI = math.pi
DEG2RAD = math.pi / 180.0


def radians(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * DEG2RAD


def clamp(val, lower, upper):
    """Limit ``val`` to the closed range ``[lower, upper]``."""
    if val < lower:
        return lower
    if val > upper:
        return upper
    return val


@dataclass(frozen=True)
class Vec2:
    """Two-component vector."""

    x: float = 0.0
    y: float = 0.0

    @property
    def u(self) -> float:
        return self.x

    @property
    def v(self) -> float:
        return self.y

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vec2) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def dot(self, other: Vec2) -> float:
        return self.x * other.x + self.y * other.y

    def scale(self, s: float) -> Vec2:
        return Vec2(s * self.x, s * self.y)

    def add_scalar(self, s: float) -> Vec2:
        return Vec2(self.x + s, self.y + s)

    def normalized(self) -> Vec2:
        """Unit vector in the same direction; the zero vector stays zero."""
        denom = math.sqrt(self.dot(self))
        if denom == 0.0:
            return Vec2(0.0, 0.0)
        return self.scale(1.0 / denom)


@dataclass(frozen=True)
class Vec3:
    """Three-component vector."""

    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    @property
    def r(self) -> float:
        return self.x

    @property
    def g(self) -> float:
        return self.y

    @property
    def b(self) -> float:
        return self.z

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __add__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x + other.x, self.y + other.y, self.z + other.z)

    def __sub__(self, other: Vec3) -> Vec3:
        if not isinstance(other, Vec3):
            return NotImplemented
        return Vec3(self.x - other.x, self.y - other.y, self.z - other.z)

    def dot(self, other: Vec3) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def scale(self, s: float) -> Vec3:
        return Vec3(s * self.x, s * self.y, s * self.z)

    def add_scalar(self, s: float) -> Vec3:
        return Vec3(self.x + s, self.y + s, self.z + s)

    def normalized(self) -> Vec3:
        """Unit vector in the same direction; the zero vector stays zero."""
        denom = math.sqrt(self.dot(self))
        if denom == 0.0:
            return Vec3(0.0, 0.0, 0.0)
        return self.scale(1.0 / denom)

    def cross(self, other: Vec3) -> Vec3:
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )


@dataclass(frozen=True)
class Mat4:
    """Immutable 4x4 matrix; ``data`` holds 16 floats in column-major order."""

    data: tuple

    def __post_init__(self) -> None:
        values = tuple(float(v) for v in self.data)
        if len(values) != 16:
            raise ValueError(f"a 4x4 matrix needs 16 values, got {len(values)}")
        object.__setattr__(self, "data", values)

    @classmethod
    def _from_rows(cls, rows: Sequence[Sequence[float]]) -> Mat4:
        return cls(tuple(value for column in zip(*rows) for value in column))

    def _columns(self) -> list[tuple]:
        return [self.data[start:start + 4] for start in range(0, 16, 4)]

    def _rows(self) -> list[tuple]:
        return list(zip(*self._columns()))

    @classmethod
    def zero(cls) -> Mat4:
        return cls((0.0,) * 16)

    @classmethod
    def identity(cls) -> Mat4:
        return cls._from_rows([
            (1, 0, 0, 0),
            (0, 1, 0, 0),
            (0, 0, 1, 0),
            (0, 0, 0, 1),
        ])

    def get(self, row: int, col: int) -> float:
        """Element at zero-based ``row`` and ``col``."""
        if not (0 <= row < 4 and 0 <= col < 4):
            raise IndexError(f"matrix index ({row}, {col}) out of range")
        return self.data[col * 4 + row]

    def __matmul__(self, other: Mat4) -> Mat4:
        if not isinstance(other, Mat4):
            return NotImplemented
        columns = other._columns()
        return Mat4._from_rows([
            [sum(a * b for a, b in zip(row, column)) for column in columns]
            for row in self._rows()
        ])

    def transposed(self) -> Mat4:
        return Mat4._from_rows(self._columns())

    def scaled(self, s: Vec3) -> Mat4:
        """Apply a per-axis scale after this transform."""
        scale = Mat4._from_rows([
            (s.x, 0, 0, 0),
            (0, s.y, 0, 0),
            (0, 0, s.z, 0),
            (0, 0, 0, 1),
        ])
        return scale @ self

    def scaled_scalar(self, s: float) -> Mat4:
        """Multiply the first three columns by ``s``; the fourth is left alone."""
        return Mat4(tuple(v * s for v in self.data[:12]) + self.data[12:])

    def translated(self, t: Vec3) -> Mat4:
        """Apply a translation after this transform."""
        translation = Mat4._from_rows([
            (1, 0, 0, t.x),
            (0, 1, 0, t.y),
            (0, 0, 1, t.z),
            (0, 0, 0, 1),
        ])
        return translation @ self

    def rotated_x(self, a: float) -> Mat4:
        c, s = math.cos(a), math.sin(a)
        rotation = Mat4._from_rows([
            (1, 0, 0, 0),
            (0, c, -s, 0),
            (0, s, c, 0),
            (0, 0, 0, 1),
        ])
        return rotation @ self

    def rotated_y(self, a: float) -> Mat4:
        c, s = math.cos(a), math.sin(a)
        rotation = Mat4._from_rows([
            (c, 0, s, 0),
            (0, 1, 0, 0),
            (-s, 0, c, 0),
            (0, 0, 0, 1),
        ])
        return rotation @ self

    def rotated_z(self, a: float) -> Mat4:
        c, s = math.cos(a), math.sin(a)
        rotation = Mat4._from_rows([
            (c, -s, 0, 0),
            (s, c, 0, 0),
            (0, 0, 1, 0),
            (0, 0, 0, 1),
        ])
        return rotation @ self

    @classmethod
    def perspective_fov(cls, fov: float, aspect: float, near: float, far: float) -> Mat4:
        """Symmetric perspective projection from a vertical field of view."""
        s = 1.0 / math.tan(0.5 * fov)
        zdenom = 1.0 / (far - near)
        return cls._from_rows([
            (s / aspect, 0, 0, 0),
            (0, s, 0, 0),
            (0, 0, -(far + near) * zdenom, (-2.0 * far * near) * zdenom),
            (0, 0, -1.0, 0),
        ])

    @classmethod
    def perspective_frustum(cls, near: float, far: float, left: float, right: float,
                            bottom: float, top: float) -> Mat4:
        """Possibly asymmetric perspective projection from frustum bounds."""
        xdenom = 1.0 / (right - left)
        ydenom = 1.0 / (top - bottom)
        zdenom = 1.0 / (far - near)
        near2 = 2.0 * near
        return cls._from_rows([
            (near2 * xdenom, 0, (right + left) * xdenom, 0),
            (0, near2 * ydenom, (top + bottom) * ydenom, 0),
            (0, 0, -(far + near) * zdenom, (-2.0 * far * near) * zdenom),
            (0, 0, -1.0, 0),
        ])

    @classmethod
    def orthographic_frustum(cls, near: float, far: float, left: float, right: float,
                             bottom: float, top: float) -> Mat4:
        """Orthographic projection from box bounds."""
        xdenom = 1.0 / (right - left)
        ydenom = 1.0 / (top - bottom)
        zdenom = 1.0 / (far - near)
        return cls._from_rows([
            (2 * xdenom, 0, 0, -(right + left) * xdenom),
            (0, 2 * ydenom, 0, -(top + bottom) * ydenom),
            (0, 0, -2 * zdenom, -(far + near) * zdenom),
            (0, 0, 0, 1.0),
        ])

    @classmethod
    def look_at(cls, t: Vec3, k: Vec3, i: Vec3) -> Mat4:
        """View matrix from position ``t``, forward ``k`` and right ``i``."""
        j = i.cross(k).normalized()
        return cls._from_rows([
            (i.x, i.y, i.z, -t.dot(i)),
            (j.x, j.y, j.z, -t.dot(j)),
            (-k.x, -k.y, -k.z, t.dot(k)),
            (0.0, 0.0, 0.0, 1.0),
        ])