"""Position, rotation and scale of an object in the world."""

from __future__ import annotations

from dataclasses import dataclass, field

from badgl.mathx import Mat4, Vec3, radians


def _zero() -> Vec3:
    return Vec3(0.0, 0.0, 0.0)


def _one() -> Vec3:
    return Vec3(1.0, 1.0, 1.0)


@dataclass
class Transform:
    """Position, Euler angles in degrees (pitch, yaw, roll) and per-axis scale."""

    pos: Vec3 = field(default_factory=_zero)
    euler: Vec3 = field(default_factory=_zero)
    scale: Vec3 = field(default_factory=_one)

    def reset(self) -> None:
        """Return to the origin with no rotation and unit scale."""
        self.pos = _zero()
        self.euler = _zero()
        self.scale = _one()

    def model_matrix(self) -> Mat4:
        """Model matrix: scale, then rotate about x, y and z, then translate."""
        return (
            Mat4.identity()
            .scaled(self.scale)
            .rotated_x(radians(self.euler.x))
            .rotated_y(radians(self.euler.y))
            .rotated_z(radians(self.euler.z))
            .translated(self.pos)
        )