"""Procedural meshes centred on the origin: UV sphere, box and plane."""

from __future__ import annotations

import math
from dataclasses import dataclass

from badgl.mathx import PI, Vec2, Vec3


@dataclass(frozen=True)
class MeshData:
    """Vertex attributes and triangle indices of one mesh.

    ``normals`` and ``uvs`` are ``None`` when the mesh does not carry them.
    Triangles are wound counter-clockwise when seen from outside.
    """

    positions: tuple[Vec3, ...]
    indices: tuple[int, ...]
    normals: tuple[Vec3, ...] | None = None
    uvs: tuple[Vec2, ...] | None = None

    def __post_init__(self) -> None:
        count = len(self.positions)
        if self.normals is not None and len(self.normals) != count:
            raise ValueError("normals must match positions in length")
        if self.uvs is not None and len(self.uvs) != count:
            raise ValueError("uvs must match positions in length")
        if len(self.indices) % 3:
            raise ValueError("index count must be a multiple of three")

    @property
    def vert_count(self) -> int:
        return len(self.positions)

    @property
    def ind_count(self) -> int:
        return len(self.indices)

    @property
    def vertex_size(self) -> int:
        """Floats per vertex: 3 for position, plus 3 for normals, plus 2 for UVs."""
        size = 3
        if self.normals is not None:
            size += 3
        if self.uvs is not None:
            size += 2
        return size

    def triangles(self):
        """Yield each triangle as a tuple of three vertex indices."""
        it = iter(self.indices)
        return zip(it, it, it)


def uv_sphere(res: int) -> MeshData:
    """Unit sphere made of ``res`` latitude rings and ``2 * res`` longitudes.

    Normals and UVs are not stored: they follow from the positions.
    """
    if res < 2:
        raise ValueError(f"{res} too small of a resolution for uv sphere")

    horizontals, verticals = res, 2 * res

    positions = [Vec3(0.0, 1.0, 0.0)]
    for i in range(horizontals):
        horizontal_angle = (i + 1) * PI / horizontals
        radius = math.sin(horizontal_angle)
        y = math.cos(horizontal_angle)
        for j in range(verticals):
            vertical_angle = j * 2 * PI / verticals
            positions.append(Vec3(radius * math.cos(vertical_angle), y,
                                  radius * math.sin(vertical_angle)))
    positions.append(Vec3(0.0, -1.0, 0.0))
    bottom = len(positions) - 1

    indices: list[int] = []
    for i in range(verticals):
        p1 = i + 1
        p2 = (i + 1) % verticals + 1
        indices += (0, p2, p1)

    for i in range(horizontals - 2):
        layer1 = i * verticals + 1
        layer2 = (i + 1) * verticals + 1
        for j in range(verticals):
            tr = layer1 + j
            tl = layer1 + (j + 1) % verticals
            br = layer2 + j
            bl = layer2 + (j + 1) % verticals
            indices += (tr, tl, bl, tr, bl, br)

    final_layer = verticals * (horizontals - 2) + 1
    for i in range(verticals):
        p1 = final_layer + i
        p2 = final_layer + (i + 1) % verticals
        indices += (bottom, p1, p2)

    return MeshData(positions=tuple(positions), indices=tuple(indices))


_BOX_FACES = (
    # (normal, corner signs as (sx, sy, sz)) for front, top, back, bottom, right, left
    ((0.0, 0.0, 1.0), ((-1, -1, 1), (1, -1, 1), (1, 1, 1), (-1, 1, 1))),
    ((0.0, 1.0, 0.0), ((-1, 1, 1), (1, 1, 1), (1, 1, -1), (-1, 1, -1))),
    ((0.0, 0.0, -1.0), ((1, -1, -1), (-1, -1, -1), (-1, 1, -1), (1, 1, -1))),
    ((0.0, -1.0, 0.0), ((-1, -1, -1), (1, -1, -1), (1, -1, 1), (-1, -1, 1))),
    ((1.0, 0.0, 0.0), ((1, -1, 1), (1, -1, -1), (1, 1, -1), (1, 1, 1))),
    ((-1.0, 0.0, 0.0), ((-1, -1, -1), (-1, -1, 1), (-1, 1, 1), (-1, 1, -1))),
)


def box(width: float, height: float, depth: float) -> MeshData:
    """Axis-aligned box with flat per-face normals (24 vertices, 36 indices)."""
    hw, hh, hd = 0.5 * width, 0.5 * height, 0.5 * depth

    positions: list[Vec3] = []
    normals: list[Vec3] = []
    indices: list[int] = []
    for normal, corners in _BOX_FACES:
        base = len(positions)
        for sx, sy, sz in corners:
            positions.append(Vec3(sx * hw, sy * hh, sz * hd))
            normals.append(Vec3(*normal))
        indices += (base, base + 1, base + 2, base, base + 2, base + 3)

    return MeshData(positions=tuple(positions), indices=tuple(indices),
                    normals=tuple(normals))


def plane(width: float, height: float, res: int) -> MeshData:
    """Grid of ``res`` by ``res`` vertices in the x/z plane facing +y.

    ``width`` runs along the x axis and ``height`` along the z axis.
    """
    if res < 2:
        raise ValueError(f"{res} too small of a resolution for rectangular plane")

    step_x = width / (res - 1)
    step_z = height / (res - 1)
    left = -0.5 * width
    top = -0.5 * height
    up = Vec3(0.0, 1.0, 0.0)

    positions = tuple(
        Vec3(left + x * step_x, 0.0, top + z * step_z)
        for z in range(res)
        for x in range(res)
    )
    normals = (up,) * len(positions)

    indices: list[int] = []
    for y in range(res - 1):
        for x in range(res - 1):
            top_right = res * y + x + 1
            top_left = res * y + x
            bottom_left = res * (y + 1) + x
            bottom_right = res * (y + 1) + x + 1
            indices += (top_right, top_left, bottom_left,
                        top_right, bottom_left, bottom_right)

    return MeshData(positions=positions, indices=tuple(indices), normals=normals)