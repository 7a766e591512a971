import math

import pytest

from badgl.mathx import Vec3
from badgl.shapes import MeshData, box, plane, uv_sphere


def _face_normal(mesh, tri):
    a, b, c = (mesh.positions[i] for i in tri)
    return (b - a).cross(c - a)


def _centroid(mesh, tri):
    a, b, c = (mesh.positions[i] for i in tri)
    return (a + b + c).scale(1.0 / 3.0)


@pytest.mark.parametrize("res", [2, 3, 8, 20])
def test_sphere_vertices_lie_on_unit_sphere(res):
    mesh = uv_sphere(res)
    for p in mesh.positions:
        assert math.isclose(math.sqrt(p.dot(p)), 1.0, abs_tol=1e-9)


def test_sphere_poles():
    mesh = uv_sphere(8)
    assert mesh.positions[0] == Vec3(0.0, 1.0, 0.0)
    assert mesh.positions[-1] == Vec3(0.0, -1.0, 0.0)


@pytest.mark.parametrize("res", [2, 5, 8])
def test_sphere_counts_and_index_range(res):
    mesh = uv_sphere(res)
    verticals = 2 * res
    assert mesh.vert_count == res * verticals + 2
    assert mesh.ind_count == 6 * verticals * (res - 1)
    assert all(0 <= i < mesh.vert_count for i in mesh.indices)


def test_sphere_has_no_normals_or_uvs():
    mesh = uv_sphere(4)
    assert mesh.normals is None
    assert mesh.uvs is None
    assert mesh.vertex_size == 3


@pytest.mark.parametrize("res", [3, 6])
def test_sphere_triangles_face_outward(res):
    mesh = uv_sphere(res)
    for tri in mesh.triangles():
        assert _face_normal(mesh, tri).dot(_centroid(mesh, tri)) > 0


@pytest.mark.parametrize("res", [0, 1])
def test_sphere_rejects_low_resolution(res):
    with pytest.raises(ValueError):
        uv_sphere(res)


def test_box_counts():
    mesh = box(1.5, 2.0, 3.0)
    assert mesh.vert_count == 24
    assert mesh.ind_count == 36
    assert mesh.vertex_size == 6


def test_box_positions_within_half_extents():
    mesh = box(1.5, 2.0, 3.0)
    for p in mesh.positions:
        assert abs(p.x) == 0.75
        assert abs(p.y) == 1.0
        assert abs(p.z) == 1.5


def test_box_triangles_match_normals_and_face_outward():
    mesh = box(1.0, 2.0, 4.0)
    for tri in mesh.triangles():
        normals = {mesh.normals[i] for i in tri}
        assert len(normals) == 1
        normal = normals.pop()
        face = _face_normal(mesh, tri).normalized()
        assert math.isclose(face.dot(normal), 1.0, abs_tol=1e-9)


def test_box_vertices_lie_on_their_face_plane():
    mesh = box(2.0, 4.0, 6.0)
    for p, n in zip(mesh.positions, mesh.normals):
        half = Vec3(1.0, 2.0, 3.0)
        assert math.isclose(p.dot(n), abs(n.dot(half)))


@pytest.mark.parametrize("res", [2, 3, 7])
def test_plane_counts(res):
    mesh = plane(50.0, 50.0, res)
    assert mesh.vert_count == res * res
    assert mesh.ind_count == 6 * (res - 1) * (res - 1)
    assert all(0 <= i < mesh.vert_count for i in mesh.indices)


def test_plane_spans_extents_flat():
    mesh = plane(4.0, 8.0, 5)
    xs = [p.x for p in mesh.positions]
    zs = [p.z for p in mesh.positions]
    assert min(xs) == -2.0 and max(xs) == 2.0
    assert min(zs) == -4.0 and max(zs) == 4.0
    assert all(p.y == 0.0 for p in mesh.positions)
    assert all(n == Vec3(0.0, 1.0, 0.0) for n in mesh.normals)


def test_plane_triangles_face_up():
    mesh = plane(3.0, 3.0, 4)
    for tri in mesh.triangles():
        assert _face_normal(mesh, tri).y > 0


@pytest.mark.parametrize("res", [0, 1])
def test_plane_rejects_low_resolution(res):
    with pytest.raises(ValueError):
        plane(1.0, 1.0, res)


def test_mesh_data_rejects_mismatched_normals():
    with pytest.raises(ValueError):
        MeshData(positions=(Vec3(), Vec3(), Vec3()), indices=(0, 1, 2),
                 normals=(Vec3(),))


def test_mesh_data_rejects_partial_triangle():
    with pytest.raises(ValueError):
        MeshData(positions=(Vec3(), Vec3()), indices=(0, 1))