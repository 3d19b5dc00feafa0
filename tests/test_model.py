import pytest

from voxkit.mesh import Vertex
from voxkit.model import Model, TriangleMaterial

POSITIONS = [(1.0, 0.0, 0.0), (0.0, 2.0, 0.0), (0.0, 0.0, 3.0)]


def test_single_triangle_is_recorded():
    model = Model()
    model.add_mesh(POSITIONS, [(0, 1, 2)])
    triangles = model.get_triangles()
    assert len(triangles) == 1
    assert [v.position for v in triangles[0].vertices] == POSITIONS


def test_mesh_is_appended_and_indices_flattened():
    model = Model()
    mesh = model.add_mesh(POSITIONS, [(0, 1, 2), (2, 1, 0)])
    assert model.meshes == [mesh]
    assert mesh.indices == [0, 1, 2, 2, 1, 0]
    assert [v.position for v in mesh.vertices] == POSITIONS


def test_near_origin_vertex_is_replaced_only_in_mesh():
    model = Model()
    positions = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 1.0)]
    mesh = model.add_mesh(positions, [(0, 1, 2)])
    assert mesh.vertices[0].position == (0.0, 1.0, 0.0)
    assert model.get_triangles()[0].vertices[0].position == (0.0, 0.0, 0.0)


def test_non_triangle_faces_add_indices_but_no_triangle():
    model = Model()
    positions = POSITIONS + [(1.0, 1.0, 1.0)]
    mesh = model.add_mesh(positions, [(0, 1, 2, 3)])
    assert mesh.indices == [0, 1, 2, 3]
    assert model.get_triangles() == []


def test_normals_and_uvs_are_copied():
    model = Model()
    normals = [(0.0, 0.0, 1.0)] * 3
    uvs = [(0.0, 0.0), (1.0, 0.0), (0.0, 1.0)]
    mesh = model.add_mesh(POSITIONS, [(0, 1, 2)], normals=normals, uvs=uvs)
    assert [v.normal for v in mesh.vertices] == normals
    assert [v.uv for v in mesh.vertices] == uvs
    tri = model.get_triangles()[0]
    assert [v.uv for v in tri.vertices] == uvs
    assert [v.normal for v in tri.vertices] == normals


def test_tangents_ignored_without_uvs():
    model = Model()
    tangents = [(1.0, 0.0, 0.0)] * 3
    mesh = model.add_mesh(POSITIONS, [(0, 1, 2)], tangents=tangents)
    assert all(v.tangent == Vertex().tangent for v in mesh.vertices)


def test_tangents_used_with_uvs():
    model = Model()
    tangents = [(1.0, 0.0, 0.0)] * 3
    bitangents = [(0.0, 1.0, 0.0)] * 3
    uvs = [(0.0, 0.0)] * 3
    mesh = model.add_mesh(POSITIONS, [(0, 1, 2)], uvs=uvs, tangents=tangents, bitangents=bitangents)
    assert [v.tangent for v in mesh.vertices] == tangents
    assert [v.bitangent for v in mesh.vertices] == bitangents


def test_triangles_accumulate_across_meshes():
    model = Model()
    model.add_mesh(POSITIONS, [(0, 1, 2)])
    model.add_mesh(POSITIONS, [(0, 1, 2), (1, 2, 0)])
    assert len(model.get_triangles()) == 3
    assert len(model.meshes) == 2


def test_get_triangles_returns_copy():
    model = Model()
    model.add_mesh(POSITIONS, [(0, 1, 2)])
    model.get_triangles().clear()
    assert len(model.get_triangles()) == 1


def test_out_of_range_index_raises():
    model = Model()
    with pytest.raises(IndexError):
        model.add_mesh(POSITIONS, [(0, 1, 3)])


def test_mismatched_normals_raise():
    model = Model()
    with pytest.raises(ValueError):
        model.add_mesh(POSITIONS, [(0, 1, 2)], normals=[(0.0, 0.0, 1.0)])


def test_triangle_material_defaults():
    material = TriangleMaterial()
    assert material.shininess == 0.0
    assert material.diffuse == (0.0, 0.0, 0.0)