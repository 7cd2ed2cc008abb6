from tilequake.geometry import Vertex, unit_tetrahedron
from tilequake.mesh import VERTEX_STRIDE, pack_vertices
from tilequake.vector import Vec3


def test_pack_single_vertex_layout():
    v = Vertex(Vec3(1.0, 2.0, 3.0), (0.5, 0.25), Vec3(4.0, 5.0, 6.0), Vec3(7.0, 8.0, 9.0), 2.0)
    packed = pack_vertices([v])
    assert packed.tolist() == [[1.0, 2.0, 3.0, 0.5, 0.25, 4.0, 5.0, 6.0, 7.0, 8.0, 9.0, 2.0]]


def test_pack_stride_matches_vertex_size():
    packed = pack_vertices(unit_tetrahedron().vertices)
    assert packed.shape == (4, 12)
    assert packed.nbytes == 4 * VERTEX_STRIDE


def test_pack_empty():
    assert pack_vertices([]).shape == (0, 12)


def test_pack_keeps_colors():
    data = unit_tetrahedron()
    packed = pack_vertices(data.vertices)
    assert [tuple(row[8:11]) for row in packed] == [tuple(v.color) for v in data.vertices]