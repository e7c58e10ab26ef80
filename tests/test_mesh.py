import pytest

from stitchmesh.mesh import MeshError, SurfaceMesh

FAN = [[0, 1, 4], [1, 2, 4], [2, 3, 4], [3, 0, 4]]


@pytest.fixture
def fan():
    return SurfaceMesh(FAN)


def test_counts(fan):
    assert fan.vertex_count == 5
    assert fan.faces == [tuple(f) for f in FAN]


def test_boundary_vertices(fan):
    assert not fan.is_boundary_vertex(4)
    assert all(fan.is_boundary_vertex(v) for v in range(4))


def test_interior_orbit(fan):
    ring = list(fan.outgoing_halfedges(4))
    assert len(ring) == 4
    assert {tip for _, tip, _ in ring} == {0, 1, 2, 3}
    assert {face for _, _, face in ring} == {0, 1, 2, 3}
    for tail, tip, face in ring:
        assert tail == 4
        assert tip in fan.faces[face]
        assert 4 in fan.faces[face]


def test_boundary_orbit_ends_on_boundary_loop(fan):
    ring = list(fan.outgoing_halfedges(0))
    assert len(ring) == 3
    faces = [face for _, _, face in ring]
    assert faces[-1] is None
    assert None not in faces[:-1]


def test_vertex_out_of_range(fan):
    with pytest.raises(IndexError):
        fan.is_boundary_vertex(5)
    with pytest.raises(IndexError):
        list(fan.outgoing_halfedges(-1))


def test_face_centroids():
    mesh = SurfaceMesh([[0, 1, 2]])
    positions = [(0.0, 0.0, 0.0), (3.0, 0.0, 0.0), (0.0, 3.0, 6.0)]
    assert mesh.face_centroids(positions) == [(1.0, 1.0, 2.0)]


def test_face_centroids_inside_face(fan):
    positions = [(0, 0, 0), (2, 0, 0), (2, 2, 0), (0, 2, 0), (1, 1, 0)]
    for face, (x, y, z) in zip(fan.faces, fan.face_centroids(positions)):
        xs = [positions[i][0] for i in face]
        ys = [positions[i][1] for i in face]
        assert min(xs) <= x <= max(xs)
        assert min(ys) <= y <= max(ys)
        assert z == 0


def test_too_few_positions(fan):
    with pytest.raises(ValueError):
        fan.face_centroids([(0, 0, 0)])


@pytest.mark.parametrize(
    "faces",
    [
        [[0, 1]],
        [[0, 1, 1]],
        [[0, 1, 2], [0, 1, 3]],
        [[0, 2, 3]],
        [[0, 1, 2], [0, 3, 4]],
        [[-1, 0, 1]],
    ],
)
def test_invalid_meshes(faces):
    with pytest.raises(MeshError):
        SurfaceMesh(faces)


def test_two_triangles_share_edge():
    mesh = SurfaceMesh([[0, 1, 2], [0, 2, 3]])
    ring = list(mesh.outgoing_halfedges(0))
    assert {tip for _, tip, _ in ring} == {1, 2, 3}
    assert [face for _, _, face in ring].count(None) == 1