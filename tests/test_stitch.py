import pytest

from stitchmesh.graph import DuplicateEdgeError, HalfedgeKind, KnitGraph
from stitchmesh.mesh import SurfaceMesh
from stitchmesh.stitch import StitchMesh, build_stitch_mesh, trace_faces


def tube_rows(columns=3, courses=3):
    rows = []
    for r in range(courses):
        for c in range(columns):
            i = r * columns + c
            rows.append(
                [
                    i,
                    float(c),
                    float(r),
                    0.0,
                    r * columns + (c - 1) % columns,
                    r * columns + (c + 1) % columns,
                    i - columns if r > 0 else -1,
                    -1,
                    i + columns if r < courses - 1 else -1,
                    -1,
                ]
            )
    return rows


def grid_rows(columns=3, courses=3):
    rows = []
    for r in range(courses):
        for c in range(columns):
            i = r * columns + c
            rows.append(
                [
                    i,
                    float(c),
                    float(r),
                    0.0,
                    i - 1 if c > 0 else -1,
                    i + 1 if c < columns - 1 else -1,
                    i - columns if r > 0 else -1,
                    -1,
                    i + columns if r < courses - 1 else -1,
                    -1,
                ]
            )
    return rows


def tube(columns=3, courses=3):
    return KnitGraph.from_rows(tube_rows(columns, courses))


def test_trace_faces_of_small_tube():
    faces = trace_faces(tube())
    assert len(faces) == 6
    assert faces[0] == [1, 0, 3, 4]


@pytest.mark.parametrize("columns,courses", [(3, 3), (4, 3), (3, 4), (5, 5)])
def test_faces_use_each_halfedge_once(columns, courses):
    graph = tube(columns, courses)
    faces = trace_faces(graph)
    pairs = [pair for face in faces for pair in zip(face, face[1:] + face[:1])]
    assert len(pairs) == len(set(pairs))
    for tail, tip in pairs:
        assert graph.halfedge(tail, tip).tail == tail


@pytest.mark.parametrize("columns,courses", [(3, 3), (4, 4)])
def test_each_face_has_one_halfedge_of_each_kind(columns, courses):
    graph = tube(columns, courses)
    for face in trace_faces(graph):
        kinds = sorted(
            (graph.halfedge(a, b).kind.value for a, b in zip(face, face[1:] + face[:1]))
        )
        assert kinds == sorted(kind.value for kind in HalfedgeKind)


def test_first_edge_labels():
    mesh = build_stitch_mesh(tube())
    assert mesh.edge_labels[0] == [1, 2, 1, 0]


@pytest.mark.parametrize("columns,courses", [(3, 3), (4, 3), (3, 5)])
def test_dual_faces_match_interior_vertices(columns, courses):
    graph = tube(columns, courses)
    mesh = build_stitch_mesh(graph)
    primal = SurfaceMesh(mesh.primal_faces)
    interior = [v for v in range(primal.vertex_count) if not primal.is_boundary_vertex(v)]
    assert len(mesh.faces) == len(interior)
    assert [len(labels) for labels in mesh.edge_labels] == [len(f) for f in mesh.faces]
    assert all(label in (0, 1, 2) for labels in mesh.edge_labels for label in labels)


def test_dual_vertices_are_face_centroids():
    graph = tube(4, 4)
    mesh = build_stitch_mesh(graph)
    primal = SurfaceMesh(mesh.primal_faces)
    centroids = primal.face_centroids([v.position for v in graph.vertices])
    assert mesh.vertices == centroids[: len(mesh.vertices)]
    assert max(i for face in mesh.faces for i in face) == len(mesh.vertices) - 1


def test_primal_faces_equal_trace():
    graph = tube(4, 3)
    assert build_stitch_mesh(graph).primal_faces == trace_faces(tube(4, 3))


def test_obj_round_trip():
    mesh = build_stitch_mesh(tube(4, 4))
    vertices, faces, labels = [], [], []
    for line in mesh.to_obj().splitlines():
        tag, *values = line.split()
        if tag == "v":
            vertices.append(tuple(float(v) for v in values))
        elif tag == "f":
            faces.append([int(v) - 1 for v in values])
        elif tag == "e":
            labels.append([int(v) for v in values])
    assert vertices == mesh.vertices
    assert faces == mesh.faces
    assert labels == mesh.edge_labels


def test_obj_line_format():
    mesh = StitchMesh(vertices=[(0.5, 1.0, 2.0)], faces=[[0, 1, 2]], edge_labels=[[1, 0, 2]])
    assert mesh.to_obj() == "v 0.5 1 2\nf 1 2 3 \ne 1 0 2 \n"


def test_write_obj(tmp_path):
    mesh = build_stitch_mesh(tube())
    path = tmp_path / "out.obj"
    mesh.write_obj(path)
    assert path.read_text() == mesh.to_obj()


def test_write_obj_default_name(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    mesh = build_stitch_mesh(tube())
    mesh.write_obj()
    assert (tmp_path / "stitchMesh.obj").read_text() == mesh.to_obj()


def test_open_grid_cannot_be_traced():
    with pytest.raises(ValueError):
        trace_faces(KnitGraph.from_rows(grid_rows()))


def test_duplicate_edges_are_rejected():
    rows = tube_rows()
    rows[0][8] = 3
    rows[0][9] = 3
    with pytest.raises(DuplicateEdgeError):
        build_stitch_mesh(KnitGraph.from_rows(rows))