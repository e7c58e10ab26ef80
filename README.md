# stitchmesh

`stitchmesh` reads a knit graph and builds a stitch mesh from it. Each knit
graph vertex is a stitch, linked to its neighbours along the course (row)
and along the wale (column). The package traces the faces that the courses
and wales enclose into a primal polygon mesh. It then builds the dual of
that mesh, with one face for each interior primal vertex, and writes the
dual as an OBJ file. Each dual face carries a line of edge labels that tell
course edges from wale edges.

The package has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Input format

The input is a text file with one vertex per line. Each line holds ten
whitespace-separated numbers:

```
id  x  y  z  row_in  row_out  col_in0  col_in1  col_out0  col_out1
```

- Vertex ids start at 0, and the vertex on the n-th line must have id n-1.
- A neighbour that does not exist is written as `-1`.
- Every neighbour must be the id of a vertex in the file.
- Lines that hold no numbers are skipped.
- Reading a line stops at the first token that is not a number.

A line with fewer than ten numbers, a wrong id or a link to an unknown
vertex raises `ValueError`.

## Command line

```
stitchmesh knitgraph.txt
```

This reads the knit graph and writes `stitchMesh.obj` to the current
directory. It takes these options:

- `-o PATH`, `--output PATH`: the stitch mesh OBJ to write. The default is
  `stitchMesh.obj`.
- `--line-element PATH`: also save the knit graph itself as a line element
  OBJ.

The command exits with status 1 and prints a message if the file cannot be
opened. It does the same if the stitch mesh cannot be built, for instance
when the graph has duplicate edges, a face does not close, or the traced
faces do not form a manifold surface.

The stitch mesh OBJ holds:

- `v x y z` lines, one per dual vertex. A dual vertex is the centroid of a
  primal face.
- `f i j k ...` lines, one per dual face, with 1-based indices.
- `e a b c ...` lines, one per dual face, with one label per face side:
  `0` for wale-in, `1` for course, `2` for wale-out.

The line element OBJ holds one `v` line per knit graph vertex and one
`l i j` line (1-based) per course or wale edge.

## Library use

```python
from stitchmesh.graph import read_knit_graph
from stitchmesh.stitch import build_stitch_mesh, trace_faces

graph = read_knit_graph("knitgraph.txt")

faces = trace_faces(graph)          # primal faces as lists of vertex ids
stitch = build_stitch_mesh(graph)   # the dual stitch mesh with edge labels
stitch.write_obj("stitchMesh.obj")  # or stitch.to_obj() for the text

graph.write_line_element_obj("lineElement.obj")  # or graph.to_line_element_obj()
```

### `stitchmesh.graph`

- `KnitVertex` describes a stitch: its `id`, its `position`, and its
  `row_in`, `row_out`, `col_in` and `col_out` links. A missing link is
  `None`.
- `KnitGraph(vertices)` checks the ids and the links.
- `KnitGraph.from_rows(rows)` builds a graph from rows of numbers that are
  already in memory. `parse_knit_graph(text)` builds one from a string, and
  `read_knit_graph(path)` from a file.
- `KnitGraph.edge_pairs()` lists the directed `(tail, tip)` pairs of every
  course and wale edge. It raises `DuplicateEdgeError`, a `ValueError`, if
  a pair appears twice.
- `KnitGraph.build_halfedges()` creates a twinned pair of `KnitHalfedge`
  objects for every edge. Each halfedge has a `HalfedgeKind`: `ROW_OUT`,
  `ROW_IN`, `WALE_OUT` or `WALE_IN`.
- `KnitGraph.halfedge(tail, tip)` looks up a single halfedge. It raises
  `KeyError` if there is none.

### `stitchmesh.mesh`

`SurfaceMesh(faces)` is an oriented manifold polygon mesh with boundary
loops. It raises `MeshError`, a `ValueError`, on faces that do not form one.
It offers:

- `vertex_count` and `faces`.
- `is_boundary_vertex(vertex)`.
- `outgoing_halfedges(vertex)`, which yields `(tail, tip, face)` around a
  vertex. `face` is `None` on a boundary loop.
- `face_centroids(positions)`.

### `stitchmesh.stitch`

`StitchMesh` holds `vertices`, `faces`, `edge_labels` and the traced
`primal_faces`.

## What it does not do

`stitchmesh` has no viewer. It does not display the knit graph, the primal
mesh or the stitch mesh on screen. It only computes them and writes OBJ
files.