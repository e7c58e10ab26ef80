"""Stitch mesh extraction: trace knit-graph faces and build their dual."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from .graph import HalfedgeKind, KnitGraph, KnitHalfedge, Position
from .mesh import SurfaceMesh

_LABELS = {
    HalfedgeKind.ROW_OUT: 1,
    HalfedgeKind.ROW_IN: 1,
    HalfedgeKind.WALE_IN: 0,
    HalfedgeKind.WALE_OUT: 2,
}


def _next_halfedge(graph: KnitGraph, he: KnitHalfedge) -> KnitHalfedge | None:
    """The halfedge that follows he around its face, or None if it has no successor."""
    vertex = graph.vertices[he.tip]
    first_out, second_out = vertex.col_out
    first_in, second_in = vertex.col_in

    if he.kind is HalfedgeKind.ROW_OUT:
        if first_in is None:
            return None
        target = first_in
    elif he.kind is HalfedgeKind.ROW_IN:
        if first_out is None:
            return None
        target = second_out if second_out is not None else first_out
    elif he.kind is HalfedgeKind.WALE_IN:
        if second_out is not None and he.tail == second_out:
            target = first_out
        elif vertex.row_in is not None:
            target = vertex.row_in
        else:
            target = first_in
    else:
        if second_in is not None and he.tail == first_in:
            target = second_in
        elif vertex.row_out is not None:
            target = vertex.row_out
        else:
            target = first_out

    if target is None:
        raise ValueError(f"cannot continue a face past vertex {he.tip}")
    try:
        return graph.halfedge(he.tip, target)
    except KeyError as error:
        raise ValueError(f"no connection {he.tip} -> {target} to follow") from error


def trace_faces(graph: KnitGraph) -> list[list[int]]:
    """Trace the faces bounded by courses and wales of a knit graph."""
    halfedges = graph.build_halfedges()
    visited = {he for he in halfedges if he.boundary}
    limit = len(halfedges) + 1
    faces: list[list[int]] = []

    for start in halfedges:
        if start in visited:
            continue
        visited.add(start)
        face: list[int] = []
        current = start
        for _ in range(limit):
            face.append(current.tail)
            following = _next_halfedge(graph, current)
            if following is None:
                if current is start:
                    break
                raise ValueError(
                    f"face starting at vertex {start.tail} stops at vertex {current.tip}"
                )
            visited.add(following)
            current = following
            if current.tail == start.tail:
                break
        else:
            raise ValueError(f"face starting at vertex {start.tail} does not close")
        if len(face) > 1:
            faces.append(face)
    return faces


@dataclass
class StitchMesh:
    """Dual of the traced knit-graph faces, with an edge label per face side.

    Labels are 1 for course edges, 0 for incoming wales and 2 for outgoing wales.
    """

    vertices: list[Position]
    faces: list[list[int]]
    edge_labels: list[list[int]]
    primal_faces: list[list[int]] = field(default_factory=list)

    def to_obj(self) -> str:
        """The mesh as OBJ text with extra 'e' lines holding edge labels."""
        lines = [f"v {x:g} {y:g} {z:g}\n" for x, y, z in self.vertices]
        lines.extend(
            "f " + "".join(f"{index + 1} " for index in face) + "\n" for face in self.faces
        )
        lines.extend(
            "e " + "".join(f"{label} " for label in labels) + "\n"
            for labels in self.edge_labels
        )
        return "".join(lines)

    def write_obj(self, path: str | Path = "stitchMesh.obj") -> None:
        """Save the mesh as an OBJ file."""
        Path(path).write_text(self.to_obj())


def build_stitch_mesh(graph: KnitGraph) -> StitchMesh:
    """Build the stitch mesh: one face per interior knit-graph vertex."""
    primal_faces = trace_faces(graph)
    primal = SurfaceMesh(primal_faces)
    positions = [vertex.position for vertex in graph.vertices]
    centroids = primal.face_centroids(positions)

    dual_faces: list[list[int]] = []
    edge_labels: list[list[int]] = []
    for vertex in range(primal.vertex_count):
        if primal.is_boundary_vertex(vertex):
            continue
        dual_face: list[int] = []
        labels: list[int] = []
        for tail, tip, face in primal.outgoing_halfedges(vertex):
            if face is None:
                continue
            dual_face.append(face)
            labels.append(_LABELS[graph.halfedge(tail, tip).kind])
        if dual_face:
            dual_faces.append(dual_face[::-1])
        if labels:
            reversed_labels = labels[::-1]
            edge_labels.append(reversed_labels[1:] + reversed_labels[:1])

    dual = SurfaceMesh(dual_faces)
    return StitchMesh(
        vertices=centroids[: dual.vertex_count],
        faces=dual_faces,
        edge_labels=edge_labels,
        primal_faces=primal_faces,
    )