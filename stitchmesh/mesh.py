"""A halfedge surface mesh built from polygon lists."""

from __future__ import annotations

from collections import Counter
from typing import Iterable, Iterator, Sequence

Halfedge = tuple[int, int]


class MeshError(ValueError):
    """The polygons do not form an oriented manifold surface."""


class SurfaceMesh:
    """Oriented manifold polygon mesh with boundary loops.

    Vertices are numbered 0..vertex_count-1 and faces keep their input order.
    """

    def __init__(self, faces: Iterable[Sequence[int]]):
        self.faces: list[tuple[int, ...]] = [tuple(int(i) for i in f) for f in faces]
        self._face_of: dict[Halfedge, int] = {}
        self._next: dict[Halfedge, Halfedge] = {}

        for index, face in enumerate(self.faces):
            if len(face) < 3:
                raise MeshError(f"face {index} has fewer than 3 vertices")
            if len(set(face)) != len(face):
                raise MeshError(f"face {index} repeats a vertex")
            if min(face) < 0:
                raise MeshError(f"face {index} has a negative vertex index")
            shifted = face[1:] + face[:1]
            twice = face[2:] + face[:2]
            for a, b, c in zip(face, shifted, twice):
                if (a, b) in self._face_of:
                    raise MeshError(f"halfedge {a} -> {b} is used twice")
                self._face_of[(a, b)] = index
                self._next[(a, b)] = (b, c)

        self.vertex_count = max((max(f) for f in self.faces), default=-1) + 1

        first_out: dict[int, Halfedge] = {}
        for he in self._face_of:
            first_out.setdefault(he[0], he)
        unused = sorted(set(range(self.vertex_count)) - first_out.keys())
        if unused:
            raise MeshError(f"vertex {unused[0]} belongs to no face")

        self._exterior_from: dict[int, Halfedge] = {}
        for a, b in self._face_of:
            if (b, a) not in self._face_of:
                if b in self._exterior_from:
                    raise MeshError(f"vertex {b} is not manifold")
                self._exterior_from[b] = (b, a)

        self._exterior_next: dict[Halfedge, Halfedge] = {}
        for tail, tip in self._exterior_from.values():
            if tip not in self._exterior_from:
                raise MeshError(f"boundary at vertex {tip} is not manifold")
            self._exterior_next[(tail, tip)] = self._exterior_from[tip]

        self._vertex_halfedge: dict[int, Halfedge] = {}
        for vertex, he in first_out.items():
            exterior = self._exterior_from.get(vertex)
            if exterior is not None:
                he = self._next_halfedge(_twin(exterior))
            self._vertex_halfedge[vertex] = he

        degree = Counter(tail for tail, _ in self._face_of)
        degree.update(self._exterior_from.keys())
        for vertex in range(self.vertex_count):
            if sum(1 for _ in self._orbit(vertex)) != degree[vertex]:
                raise MeshError(f"vertex {vertex} is not manifold")

    def _next_halfedge(self, he: Halfedge) -> Halfedge:
        if he in self._next:
            return self._next[he]
        return self._exterior_next[he]

    def _orbit(self, vertex: int) -> Iterator[Halfedge]:
        start = self._vertex_halfedge[vertex]
        he = start
        while True:
            yield he
            he = self._next_halfedge(_twin(he))
            if he == start:
                return

    def _check_vertex(self, vertex: int) -> None:
        if not 0 <= vertex < self.vertex_count:
            raise IndexError(f"vertex {vertex} is out of range")

    def is_boundary_vertex(self, vertex: int) -> bool:
        """Whether the vertex lies on a boundary loop."""
        self._check_vertex(vertex)
        return vertex in self._exterior_from

    def outgoing_halfedges(self, vertex: int) -> Iterator[tuple[int, int, int | None]]:
        """Yield (tail, tip, face) around the vertex; face is None on a boundary loop."""
        self._check_vertex(vertex)
        for he in self._orbit(vertex):
            yield he[0], he[1], self._face_of.get(he)

    def face_centroids(
        self, positions: Sequence[Sequence[float]]
    ) -> list[tuple[float, float, float]]:
        """Average vertex position of every face, in face order."""
        if len(positions) < self.vertex_count:
            raise ValueError("fewer positions than mesh vertices")
        centroids = []
        for face in self.faces:
            points = [positions[i] for i in face]
            x, y, z = (sum(p[axis] for p in points) / len(face) for axis in range(3))
            centroids.append((x, y, z))
        return centroids


def _twin(he: Halfedge) -> Halfedge:
    return he[1], he[0]