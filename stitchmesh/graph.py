"""Knit graph: stitches joined by course (row) and wale (column) connections."""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Sequence

Position = tuple[float, float, float]

_FIELDS_PER_ROW = 10
_NO_LINK = -1


class HalfedgeKind(Enum):
    """Direction and type of a knit-graph halfedge."""

    ROW_OUT = "row_out"
    ROW_IN = "row_in"
    WALE_OUT = "wale_out"
    WALE_IN = "wale_in"

    @property
    def is_row(self) -> bool:
        return self in (HalfedgeKind.ROW_OUT, HalfedgeKind.ROW_IN)

    @property
    def is_wale(self) -> bool:
        return self in (HalfedgeKind.WALE_OUT, HalfedgeKind.WALE_IN)


@dataclass
class KnitVertex:
    """A stitch with its course and wale neighbours; missing links are None."""

    id: int
    position: Position = (0.0, 0.0, 0.0)
    row_in: int | None = None
    row_out: int | None = None
    col_in: tuple[int | None, int | None] = (None, None)
    col_out: tuple[int | None, int | None] = (None, None)

    def links(self) -> Iterator[int]:
        """Every neighbour id this vertex refers to."""
        for link in (self.row_in, self.row_out, *self.col_in, *self.col_out):
            if link is not None:
                yield link


@dataclass(eq=False)
class KnitHalfedge:
    """A directed connection between two stitches."""

    tail: int
    tip: int
    kind: HalfedgeKind
    boundary: bool = False
    twin: KnitHalfedge | None = field(default=None, repr=False)


@dataclass(frozen=True)
class KnitEdge:
    """An undirected connection, stored from its outgoing end."""

    v1: int
    v2: int
    is_course: bool = False
    is_wale: bool = False
    is_boundary: bool = True


class DuplicateEdgeError(ValueError):
    """The same directed edge appears more than once in a knit graph."""


def _link(value: float) -> int | None:
    index = int(value)
    if index == _NO_LINK:
        return None
    if index < 0:
        raise ValueError(f"invalid vertex link {value!r}")
    return index


class KnitGraph:
    """A knit graph whose vertex ids equal their positions in the vertex list."""

    def __init__(self, vertices: Iterable[KnitVertex]):
        self.vertices: list[KnitVertex] = list(vertices)
        count = len(self.vertices)
        for index, vertex in enumerate(self.vertices):
            if vertex.id != index:
                raise ValueError(f"vertex at position {index} has id {vertex.id}")
            for link in vertex.links():
                if not 0 <= link < count:
                    raise ValueError(f"vertex {index} links to unknown vertex {link}")
        self.halfedges: list[KnitHalfedge] = []
        self._by_pair: dict[tuple[int, int], KnitHalfedge] | None = None

    @classmethod
    def from_rows(cls, rows: Iterable[Sequence[float]]) -> KnitGraph:
        """Build a graph from numeric rows: id, x, y, z, row_in, row_out,
        col_in[0], col_in[1], col_out[0], col_out[1]."""
        vertices = []
        for number, row in enumerate(rows, start=1):
            if len(row) < _FIELDS_PER_ROW:
                raise ValueError(
                    f"row {number} has {len(row)} values, expected {_FIELDS_PER_ROW}"
                )
            vertices.append(
                KnitVertex(
                    id=int(row[0]),
                    position=(float(row[1]), float(row[2]), float(row[3])),
                    row_in=_link(row[4]),
                    row_out=_link(row[5]),
                    col_in=(_link(row[6]), _link(row[7])),
                    col_out=(_link(row[8]), _link(row[9])),
                )
            )
        return cls(vertices)

    def _edges(self) -> Iterator[KnitEdge]:
        for vertex in self.vertices:
            if vertex.row_out is not None:
                yield KnitEdge(vertex.id, vertex.row_out, is_course=True)
            for wale in vertex.col_out:
                if wale is not None:
                    yield KnitEdge(vertex.id, wale, is_wale=True)

    def edge_pairs(self) -> list[tuple[int, int]]:
        """Directed (tail, tip) pairs of every edge; raises on duplicates."""
        pairs = [(edge.v1, edge.v2) for edge in self._edges()]
        repeated = [pair for pair, seen in Counter(pairs).items() if seen > 1]
        if repeated:
            tail, tip = repeated[0]
            raise DuplicateEdgeError(f"duplicate edge {tail} -> {tip}")
        return pairs

    def build_halfedges(self) -> list[KnitHalfedge]:
        """Create a twinned pair of halfedges for every edge."""
        self.edge_pairs()
        halfedges: list[KnitHalfedge] = []
        for edge in self._edges():
            if edge.is_course:
                out_kind, in_kind = HalfedgeKind.ROW_OUT, HalfedgeKind.ROW_IN
            else:
                out_kind, in_kind = HalfedgeKind.WALE_OUT, HalfedgeKind.WALE_IN
            forward = KnitHalfedge(edge.v1, edge.v2, out_kind)
            backward = KnitHalfedge(edge.v2, edge.v1, in_kind)
            forward.twin = backward
            backward.twin = forward
            halfedges.extend((forward, backward))
        self.halfedges = halfedges
        self._by_pair = {(he.tail, he.tip): he for he in halfedges}
        return halfedges

    def halfedge(self, tail: int, tip: int) -> KnitHalfedge:
        """The halfedge running from tail to tip."""
        if self._by_pair is None:
            self.build_halfedges()
        try:
            return self._by_pair[(tail, tip)]
        except KeyError:
            raise KeyError(f"no halfedge {tail} -> {tip}") from None

    def to_line_element_obj(self) -> str:
        """The graph as OBJ text with one line element per edge."""
        lines = [f" v {x:g} {y:g} {z:g}" for x, y, z in (v.position for v in self.vertices)]
        for vertex in self.vertices:
            for tip in (vertex.row_out, *vertex.col_out):
                if tip is not None:
                    lines.append(f"l {vertex.id + 1} {tip + 1}")
        return "".join(line + "\n" for line in lines)

    def write_line_element_obj(self, path: str | Path = "lineElement.obj") -> None:
        """Save the graph as a line element OBJ file."""
        Path(path).write_text(self.to_line_element_obj())


def _numbers(line: str) -> list[float]:
    values = []
    for token in line.split():
        try:
            values.append(float(token))
        except ValueError:
            break
    return values


def parse_knit_graph(text: str) -> KnitGraph:
    """Parse a knit graph from whitespace-separated rows of numbers."""
    rows = [row for row in map(_numbers, text.splitlines()) if row]
    return KnitGraph.from_rows(rows)


def read_knit_graph(path: str | Path) -> KnitGraph:
    """Read a knit graph file."""
    return parse_knit_graph(Path(path).read_text())