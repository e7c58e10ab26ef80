"""Command line entry: read a knit graph file and write its stitch mesh."""

from __future__ import annotations

import argparse
import sys

from .graph import read_knit_graph
from .stitch import build_stitch_mesh


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stitchmesh",
        description="Build a stitch mesh OBJ from a knit graph file.",
    )
    parser.add_argument("graph", help="knit graph file, one stitch per line")
    parser.add_argument(
        "-o", "--output", default="stitchMesh.obj", help="stitch mesh OBJ to write"
    )
    parser.add_argument(
        "--line-element", metavar="PATH", help="also save the graph as a line element OBJ"
    )
    return parser


def main(argv=None) -> int:
    """Run the command; returns the exit status."""
    args = _parser().parse_args(argv)
    try:
        graph = read_knit_graph(args.graph)
    except OSError:
        print(f"Error: Could not open the file {args.graph}", file=sys.stderr)
        return 1
    try:
        mesh = build_stitch_mesh(graph)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    mesh.write_obj(args.output)
    if args.line_element:
        graph.write_line_element_obj(args.line_element)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())