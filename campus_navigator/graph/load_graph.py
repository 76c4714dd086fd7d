"""Campus graph loading from text map files.

A map file looks like::

    Buildings
    Library
    Gym
    Cafeteria
    EDGES
    Library,Gym,5
    Gym,Cafeteria,3

The first line is a header. Building names follow, one per line, until
the edges marker line. Each remaining line is ``start,end,distance``.
"""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, List, Tuple, Union

from ..domain.errors import MapFormatError
from ..domain.models import Edge, Node
from .campus_graph import CampusGraph

EDGES_MARKER = "EDGES"


def parse_campus_map(
    lines: Iterable[str], edges_marker: str = EDGES_MARKER
) -> Tuple[List[Node], List[Edge]]:
    """Parse map file lines into buildings and walking paths.

    Edge endpoints that are not listed buildings become standalone nodes
    outside the building list, so the graph's building validation rejects
    them rather than the parser.

    Raises:
        MapFormatError: On an edge line without three fields or with a
            non-integer distance.
    """
    nodes: List[Node] = []
    edges: List[Edge] = []
    by_name: Dict[str, Node] = {}
    in_edges = False

    for line_number, raw in enumerate(lines, start=1):
        if line_number == 1:
            continue
        line = raw.strip()
        if not line:
            continue

        if not in_edges:
            if line == edges_marker:
                in_edges = True
                continue
            node = Node(line)
            nodes.append(node)
            by_name.setdefault(line, node)
            continue

        fields = [part.strip() for part in line.split(",")]
        if len(fields) < 3 or not fields[0] or not fields[1]:
            raise MapFormatError(
                f"Expected 'start,end,distance' on line {line_number}, got {line!r}",
                line_number=line_number,
            )
        try:
            distance = int(fields[2])
        except ValueError as e:
            raise MapFormatError(
                f"Invalid distance on line {line_number}",
                cause=e,
                line_number=line_number,
            ) from e

        start = by_name.get(fields[0]) or Node(fields[0])
        end = by_name.get(fields[1]) or Node(fields[1])
        edges.append(Edge(start, end, distance))

    return nodes, edges


def load_graph(
    map_path: Union[str, Path], edges_marker: str = EDGES_MARKER
) -> CampusGraph:
    """Load a campus graph from a text map file.

    Raises:
        OSError: If the file cannot be read.
        MapFormatError: If a line is malformed.
    """
    with open(map_path, encoding="utf-8") as f:
        try:
            nodes, edges = parse_campus_map(f, edges_marker)
        except MapFormatError as e:
            e.file_path = str(map_path)
            raise
    return CampusGraph(nodes, edges)
