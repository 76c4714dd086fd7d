"""In-memory campus graph.

This module defines ``CampusGraph``: the building list, the walking path
list and the adjacency map derived from them, plus the two validation
checks run once after loading.
"""

from __future__ import annotations

from typing import Dict, Iterable, List, Optional, Set, Tuple

from ..domain.errors import BuildingNotFoundError
from ..domain.models import Edge, Node, SpanningForest
from .spanning_tree import minimum_spanning_forest

MIN_DISTANCE = 0
MAX_DISTANCE = 30

AdjacencyMap = Dict[Node, Set[Node]]


def build_adjacency(nodes: Iterable[Node], edges: Iterable[Edge]) -> AdjacencyMap:
    """Build the symmetric adjacency map of an undirected edge list.

    Every node gets an entry, possibly empty. Endpoints missing from
    ``nodes`` still get an entry so the map stays the exact symmetric
    closure of ``edges``; ``validate_buildings`` reports them.
    """
    adjacency: AdjacencyMap = {node: set() for node in nodes}
    for edge in edges:
        adjacency.setdefault(edge.start, set()).add(edge.end)
        adjacency.setdefault(edge.end, set()).add(edge.start)
    return adjacency


class CampusGraph:
    """Buildings and walking paths of a campus map.

    The graph is read-only once built. Parallel edges and self-loops are
    kept as given.

    Neighbor sets are unordered, so traversal order among siblings is
    implementation-defined.
    """

    def __init__(self, nodes: Iterable[Node], edges: Iterable[Edge]) -> None:
        self._nodes: Tuple[Node, ...] = tuple(nodes)
        self._edges: Tuple[Edge, ...] = tuple(edges)
        self._node_names: Set[str] = {node.name for node in self._nodes}
        self._adjacency = build_adjacency(self._nodes, self._edges)

    @property
    def nodes(self) -> Tuple[Node, ...]:
        """Buildings in map order."""
        return self._nodes

    @property
    def edges(self) -> Tuple[Edge, ...]:
        """Walking paths in map order."""
        return self._edges

    def build_nodes(self) -> List[Node]:
        return list(self._nodes)

    def build_edges(self) -> List[Edge]:
        return list(self._edges)

    def adjacent_nodes(self, node: Node) -> frozenset[Node]:
        """Return the buildings directly connected to ``node``.

        Raises:
            BuildingNotFoundError: If ``node`` is not part of the graph.
        """
        try:
            return frozenset(self._adjacency[node])
        except KeyError:
            raise BuildingNotFoundError(
                f"Building not in graph: {node.name}",
                building_name=node.name,
            ) from None

    def find_node(self, name: str) -> Optional[Node]:
        """Look up a building by name, ignoring surrounding whitespace."""
        name = name.strip()
        for node in self._nodes:
            if node.name == name:
                return node
        return None

    def get_node(self, name: str) -> Node:
        """Look up a building by name, raising if it is not on the map.

        Raises:
            BuildingNotFoundError: If no building has this name.
        """
        node = self.find_node(name)
        if node is None:
            raise BuildingNotFoundError(
                f"Building not found: {name.strip()}",
                building_name=name.strip(),
            )
        return node

    def invalid_building_edges(self) -> List[Edge]:
        """Edges with an endpoint missing from the building list."""
        return [
            edge
            for edge in self._edges
            if edge.start.name not in self._node_names
            or edge.end.name not in self._node_names
        ]

    def invalid_distance_edges(
        self, min_distance: int = MIN_DISTANCE, max_distance: int = MAX_DISTANCE
    ) -> List[Edge]:
        """Edges whose distance lies outside ``[min_distance, max_distance]``."""
        return [
            edge
            for edge in self._edges
            if not min_distance <= edge.distance <= max_distance
        ]

    def validate_buildings(self) -> bool:
        """Check that every edge connects buildings listed in the map."""
        return not self.invalid_building_edges()

    def validate_distances(
        self, min_distance: int = MIN_DISTANCE, max_distance: int = MAX_DISTANCE
    ) -> bool:
        """Check that every edge distance is within the accepted range."""
        return not self.invalid_distance_edges(min_distance, max_distance)

    def minimum_spanning_forest(self) -> SpanningForest:
        """Run Kruskal's algorithm over this graph's buildings and paths."""
        return minimum_spanning_forest(self._nodes, self._edges)

    def __contains__(self, node: object) -> bool:
        return node in self._adjacency

    def __len__(self) -> int:
        return len(self._nodes)

    def __repr__(self) -> str:
        return f"CampusGraph(nodes={len(self._nodes)}, edges={len(self._edges)})"
