"""Minimum spanning forest using Kruskal's algorithm.

Edges are processed in ascending distance order and accepted when they
join two different disjoint-set groups. Disconnected maps yield one tree
per connected component rather than an error.
"""

from __future__ import annotations

from typing import Dict, Hashable, Iterable, List, Sequence

from ..domain.models import Edge, Node, SpanningForest


class DisjointSet:
    """Union-find over hashable items with union by rank and path compression."""

    def __init__(self, items: Iterable[Hashable] = ()) -> None:
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        for item in items:
            self.add(item)

    def add(self, item: Hashable) -> None:
        if item not in self._parent:
            self._parent[item] = item
            self._rank[item] = 0

    def find(self, item: Hashable) -> Hashable:
        """Return the representative of the group containing ``item``.

        Unknown items are added as singleton groups.
        """
        self.add(item)
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the groups of ``a`` and ``b``.

        Returns:
            False if they were already in the same group.
        """
        root_a, root_b = self.find(a), self.find(b)
        if root_a == root_b:
            return False
        if self._rank[root_a] < self._rank[root_b]:
            root_a, root_b = root_b, root_a
        self._parent[root_b] = root_a
        if self._rank[root_a] == self._rank[root_b]:
            self._rank[root_a] += 1
        return True


def sort_edges(edges: Iterable[Edge]) -> List[Edge]:
    """Sort edges by ascending distance, keeping input order for ties."""
    return sorted(edges, key=lambda edge: edge.sort_key)


def minimum_spanning_forest(
    nodes: Sequence[Node], edges: Sequence[Edge]
) -> SpanningForest:
    """Compute a minimum spanning forest with Kruskal's algorithm.

    Parameters
    ----------
    nodes:
        Buildings of the map; each starts in its own group.
    edges:
        Walking paths. The sequence itself is not reordered.

    Returns
    -------
    SpanningForest
        Accepted edges in acceptance order. A map with ``k`` connected
        components yields ``len(nodes) - k`` edges.
    """
    groups = DisjointSet(nodes)
    accepted: List[Edge] = []

    for edge in sort_edges(edges):
        # same group means the edge would close a cycle
        if groups.union(edge.start, edge.end):
            accepted.append(edge)

    return SpanningForest(edges=tuple(accepted))
