"""Graph-related utilities for representing the campus map.

This subpackage contains modules to build an in-memory graph from a
text map file and to run traversal and spanning tree algorithms on it.
"""

from .campus_graph import MAX_DISTANCE, MIN_DISTANCE, CampusGraph
from .load_graph import EDGES_MARKER, load_graph, parse_campus_map
from .spanning_tree import DisjointSet, minimum_spanning_forest
from .traversal import breadth_first, connected_components, depth_first

__all__ = [
    "CampusGraph",
    "MIN_DISTANCE",
    "MAX_DISTANCE",
    "EDGES_MARKER",
    "load_graph",
    "parse_campus_map",
    "DisjointSet",
    "minimum_spanning_forest",
    "depth_first",
    "breadth_first",
    "connected_components",
]
