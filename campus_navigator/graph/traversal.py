"""Unweighted traversals over a campus graph.

Both walks visit each building reachable from the start exactly once.
Siblings are visited in neighbor-set iteration order, which is not
guaranteed to be stable across runs.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional, Set, Tuple

from ..domain.errors import BuildingNotFoundError
from ..domain.models import Node
from .campus_graph import CampusGraph


def _check_start(graph: CampusGraph, start: Node) -> None:
    if start not in graph:
        raise BuildingNotFoundError(
            f"Building not in graph: {start.name}",
            building_name=start.name,
        )


def depth_first(graph: CampusGraph, start: Optional[Node]) -> List[Node]:
    """Return the buildings in the order a recursive depth-first walk visits them.

    Parameters
    ----------
    graph:
        Campus graph to walk.
    start:
        Starting building. ``None`` yields an empty walk.

    Raises
    ------
    BuildingNotFoundError
        If ``start`` is not part of ``graph``.
    """
    if start is None:
        return []
    _check_start(graph, start)

    visited: Set[Node] = {start}
    order: List[Node] = [start]
    # one frame per recursion level: the node and its remaining neighbors
    stack: List[Tuple[Node, Iterator[Node]]] = [
        (start, iter(graph.adjacent_nodes(start)))
    ]

    while stack:
        _, neighbors = stack[-1]
        for neighbor in neighbors:
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                stack.append((neighbor, iter(graph.adjacent_nodes(neighbor))))
                break
        else:
            stack.pop()

    return order


def breadth_first(graph: CampusGraph, start: Optional[Node]) -> List[Node]:
    """Return the buildings in breadth-first discovery order.

    The start comes first; every building first discovered at frontier
    distance ``d`` is emitted before any building at distance ``d + 1``.

    Raises:
        BuildingNotFoundError: If ``start`` is not part of ``graph``.
    """
    if start is None:
        return []
    _check_start(graph, start)

    visited: Set[Node] = {start}
    order: List[Node] = [start]
    frontier: Deque[Node] = deque([start])

    while frontier:
        node = frontier.popleft()
        for neighbor in graph.adjacent_nodes(node):
            if neighbor not in visited:
                visited.add(neighbor)
                order.append(neighbor)
                frontier.append(neighbor)

    return order


def connected_components(graph: CampusGraph) -> List[List[Node]]:
    """Group the graph's buildings into connected components.

    Components are listed in order of their first building in the map.
    """
    seen: Set[Node] = set()
    components: List[List[Node]] = []
    for node in graph.nodes:
        if node in seen:
            continue
        component = breadth_first(graph, node)
        seen.update(component)
        components.append(component)
    return components
