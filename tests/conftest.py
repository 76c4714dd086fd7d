"""Shared fixtures for the campus navigator tests."""

from __future__ import annotations

from typing import Callable, Iterable, Tuple

import pytest

from campus_navigator.config import reset_config
from campus_navigator.domain.models import Edge, Node
from campus_navigator.graph.campus_graph import CampusGraph

GraphFactory = Callable[[Iterable[str], Iterable[Tuple[str, str, int]]], CampusGraph]


def make_graph(
    names: Iterable[str], triples: Iterable[Tuple[str, str, int]]
) -> CampusGraph:
    """Build a graph from building names and (start, end, distance) triples.

    Endpoint names not in ``names`` become nodes outside the building list.
    """
    nodes = {name: Node(name) for name in names}
    edges = [
        Edge(nodes.get(start, Node(start)), nodes.get(end, Node(end)), distance)
        for start, end, distance in triples
    ]
    return CampusGraph(list(nodes.values()), edges)


@pytest.fixture
def graph_factory() -> GraphFactory:
    return make_graph


@pytest.fixture
def triangle() -> CampusGraph:
    return make_graph("ABC", [("A", "B", 5), ("B", "C", 3), ("A", "C", 10)])


@pytest.fixture(autouse=True)
def _fresh_config(monkeypatch):
    for var in ("CAMPUS_GRAPH_DATA_DIR", "CAMPUS_GRAPH_MAP_FILE", "CAMPUS_LOG_LEVEL"):
        monkeypatch.delenv(var, raising=False)
    reset_config()
    yield
    reset_config()
