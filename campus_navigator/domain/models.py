"""Immutable domain models for the Campus Navigator.

All models are frozen dataclasses with slots. Buildings are identified by
name, so two ``Node`` instances with the same name compare equal and hash
the same.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator


@dataclass(frozen=True, slots=True)
class Node:
    """A campus building.

    Attributes:
        name: Unique building name within a loaded map
    """

    name: str

    def __post_init__(self) -> None:
        """Validate the building name and strip surrounding whitespace."""
        if not self.name or not self.name.strip():
            raise ValueError("Building name must be a non-empty string")
        object.__setattr__(self, "name", self.name.strip())

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True, slots=True)
class Edge:
    """An undirected walking path between two buildings.

    Attributes:
        start: One endpoint of the path
        end: The other endpoint of the path
        distance: Travel time in minutes
    """

    start: Node
    end: Node
    distance: int

    @property
    def sort_key(self) -> int:
        """Key giving edges their natural order (ascending distance)."""
        return self.distance

    def __str__(self) -> str:
        return f"{self.start.name} -> {self.end.name} ({self.distance} minutes)"


@dataclass(frozen=True, slots=True)
class SpanningForest:
    """Result of Kruskal's algorithm.

    One tree per connected component; a single spanning tree when the
    graph is connected.

    Attributes:
        edges: Accepted edges in acceptance order (ascending distance)
    """

    edges: tuple[Edge, ...] = field(default_factory=tuple)

    @property
    def total_distance(self) -> int:
        """Sum of the accepted edge distances."""
        return sum(edge.distance for edge in self.edges)

    @property
    def is_empty(self) -> bool:
        """Check if no edge was accepted."""
        return len(self.edges) == 0

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)
