"""Navigation service - Main orchestrator.

Loads the campus map through a repository, validates it once, and runs
the traversal and spanning tree algorithms on demand.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import GraphConfig, get_config
from ..domain.errors import GraphError, GraphValidationError
from ..domain.models import Node, SpanningForest
from ..graph.campus_graph import CampusGraph
from ..graph.traversal import breadth_first, connected_components, depth_first
from ..ports.graph import GraphRepositoryPort


@dataclass
class NavigationService:
    """Main service for campus navigation.

    The graph is either fully valid and usable, or ``load`` raises.

    Attributes:
        graph_repository: Loads the campus graph
        config: Graph configuration (accepted distance range)
    """

    graph_repository: GraphRepositoryPort
    config: GraphConfig = field(default_factory=lambda: get_config().graph)

    _graph: Optional[CampusGraph] = field(default=None, init=False, repr=False)
    _logger: logging.Logger = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CampusGraph:
        """Load and validate the campus graph.

        Returns:
            The validated campus graph.

        Raises:
            MapLoadError: If the map file cannot be read.
            MapFormatError: If the map file is malformed.
            GraphValidationError: If an edge references an unknown building
                or has a distance outside the accepted range.
        """
        if self._graph is not None:
            return self._graph

        graph = self.graph_repository.load()
        self.validate(graph)
        self._graph = graph

        self._logger.info(
            "Campus graph ready",
            extra={
                "nodes": len(graph.nodes),
                "edges": len(graph.edges),
                "components": len(connected_components(graph)),
            },
        )
        return graph

    def validate(self, graph: CampusGraph) -> None:
        """Run both validation checks over the whole edge list.

        Raises:
            GraphValidationError: If either check fails.
        """
        invalid_buildings = tuple(graph.invalid_building_edges())
        invalid_distances = tuple(
            graph.invalid_distance_edges(
                self.config.min_distance, self.config.max_distance
            )
        )
        if not invalid_buildings and not invalid_distances:
            return

        self._logger.warning(
            "Campus graph failed validation",
            extra={
                "invalid_buildings": [str(edge) for edge in invalid_buildings],
                "invalid_distances": [str(edge) for edge in invalid_distances],
            },
        )
        raise GraphValidationError(
            "Issue found with edges/weights",
            invalid_buildings=invalid_buildings,
            invalid_distances=invalid_distances,
        )

    @property
    def graph(self) -> CampusGraph:
        if self._graph is None:
            raise GraphError("Campus graph has not been loaded")
        return self._graph

    def summary(self) -> str:
        """One-line description of the loaded map."""
        graph = self.graph
        return (
            f"Loaded campus map with {len(graph.nodes)} buildings "
            f"and {len(graph.edges)} paths."
        )

    def depth_first(self, building_name: str) -> List[Node]:
        """Depth-first walk from the named building.

        Raises:
            BuildingNotFoundError: If no building has this name.
        """
        start = self.graph.get_node(building_name)
        order = depth_first(self.graph, start)
        self._logger.debug(
            "Depth-first traversal",
            extra={"start": start.name, "visited": len(order)},
        )
        return order

    def breadth_first(self, building_name: str) -> List[Node]:
        """Breadth-first walk from the named building.

        Raises:
            BuildingNotFoundError: If no building has this name.
        """
        start = self.graph.get_node(building_name)
        order = breadth_first(self.graph, start)
        self._logger.debug(
            "Breadth-first traversal",
            extra={"start": start.name, "visited": len(order)},
        )
        return order

    def minimum_spanning_forest(self) -> SpanningForest:
        forest = self.graph.minimum_spanning_forest()
        if forest.is_empty:
            self._logger.info(
                "Minimum spanning forest has no paths",
                extra={"nodes": len(self.graph.nodes), "edges": len(self.graph.edges)},
            )
            return forest
        self._logger.debug(
            "Minimum spanning forest",
            extra={"edges": len(forest), "total_minutes": forest.total_distance},
        )
        return forest
