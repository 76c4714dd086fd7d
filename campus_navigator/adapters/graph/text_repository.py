"""Text map Graph Repository adapter.

This adapter wraps the map file parsing in graph/load_graph.py and adds:
- Configuration injection (path and edges marker from config)
- Caching support
- Typed load errors
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Optional

from ...config import GraphConfig, get_config
from ...domain.errors import MapFormatError, MapLoadError
from ...graph.campus_graph import CampusGraph
from ...graph.load_graph import load_graph


@dataclass
class TextGraphRepository:
    """Graph repository that loads from a text map file.

    This adapter implements GraphRepositoryPort.

    Attributes:
        config: Graph configuration (map path, edges marker)
    """

    config: GraphConfig = field(default_factory=lambda: get_config().graph)
    _logger: logging.Logger = field(init=False, repr=False)

    # Cached data
    _graph: Optional[CampusGraph] = field(default=None, repr=False)

    def __post_init__(self) -> None:
        self._logger = logging.getLogger(__name__)

    def load(self) -> CampusGraph:
        """Load the campus graph from the configured map file.

        Returns:
            The parsed campus graph.

        Raises:
            MapLoadError: If the file cannot be read.
            MapFormatError: If a line of the file is malformed.
        """
        if self._graph is not None:
            return self._graph

        map_path = self.config.map_path
        self._logger.debug("Loading campus map", extra={"map_path": str(map_path)})

        try:
            graph = load_graph(map_path, self.config.edges_marker)
        except MapFormatError as e:
            self._logger.error(
                "Malformed campus map",
                extra={"map_path": str(map_path), "line_number": e.line_number},
            )
            raise
        except (OSError, UnicodeDecodeError) as e:
            raise MapLoadError(
                f"Failed to read campus map {map_path}",
                file_path=str(map_path),
                cause=e,
            ) from e

        self._graph = graph
        self._logger.info(
            "Campus map loaded",
            extra={"nodes": len(graph.nodes), "edges": len(graph.edges)},
        )
        return graph

    def clear_cache(self) -> None:
        """Clear the cached graph."""
        self._graph = None
        self._logger.debug("Graph cache cleared")
