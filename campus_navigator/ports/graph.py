"""Graph ports - Abstractions for loading the campus map.

These protocols define the contracts between the navigation service
and whatever storage the campus map comes from.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from ..graph.campus_graph import CampusGraph


class GraphRepositoryPort(Protocol):
    """Port for loading graph data.

    Implementation: adapters/graph/text_repository.py

    The repository is responsible for loading and caching the
    campus graph from persistent storage.
    """

    def load(self) -> CampusGraph:
        """Load the campus graph.

        Returns:
            The campus graph, not yet validated.
        """
        ...

    def clear_cache(self) -> None:
        """Forget any cached graph so the next load reads storage again."""
        ...
