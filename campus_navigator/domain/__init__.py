"""Domain layer - Core models and errors.

This module contains immutable domain models and typed errors
used throughout the application. No external dependencies.
"""

from .errors import (
    BuildingNotFoundError,
    CampusNavigatorError,
    ConfigurationError,
    GraphError,
    GraphValidationError,
    MapFormatError,
    MapLoadError,
)
from .models import Edge, Node, SpanningForest

__all__ = [
    # Models
    "Node",
    "Edge",
    "SpanningForest",
    # Errors
    "CampusNavigatorError",
    "GraphError",
    "MapLoadError",
    "MapFormatError",
    "GraphValidationError",
    "BuildingNotFoundError",
    "ConfigurationError",
]
