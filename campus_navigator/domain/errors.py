"""Typed domain errors for the Campus Navigator.

Load and validation errors are fatal at startup; a missing building is a
user-input error that the interactive shell reports before re-prompting.

All errors inherit from CampusNavigatorError and can optionally
wrap a root cause exception for debugging.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .models import Edge


@dataclass
class CampusNavigatorError(Exception):
    """Base error for the campus navigator domain.

    All domain-specific errors inherit from this class.

    Attributes:
        message: Human-readable error description
        cause: Optional underlying exception that caused this error
    """

    message: str
    cause: Optional[Exception] = field(default=None, repr=False)

    def __str__(self) -> str:
        if self.cause:
            return f"{self.message}: {self.cause}"
        return self.message

    def __post_init__(self) -> None:
        super().__init__(self.message)


@dataclass
class GraphError(CampusNavigatorError):
    """Graph loading or data integrity error.

    Attributes:
        file_path: Path to the campus map file if relevant
    """

    file_path: Optional[str] = None


@dataclass
class MapLoadError(GraphError):
    """The campus map file could not be read."""


@dataclass
class MapFormatError(GraphError):
    """A line of the campus map file is malformed.

    Attributes:
        line_number: 1-based line number of the offending line
    """

    line_number: Optional[int] = None


@dataclass
class GraphValidationError(GraphError):
    """The loaded graph failed building or distance validation.

    Attributes:
        invalid_buildings: Edges referencing a building missing from the map
        invalid_distances: Edges whose distance is outside the accepted range
    """

    invalid_buildings: tuple[Edge, ...] = ()
    invalid_distances: tuple[Edge, ...] = ()


@dataclass
class BuildingNotFoundError(CampusNavigatorError):
    """Building name not found in the graph.

    Attributes:
        building_name: The building name that was not found
    """

    building_name: str = ""


@dataclass
class ConfigurationError(CampusNavigatorError):
    """Invalid or missing configuration.

    Attributes:
        setting_name: Name of the problematic setting
        expected_type: Expected type or format
    """

    setting_name: str = ""
    expected_type: Optional[str] = None
