"""Centralized configuration using Pydantic Settings.

This module provides a single source of truth for configuration:
the campus map location, the accepted walking distance range and
logging settings.

Configuration can be overridden via environment variables:
- CAMPUS_GRAPH_DATA_DIR=/path/to/data
- CAMPUS_GRAPH_MAP_FILE=north_campus.txt
- CAMPUS_GRAPH_MAX_DISTANCE=45
- CAMPUS_LOG_LEVEL=DEBUG
- etc.
"""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Literal

from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .domain.errors import ConfigurationError


class GraphConfig(BaseSettings):
    """Campus map configuration.

    Environment variables prefixed with CAMPUS_GRAPH_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_GRAPH_")

    data_dir: Path = Field(
        default_factory=lambda: Path(__file__).resolve().parent.parent / "data"
    )
    map_file: str = "campus_map.txt"
    edges_marker: str = "EDGES"
    min_distance: int = 0
    max_distance: int = 30

    @model_validator(mode="after")
    def _check_distance_range(self) -> "GraphConfig":
        if self.min_distance > self.max_distance:
            raise ConfigurationError(
                f"min_distance ({self.min_distance}) is greater than "
                f"max_distance ({self.max_distance})",
                setting_name="min_distance",
                expected_type="int <= max_distance",
            )
        return self

    @property
    def map_path(self) -> Path:
        """Full path to the campus map file."""
        return self.data_dir / self.map_file


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Environment variables prefixed with CAMPUS_LOG_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_LOG_")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "WARNING"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    @field_validator("level", mode="before")
    @classmethod
    def _upper_level(cls, value: object) -> object:
        return value.upper() if isinstance(value, str) else value


class AppConfig(BaseSettings):
    """Main application configuration aggregating all sub-configs.

        config = get_config()
        print(config.graph.map_path)
        print(config.observability.level)

    Environment variables prefixed with CAMPUS_.
    """

    model_config = SettingsConfigDict(env_prefix="CAMPUS_")

    graph: GraphConfig = Field(default_factory=GraphConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)


@lru_cache(maxsize=1)
def get_config() -> AppConfig:
    """Get the singleton application configuration.

    Configuration is loaded once and cached. To reload configuration
    (e.g., in tests), use reset_config() first.
    """
    return AppConfig()


def reset_config() -> None:
    """Reset the configuration cache.

    Call this in tests to ensure a fresh configuration is loaded.
    """
    get_config.cache_clear()
