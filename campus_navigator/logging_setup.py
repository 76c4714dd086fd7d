"""Applies the observability configuration to the standard logging module."""

from __future__ import annotations

import logging
import sys
from typing import Optional

from .config import ObservabilityConfig, get_config


def configure_logging(
    config: Optional[ObservabilityConfig] = None, level: Optional[str] = None
) -> None:
    """Configure root logging to stderr.

    Args:
        config: Observability settings; defaults to the application config.
        level: Level name overriding ``config.level``.
    """
    config = config or get_config().observability
    logging.basicConfig(
        level=(level or config.level).upper(),
        format=config.format,
        stream=sys.stderr,
        force=True,
    )
