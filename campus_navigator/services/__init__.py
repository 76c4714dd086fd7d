"""Services layer - Application orchestration.

Available services:
- NavigationService: Loads, validates and queries the campus graph
"""

from .navigation import NavigationService

__all__ = ["NavigationService"]
