"""Graph adapters - Implementations of graph-related ports.

Available implementations:
- TextGraphRepository: Loads the campus graph from a text map file
"""

from .text_repository import TextGraphRepository

__all__ = ["TextGraphRepository"]
