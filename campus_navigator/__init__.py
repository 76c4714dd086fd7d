"""Top-level package for the Campus Navigator project.

This package loads a campus map of buildings and walking paths, validates
it, and runs depth-first traversal, breadth-first traversal and Kruskal's
minimum spanning tree over it.
"""

__version__ = "0.1.0"
