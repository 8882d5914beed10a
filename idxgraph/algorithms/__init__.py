"""Shortest-path algorithms and their result types."""

from idxgraph.algorithms.paths import ShortestPaths
from idxgraph.algorithms.spf import calculate_for

__all__ = ["ShortestPaths", "calculate_for"]
