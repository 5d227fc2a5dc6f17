"""Graph algorithms operating on ``pathgraph.model.graph.Graph``."""

from pathgraph.algorithms.path_finder import PathFinder

__all__ = ["PathFinder"]
