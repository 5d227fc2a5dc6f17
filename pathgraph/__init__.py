"""pathgraph: in-memory directed multigraph with all-simple-paths search.

Primary API:
    Graph, Node, Edge - Append-only directed multigraph with payloads
    Path - Validated, immutable chain of edges
    PathFinder - Cached enumeration of all simple paths between two nodes
    from_networkx() / to_networkx() - NetworkX conversion

Example:
    from pathgraph import Graph

    g = Graph()
    a, b, c = g.add_node("A"), g.add_node("B"), g.add_node("C")
    a.connect(b)
    b.connect(c)
    a.connect(c)

    for path in g.get_paths("A", "C"):
        print(path, path.length)
"""

from __future__ import annotations

from pathgraph import logging
from pathgraph._version import __version__
from pathgraph.algorithms.path_finder import PathFinder
from pathgraph.config import PATHFINDER_CONFIG, PathFinderConfig
from pathgraph.errors import (
    DuplicateNodeError,
    ForeignNodeError,
    GraphError,
    InvalidPathError,
    NodeNotFoundError,
)
from pathgraph.lib.nx import from_networkx, to_networkx
from pathgraph.model.graph import Edge, Graph, Node
from pathgraph.model.path import Path

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "Node",
    "Edge",
    "Path",
    # Algorithms
    "PathFinder",
    # Configuration
    "PathFinderConfig",
    "PATHFINDER_CONFIG",
    # Errors
    "GraphError",
    "DuplicateNodeError",
    "NodeNotFoundError",
    "ForeignNodeError",
    "InvalidPathError",
    # Library integrations (NetworkX)
    "from_networkx",
    "to_networkx",
    # Utilities
    "logging",
]
