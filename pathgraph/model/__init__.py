"""Graph model: nodes, edges, the graph container and paths."""

from pathgraph.model.graph import Edge, Graph, Node
from pathgraph.model.path import Path

__all__ = ["Edge", "Graph", "Node", "Path"]
