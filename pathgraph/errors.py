"""Exception types raised by graph construction, queries and path validation.

All errors derive from ``GraphError``, which is a ``ValueError`` so callers that
already guard graph operations with ``except ValueError`` keep working.
"""

from __future__ import annotations

from typing import Optional


class GraphError(ValueError):
    """Base class for all pathgraph errors."""


class NodeError(GraphError):
    """Error concerning a specific node.

    Attributes:
        node_id: Identifier of the offending node.
    """

    def __init__(self, message: str, node_id: Optional[str] = None) -> None:
        super().__init__(message)
        self.node_id = node_id


class DuplicateNodeError(NodeError):
    """A node with the same id already exists in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' already exists in this graph.", node_id)


class NodeNotFoundError(NodeError, KeyError):
    """No node with the requested id exists in the graph."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' not found in this graph.", node_id)

    def __str__(self) -> str:
        # KeyError would otherwise quote the message
        return str(self.args[0])


class ForeignNodeError(NodeError):
    """A node handle belongs to a different graph instance."""

    def __init__(self, node_id: str) -> None:
        super().__init__(f"Node '{node_id}' does not belong to this graph.", node_id)


class InvalidPathError(GraphError):
    """Edges given to ``Path`` do not chain from its start node to its end node."""
