"""Immutable representation of a single path through a ``Graph``.

A ``Path`` is a start node, an end node and the ordered edges joining them.
The edge chain is validated on construction; a path with no edges is the
trivial path of a node to itself.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from pathgraph.errors import InvalidPathError
from pathgraph.model.graph import Edge, Node


@dataclass(frozen=True)
class Path:
    """A contiguous chain of edges from ``start`` to ``end``.

    Attributes:
        start (Node): First node of the path.
        end (Node): Last node of the path.
        edges (Tuple[Edge, ...]): Ordered edges. Any sequence is accepted and
            stored as a tuple.

    Raises:
        InvalidPathError: If the edges do not chain from ``start`` to ``end``,
            or if there are no edges and ``start`` is not ``end``.
    """

    start: Node
    end: Node
    edges: Tuple[Edge, ...] = ()

    def __post_init__(self) -> None:
        """Freeze ``edges`` into a tuple and validate the chain."""
        object.__setattr__(self, "edges", tuple(self.edges))
        self._validate()

    def __len__(self) -> int:
        """Return the number of edges."""
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        """Iterate over the edges in order."""
        return iter(self.edges)

    def __str__(self) -> str:
        """Render node ids joined by arrows, e.g. ``A -> B -> C``."""
        return " -> ".join(node.id for node in self.get_nodes())

    def __repr__(self) -> str:
        return f"Path({self})"

    @property
    def length(self) -> int:
        """Number of edges in the path."""
        return len(self.edges)

    def get_nodes(self) -> List[Node]:
        """Return all nodes along the path, start and end included.

        Returns:
            List[Node]: ``[start]`` followed by the target of every edge.
        """
        return [self.start] + [edge.target for edge in self.edges]

    def contains_node(self, node: Node) -> bool:
        """Return True if ``node`` (by identity) lies on this path."""
        return any(n is node for n in self.get_nodes())

    def contains_edge(self, edge: Edge) -> bool:
        """Return True if ``edge`` (by identity) is part of this path."""
        return any(e is edge for e in self.edges)

    def _validate(self) -> None:
        if not self.edges:
            if self.start is not self.end:
                raise InvalidPathError(
                    f"Empty path must start and end at the same node, "
                    f"got '{self.start.id}' and '{self.end.id}'."
                )
            return

        current = self.start
        for i, edge in enumerate(self.edges):
            if edge.source is not current:
                raise InvalidPathError(
                    f"Edge at index {i} does not continue from the previous node. "
                    f"Expected from node '{current.id}', got '{edge.source.id}'."
                )
            current = edge.target

        if current is not self.end:
            raise InvalidPathError(
                f"Path does not end at the expected node. "
                f"Expected '{self.end.id}', got '{current.id}'."
            )

    @classmethod
    def from_edges(cls, edges: Sequence[Edge]) -> Path:
        """Build a path spanning a non-empty edge sequence.

        Args:
            edges: Contiguous edges; start and end are taken from the first
                and last edge.

        Raises:
            InvalidPathError: If ``edges`` is empty or not contiguous.
        """
        if not edges:
            raise InvalidPathError("Cannot infer path endpoints from an empty edge list.")
        return cls(edges[0].source, edges[-1].target, tuple(edges))
