"""Append-only directed multigraph with Node, Edge and Graph classes.

The ``Graph`` is the only owner of its nodes and edges. It keeps two adjacency
indices keyed by node id (outgoing and incoming edge lists, both in ``connect``
call order). ``Node`` and ``Edge`` are frozen handles compared by identity:
a node refers back to its graph, and an edge derives its graph from its source
node, so edges can never disagree about which graph they belong to.

Example:
    >>> g = Graph()
    >>> a = g.add_node("A")
    >>> b = g.add_node("B")
    >>> edge = a.connect(b, "a-to-b")
    >>> [str(p) for p in g.get_paths("A", "B")]
    ['A -> B']
"""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import (
    TYPE_CHECKING,
    Any,
    Dict,
    Iterator,
    List,
    Mapping,
    Optional,
    Union,
)

from pathgraph.config import PATHFINDER_CONFIG, PathFinderConfig
from pathgraph.errors import DuplicateNodeError, ForeignNodeError, NodeNotFoundError
from pathgraph.logging import get_logger

if TYPE_CHECKING:
    from pathgraph.algorithms.path_finder import PathFinder
    from pathgraph.model.path import Path

LOGGER = get_logger(__name__)


@dataclass(frozen=True, eq=False)
class Node:
    """A node owned by a ``Graph``.

    Nodes are created through ``Graph.add_node`` and compare by identity.

    Attributes:
        graph (Graph): Owning graph (non-owning back reference).
        id (str): Identifier, unique within the owning graph.
        data (Any): Opaque user payload.
    """

    graph: Graph = field(repr=False)
    id: str
    data: Any = None

    @property
    def incoming_edges(self) -> List[Edge]:
        """Edges ending at this node, in insertion order."""
        return self.graph.get_incoming_edges(self)

    @property
    def outgoing_edges(self) -> List[Edge]:
        """Edges starting at this node, in insertion order."""
        return self.graph.get_outgoing_edges(self)

    def connect(self, to: Union[Node, str], data: Any = None) -> Edge:
        """Connect this node to ``to``; see ``Graph.connect``."""
        return self.graph.connect(self, to, data)


@dataclass(frozen=True, eq=False)
class Edge:
    """One directed edge between two nodes of the same graph.

    Parallel edges between the same ordered pair are distinct objects even if
    their payloads are equal. Self loops are allowed.

    Attributes:
        source (Node): Node the edge leaves.
        target (Node): Node the edge enters.
        data (Any): Opaque user payload.
    """

    source: Node
    target: Node
    data: Any = None

    @property
    def graph(self) -> Graph:
        """Owning graph, taken from the source node."""
        return self.source.graph

    def __repr__(self) -> str:
        return f"Edge({self.source.id!r} -> {self.target.id!r}, data={self.data!r})"


NodeLike = Union[Node, str]


class Graph:
    """Append-only directed multigraph.

    Nodes and edges are never removed. Every structural mutation drops the
    memoized ``PathFinder`` so path queries always reflect the current
    topology.

    Attributes:
        config: Settings handed to every ``PathFinder`` this graph creates.
    """

    def __init__(self, config: Optional[PathFinderConfig] = None) -> None:
        self.config = config if config is not None else PATHFINDER_CONFIG
        self._nodes: Dict[str, Node] = {}
        self._outgoing: Dict[str, List[Edge]] = {}
        self._incoming: Dict[str, List[Edge]] = {}
        self._path_finder: Optional[PathFinder] = None

    def __repr__(self) -> str:
        return f"Graph(nodes={len(self._nodes)}, edges={self.number_of_edges()})"

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._nodes.values())

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return item.graph is self
        if isinstance(item, str):
            return item in self._nodes
        return False

    #
    # Node management
    #
    def add_node(self, id: str, data: Any = None) -> Node:
        """Add a node with a unique id.

        Args:
            id: Node identifier.
            data: Opaque payload stored on the node.

        Returns:
            Node: The new node.

        Raises:
            DuplicateNodeError: If a node with ``id`` already exists.
        """
        if id in self._nodes:
            raise DuplicateNodeError(id)

        node = Node(self, id, data)
        self._nodes[id] = node
        self._outgoing[id] = []
        self._incoming[id] = []
        self._invalidate_path_finder()
        return node

    def get_node(self, id: str) -> Node:
        """Return the node with the given id.

        Raises:
            NodeNotFoundError: If no such node exists.
        """
        try:
            return self._nodes[id]
        except KeyError:
            raise NodeNotFoundError(id) from None

    def has_node(self, id: str) -> bool:
        """Return True if a node with ``id`` exists in this graph."""
        return id in self._nodes

    @property
    def nodes(self) -> Mapping[str, Node]:
        """Read-only view of id -> Node in insertion order."""
        return MappingProxyType(self._nodes)

    def resolve_node(self, node: NodeLike) -> Node:
        """Turn a node id or node handle into a node of this graph.

        Args:
            node: Node id or ``Node``.

        Returns:
            Node: A node owned by this graph.

        Raises:
            NodeNotFoundError: If an id is given that does not exist.
            ForeignNodeError: If a ``Node`` from another graph is given.
            TypeError: If ``node`` is neither a string nor a ``Node``.
        """
        if isinstance(node, str):
            return self.get_node(node)
        if isinstance(node, Node):
            if node.graph is not self:
                raise ForeignNodeError(node.id)
            return node
        raise TypeError(f"Expected Node or node id, got {type(node).__name__}")

    #
    # Edge management
    #
    def connect(self, source: NodeLike, target: NodeLike, data: Any = None) -> Edge:
        """Add a directed edge from ``source`` to ``target``.

        Both endpoints are resolved before anything is stored, so a failing
        call leaves the graph unchanged.

        Args:
            source: Source node or its id.
            target: Target node or its id.
            data: Opaque payload stored on the edge.

        Returns:
            Edge: The new edge.

        Raises:
            NodeNotFoundError: If an endpoint id does not exist.
            ForeignNodeError: If an endpoint node belongs to another graph.
        """
        source_node = self.resolve_node(source)
        target_node = self.resolve_node(target)

        edge = Edge(source_node, target_node, data)
        self._outgoing[source_node.id].append(edge)
        self._incoming[target_node.id].append(edge)
        self._invalidate_path_finder()
        return edge

    def get_outgoing_edges(self, node: Node) -> List[Edge]:
        """Return edges leaving ``node`` in insertion order."""
        return list(self._outgoing[node.id])

    def get_incoming_edges(self, node: Node) -> List[Edge]:
        """Return edges entering ``node`` in insertion order."""
        return list(self._incoming[node.id])

    def edges(self) -> List[Edge]:
        """Return all edges, grouped by source node in node insertion order."""
        return [edge for edges in self._outgoing.values() for edge in edges]

    def number_of_edges(self) -> int:
        """Return the total number of edges."""
        return sum(len(edges) for edges in self._outgoing.values())

    #
    # Path queries
    #
    @property
    def path_finder(self) -> PathFinder:
        """PathFinder bound to the current topology, created on first use."""
        if self._path_finder is None:
            # Import here to avoid circular import
            from pathgraph.algorithms.path_finder import PathFinder

            self._path_finder = PathFinder(self, config=self.config)
        return self._path_finder

    def get_paths(self, source: NodeLike, target: NodeLike) -> List[Path]:
        """Return every simple path from ``source`` to ``target``.

        Args:
            source: Start node or its id.
            target: End node or its id.

        Returns:
            List[Path]: Paths in depth-first discovery order. A node to itself
                yields one zero-length path; unreachable targets yield ``[]``.

        Raises:
            NodeNotFoundError: If an endpoint id does not exist.
            ForeignNodeError: If an endpoint node belongs to another graph.
        """
        source_node = self.resolve_node(source)
        target_node = self.resolve_node(target)
        return self.path_finder.find_all_paths(source_node, target_node)

    def _invalidate_path_finder(self) -> None:
        if self._path_finder is not None:
            LOGGER.debug(
                "Graph changed; discarding path finder with %d cached queries",
                self._path_finder.cache_size,
            )
            self._path_finder = None
