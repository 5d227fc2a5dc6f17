"""NetworkX graph conversion utilities.

Convert between ``pathgraph.Graph`` and NetworkX graphs, e.g. to draw a graph
or to run NetworkX algorithms next to ``Graph.get_paths``.

Example:
    >>> import networkx as nx
    >>> from pathgraph.lib.nx import from_networkx, to_networkx
    >>>
    >>> G = nx.DiGraph()
    >>> G.add_edge("A", "B", data="a-b")
    >>> graph = from_networkx(G)
    >>> [str(p) for p in graph.get_paths("A", "B")]
    ['A -> B']
    >>> to_networkx(graph).number_of_edges()
    1
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Union

import networkx as nx

from pathgraph.model.graph import Graph

if TYPE_CHECKING:
    NxGraph = Union[nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph]
else:
    NxGraph = Any


def to_networkx(graph: Graph, data_attr: str = "data") -> nx.MultiDiGraph:
    """Convert a ``Graph`` to a NetworkX MultiDiGraph.

    Nodes keep their ids and insertion order. Each edge becomes one keyed
    multi-edge, added in ``connect`` order per source node.

    Args:
        graph: Graph to convert.
        data_attr: Attribute name under which node and edge payloads are
            stored (default: "data").

    Returns:
        nx.MultiDiGraph: Node attribute ``data_attr`` holds the node payload;
            edge attributes ``data_attr`` and ``edge`` hold the edge payload
            and the original ``Edge`` object.
    """
    G = nx.MultiDiGraph()
    for node in graph:
        G.add_node(node.id, **{data_attr: node.data})
    for edge in graph.edges():
        G.add_edge(edge.source.id, edge.target.id, **{data_attr: edge.data, "edge": edge})
    return G


def from_networkx(G: NxGraph, data_attr: str = "data") -> Graph:
    """Build a ``Graph`` from any NetworkX graph.

    Node names are converted to ids with ``str``. Undirected edges become two
    directed edges (one each way; a single edge for self loops).

    Args:
        G: NetworkX graph (DiGraph, MultiDiGraph, Graph, or MultiGraph).
        data_attr: Attribute read as the node or edge payload; missing
            attributes give ``None`` (default: "data").

    Returns:
        Graph: A new graph with the same nodes and edges.

    Raises:
        TypeError: If G is not a NetworkX graph.
        DuplicateNodeError: If two node names map to the same string id.
    """
    if not isinstance(G, (nx.DiGraph, nx.MultiDiGraph, nx.Graph, nx.MultiGraph)):
        raise TypeError(
            f"Expected NetworkX graph (DiGraph, MultiDiGraph, Graph, MultiGraph), "
            f"got {type(G).__name__}"
        )

    graph = Graph()
    for name, attrs in G.nodes(data=True):
        graph.add_node(str(name), attrs.get(data_attr))

    for u, v, attrs in G.edges(data=True):
        payload = attrs.get(data_attr)
        graph.connect(str(u), str(v), payload)
        if not G.is_directed() and u != v:
            graph.connect(str(v), str(u), payload)

    return graph
