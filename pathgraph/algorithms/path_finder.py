"""Enumeration of all simple paths between two nodes of a ``Graph``.

``PathFinder`` runs a backtracking depth-first search over the graph's
outgoing adjacency index and caches whole-query results per
``(source id, target id)``. The cache is only valid for the topology the
finder was created against; ``Graph`` discards its finder on every mutation.
"""

from __future__ import annotations

from time import perf_counter
from typing import TYPE_CHECKING, Dict, Iterator, List, Optional, Set, Tuple

from pathgraph.config import PATHFINDER_CONFIG, PathFinderConfig
from pathgraph.logging import get_logger
from pathgraph.model.path import Path

if TYPE_CHECKING:
    from pathgraph.model.graph import Edge, Graph, Node, NodeLike

LOGGER = get_logger(__name__)

CacheKey = Tuple[str, str]


class PathFinder:
    """Find all simple paths in one graph, caching results per node pair.

    Attributes:
        graph: The graph searched. It is only read, never modified.
        config: Caching and warning settings.
    """

    def __init__(self, graph: Graph, config: Optional[PathFinderConfig] = None) -> None:
        self.graph = graph
        self.config = config if config is not None else PATHFINDER_CONFIG
        self._cache: Dict[CacheKey, List[Path]] = {}

    @property
    def cache_size(self) -> int:
        """Number of cached (source, target) queries."""
        return len(self._cache)

    def is_cached(self, source_id: str, target_id: str) -> bool:
        """Return True if results for this id pair are cached."""
        return (source_id, target_id) in self._cache

    def clear_cache(self) -> None:
        """Drop every cached result."""
        self._cache.clear()

    def find_all_paths(self, source: NodeLike, target: NodeLike) -> List[Path]:
        """Return every simple path from ``source`` to ``target``.

        A simple path visits no node twice. Paths are returned in depth-first
        discovery order, following outgoing edges in insertion order; callers
        that need another order must sort. ``source`` equal to ``target``
        yields exactly one zero-length path. Unreachable targets yield ``[]``.
        Both endpoints are checked against the graph before the cache is
        consulted, so a node from another graph is rejected even when its id
        matches a cached pair.

        Args:
            source: Start node or its id.
            target: End node or its id.

        Returns:
            List[Path]: A new list on every call; repeated queries without a
                graph mutation return the same ``Path`` objects.

        Raises:
            NodeNotFoundError: If an id does not exist in the graph.
            ForeignNodeError: If a node belongs to a different graph.
        """
        source_node = self.graph.resolve_node(source)
        target_node = self.graph.resolve_node(target)
        key = (source_node.id, target_node.id)

        cached = self._cache.get(key)
        if cached is not None:
            LOGGER.debug("Path cache hit for %s -> %s", *key)
            return list(cached)

        start_time = perf_counter()
        paths = self._depth_first_search(source_node, target_node)
        LOGGER.debug(
            "Found %d paths %s -> %s in %.3f ms",
            len(paths),
            source_node.id,
            target_node.id,
            (perf_counter() - start_time) * 1000.0,
        )
        if self.config.should_warn(len(paths)):
            LOGGER.warning(
                "Enumerated %d simple paths %s -> %s; path count grows "
                "combinatorially on densely connected graphs",
                len(paths),
                source_node.id,
                target_node.id,
            )

        if self.config.cache_results:
            self._cache[key] = paths
        return list(paths)

    def _depth_first_search(self, source: Node, target: Node) -> List[Path]:
        """Backtracking DFS collecting every simple path to ``target``.

        The stack holds one outgoing-edge iterator per node on the current
        branch, and ``branch`` the edges leading to those nodes. ``visited``
        only contains nodes of the current branch, so a node skipped here can
        still appear on a sibling branch.
        """
        if source is target:
            return [Path(source, target, ())]

        paths: List[Path] = []
        visited: Set[str] = {source.id}
        branch: List[Edge] = []
        stack: List[Iterator[Edge]] = [iter(self.graph.get_outgoing_edges(source))]

        while stack:
            edge = next(stack[-1], None)
            if edge is None:
                # backtrack
                stack.pop()
                if branch:
                    visited.discard(branch.pop().target.id)
                continue

            next_node = edge.target
            if next_node.id in visited:
                # cycle or self loop, skip
                continue

            if next_node is target:
                paths.append(Path(source, target, (*branch, edge)))
                continue

            visited.add(next_node.id)
            branch.append(edge)
            stack.append(iter(self.graph.get_outgoing_edges(next_node)))

        return paths
