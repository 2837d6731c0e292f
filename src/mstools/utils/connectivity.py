from __future__ import annotations

from typing import List, Set

from mstools.errors import InvalidOperationError
from mstools.graph.model import Graph


def reachable_from(graph: Graph, start: int) -> Set[int]:
    """Vertices reachable from *start* along adjacency (iterative DFS).

    Follows outgoing adjacency, which for undirected graphs includes the
    mirrored entries.  Raises VertexNotFoundError for an unknown *start*.
    """
    graph.get_vertex(start)
    visited: Set[int] = set()
    stack = [start]
    while stack:
        node = stack.pop()
        if node in visited:
            continue
        visited.add(node)
        for e in graph.get_vertex(node).edges:
            if e.target not in visited:
                stack.append(e.target)
    return visited


def is_connected(graph: Graph) -> bool:
    """Check whether every vertex is reachable from the smallest identity.

    Semantics for degenerate cases:
      - no vertices  -> True  (vacuously connected)
      - one vertex   -> True
    For directed graphs this is reachability from the minimum identity,
    not strong connectivity.
    """
    n = graph.vertex_count()
    if n <= 1:
        return True
    start = min(graph.vertex_ids())
    return len(reachable_from(graph, start)) == n


def connected_components(graph: Graph) -> List[Set[int]]:
    """Connected components of an undirected graph, ordered by smallest member."""
    if graph.directed:
        raise InvalidOperationError("connected components require an undirected graph")

    components: List[Set[int]] = []
    seen: Set[int] = set()
    for vid in graph.vertex_ids():
        if vid in seen:
            continue
        comp = reachable_from(graph, vid)
        seen |= comp
        components.append(comp)
    return components
