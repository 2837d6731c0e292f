from __future__ import annotations

import logging
from typing import List

from mstools.errors import InvalidOperationError
from mstools.graph.model import Edge, Graph
from mstools.structures.union_find import DisjointSet
from .result import SpanningTree

logger = logging.getLogger(__name__)


def kruskal(graph: Graph) -> SpanningTree:
    """
    Minimum spanning forest by Kruskal's algorithm.

    Edges are scanned by (weight, insertion index), so ties resolve in
    insertion order and the result is reproducible.  On a connected graph
    the result has |V|-1 edges; otherwise it is a forest with one tree per
    component.

    Raises InvalidOperationError for directed graphs.
    """
    if graph.directed:
        raise InvalidOperationError("Kruskal requires an undirected graph")

    ordered = sorted(graph.edges(), key=lambda e: (e.weight, e.index))
    ds = DisjointSet(graph.vertex_ids())
    need = max(graph.vertex_count() - 1, 0)

    accepted: List[Edge] = []
    total = 0
    for e in ordered:
        if len(accepted) == need:
            break
        if ds.union(e.source, e.target):
            accepted.append(e)
            total += e.weight

    if len(accepted) < need:
        logger.debug(
            f"Kruskal: graph is disconnected, forest of {ds.set_count} trees "
            f"with {len(accepted)} edges"
        )
    else:
        logger.debug(f"Kruskal: spanning tree with {len(accepted)} edges, weight {total}")
    return SpanningTree(edges=tuple(accepted), total_weight=total)
