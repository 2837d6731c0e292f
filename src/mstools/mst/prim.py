from __future__ import annotations

import logging
from typing import List, Set, Tuple

from mstools.errors import InvalidOperationError
from mstools.graph.model import Edge, Graph
from mstools.structures.heap import EdgeHeap
from .result import SpanningTree

logger = logging.getLogger(__name__)


def _grow(graph: Graph, start: int, visited: Set[int], limit: int) -> Tuple[List[Edge], int]:
    """
    Lazy Prim from *start*, marking vertices in *visited* as they join.

    Stops after *limit* accepted edges or when no candidate edge is left.
    Returned edges are in acceptance order, oriented tree -> new vertex.
    """
    heap = EdgeHeap()
    visited.add(start)
    for e in graph.get_vertex(start).edges:
        if e.target not in visited:
            heap.push(e)

    accepted: List[Edge] = []
    total = 0
    while heap and len(accepted) < limit:
        e = heap.pop()
        if e.target in visited:
            continue
        accepted.append(e)
        total += e.weight
        visited.add(e.target)
        for nxt in graph.get_vertex(e.target).edges:
            if nxt.target not in visited:
                heap.push(nxt)
    return accepted, total


def _check_undirected(graph: Graph) -> None:
    if graph.directed:
        raise InvalidOperationError("Prim requires an undirected graph")


def prim(graph: Graph, start: int) -> SpanningTree:
    """
    Minimum spanning tree of *start*'s component by lazy Prim.

    Candidate edges leave the heap by (weight, target id, insertion index).
    If the graph is disconnected the result only spans the vertices
    reachable from *start*; that is not an error.

    Raises InvalidOperationError for directed graphs and
    VertexNotFoundError if *start* is not in the graph.
    """
    _check_undirected(graph)
    graph.get_vertex(start)

    need = graph.vertex_count() - 1
    edges, total = _grow(graph, start, set(), need)
    if len(edges) < need:
        logger.debug(
            f"Prim: start {start} reaches {len(edges) + 1} of "
            f"{graph.vertex_count()} vertices"
        )
    return SpanningTree(edges=tuple(edges), total_weight=total)


def prim_forest(graph: Graph) -> SpanningTree:
    """
    Minimum spanning forest by Prim, restarted from the smallest unvisited
    vertex until every component is covered.  Trees appear in order of their
    smallest vertex identity.
    """
    _check_undirected(graph)

    visited: Set[int] = set()
    edges: List[Edge] = []
    total = 0
    trees = 0
    for vid in graph.vertex_ids():
        if vid in visited:
            continue
        part, weight = _grow(graph, vid, visited, graph.vertex_count() - 1)
        edges.extend(part)
        total += weight
        trees += 1

    logger.debug(f"Prim forest: {trees} trees, {len(edges)} edges, weight {total}")
    return SpanningTree(edges=tuple(edges), total_weight=total)
