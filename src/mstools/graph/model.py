"""Vertex, edge and graph containers.

The graph is an arena keyed by vertex identity.  Vertices own their
adjacency lists; edges refer to their endpoints by identity only, so no
caller-owned object is ever stored inside a graph.

For undirected graphs every inserted edge is recorded once in the global
edge sequence (the source of truth for edge counts and for Kruskal) and
twice in adjacency: forward on the source, mirrored on the target.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Iterable, List, Optional, Sequence, Tuple, Union

from mstools.errors import InvalidConstructionError, VertexNotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Edge:
    """
    Weighted edge between two vertex identities.

    index: position of the forward edge in the owning graph's edge sequence
           (-1 for edges not yet inserted).  Mirrored adjacency entries share
           the index of the edge they mirror.
    """

    source: Optional[int]
    target: Optional[int]
    weight: int
    data: Any = field(default=None, compare=False)
    index: int = -1

    @property
    def endpoints(self) -> Tuple[Optional[int], Optional[int]]:
        return (self.source, self.target)

    def reversed(self) -> "Edge":
        """Same edge seen from the other endpoint (weight, data, index kept)."""
        return replace(self, source=self.target, target=self.source)

    def is_self_loop(self) -> bool:
        return self.source == self.target


@dataclass(frozen=True)
class Vertex:
    """
    Graph vertex.  Identity, name and payload are fixed at creation;
    the adjacency list grows as edges are inserted.
    """

    id: int
    name: str = ""
    data: Any = field(default=None, compare=False)
    edges: List[Edge] = field(default_factory=list, compare=False, repr=False)

    @property
    def degree(self) -> int:
        return len(self.edges)


Endpoint = Union[int, Vertex]


def _endpoint_id(v: Optional[Endpoint]) -> Optional[int]:
    if isinstance(v, Vertex):
        return v.id
    return v


def new_vertex(vertex_id: int, name: str, data: Any, edges: Sequence[Edge]) -> Vertex:
    """
    Build a standalone vertex that already has adjacency.

    Raises InvalidConstructionError if *edges* is empty.
    """
    if not edges:
        raise InvalidConstructionError(f"vertex {vertex_id!r} has no edges")
    return Vertex(id=vertex_id, name=name, data=data, edges=list(edges))


def new_edge(
    source: Optional[Endpoint],
    target: Optional[Endpoint],
    weight: int,
    data: Any = None,
) -> Edge:
    """
    Build a standalone edge.  Endpoints may be identities or vertices.

    Raises InvalidConstructionError if neither endpoint is given.
    """
    if source is None and target is None:
        raise InvalidConstructionError("edge has no endpoint")
    return Edge(_endpoint_id(source), _endpoint_id(target), weight, data)


class Graph:
    """
    Weighted graph with integer vertex identities.

    Grow-only: vertices and edges can be added but not removed.
    Not safe for concurrent mutation.
    """

    def __init__(self, directed: bool = False):
        self._directed = directed
        self._vertices: Dict[int, Vertex] = {}
        self._edges: List[Edge] = []

    @property
    def directed(self) -> bool:
        return self._directed

    def __repr__(self) -> str:
        kind = "directed" if self._directed else "undirected"
        return f"Graph({kind}, |V|={len(self._vertices)}, |E|={len(self._edges)})"

    def __len__(self) -> int:
        return len(self._vertices)

    def __contains__(self, vertex_id: object) -> bool:
        return vertex_id in self._vertices

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_vertex(self, vertex_id: int, name: str = "", data: Any = None) -> Vertex:
        """
        Insert a vertex and return the stored record.

        The first insertion of an identity wins: later calls with the same
        identity leave name and data untouched and return the existing vertex.
        """
        existing = self._vertices.get(vertex_id)
        if existing is not None:
            if name != existing.name or data is not existing.data:
                logger.debug(f"Vertex {vertex_id} already present; keeping first name/data")
            return existing
        v = Vertex(id=vertex_id, name=name, data=data)
        self._vertices[vertex_id] = v
        return v

    def _ensure_endpoint(self, v: Optional[Endpoint]) -> int:
        if v is None:
            raise InvalidConstructionError("edge endpoint missing")
        if isinstance(v, Vertex):
            return self.add_vertex(v.id, v.name, v.data).id
        return self.add_vertex(v).id

    def add_edge(self, source: Endpoint, target: Endpoint, weight: int, data: Any = None) -> Edge:
        """
        Insert an edge and return the stored forward edge.

        Missing endpoints are created.  Vertex arguments contribute their
        id, name and data; the objects themselves are not kept.
        Undirected graphs also get the mirrored entry in the target's adjacency.
        """
        u = self._ensure_endpoint(source)
        v = self._ensure_endpoint(target)

        e = Edge(u, v, weight, data, index=len(self._edges))
        self._vertices[u].edges.append(e)
        self._edges.append(e)
        if not self._directed:
            self._vertices[v].edges.append(e.reversed())
        return e

    def add_edge_from(self, edge: Edge) -> Edge:
        """Insert a canonical copy of a caller-built edge."""
        return self.add_edge(edge.source, edge.target, edge.weight, edge.data)

    def add_edges_from(self, edges: Iterable[tuple]) -> List[Edge]:
        """
        Insert edges given as (u, v, w) or (u, v, w, data) tuples,
        in iteration order.
        """
        added: List[Edge] = []
        for item in edges:
            if len(item) == 3:
                u, v, w = item
                added.append(self.add_edge(u, v, w))
            elif len(item) == 4:
                u, v, w, d = item
                added.append(self.add_edge(u, v, w, d))
            else:
                raise InvalidConstructionError(
                    f"expected (u, v, w) or (u, v, w, data), got {item!r}"
                )
        return added

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def vertex_count(self) -> int:
        return len(self._vertices)

    def edge_count(self) -> int:
        """Number of inserted edges (mirrored entries are not counted)."""
        return len(self._edges)

    def has_vertex(self, vertex_id: int) -> bool:
        return vertex_id in self._vertices

    def get_vertex(self, vertex_id: int) -> Vertex:
        """Return the stored vertex; raises VertexNotFoundError if absent."""
        try:
            return self._vertices[vertex_id]
        except KeyError:
            raise VertexNotFoundError(vertex_id) from None

    def vertex_ids(self) -> List[int]:
        return sorted(self._vertices)

    def vertices(self) -> List[Vertex]:
        return [self._vertices[i] for i in sorted(self._vertices)]

    def edges(self) -> List[Edge]:
        """Copy of the edge sequence in insertion order."""
        return list(self._edges)

    def neighbors(self, vertex_id: int) -> List[Edge]:
        """Copy of the adjacency list of *vertex_id*."""
        return list(self.get_vertex(vertex_id).edges)
