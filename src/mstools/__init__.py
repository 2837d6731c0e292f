"""
mstools: minimum spanning trees and forests (Kruskal, Prim) over a small
weighted graph model, with connectivity helpers and NetworkX interop.
"""

import logging

from .errors import (
    MSTError,
    InvalidOperationError,
    VertexNotFoundError,
    InvalidConstructionError,
)
from .graph.model import Edge, Graph, Vertex, new_edge, new_vertex
from .structures.union_find import DisjointSet
from .structures.heap import EdgeHeap
from .mst.result import SpanningTree
from .mst.kruskal import kruskal
from .mst.prim import prim, prim_forest
from .utils.connectivity import is_connected, connected_components, reachable_from
from .io.convert import to_networkx, from_networkx

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Errors
    "MSTError",
    "InvalidOperationError",
    "VertexNotFoundError",
    "InvalidConstructionError",
    # Graph model
    "Edge",
    "Graph",
    "Vertex",
    "new_edge",
    "new_vertex",
    # Structures
    "DisjointSet",
    "EdgeHeap",
    # Algorithms
    "SpanningTree",
    "kruskal",
    "prim",
    "prim_forest",
    # Connectivity
    "is_connected",
    "connected_components",
    "reachable_from",
    # NetworkX
    "to_networkx",
    "from_networkx",
]
