from .result import SpanningTree
from .kruskal import kruskal
from .prim import prim, prim_forest

__all__ = [
    "SpanningTree",
    "kruskal",
    "prim",
    "prim_forest",
]
