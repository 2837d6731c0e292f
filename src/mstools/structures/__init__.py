from .union_find import DisjointSet
from .heap import EdgeHeap

__all__ = [
    "DisjointSet",
    "EdgeHeap",
]
