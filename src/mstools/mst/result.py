from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Set, Tuple

from mstools.graph.model import Edge, Graph


@dataclass(frozen=True)
class SpanningTree:
    """
    Output of Kruskal or Prim.

    edges:        accepted edges, in the order the algorithm produced them
    total_weight: sum of their weights

    A forest or a partial tree is a valid result; use is_spanning() to tell
    whether every vertex of the graph was covered.
    """

    edges: Tuple[Edge, ...]
    total_weight: int

    def __len__(self) -> int:
        return len(self.edges)

    def __iter__(self) -> Iterator[Edge]:
        return iter(self.edges)

    def vertex_ids(self) -> Set[int]:
        out: Set[int] = set()
        for e in self.edges:
            out.add(e.source)
            out.add(e.target)
        return out

    def is_spanning(self, graph: Graph) -> bool:
        """True iff the edges form one tree over all vertices of *graph*."""
        return len(self.edges) == max(graph.vertex_count() - 1, 0)

    def as_tuples(self) -> List[Tuple[int, int, int]]:
        return [(e.source, e.target, e.weight) for e in self.edges]
