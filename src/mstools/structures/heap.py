from __future__ import annotations

import heapq
from itertools import count
from typing import List, Tuple

from mstools.graph.model import Edge

_Entry = Tuple[int, int, int, int, Edge]


class EdgeHeap:
    """
    Min-heap of candidate edges.

    Entries are ordered by (weight, target id, insertion index, push order),
    which is a total order, so equal-weight edges pop reproducibly and
    Edge objects themselves are never compared.
    """

    def __init__(self):
        self._heap: List[_Entry] = []
        self._seq = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, edge: Edge) -> None:
        heapq.heappush(self._heap, (edge.weight, edge.target, edge.index, next(self._seq), edge))

    def pop(self) -> Edge:
        """Remove and return the minimum edge; IndexError if empty."""
        return heapq.heappop(self._heap)[-1]
