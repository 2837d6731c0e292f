from __future__ import annotations

from typing import Dict, Hashable, Iterable


class DisjointSet:
    """
    Union-find over hashable elements with path compression and union by rank.

    Tie rule for union(a, b) with equal ranks: the root of b is attached
    under the root of a, and a's root gains one rank.
    """

    def __init__(self, elements: Iterable[Hashable] = ()):
        self._parent: Dict[Hashable, Hashable] = {}
        self._rank: Dict[Hashable, int] = {}
        self._sets = 0
        for x in elements:
            self.make_set(x)

    def __len__(self) -> int:
        return len(self._parent)

    def __contains__(self, x: object) -> bool:
        return x in self._parent

    @property
    def set_count(self) -> int:
        """Number of disjoint sets currently held."""
        return self._sets

    def make_set(self, x: Hashable) -> None:
        if x in self._parent:
            return
        self._parent[x] = x
        self._rank[x] = 0
        self._sets += 1

    def find(self, x: Hashable) -> Hashable:
        """Root of x's set.  Every node on the path is re-pointed at the root."""
        parent = self._parent
        root = x
        while parent[root] != root:
            root = parent[root]
        while parent[x] != root:
            parent[x], x = root, parent[x]
        return root

    def union(self, a: Hashable, b: Hashable) -> bool:
        """Merge the sets of a and b.  Returns False if they already share one."""
        ra, rb = self.find(a), self.find(b)
        if ra == rb:
            return False
        rank = self._rank
        if rank[ra] < rank[rb]:
            self._parent[ra] = rb
        elif rank[ra] > rank[rb]:
            self._parent[rb] = ra
        else:
            self._parent[rb] = ra
            rank[ra] += 1
        self._sets -= 1
        return True

    def connected(self, a: Hashable, b: Hashable) -> bool:
        return self.find(a) == self.find(b)
