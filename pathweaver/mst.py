"""Minimum spanning tree weight by Kruskal's algorithm."""

from __future__ import annotations

from collections.abc import Sequence

WeightedGraph = Sequence[Sequence[tuple[int, int]]]


class DisjointSet:
    """Union-find over ``0..n-1`` with union by rank and path compression."""

    def __init__(self, n: int) -> None:
        self._parent = list(range(n))
        self._rank = [0] * n

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            following = self._parent[node]
            self._parent[node] = root
            node = following
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if already joined."""
        root_u = self.find(u)
        root_v = self.find(v)
        if root_u == root_v:
            return False
        if self._rank[root_u] < self._rank[root_v]:
            self._parent[root_u] = root_v
        elif self._rank[root_u] > self._rank[root_v]:
            self._parent[root_v] = root_u
        else:
            self._parent[root_v] = root_u
            self._rank[root_u] += 1
        return True


def mst_weight(n: int, graph: WeightedGraph) -> int:
    """Total weight of a minimum spanning forest, edges taken as undirected."""
    edges = sorted(
        (weight, u, v) for u, adjacent in enumerate(graph) for v, weight in adjacent
    )
    components = DisjointSet(n)
    return sum(weight for weight, u, v in edges if components.union(u, v))