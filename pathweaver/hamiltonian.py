"""Hamiltonian cycles in undirected graphs given as adjacency matrices."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

Matrix = Sequence[Sequence[int]]


def adjacency_matrix(n: int, edges: Iterable[tuple[int, int]]) -> list[list[bool]]:
    """Build a symmetric ``n`` by ``n`` matrix from undirected edges."""
    roads = [[False] * n for _ in range(n)]
    for u, v in edges:
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
        roads[u][v] = roads[v][u] = True
    return roads


def hamiltonian_cycle_backtracking(roads: Matrix) -> list[int] | None:
    """Find a Hamiltonian cycle from vertex 0 by backtracking.

    Returns the closed cycle, starting and ending at 0, or None if there is none.
    Candidates are tried in increasing vertex order.
    """
    n = len(roads)
    if n == 0:
        raise ValueError("graph has no vertices")

    path = [0]
    used = {0}

    def extend() -> bool:
        if len(path) == n:
            return bool(roads[path[-1]][0])
        for candidate in range(1, n):
            if roads[path[-1]][candidate] and candidate not in used:
                path.append(candidate)
                used.add(candidate)
                if extend():
                    return True
                path.pop()
                used.discard(candidate)
        return False

    return path + [0] if extend() else None


def hamiltonian_cycle_bitmask(roads: Matrix) -> list[int] | None:
    """Find a Hamiltonian cycle by dynamic programming over vertex subsets.

    Returns the closed cycle, starting and ending at 0, or None if there is none.
    A single vertex never forms a cycle here.
    """
    n = len(roads)
    if n == 0:
        raise ValueError("graph has no vertices")

    # into[j]: vertices k != j with an edge k -> j
    into = [
        sum(1 << k for k in range(n) if k != j and roads[k][j]) for j in range(n)
    ]
    full = (1 << n) - 1
    # reach[mask]: vertices at which a path covering exactly ``mask`` can end
    reach = [0] * (1 << n)
    for i in range(n):
        reach[1 << i] = 1 << i

    for mask in range(1, 1 << n):
        ends = reach[mask]
        remaining = mask
        while remaining:
            low = remaining & -remaining
            remaining ^= low
            if reach[mask ^ low] & into[low.bit_length() - 1]:
                ends |= low
        reach[mask] = ends

    end = next(
        (i for i in range(1, n) if (reach[full] >> i) & 1 and roads[i][0]), None
    )
    if end is None:
        return None

    path = []
    node: int | None = end
    mask = full
    while node is not None:
        path.append(node)
        mask ^= 1 << node
        candidates = reach[mask] & into[node]
        node = candidates.bit_length() - 1 if candidates else None

    path.reverse()
    start = path.index(0)
    return path[start:] + path[:start] + [0]