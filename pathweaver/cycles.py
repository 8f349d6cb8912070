"""Cycle detection in directed graphs given as weighted adjacency lists."""

from __future__ import annotations

from collections import deque
from collections.abc import Sequence

WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def has_cycle_kahn(n: int, graph: WeightedGraph) -> bool:
    """Return True if the directed graph has a cycle, using Kahn's algorithm.

    ``graph[u]`` holds ``(v, weight)`` pairs for the edges leaving ``u``.
    """
    in_degree = [0] * n
    for edges in graph:
        for target, _ in edges:
            in_degree[target] += 1

    queue = deque(node for node in range(n) if in_degree[node] == 0)
    removed = 0
    while queue:
        node = queue.popleft()
        removed += 1
        for target, _ in graph[node]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)

    return removed < n


def has_cycle_dfs(n: int, graph: WeightedGraph) -> bool:
    """Return True if the directed graph has a cycle, using depth-first search.

    A cycle exists when an edge leads back to a vertex on the current path.
    """
    visited = [False] * n
    on_path = [False] * n

    for root in range(n):
        if visited[root]:
            continue
        visited[root] = on_path[root] = True
        nodes = [root]
        iterators = [iter(graph[root])]
        while iterators:
            for target, _ in iterators[-1]:
                if not visited[target]:
                    visited[target] = on_path[target] = True
                    nodes.append(target)
                    iterators.append(iter(graph[target]))
                    break
                if on_path[target]:
                    return True
            else:
                iterators.pop()
                on_path[nodes.pop()] = False

    return False