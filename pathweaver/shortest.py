"""Single-source shortest distances and paths in weighted directed graphs."""

from __future__ import annotations

import heapq
import math
from collections.abc import Sequence

WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def _check_node(n: int, node: int) -> None:
    if not 0 <= node < n:
        raise ValueError(f"vertex {node} is outside 0..{n - 1}")


def _dijkstra(
    n: int, graph: WeightedGraph, source: int
) -> tuple[list[float], list[int]]:
    _check_node(n, source)
    distance: list[float] = [math.inf] * n
    parent = list(range(n))
    distance[source] = 0
    queue = [(0, source)]
    while queue:
        dist, node = heapq.heappop(queue)
        if dist > distance[node]:
            continue
        for target, weight in graph[node]:
            candidate = dist + weight
            if candidate < distance[target]:
                distance[target] = candidate
                parent[target] = node
                heapq.heappush(queue, (candidate, target))
    return distance, parent


def dijkstra_distances(n: int, graph: WeightedGraph, source: int) -> list[float]:
    """Shortest distances from ``source``; unreachable vertices get ``math.inf``."""
    return _dijkstra(n, graph, source)[0]


def dag_distances(n: int, graph: WeightedGraph, source: int) -> list[float]:
    """Shortest distances from ``source`` in a DAG, relaxing in topological order.

    Negative weights are allowed; unreachable vertices get ``math.inf``.
    """
    _check_node(n, source)
    visited = [False] * n
    finished: list[int] = []
    for root in range(n):
        if visited[root]:
            continue
        visited[root] = True
        stack = [(root, iter(graph[root]))]
        while stack:
            node, edges = stack[-1]
            for target, _ in edges:
                if not visited[target]:
                    visited[target] = True
                    stack.append((target, iter(graph[target])))
                    break
            else:
                stack.pop()
                finished.append(node)

    distance: list[float] = [math.inf] * n
    distance[source] = 0
    for node in reversed(finished):
        for target, weight in graph[node]:
            distance[target] = min(distance[target], distance[node] + weight)
    return distance


def dijkstra_path(
    n: int, graph: WeightedGraph, source: int, target: int
) -> list[int] | None:
    """A shortest path from ``source`` to ``target``, or None if unreachable."""
    _check_node(n, target)
    distance, parent = _dijkstra(n, graph, source)
    if distance[target] == math.inf:
        return None
    path = []
    node = target
    while parent[node] != node:
        path.append(node)
        node = parent[node]
    path.append(source)
    path.reverse()
    return path