"""Strongly connected components (Kosaraju) and their topological order."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator, Sequence

WeightedGraph = Sequence[Sequence[tuple[int, int]]]


def _postorder(root: int, graph: WeightedGraph, visited: list[bool]) -> Iterator[int]:
    """Yield the vertices reached from ``root`` in depth-first finishing order."""
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
            yield node


def strongly_connected_components(n: int, graph: WeightedGraph) -> list[list[int]]:
    """Return the strongly connected components of a directed graph.

    Components come out in topological order of the condensation; each
    lists its vertices in depth-first finishing order on the reversed graph.
    """
    visited = [False] * n
    finished: list[int] = []
    for node in range(n):
        if not visited[node]:
            finished.extend(_postorder(node, graph, visited))

    reversed_graph: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for source, edges in enumerate(graph):
        for target, weight in edges:
            reversed_graph[target].append((source, weight))

    visited = [False] * n
    return [
        list(_postorder(node, reversed_graph, visited))
        for node in reversed(finished)
        if not visited[node]
    ]


def topological_order(n: int, graph: Sequence[Sequence[int]]) -> list[int]:
    """Kahn's topological sort of an unweighted graph.

    Vertices on or behind a cycle are left out.
    """
    in_degree = [0] * n
    for edges in graph:
        for target in edges:
            in_degree[target] += 1

    queue = deque(node for node in range(n) if in_degree[node] == 0)
    order = []
    while queue:
        node = queue.popleft()
        order.append(node)
        for target in graph[node]:
            in_degree[target] -= 1
            if in_degree[target] == 0:
                queue.append(target)
    return order


def condensation_order(
    n: int, graph: WeightedGraph, components: Sequence[Sequence[int]]
) -> list[int]:
    """Topologically sort the components, given by their index in ``components``."""
    component_of = [0] * n
    for index, members in enumerate(components):
        for node in members:
            component_of[node] = index

    links: list[dict[int, None]] = [{} for _ in components]
    for source, edges in enumerate(graph):
        for target, _ in edges:
            if component_of[source] != component_of[target]:
                links[component_of[source]][component_of[target]] = None

    return topological_order(len(components), [list(targets) for targets in links])