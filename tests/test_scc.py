import random

import pytest

from pathweaver.scc import (
    condensation_order,
    strongly_connected_components,
    topological_order,
)


def _random_digraph(rng, n, m):
    graph = [[] for _ in range(n)]
    for _ in range(m):
        graph[rng.randrange(n)].append((rng.randrange(n), rng.randint(1, 9)))
    return graph


def _reachable(graph, start):
    seen = {start}
    todo = [start]
    while todo:
        node = todo.pop()
        for target, _ in graph[node]:
            if target not in seen:
                seen.add(target)
                todo.append(target)
    return seen


def _cross_edges(graph, components):
    component_of = {v: i for i, comp in enumerate(components) for v in comp}
    for u, edges in enumerate(graph):
        for v, _ in edges:
            if component_of[u] != component_of[v]:
                yield component_of[u], component_of[v]


def test_example_components():
    graph = [[(1, 1)], [(2, 1)], [(0, 1)], [(4, 1)], []]
    components = strongly_connected_components(5, graph)
    assert {frozenset(c) for c in components} == {
        frozenset({0, 1, 2}),
        frozenset({3}),
        frozenset({4}),
    }


@pytest.mark.parametrize("seed", range(15))
def test_components_partition_vertices(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    graph = _random_digraph(rng, n, rng.randint(0, 25))
    components = strongly_connected_components(n, graph)
    flat = [v for comp in components for v in comp]
    assert sorted(flat) == list(range(n))


@pytest.mark.parametrize("seed", range(15))
def test_components_match_mutual_reachability(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 10)
    graph = _random_digraph(rng, n, rng.randint(0, 20))
    components = strongly_connected_components(n, graph)
    component_of = {v: i for i, comp in enumerate(components) for v in comp}
    reach = [_reachable(graph, v) for v in range(n)]
    for u in range(n):
        for v in range(n):
            mutual = v in reach[u] and u in reach[v]
            assert mutual == (component_of[u] == component_of[v])


@pytest.mark.parametrize("seed", range(15))
def test_components_come_in_topological_order(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    graph = _random_digraph(rng, n, rng.randint(0, 25))
    components = strongly_connected_components(n, graph)
    for a, b in _cross_edges(graph, components):
        assert a < b


@pytest.mark.parametrize("seed", range(15))
def test_condensation_order_is_valid(seed):
    rng = random.Random(seed)
    n = rng.randint(1, 12)
    graph = _random_digraph(rng, n, rng.randint(0, 25))
    components = strongly_connected_components(n, graph)
    order = condensation_order(n, graph, components)
    assert sorted(order) == list(range(len(components)))
    position = {c: i for i, c in enumerate(order)}
    for a, b in _cross_edges(graph, components):
        assert position[a] < position[b]


def test_topological_order_of_dag():
    graph = [[2], [0, 2], [3], []]
    order = topological_order(4, graph)
    assert sorted(order) == [0, 1, 2, 3]
    position = {v: i for i, v in enumerate(order)}
    for u, targets in enumerate(graph):
        for v in targets:
            assert position[u] < position[v]


def test_topological_order_leaves_out_cycle():
    graph = [[1], [2], [1], []]
    order = topological_order(4, graph)
    assert set(order) == {0, 3}