"""Command-line front end for the graph and tour algorithms."""

from __future__ import annotations

import argparse
import math
import random
import sys
from collections.abc import Callable, Iterator, Sequence

from pathweaver.cycles import has_cycle_dfs, has_cycle_kahn
from pathweaver.genetic import evolve
from pathweaver.hamiltonian import (
    adjacency_matrix,
    hamiltonian_cycle_backtracking,
    hamiltonian_cycle_bitmask,
)
from pathweaver.mst import mst_weight
from pathweaver.scc import condensation_order, strongly_connected_components
from pathweaver.shortest import dag_distances, dijkstra_distances, dijkstra_path
from pathweaver.tour import parse_problem, nearest_start_tour, weighted_start_tour

Graph = list[list[tuple[int, int]]]


def _integers(text: str) -> Iterator[int]:
    for token in text.split():
        try:
            yield int(token)
        except ValueError:
            raise ValueError(f"not an integer: {token!r}") from None


def _header(numbers: list[int]) -> tuple[int, int]:
    if len(numbers) < 2:
        raise ValueError("input must start with the vertex and edge counts")
    n, m = numbers[0], numbers[1]
    if n < 0 or m < 0:
        raise ValueError(f"counts must not be negative, got {n} and {m}")
    return n, m


def parse_weighted_graph(text: str) -> tuple[int, Graph, list[int]]:
    """Read ``n m`` and ``m`` lines of ``u v w`` describing directed edges.

    Returns the vertex count, the adjacency lists of ``(v, w)`` pairs and
    any integers that follow the edges.
    """
    numbers = list(_integers(text))
    n, m = _header(numbers)
    body = numbers[2:]
    if len(body) < 3 * m:
        raise ValueError(f"expected {m} edges of three integers each")
    graph: Graph = [[] for _ in range(n)]
    for index in range(m):
        u, v, w = body[3 * index : 3 * index + 3]
        if not (0 <= u < n and 0 <= v < n):
            raise ValueError(f"edge ({u}, {v}) has a vertex outside 0..{n - 1}")
        graph[u].append((v, w))
    return n, graph, body[3 * m :]


def _parse_undirected(text: str) -> list[list[bool]]:
    numbers = list(_integers(text))
    n, m = _header(numbers)
    body = numbers[2:]
    if len(body) < 2 * m:
        raise ValueError(f"expected {m} edges of two integers each")
    return adjacency_matrix(n, zip(body[0 : 2 * m : 2], body[1 : 2 * m : 2]))


def _endpoints(trailing: list[int]) -> tuple[int, int]:
    if len(trailing) < 2:
        raise ValueError("input must end with the source and target vertices")
    return trailing[0], trailing[1]


def _cycle(args: argparse.Namespace, text: str) -> list[str]:
    n, graph, _ = parse_weighted_graph(text)
    check = has_cycle_dfs if args.method == "dfs" else has_cycle_kahn
    return ["Cycle Exists" if check(n, graph) else "Cycle does not exist"]


def _mst(args: argparse.Namespace, text: str) -> list[str]:
    n, graph, _ = parse_weighted_graph(text)
    return [f"Weight of MST: {mst_weight(n, graph)}"]


def _scc(args: argparse.Namespace, text: str) -> list[str]:
    n, graph, _ = parse_weighted_graph(text)
    components = strongly_connected_components(n, graph)
    order = condensation_order(n, graph, components)
    lines = [
        f"SCC{index}: " + " ".join(map(str, members))
        for index, members in enumerate(components)
    ]
    lines.append("")
    lines.append("Topological sort of SCCs: " + " ".join(map(str, order)))
    return lines


def _unreachable(source: int, target: int) -> str:
    return f"There is no valid path from {source} to {target}"


def _distance(args: argparse.Namespace, text: str) -> list[str]:
    n, graph, trailing = parse_weighted_graph(text)
    source, target = _endpoints(trailing)
    if not 0 <= target < n:
        raise ValueError(f"vertex {target} is outside 0..{n - 1}")
    solve = dag_distances if args.dag else dijkstra_distances
    distance = solve(n, graph, source)[target]
    if distance == math.inf:
        return [_unreachable(source, target)]
    return [str(distance)]


def _path(args: argparse.Namespace, text: str) -> list[str]:
    n, graph, trailing = parse_weighted_graph(text)
    source, target = _endpoints(trailing)
    path = dijkstra_path(n, graph, source, target)
    if path is None:
        return [_unreachable(source, target)]
    return [" ".join(map(str, path))]


def _hamiltonian(args: argparse.Namespace, text: str) -> list[str]:
    roads = _parse_undirected(text)
    solve = (
        hamiltonian_cycle_bitmask
        if args.method == "bitmask"
        else hamiltonian_cycle_backtracking
    )
    cycle = solve(roads)
    if cycle is None:
        return ["-1"]
    return ["1", " ".join(map(str, cycle))]


def _tour(args: argparse.Namespace, text: str) -> list[str]:
    problem = parse_problem(text)
    if args.strategy == "nearest":
        tour = nearest_start_tour(problem)
    elif args.strategy == "weighted":
        tour = weighted_start_tour(problem)
    else:
        tour = evolve(
            problem, random.Random(args.seed), args.time_limit, args.population
        )
    return [str(len(tour)), " ".join(map(str, tour))]


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pathweaver", description="Graph algorithms and tour search."
    )
    commands = parser.add_subparsers(dest="command", required=True)

    def command(name: str, help_text: str, handler: Callable) -> argparse.ArgumentParser:
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument(
            "input", nargs="?", default="-", help="input file, '-' for stdin"
        )
        sub.set_defaults(handler=handler)
        return sub

    sub = command("cycle", "detect a cycle in a directed graph", _cycle)
    sub.add_argument("--method", choices=("kahn", "dfs"), default="kahn")
    command("mst", "weight of a minimum spanning tree", _mst)
    command("scc", "strongly connected components and their order", _scc)
    sub = command("distance", "shortest distance between two vertices", _distance)
    sub.add_argument(
        "--dag", action="store_true", help="relax edges in topological order"
    )
    command("path", "shortest path between two vertices", _path)
    sub = command("hamiltonian", "Hamiltonian cycle through vertex 0", _hamiltonian)
    sub.add_argument(
        "--method", choices=("backtracking", "bitmask"), default="backtracking"
    )
    sub = command("tour", "gold-collecting tour", _tour)
    sub.add_argument(
        "--strategy", choices=("genetic", "nearest", "weighted"), default="genetic"
    )
    sub.add_argument("--time-limit", type=float, default=1.0)
    sub.add_argument("--population", type=int, default=150)
    sub.add_argument("--seed", type=int, default=None)
    return parser


def _read(path: str) -> str:
    if path == "-":
        return sys.stdin.read()
    with open(path, encoding="utf-8") as handle:
        return handle.read()


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command; return the process exit status."""
    args = _build_parser().parse_args(argv)
    try:
        lines = args.handler(args, _read(args.input))
    except (ValueError, OSError) as error:
        print(f"pathweaver: error: {error}", file=sys.stderr)
        return 1
    for line in lines:
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())