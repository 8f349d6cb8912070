# pathweaver

Graph algorithms and route-planning heuristics, usable as a library or from
the `pathweaver` command.

## What it covers

- **Cycle detection** in directed graphs, by in-degree elimination
  (`pathweaver.cycles.has_cycle_kahn`) or depth-first search
  (`pathweaver.cycles.has_cycle_dfs`).
- **Hamiltonian cycles** through vertex 0 in undirected graphs, by
  backtracking (`pathweaver.hamiltonian.hamiltonian_cycle_backtracking`) or by
  dynamic programming over vertex subsets, practical up to about twenty
  vertices (`pathweaver.hamiltonian.hamiltonian_cycle_bitmask`). Both take an
  adjacency matrix, which `pathweaver.hamiltonian.adjacency_matrix` builds
  from a list of edges, and return the closed cycle `[0, ..., 0]` or `None`.
- **Minimum spanning tree weight** with Kruskal's algorithm
  (`pathweaver.mst.mst_weight`, edges taken as undirected; on a disconnected
  graph it gives the weight of the spanning forest), backed by
  `pathweaver.mst.DisjointSet` with `find` and `union`.
- **Strongly connected components** with Kosaraju's algorithm
  (`pathweaver.scc.strongly_connected_components`), a topological order of an
  unweighted graph (`pathweaver.scc.topological_order`, which leaves out
  vertices on or behind a cycle) and of the component graph
  (`pathweaver.scc.condensation_order`).
- **Shortest paths**: Dijkstra distances and paths
  (`pathweaver.shortest.dijkstra_distances`,
  `pathweaver.shortest.dijkstra_path`) and distances in a directed acyclic
  graph relaxed in topological order, negative weights allowed
  (`pathweaver.shortest.dag_distances`). Unreachable vertices get
  `math.inf`; `dijkstra_path` returns `None` for them.
- **Gold-collecting tours**: given sites with coordinates and gold, a travel
  speed and two time thresholds `t1` and `t2`, plan a visiting order.
  - `pathweaver.tour` holds the `Site` and `Problem` data classes,
    `parse_problem`, two greedy constructions and `tour_score`.
    `nearest_start_tour` starts at the site nearest the origin;
    `weighted_start_tour` starts at the site with the least distance per unit
    of gold. Each step then favours gold per distance until `t1`, a blend of
    gold and nearness until `t2`, and plain nearness after that. Distances
    here are measured on coordinates truncated to integers. `tour_score`
    gives the share of all gold, scaled to 200, gathered before `t2`, with
    the clock starting at the distance from the origin.
  - `pathweaver.genetic` holds a time-limited genetic search (`evolve`) with
    tournament selection, order crossover, swap mutation and 2-opt
    improvement, and its building blocks (`evaluate`, `random_tour`,
    `greedy_tour`, `tournament_selection`, `order_crossover`, `mutate`,
    `two_opt`). Its `evaluate` starts the clock at the distance from the
    first site to site 0 and counts a site's gold only if it is reached
    within `t2`.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Graphs as data

Weighted graphs are adjacency lists: `graph[u]` holds `(v, w)` pairs, one for
each directed edge from `u` to `v` with weight `w`. Vertices are numbered from
`0` to `n - 1`.

```python
from pathweaver.cycles import has_cycle_kahn
from pathweaver.mst import mst_weight
from pathweaver.scc import strongly_connected_components
from pathweaver.shortest import dijkstra_distances, dijkstra_path

graph = [
    [(1, 4), (2, 1)],
    [(3, 1)],
    [(1, 2), (3, 5)],
    [],
]

has_cycle_kahn(4, graph)                   # False
mst_weight(4, graph)                       # 4
strongly_connected_components(4, graph)    # one component per vertex
dijkstra_distances(4, graph, 0)            # [0, 3, 1, 4]
dijkstra_path(4, graph, 0, 3)              # [0, 2, 1, 3]
```

Hamiltonian-cycle search works on an undirected adjacency matrix:

```python
from pathweaver.hamiltonian import adjacency_matrix, hamiltonian_cycle_bitmask

roads = adjacency_matrix(4, [(0, 1), (1, 2), (2, 3), (3, 0)])
hamiltonian_cycle_bitmask(roads)   # a cycle such as [0, 1, 2, 3, 0]
```

## Tours

`pathweaver.tour.parse_problem` reads the number of sites, then `x y gold` for
each site, then the speed and the two time thresholds, all separated by
whitespace.

```python
import random

from pathweaver.genetic import evolve
from pathweaver.tour import parse_problem, tour_score, weighted_start_tour

problem = parse_problem("""
3
1 1 10
2 2 5
5 5 20
1.0 10 20
""")

tour = weighted_start_tour(problem)
tour_score(problem, tour)

best = evolve(problem, random.Random(7), 1.0, 150)
```

## Command line

The `pathweaver` command runs one subcommand on an input file, or on standard
input when the file is `-` or left out:

```
pathweaver --help
```

| Subcommand    | Input                                           | Output |
|---------------|-------------------------------------------------|--------|
| `cycle`       | `n m`, then `m` lines `u v w`                   | `Cycle Exists` or `Cycle does not exist`; `--method kahn` (default) or `dfs` |
| `mst`         | as `cycle`                                      | `Weight of MST: <w>` |
| `scc`         | as `cycle`                                      | one `SCC<i>: ...` line per component, then `Topological sort of SCCs: ...` |
| `distance`    | as `cycle`, then `source target`                | the distance, or `There is no valid path from <source> to <target>`; `--dag` relaxes in topological order |
| `path`        | as `distance`                                   | the vertices of a shortest path, or the same no-path message |
| `hamiltonian` | `n m`, then `m` lines `u v` (undirected)        | `1` and the cycle, or `-1`; `--method backtracking` (default) or `bitmask` |
| `tour`        | as for `parse_problem`                          | the tour length, then the tour; `--strategy genetic` (default), `nearest` or `weighted`, with `--time-limit`, `--population` and `--seed` for the genetic search |

Malformed input is reported on standard error with exit status 1.

## What it does not do

Graphs and problems are read only as whitespace-separated integers or numbers
in the forms above; there is no other file format, no drawing of graphs or
tours, and nothing is stored between runs.