"""Gold-collecting tours built greedily from a start site, and their scores."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass
from itertools import pairwise

_FAR = 1e18
_TOUCHING = 1e-6


@dataclass(frozen=True)
class Site:
    """A location on the plane holding some gold."""

    x: float
    y: float
    gold: float


@dataclass(frozen=True)
class Problem:
    """Sites to visit, the travel speed and the two time thresholds."""

    sites: tuple[Site, ...]
    speed: float
    t1: float
    t2: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "sites", tuple(self.sites))
        if not self.sites:
            raise ValueError("a problem needs at least one site")
        if self.speed <= 0:
            raise ValueError(f"speed must be positive, got {self.speed}")

    def __len__(self) -> int:
        return len(self.sites)

    @property
    def total_gold(self) -> float:
        """Sum of the gold over all sites."""
        return sum(site.gold for site in self.sites)


def parse_problem(text: str) -> Problem:
    """Read ``n``, then ``n`` lines of ``x y gold``, then ``speed t1 t2``."""
    tokens = iter(text.split())

    def number(what: str) -> float:
        try:
            token = next(tokens)
        except StopIteration:
            raise ValueError(f"input ends before {what}") from None
        try:
            return float(token)
        except ValueError:
            raise ValueError(f"{what} is not a number: {token!r}") from None

    count = number("the number of sites")
    if not count.is_integer() or count < 0:
        raise ValueError(f"the number of sites must be a whole number, got {count}")
    sites = [
        Site(number(f"x of site {i}"), number(f"y of site {i}"), number(f"gold of site {i}"))
        for i in range(int(count))
    ]
    speed = number("the speed")
    t1 = number("t1")
    t2 = number("t2")
    return Problem(tuple(sites), speed, t1, t2)


def _distance(a: Site, b: Site) -> float:
    # Coordinates are truncated to integers before measuring.
    return math.hypot(int(a.x) - int(b.x), int(a.y) - int(b.y))


def _from_origin(site: Site) -> float:
    return math.hypot(int(site.x), int(site.y))


def _ratio(distance: float, gold: float) -> float:
    if gold:
        return distance / gold
    return math.inf if distance else math.nan


def _attraction(gold: float, dist: float, elapsed: float, problem: Problem) -> float:
    if elapsed <= problem.t1:
        return gold / dist
    if elapsed <= problem.t2:
        return (10.0 / dist + gold / dist) / 11
    return 1 / dist


def _pick_start(problem: Problem, keys: Sequence[float]) -> tuple[int, float]:
    best, best_key = 0, _FAR
    for index, key in enumerate(keys):
        if key < best_key:
            best, best_key = index, key
    return best, best_key


def _greedy_from(problem: Problem, start: int, elapsed: float) -> list[int]:
    sites = problem.sites
    tour = [start]
    remaining = [i for i in range(len(sites)) if i != start]
    current = start
    while remaining:

        def score(index: int) -> float:
            dist = _distance(sites[current], sites[index]) or _TOUCHING
            return _attraction(sites[index].gold, dist, elapsed, problem)

        chosen = max(remaining, key=score)
        elapsed += _distance(sites[current], sites[chosen]) / problem.speed
        remaining.remove(chosen)
        tour.append(chosen)
        current = chosen
    return tour


def nearest_start_tour(problem: Problem) -> list[int]:
    """Greedy tour starting at the site nearest to the origin."""
    start, distance = _pick_start(problem, [_from_origin(s) for s in problem.sites])
    return _greedy_from(problem, start, distance / problem.speed)


def weighted_start_tour(problem: Problem) -> list[int]:
    """Greedy tour starting at the site with the least distance per unit of gold."""
    keys = [_ratio(_from_origin(s), s.gold) for s in problem.sites]
    start, key = _pick_start(problem, keys)
    return _greedy_from(problem, start, key / problem.speed)


def tour_score(problem: Problem, tour: Sequence[int]) -> float:
    """Share of all gold, scaled to 200, gathered before time ``t2`` runs out."""
    if not tour:
        raise ValueError("tour is empty")
    total = problem.total_gold
    if total == 0:
        raise ValueError("there is no gold to collect")
    sites = problem.sites
    gold = sites[tour[0]].gold
    elapsed = _from_origin(sites[tour[0]]) / problem.speed
    for previous, following in pairwise(tour):
        if elapsed > problem.t2:
            break
        gold += sites[following].gold
        elapsed += _distance(sites[previous], sites[following]) / problem.speed
    return gold * 200.0 / total