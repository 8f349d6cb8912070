"""Genetic search for gold-collecting tours with 2-opt refinement."""

from __future__ import annotations

import math
import random
import time
from collections.abc import Sequence
from itertools import pairwise

from pathweaver.tour import Problem

Population = Sequence[tuple[float, Sequence[int]]]

_FAR = 1e18


def _distance(problem: Problem, i: int, j: int) -> float:
    a, b = problem.sites[i], problem.sites[j]
    return math.hypot(a.x - b.x, a.y - b.y)


def evaluate(problem: Problem, tour: Sequence[int]) -> float:
    """Gold gathered within ``t2``, as a share of all gold scaled to 200.

    The clock starts with the distance from the first site to site 0.
    """
    if not tour:
        raise ValueError("tour is empty")
    total = problem.total_gold
    if total == 0:
        raise ValueError("there is no gold to collect")
    gold = problem.sites[tour[0]].gold
    elapsed = _distance(problem, tour[0], 0) / problem.speed
    for previous, following in pairwise(tour):
        if elapsed > problem.t2:
            break
        elapsed += _distance(problem, previous, following) / problem.speed
        if elapsed <= problem.t2:
            gold += problem.sites[following].gold
    return gold * 200.0 / total


def random_tour(problem: Problem, rng: random.Random) -> list[int]:
    """A uniformly shuffled visiting order."""
    tour = list(range(len(problem)))
    rng.shuffle(tour)
    return tour


def greedy_tour(problem: Problem, rng: random.Random) -> list[int]:
    """Nearest-neighbour tour from a random start."""
    current = rng.randrange(len(problem))
    tour = [current]
    remaining = [i for i in range(len(problem)) if i != current]
    while remaining:
        best, best_dist = None, _FAR
        for candidate in remaining:
            dist = _distance(problem, current, candidate)
            if dist < best_dist:
                best, best_dist = candidate, dist
        if best is None:
            break
        remaining.remove(best)
        tour.append(best)
        current = best
    return tour


def tournament_selection(
    population: Population, rng: random.Random, k: int = 3
) -> list[int]:
    """Best of ``k`` randomly drawn members (drawn with replacement)."""
    if not population:
        raise ValueError("population is empty")
    best: Sequence[int] = []
    best_score = -_FAR
    for _ in range(k):
        score, tour = population[rng.randrange(len(population))]
        if score > best_score:
            best_score, best = score, tour
    return list(best)


def order_crossover(
    parent1: Sequence[int], parent2: Sequence[int], rng: random.Random
) -> list[int]:
    """Keep a random slice of ``parent1`` and fill the rest in ``parent2``'s order."""
    n = len(parent1)
    left, right = sorted((rng.randrange(n), rng.randrange(n)))
    child: list[int | None] = [None] * n
    child[left : right + 1] = parent1[left : right + 1]
    kept = set(parent1[left : right + 1])
    free = (i for i, gene in enumerate(child) if gene is None)
    for gene in parent2:
        if gene not in kept:
            child[next(free)] = gene
    return [gene for gene in child if gene is not None]


def mutate(tour: list[int], rng: random.Random, rate: float = 0.2) -> None:
    """With probability ``rate``, swap two randomly chosen positions in place."""
    if rng.randrange(1000) / 1000.0 < rate:
        i = rng.randrange(len(tour))
        j = rng.randrange(len(tour))
        tour[i], tour[j] = tour[j], tour[i]


def two_opt(problem: Problem, tour: list[int]) -> None:
    """Reverse segments in place while that shortens the closed tour."""
    n = len(tour)
    improved = True
    while improved:
        improved = False
        for i in range(1, n - 1):
            for j in range(i + 1, n):
                after_j = tour[(j + 1) % n]
                before = _distance(problem, tour[i - 1], tour[i]) + _distance(
                    problem, tour[j], after_j
                )
                after = _distance(problem, tour[i - 1], tour[j]) + _distance(
                    problem, tour[i], after_j
                )
                if after < before:
                    tour[i : j + 1] = tour[i : j + 1][::-1]
                    improved = True


def evolve(
    problem: Problem,
    rng: random.Random,
    time_limit: float = 1.0,
    population_size: int = 150,
) -> list[int]:
    """Run the genetic search for ``time_limit`` seconds and return the best tour."""
    if population_size < 1:
        raise ValueError("population size must be at least 1")

    population: list[tuple[float, list[int]]] = []
    for _ in range(population_size):
        tour = greedy_tour(problem, rng)
        for _ in range(3):
            mutate(tour, rng, 1.0)
        population.append((evaluate(problem, tour), tour))

    mutation_rate = 0.2
    stagnation = 0
    best_score = population[0][0]
    started = time.perf_counter()
    while time.perf_counter() - started < time_limit:
        population.sort(reverse=True)
        offspring = [population[0]]
        while len(offspring) < population_size:
            parent1 = tournament_selection(population, rng)
            parent2 = tournament_selection(population, rng)
            child = order_crossover(parent1, parent2, rng)
            mutate(child, rng, mutation_rate)
            two_opt(problem, child)
            offspring.append((evaluate(problem, child), child))

        if abs(offspring[0][0] - best_score) < 1e-9:
            stagnation += 1
            if stagnation >= 50:
                mutation_rate = min(1.0, mutation_rate * 1.5)
        else:
            stagnation = 0
            best_score = offspring[0][0]
            mutation_rate = 0.2
        population = offspring

    return list(max(population)[1])