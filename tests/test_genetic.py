import math
import random

import pytest

from pathweaver.genetic import (
    evaluate,
    evolve,
    greedy_tour,
    mutate,
    order_crossover,
    random_tour,
    tournament_selection,
    two_opt,
)
from pathweaver.tour import Problem, Site


def make_problem(points, speed=1.0, t1=1e9, t2=1e9):
    return Problem(tuple(Site(x, y, g) for x, y, g in points), speed, t1, t2)


SCATTER = make_problem(
    [(5, 5, 3), (9, 1, 7), (1, 2, 4), (7, 8, 1), (3, 9, 6), (2, 6, 2), (8, 4, 5)]
)


def cyclic_length(problem, tour):
    sites = problem.sites
    return sum(
        math.hypot(sites[a].x - sites[b].x, sites[a].y - sites[b].y)
        for a, b in zip(tour, tour[1:] + tour[:1])
    )


def test_evaluate_full_collection():
    assert evaluate(SCATTER, list(range(7))) == pytest.approx(200.0)


def test_evaluate_clock_starts_from_site_zero():
    problem = make_problem([(0, 0, 10), (100, 0, 30)], t1=0, t2=5)
    assert evaluate(problem, [0, 1]) == pytest.approx(50.0)
    assert evaluate(problem, [1, 0]) == pytest.approx(150.0)


def test_evaluate_rejects_empty_and_goldless():
    with pytest.raises(ValueError):
        evaluate(SCATTER, [])
    with pytest.raises(ValueError):
        evaluate(make_problem([(0, 0, 0), (1, 1, 0)]), [0, 1])


@pytest.mark.parametrize("seed", range(5))
def test_random_and_greedy_tours_are_permutations(seed):
    rng = random.Random(seed)
    assert sorted(random_tour(SCATTER, rng)) == list(range(7))
    assert sorted(greedy_tour(SCATTER, rng)) == list(range(7))


@pytest.mark.parametrize("seed", range(5))
def test_greedy_steps_to_nearest_unvisited(seed):
    tour = greedy_tour(SCATTER, random.Random(seed))
    sites = SCATTER.sites

    def dist(a, b):
        return math.hypot(sites[a].x - sites[b].x, sites[a].y - sites[b].y)

    for position in range(1, len(tour)):
        current = tour[position - 1]
        rest = tour[position:]
        assert dist(current, tour[position]) == min(dist(current, r) for r in rest)


def test_tournament_with_single_member_returns_it():
    population = [(12.5, [2, 0, 1])]
    chosen = tournament_selection(population, random.Random(1), 3)
    assert chosen == [2, 0, 1]
    assert chosen is not population[0][1]


def test_tournament_with_many_draws_finds_best():
    population = [(1.0, [0, 1, 2]), (9.0, [2, 1, 0]), (4.0, [1, 0, 2])]
    assert tournament_selection(population, random.Random(3), 200) == [2, 1, 0]


def test_tournament_rejects_empty_population():
    with pytest.raises(ValueError):
        tournament_selection([], random.Random(0), 3)


@pytest.mark.parametrize("seed", range(10))
def test_crossover_yields_permutation(seed):
    rng = random.Random(seed)
    parent1 = random_tour(SCATTER, rng)
    parent2 = random_tour(SCATTER, rng)
    child = order_crossover(parent1, parent2, rng)
    assert sorted(child) == list(range(7))


def test_crossover_of_identical_parents_is_the_parent():
    parent = [3, 1, 4, 0, 6, 2, 5]
    assert order_crossover(parent, list(parent), random.Random(7)) == parent


def test_mutate_with_zero_rate_leaves_tour():
    tour = [0, 1, 2, 3, 4]
    mutate(tour, random.Random(0), 0.0)
    assert tour == [0, 1, 2, 3, 4]


@pytest.mark.parametrize("seed", range(5))
def test_mutate_with_full_rate_swaps_at_most_two(seed):
    original = [0, 1, 2, 3, 4, 5]
    tour = list(original)
    mutate(tour, random.Random(seed), 1.0)
    assert sorted(tour) == original
    assert sum(a != b for a, b in zip(tour, original)) in (0, 2)


def test_two_opt_uncrosses_square():
    problem = make_problem([(0, 0, 1), (1, 1, 1), (1, 0, 1), (0, 1, 1)])
    tour = [0, 1, 2, 3]
    two_opt(problem, tour)
    assert sorted(tour) == [0, 1, 2, 3]
    assert cyclic_length(problem, tour) == pytest.approx(4.0)


@pytest.mark.parametrize("seed", range(5))
def test_two_opt_never_lengthens(seed):
    tour = random_tour(SCATTER, random.Random(seed))
    before = cyclic_length(SCATTER, tour)
    two_opt(SCATTER, tour)
    assert sorted(tour) == list(range(7))
    assert cyclic_length(SCATTER, tour) <= before + 1e-9


def test_evolve_without_time_returns_permutation():
    best = evolve(SCATTER, random.Random(4), 0.0, 20)
    assert sorted(best) == list(range(7))


def test_evolve_short_run_gives_valid_scored_tour():
    problem = make_problem(
        [(5, 5, 3), (9, 1, 7), (1, 2, 4), (7, 8, 1), (3, 9, 6)], t1=5, t2=12
    )
    best = evolve(problem, random.Random(2), 0.05, 10)
    assert sorted(best) == list(range(5))
    assert 0 <= evaluate(problem, best) <= 200.0


def test_evolve_rejects_empty_population():
    with pytest.raises(ValueError):
        evolve(SCATTER, random.Random(0), 0.0, 0)