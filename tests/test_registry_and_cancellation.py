import pytest

from aima_search.algorithms.bfs import breadth_first_search
from aima_search.algorithms.depth_limited import depth_limited_search
from aima_search.algorithms.dfs import depth_first_search
from aima_search.algorithms.ids import iterative_deepening_search
from aima_search.algorithms.registry import STOCHASTIC, algorithm_registry
from aima_search.algorithms.ucs import uniform_cost_search
from aima_search.core.cancellation import CancellationToken
from aima_search.core.metrics import Outcome


def test_registry_names():
    algos = algorithm_registry(dls_limit=5, weight=2.0)
    assert list(algos) == [
        "BFS", "DFS", "DLS(l=5)", "IDS", "UCS", "Greedy", "A*", "WeightedA*(w=2.0)",
        "Hill-Climbing", "Simulated Annealing",
    ]
    assert STOCHASTIC <= set(algos)


def test_registry_fresh_per_call():
    first = algorithm_registry()
    first.clear()
    assert algorithm_registry()


@pytest.mark.parametrize("name", ["BFS", "DFS", "DLS(l=12)", "IDS", "UCS", "Greedy", "A*",
                                  "WeightedA*(w=1.5)", "Hill-Climbing"])
def test_registry_entries_solve_romania(romania, name):
    fn = algorithm_registry(dls_limit=12)[name]
    r = fn(romania)
    assert r.success
    assert r.final_state == "Bucharest"


@pytest.mark.parametrize("search", [breadth_first_search, depth_first_search, uniform_cost_search,
                                    iterative_deepening_search])
def test_cancel_before_start(line_factory, search):
    problem, token = line_factory()
    token.cancel()
    r = search(problem, cancel=token)
    assert r.outcome is Outcome.CANCELLED
    assert r.actions == []


@pytest.mark.parametrize("search", [breadth_first_search, depth_first_search, uniform_cost_search])
def test_cancel_during_search_finishes_current_expansion(line_factory, search):
    problem, token = line_factory(cancel_after=5)
    r = search(problem, cancel=token)
    assert r.is_cancelled
    assert r.nodes_expanded == 5


def test_cancel_stops_unbounded_ids(line_factory):
    problem, token = line_factory(cancel_after=50)
    r = iterative_deepening_search(problem, cancel=token)
    assert r.is_cancelled


def test_cancel_depth_limited(line_factory):
    problem, token = line_factory(cancel_after=3)
    r = depth_limited_search(problem, limit=100, cancel=token)
    assert r.is_cancelled
    assert r.nodes_expanded == 3
