import math
import random

from aima_search.algorithms.hill_climbing import hill_climbing_search
from aima_search.algorithms.simulated_annealing import (
    ACCEPTED_MOVES, STEPS, Scheduler, probability_of_acceptance, simulated_annealing_search,
)
from aima_search.core.cancellation import CancellationToken
from aima_search.core.metrics import Outcome
from aima_search.core.problem import GeneralProblem, goal_state
from aima_search.problems.eight_puzzle import BOARDS, EightPuzzleProblem
from aima_search.problems.grid import GridProblem


def test_scheduler_shape():
    s = Scheduler()
    assert s(0) == 20.0
    assert math.isclose(s(10), 20.0 * math.exp(-0.45))
    assert s(99) > 0.0
    assert s(100) == 0.0


def test_probability_of_acceptance():
    assert math.isclose(probability_of_acceptance(1.0, -1.0), math.exp(-1.0))
    assert probability_of_acceptance(1e12, -1.0) > 0.999999
    assert probability_of_acceptance(0.01, -1.0) < 1e-40


def test_sa_frozen_schedule_stops_immediately():
    at_goal = GridProblem(3, 3, (1, 1), (1, 1))
    r = simulated_annealing_search(at_goal, schedule=lambda t: 0.0)
    assert r.success and r.actions == [] and r.nodes_expanded == 0

    elsewhere = GridProblem(3, 3, (0, 0), (2, 2))
    r = simulated_annealing_search(elsewhere, schedule=lambda t: 0.0)
    assert r.outcome is Outcome.FAILURE
    assert r.final_state == (0, 0)
    assert r.nodes_expanded == 0


def test_sa_seeded_runs_repeat():
    problem = EightPuzzleProblem(BOARDS["medium"])
    a = simulated_annealing_search(problem, seed=7)
    b = simulated_annealing_search(problem, rng=random.Random(7))
    assert a.actions == b.actions
    assert a.final_state == b.final_state
    assert a.metrics[ACCEPTED_MOVES] == b.metrics[ACCEPTED_MOVES]


def test_sa_hot_schedule_accepts_every_move():
    problem = GridProblem(5, 5, (2, 2), (4, 4))
    r = simulated_annealing_search(problem, schedule=lambda t: 1e12 if t < 500 else 0.0, seed=1)
    assert r.metrics[ACCEPTED_MOVES] == 500
    assert r.metrics[STEPS] == 501
    assert len(r.actions) == 500


def test_sa_dead_end_waits_for_schedule():
    stuck = GeneralProblem(0, lambda s: [], lambda s, a: s, goal_state(1))
    r = simulated_annealing_search(stuck, schedule=lambda t: 1.0 if t < 5 else 0.0)
    assert r.is_failure
    assert r.nodes_expanded == 5
    assert r.final_state == 0


def test_sa_cancelled_before_start():
    token = CancellationToken()
    token.cancel()
    r = simulated_annealing_search(GridProblem(3, 3, (0, 0), (2, 2)), cancel=token)
    assert r.is_cancelled
    assert r.final_state == (0, 0)


def test_hill_climbing_reaches_goal_on_open_grid():
    r = hill_climbing_search(GridProblem(5, 5, (0, 0), (4, 4)))
    assert r.success
    assert len(r.actions) == 8


def test_hill_climbing_romania(romania):
    r = hill_climbing_search(romania)
    assert r.actions == ["Sibiu", "Fagaras", "Bucharest"]


def test_hill_climbing_stuck_at_local_maximum():
    # the only way round the wall leads away from the goal first
    problem = GridProblem(3, 3, (0, 0), (0, 2), walls={(0, 1), (1, 1)})
    r = hill_climbing_search(problem)
    assert r.is_failure
    assert r.final_state == (0, 0)
    assert r.actions == []
