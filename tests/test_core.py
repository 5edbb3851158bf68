import pytest

from aima_search.core.cancellation import CancellationToken, cancelled
from aima_search.core.evaluation import path_cost_plus_heuristic, resolve_heuristic
from aima_search.core.frontiers import FIFOQueue, LIFOStack, PriorityQueue
from aima_search.core.metrics import (
    MAX_QUEUE_SIZE, NODES_EXPANDED, PATH_COST, QUEUE_SIZE, MeasuredRun, Metrics, Outcome, SearchResult,
)
from aima_search.core.node import SearchTree
from aima_search.core.problem import GeneralProblem, goal_state, make_bidirectional
from aima_search.core.utils import reconstruct_path
from aima_search.problems.checks import sanity_check_problem
from aima_search.problems.eight_puzzle import EightPuzzleProblem, GOAL, manhattan, random_board
from aima_search.problems.graph import GraphProblem, undirected


def weighted_line():
    # 0 -a-> 1 -b-> 2, costs 2 and 3
    return GeneralProblem(
        initial=0,
        actions_fn=lambda s: ["step"] if s < 2 else [],
        result_fn=lambda s, a: s + 1,
        goal_test=goal_state(2),
        step_cost_fn=lambda s, a, s2: 2.0 if s == 0 else 3.0,
    )


def test_expand_builds_children_in_action_order():
    problem = EightPuzzleProblem((1, 0, 2, 3, 4, 5, 6, 7, 8))
    tree = SearchTree()
    root = tree.root(problem.initial_state())
    children = list(tree.expand(root, problem))

    assert [c.action for c in children] == ["Down", "Left", "Right"]
    for c in children:
        assert c.parent == root.index
        assert c.depth == root.depth + 1
        assert c.path_cost == root.path_cost + 1.0
        assert tree.parent_of(c) is root
    assert tree.metrics[NODES_EXPANDED] == 1
    assert root.is_root and not children[0].is_root


def test_path_cost_accumulates_and_path_reconstructs():
    problem = weighted_line()
    tree = SearchTree()
    n = tree.root(problem.initial_state())
    for _ in range(2):
        (n,) = list(tree.expand(n, problem))
    assert n.path_cost == 5.0
    assert [x.state for x in tree.path(n)] == [0, 1, 2]
    actions, cost = reconstruct_path(tree, n)
    assert actions == ["step", "step"]
    assert cost == 5.0
    assert tree.on_path(n, 1) and not tree.on_path(n, 7)


def test_missing_step_cost_is_reported():
    problem = GeneralProblem(0, lambda s: ["x"], lambda s, a: s + 1, goal_state(9),
                             step_cost_fn=lambda s, a, s2: None)
    tree = SearchTree()
    with pytest.raises(ValueError, match="step_cost returned None"):
        list(tree.expand(tree.root(0), problem))


def test_truncate_and_keep_only():
    problem = EightPuzzleProblem((1, 0, 2, 3, 4, 5, 6, 7, 8))
    tree = SearchTree()
    root = tree.root(problem.initial_state())
    children = list(tree.expand(root, problem))
    assert len(tree) == 4

    kept = tree.keep_only(children, children[2])
    assert len(tree) == 2
    assert tree[kept.index] is kept and kept.parent == root.index

    tree.truncate(1)
    assert len(tree) == 1


def test_metrics_mapping_and_properties():
    m = Metrics()
    assert set(m) >= {NODES_EXPANDED, QUEUE_SIZE, MAX_QUEUE_SIZE, PATH_COST}
    m.increment(NODES_EXPANDED)
    m.track_queue(5)
    m.track_queue(2)
    assert m.nodes_expanded == 1
    assert m[QUEUE_SIZE] == 2
    assert m[MAX_QUEUE_SIZE] == 5
    props = m.as_properties()
    assert props[MAX_QUEUE_SIZE] == "5"
    assert all(isinstance(v, str) for v in props.values())
    m.clear()
    assert m.nodes_expanded == 0


def test_search_result_flags():
    r = SearchResult("X", Outcome.CUTOFF, [], float("inf"), 3)
    assert r.is_cutoff and not r.success and not r.is_failure and not r.is_cancelled


def test_measured_run_nests():
    with MeasuredRun() as outer:
        with MeasuredRun() as inner:
            _ = [0] * 10_000
        assert inner.elapsed >= 0.0
        assert outer.peak_kb >= 0
    assert outer.elapsed >= inner.elapsed


def test_frontiers_order():
    fifo, lifo = FIFOQueue(), LIFOStack()
    for x in (1, 2, 3):
        fifo.push(x)
        lifo.push(x)
    assert [fifo.pop() for _ in range(3)] == [1, 2, 3]
    assert [lifo.pop() for _ in range(3)] == [3, 2, 1]

    pq = PriorityQueue(key=lambda x: x[0])
    assert pq.min_key() == float("inf")
    for item in [(2, "a"), (1, "b"), (2, "c"), (1, "d")]:
        pq.push(item)
    assert pq.min_key() == 1
    assert [pq.pop()[1] for _ in range(4)] == ["b", "d", "a", "c"]
    # strategies only push, pop and size a frontier
    assert not any(hasattr(f, "peek") for f in (fifo, lifo, pq))


def test_heuristic_resolution():
    problem = EightPuzzleProblem((1, 0, 2, 3, 4, 5, 6, 7, 8))
    assert resolve_heuristic(problem, None)(GOAL) == 0.0
    assert resolve_heuristic(problem, lambda s: 7.0)(GOAL) == 7.0

    tree = SearchTree()
    root = tree.root(problem.initial_state())
    assert path_cost_plus_heuristic(manhattan, weight=2.0)(root) == 2.0


def test_cancellation_token():
    token = CancellationToken()
    assert not token.is_cancelled and not cancelled(token) and not cancelled(None)
    token.cancel()
    assert token.is_cancelled and cancelled(token)


def test_make_bidirectional_swaps_endpoints():
    graph = undirected([("A", "B", 1), ("B", "C", 2)])
    bp = make_bidirectional(GraphProblem("A", "C", graph), "C")
    rev = bp.reverse_problem()
    assert bp.original_problem().initial_state() == "A"
    assert rev.initial_state() == "C"
    assert rev.is_goal("A") and not rev.is_goal("C")
    assert rev.step_cost("C", "B", "B") == 2.0


def test_reference_problems_are_sane():
    assert sanity_check_problem(EightPuzzleProblem(random_board(30))).startswith("OK")
    bad = GeneralProblem(0, lambda s: ["x"] if s < 3 else [], lambda s, a: s + 1, goal_state(3),
                         step_cost_fn=lambda s, a, s2: -1.0)
    with pytest.raises(AssertionError, match="negative"):
        sanity_check_problem(bad)


def test_eight_puzzle_rejects_bad_board():
    with pytest.raises(ValueError):
        EightPuzzleProblem((1, 1, 2, 3, 4, 5, 6, 7, 8))
