# aima_search/core/evaluation.py
# Pluggable node scoring used to order priority frontiers.
from __future__ import annotations
from typing import Callable, Optional
from .node import Node
from .problem import State

Heuristic = Callable[[State], float]
EvalFn = Callable[[Node], float]


def heuristic_from_problem(problem) -> Optional[Heuristic]:
    """The problem's own heuristic(s), if it defines one; a None value counts as 0."""
    if hasattr(problem, "heuristic"):
        def h(s: State) -> float:
            val = problem.heuristic(s)
            return 0.0 if val is None else float(val)
        return h
    return None


def resolve_heuristic(problem, h: Optional[Heuristic]) -> Heuristic:
    return h or heuristic_from_problem(problem) or (lambda s: 0.0)


def heuristic_only(h: Heuristic) -> EvalFn:
    """f(n) = h(n), greedy best-first."""
    return lambda n: float(h(n.state))


def path_cost() -> EvalFn:
    """f(n) = g(n), uniform-cost."""
    return lambda n: n.path_cost


def path_cost_plus_heuristic(h: Heuristic, weight: float = 1.0) -> EvalFn:
    """f(n) = g(n) + w*h(n); w=1 is A*.

    The returned path is cost-optimal only if h is admissible, which is up to the caller.
    """
    return lambda n: n.path_cost + weight * float(h(n.state))
