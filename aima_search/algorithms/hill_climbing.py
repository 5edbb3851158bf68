# aima_search/algorithms/hill_climbing.py
from __future__ import annotations
import logging
from typing import Optional
from ..config import get_settings
from ..core.cancellation import CancellationToken, cancelled
from ..core.evaluation import Heuristic, resolve_heuristic
from ..core.metrics import MeasuredRun, Metrics, Outcome, SearchResult
from ..core.node import SearchTree
from ..core.problem import Problem
from ..core.utils import path_result

logger = logging.getLogger(__name__)


def hill_climbing_search(problem: Problem, h: Optional[Heuristic] = None,
                         cancel: Optional[CancellationToken] = None) -> SearchResult:
    """Steepest ascent on value = -h: move to the best child while it is strictly better.

    Stops on a goal, a local maximum or a plateau; SOLUTION only if it stopped on a goal.
    """
    name = "Hill-Climbing"
    h = resolve_heuristic(problem, h)
    metrics = Metrics()
    tree = SearchTree(metrics)

    with MeasuredRun(get_settings().trace_memory) as meter:
        current = tree.root(problem.initial_state())
        while not problem.is_goal(current.state):
            if cancelled(cancel):
                return path_result(name, Outcome.CANCELLED, tree, current, meter)
            children = list(tree.expand(current, problem))
            # max() keeps the first of equally good children
            best = max(children, key=lambda n: -float(h(n.state)), default=None)
            if best is None or -float(h(best.state)) <= -float(h(current.state)):
                tree.keep_only(children)
                logger.debug("%s: stuck at %r (h=%s)", name, current.state, h(current.state))
                return path_result(name, Outcome.FAILURE, tree, current, meter)
            current = tree.keep_only(children, best)

        return path_result(name, Outcome.SOLUTION, tree, current, meter)
