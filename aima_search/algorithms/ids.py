# aima_search/algorithms/ids.py
from __future__ import annotations
import itertools
import logging
from typing import Optional
from .depth_limited import recursive_dls
from ..config import get_settings
from ..core.cancellation import CancellationToken
from ..core.metrics import MeasuredRun, Metrics, Outcome, SearchResult
from ..core.node import SearchTree
from ..core.problem import Problem
from ..core.utils import empty_result, path_result

logger = logging.getLogger(__name__)


def iterative_deepening_search(problem: Problem, max_depth: Optional[int] = None,
                               prune_cycles: bool = True,
                               cancel: Optional[CancellationToken] = None) -> SearchResult:
    """
    Iterative Deepening Search (tree-like). Repeats a depth-limited DFS with limits 0, 1, 2, ...
    until a solution or a failure that was not cut off.

    Without max_depth this never ends on an infinite space with no goal; pass a bound or a
    cancellation token. Running out of max_depth returns Outcome.CUTOFF.
    Expansion count accumulates over all iterations.
    """
    name = "IDS"
    metrics = Metrics()

    with MeasuredRun(get_settings().trace_memory) as meter:
        limits = itertools.count() if max_depth is None else range(max_depth + 1)
        for limit in limits:
            tree = SearchTree(metrics)
            root = tree.root(problem.initial_state())
            outcome, goal = recursive_dls(tree, root, problem, limit, prune_cycles, cancel)
            if goal is not None:
                logger.debug("%s: solution at depth %d", name, limit)
                return path_result(name, Outcome.SOLUTION, tree, goal, meter)
            if outcome is not Outcome.CUTOFF:
                # FAILURE: fully explored, nothing deeper; or CANCELLED
                logger.debug("%s: %s at limit %d", name, outcome.value, limit)
                return empty_result(name, outcome, metrics, meter)

        return empty_result(name, Outcome.CUTOFF, metrics, meter)
