# aima_search/algorithms/depth_limited.py
# This code implements Depth-Limited Search (DLS) for AI search problems, allowing a maximum depth limit.
from __future__ import annotations
import logging
from typing import Optional, Tuple
from ..config import get_settings
from ..core.cancellation import CancellationToken, cancelled
from ..core.metrics import MeasuredRun, Metrics, Outcome, SearchResult
from ..core.node import Node, SearchTree
from ..core.problem import Problem
from ..core.utils import empty_result, path_result

logger = logging.getLogger(__name__)


def depth_limited_search(problem: Problem, limit: int, prune_cycles: bool = True,
                         cancel: Optional[CancellationToken] = None) -> SearchResult:
    """
    Recursive DLS (tree-like). Never returns a plan longer than `limit` actions.

    Outcome.CUTOFF means some branch was abandoned at the depth bound, so a goal may
    still exist deeper; Outcome.FAILURE means the space within the bound holds no goal.
    With prune_cycles, children repeating a state already on the current path are skipped.
    """
    if limit < 0:
        raise ValueError(f"depth limit must be >= 0, got {limit}")
    name = f"DLS(l={limit})"
    metrics = Metrics()
    tree = SearchTree(metrics)

    with MeasuredRun(get_settings().trace_memory) as meter:
        root = tree.root(problem.initial_state())
        outcome, goal = recursive_dls(tree, root, problem, limit, prune_cycles, cancel)
        logger.debug("%s: %s after %d expansions", name, outcome.value, metrics.nodes_expanded)
        if goal is not None:
            return path_result(name, Outcome.SOLUTION, tree, goal, meter)
        return empty_result(name, outcome, metrics, meter)


def recursive_dls(tree: SearchTree, node: Node, problem: Problem, limit: int,
                  prune_cycles: bool = True,
                  cancel: Optional[CancellationToken] = None) -> Tuple[Outcome, Optional[Node]]:
    if problem.is_goal(node.state):
        return Outcome.SOLUTION, node
    if limit == 0:
        return Outcome.CUTOFF, None
    if cancelled(cancel):
        return Outcome.CANCELLED, None

    cutoff_occurred = False
    for child in tree.expand(node, problem):
        if prune_cycles and tree.on_path(node, child.state):
            tree.truncate(child.index)
            continue
        outcome, goal = recursive_dls(tree, child, problem, limit - 1, prune_cycles, cancel)
        if outcome is Outcome.SOLUTION or outcome is Outcome.CANCELLED:
            return outcome, goal
        if outcome is Outcome.CUTOFF:
            cutoff_occurred = True
        # the child's subtree is finished; keep memory linear in the depth
        tree.truncate(child.index)
    return (Outcome.CUTOFF if cutoff_occurred else Outcome.FAILURE), None
