# aima_search/algorithms/queue_search.py
# The expansion / goal-test / failure protocol shared by every queue-based strategy.
# Strategies differ only in the frontier they hand in and in the duplicate policy.
from __future__ import annotations
import logging
from typing import Dict, Optional
from ..config import get_settings
from ..core.cancellation import CancellationToken, cancelled
from ..core.frontiers import Frontier
from ..core.metrics import MeasuredRun, Metrics, Outcome, SearchResult
from ..core.node import Node, SearchTree
from ..core.problem import Problem, State
from ..core.utils import empty_result, path_result

logger = logging.getLogger(__name__)


def queue_search(
    problem: Problem,
    frontier: Frontier,
    name: str,
    graph: bool = True,
    early_goal_test: bool = False,
    cost_aware: bool = False,
    cancel: Optional[CancellationToken] = None,
) -> SearchResult:
    """
    Generic queue search.

    graph           keep a reached map (state -> best node) and skip states already reached
                    (graph search); False means tree search, which may revisit states and
                    loop on cycles.
    early_goal_test test children when generated instead of when popped (saves one layer
                    of expansion for BFS).
    cost_aware      a child reaching a known state, expanded or not, is still pushed when it
                    is strictly cheaper; the dearer entry is dropped when popped.
                    Needed for optimality of UCS/A*, also with inconsistent heuristics.
    """
    metrics = Metrics()
    tree = SearchTree(metrics)
    reached: Dict[State, Node] = {}
    logger.debug("%s: starting", name)

    with MeasuredRun(get_settings().trace_memory) as meter:
        root = tree.root(problem.initial_state())
        if early_goal_test and problem.is_goal(root.state):
            return _done(name, path_result(name, Outcome.SOLUTION, tree, root, meter))

        frontier.push(root)
        reached[root.state] = root
        metrics.track_queue(len(frontier))

        while True:
            if not len(frontier):
                return _done(name, empty_result(name, Outcome.FAILURE, metrics, meter))
            if cancelled(cancel):
                return _done(name, empty_result(name, Outcome.CANCELLED, metrics, meter))

            node = frontier.pop()
            if graph and reached.get(node.state) is not node:
                # stale entry, superseded by a cheaper path to the same state
                metrics.track_queue(len(frontier))
                continue

            if not early_goal_test and problem.is_goal(node.state):
                metrics.track_queue(len(frontier))
                return _done(name, path_result(name, Outcome.SOLUTION, tree, node, meter))

            for child in tree.expand(node, problem):
                if graph:
                    prev = reached.get(child.state)
                    if prev is not None and (not cost_aware or prev.path_cost <= child.path_cost):
                        continue
                    reached[child.state] = child
                if early_goal_test and problem.is_goal(child.state):
                    metrics.track_queue(len(frontier))
                    return _done(name, path_result(name, Outcome.SOLUTION, tree, child, meter))
                frontier.push(child)

            metrics.track_queue(len(frontier))


def _done(name: str, result: SearchResult) -> SearchResult:
    logger.debug("%s: %s after %d expansions (cost=%s)", name, result.outcome.value,
                 result.nodes_expanded, result.cost)
    return result
