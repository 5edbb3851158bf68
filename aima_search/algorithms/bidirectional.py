# aima_search/algorithms/bidirectional.py
# Meet-in-the-middle uniform-cost search. Both halves run through the same expansion
# code; the BidirectionalProblem supplies the forward problem and its goal-reversed twin.
from __future__ import annotations
import logging
from typing import Dict, List, Optional, Tuple
from ..config import get_settings
from ..core.cancellation import CancellationToken, cancelled
from ..core.frontiers import PriorityQueue
from ..core.metrics import MeasuredRun, Metrics, Outcome, SearchResult, PATH_COST
from ..core.node import Node, SearchTree
from ..core.problem import Action, BidirectionalProblem, Problem, State
from ..core.utils import empty_result, path_result, reconstruct_path

logger = logging.getLogger(__name__)


class _Half:
    """One search direction: its tree, frontier and best node per reached state."""

    def __init__(self, problem: Problem, metrics: Metrics):
        self.problem = problem
        self.tree = SearchTree(metrics)
        self.frontier = PriorityQueue(key=lambda n: n.path_cost)
        self.reached: Dict[State, Node] = {}
        root = self.tree.root(problem.initial_state())
        self.frontier.push(root)
        self.reached[root.state] = root

    def step(self, other: "_Half", best_cost: float) -> Tuple[Optional[Tuple[Node, Node]], float]:
        """Expand the cheapest frontier node.

        Returns (mine, theirs) for the best new meeting found, or None, plus the best cost.
        """
        meet = None
        node = self.frontier.pop()
        if self.reached.get(node.state) is not node:
            return meet, best_cost
        for child in self.tree.expand(node, self.problem):
            prev = self.reached.get(child.state)
            if prev is None or child.path_cost < prev.path_cost:
                self.reached[child.state] = child
                self.frontier.push(child)
            mine = self.reached[child.state]
            theirs = other.reached.get(child.state)
            if theirs is not None and mine.path_cost + theirs.path_cost < best_cost:
                best_cost = mine.path_cost + theirs.path_cost
                meet = (mine, theirs)
        return meet, best_cost


def bidirectional_search(bproblem: BidirectionalProblem,
                         cancel: Optional[CancellationToken] = None) -> SearchResult:
    """
    Bidirectional uniform-cost search.
    Stops when the two frontier minima sum to at least the best meeting cost.
    Requires every action to be reversible (undirected-graph-like spaces).
    """
    name = "Bidirectional UCS"
    forward = bproblem.original_problem()
    metrics = Metrics()

    with MeasuredRun(get_settings().trace_memory) as meter:
        fwd = _Half(forward, metrics)
        start = fwd.tree[0]
        if forward.is_goal(start.state):
            return path_result(name, Outcome.SOLUTION, fwd.tree, start, meter)
        bwd = _Half(bproblem.reverse_problem(), metrics)

        meet: Optional[Tuple[Node, Node]] = None
        best_cost = float("inf")
        goal_root = bwd.tree[0]
        if goal_root.state in fwd.reached:
            meet, best_cost = (start, goal_root), 0.0

        while len(fwd.frontier) and len(bwd.frontier):
            if cancelled(cancel):
                return empty_result(name, Outcome.CANCELLED, metrics, meter)
            top_f = fwd.frontier.min_key()
            top_b = bwd.frontier.min_key()
            if meet is not None and top_f + top_b >= best_cost:
                break
            # Expand the frontier with smaller top path-cost
            if top_f <= top_b:
                found, best_cost = fwd.step(bwd, best_cost)
                if found is not None:
                    meet = found
            else:
                found, best_cost = bwd.step(fwd, best_cost)
                if found is not None:
                    meet = (found[1], found[0])
            metrics.track_queue(len(fwd.frontier) + len(bwd.frontier))

        if meet is None:
            return empty_result(name, Outcome.FAILURE, metrics, meter)

        nf, nb = meet
        actions, cost = reconstruct_path(fwd.tree, nf)
        back_actions, back_cost = _invert(forward, bwd.tree.path(nb))
        actions.extend(back_actions)
        cost += back_cost
        metrics.set(PATH_COST, cost)
        logger.debug("%s: met at %r, cost=%s", name, nf.state, cost)
        return SearchResult(name, Outcome.SOLUTION, actions, cost, metrics.nodes_expanded,
                            meter.elapsed, meter.peak_kb, final_state=goal_root.state,
                            metrics=dict(metrics))


def _invert(forward: Problem, backward_path: List[Node]) -> Tuple[List[Action], float]:
    """Forward actions walking the backward path from the meeting state back to its root.

    Among parallel actions to the same state the cheapest is taken; the cost returned is
    the forward step cost of the actions chosen.
    """
    actions: List[Action] = []
    cost = 0.0
    for i in range(len(backward_path) - 1, 0, -1):
        here, there = backward_path[i].state, backward_path[i - 1].state
        best: Optional[Tuple[float, Action]] = None
        for a in forward.actions(here):
            if forward.result(here, a) == there:
                c = float(forward.step_cost(here, a, there))
                if best is None or c < best[0]:
                    best = (c, a)
        if best is None:
            raise ValueError(f"no action leads from {here!r} back to {there!r}; "
                             "bidirectional search needs reversible actions")
        cost += best[0]
        actions.append(best[1])
    return actions, cost
