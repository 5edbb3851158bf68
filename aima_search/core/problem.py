# Defines the standard interface for any search problem (states, actions, goals, costs, heuristic).
# aima_search/core/problem.py
from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Callable, Hashable, Iterable, Protocol

Action = Hashable
State = Hashable

# Returned by agents when there is nothing left to do (goal reached or exploration exhausted).
NO_OP: Action = "NoOp"


class Problem(Protocol):
    """Canonical AI search problem interface (atomic state-space view).

    Preconditions, not checked at runtime: ``actions`` is side-effect free and
    deterministic in order, ``result`` is pure and ``step_cost`` is never negative.
    """
    def initial_state(self) -> State: ...
    def is_goal(self, s: State) -> bool: ...
    def actions(self, s: State) -> Iterable[Action]: ...
    def result(self, s: State, a: Action) -> State: ...
    def step_cost(self, s: State, a: Action, s2: State) -> float: ...
    # Optional heuristic for informed search; default 0
    def heuristic(self, s: State) -> float: return 0.0


def unit_cost(s: State, a: Action, s2: State) -> float:
    return 1.0


def zero_heuristic(s: State) -> float:
    return 0.0


def goal_state(goal: State) -> Callable[[State], bool]:
    """Goal test that matches a single state by equality."""
    def test(s: State) -> bool:
        return s == goal
    return test


@dataclass(frozen=True)
class GeneralProblem:
    """A Problem assembled from plain functions.

    Handy for ad-hoc graphs and for the reverse half of a bidirectional problem.
    """
    initial: State
    actions_fn: Callable[[State], Iterable[Action]]
    result_fn: Callable[[State, Action], State]
    goal_test: Callable[[State], bool]
    step_cost_fn: Callable[[State, Action, State], float] = unit_cost
    heuristic_fn: Callable[[State], float] = zero_heuristic

    def initial_state(self) -> State:
        return self.initial

    def is_goal(self, s: State) -> bool:
        return bool(self.goal_test(s))

    def actions(self, s: State) -> Iterable[Action]:
        return self.actions_fn(s)

    def result(self, s: State, a: Action) -> State:
        return self.result_fn(s, a)

    def step_cost(self, s: State, a: Action, s2: State) -> float:
        return self.step_cost_fn(s, a, s2)

    def heuristic(self, s: State) -> float:
        return self.heuristic_fn(s)


# Helper for bidirectional: original + reverse problem pair
class BidirectionalProblem:
    """Pairs a problem with its goal-reversed counterpart.

    Both directions share the same ACTIONS/RESULT/step cost, so meet-in-the-middle
    search only works when every action can be undone by some other action.
    """
    def __init__(self, original: Any, reverse: Any):
        self._original = original
        self._reverse = reverse

    def original_problem(self):
        return self._original

    def reverse_problem(self):
        return self._reverse


def make_bidirectional(problem, goal: State) -> BidirectionalProblem:
    """Builds the reverse problem by swapping the initial state and the (single) goal."""
    start = problem.initial_state()
    reverse = GeneralProblem(
        initial=goal,
        actions_fn=problem.actions,
        result_fn=problem.result,
        goal_test=goal_state(start),
        step_cost_fn=problem.step_cost,
    )
    return BidirectionalProblem(problem, reverse)
