# aima_search/problems/nqueens.py
# Incremental N-queens: queens are placed column by column, only on squares that are not
# under attack. A state is the tuple of rows used so far; an action is the (col, row) placed.
from __future__ import annotations
from typing import Iterable, Tuple
from ..core.problem import Problem

Placement = Tuple[int, ...]


def attacked(state: Placement, col: int, row: int) -> bool:
    for c, r in enumerate(state):
        if r == row or abs(r - row) == abs(c - col):
            return True
    return False


class NQueensProblem(Problem):
    def __init__(self, n: int = 8):
        self.n = n

    def initial_state(self) -> Placement:
        return ()

    def is_goal(self, s: Placement) -> bool:
        return len(s) == self.n and not any(attacked(s[:c], c, r) for c, r in enumerate(s))

    def actions(self, s: Placement) -> Iterable[Tuple[int, int]]:
        col = len(s)
        if col >= self.n:
            return []
        return [(col, row) for row in range(self.n) if not attacked(s, col, row)]

    def result(self, s: Placement, a: Tuple[int, int]) -> Placement:
        return s + (a[1],)

    def step_cost(self, s, a, s2) -> float:
        return 1.0

    def heuristic(self, s: Placement) -> float:
        return float(self.n - len(s))
