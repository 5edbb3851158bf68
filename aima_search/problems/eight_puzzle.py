# aima_search/problems/eight_puzzle.py
"""
Eight puzzle. A state is a 9-tuple read row by row, 0 marks the gap.
Actions move the gap: Up, Down, Left, Right (in that order, when legal).
Goal: (0, 1, 2, 3, 4, 5, 6, 7, 8).
"""
from __future__ import annotations
import random
from typing import Dict, Iterable, List, Optional, Tuple
from ..core.problem import Problem

Board = Tuple[int, ...]

GOAL: Board = (0, 1, 2, 3, 4, 5, 6, 7, 8)

_GAP_MOVES = {"Up": -3, "Down": 3, "Left": -1, "Right": 1}

# Start positions offered by the demo app
BOARDS: Dict[str, Board] = {
    "three_moves": (1, 2, 5, 3, 4, 0, 6, 7, 8),
    "medium": (1, 4, 2, 7, 5, 8, 3, 0, 6),
    "extreme": (0, 8, 7, 6, 5, 4, 3, 2, 1),
}


def gap_actions(board: Board) -> List[str]:
    i = board.index(0)
    r, c = divmod(i, 3)
    out = []
    if r > 0: out.append("Up")
    if r < 2: out.append("Down")
    if c > 0: out.append("Left")
    if c < 2: out.append("Right")
    return out


def move_gap(board: Board, action: str) -> Board:
    i = board.index(0)
    j = i + _GAP_MOVES[action]
    b = list(board)
    b[i], b[j] = b[j], b[i]
    return tuple(b)


def manhattan(board: Board) -> float:
    """Sum of tile distances from their goal squares (gap excluded); admissible."""
    total = 0
    for i, tile in enumerate(board):
        if tile == 0:
            continue
        r, c = divmod(i, 3)
        gr, gc = divmod(tile, 3)
        total += abs(r - gr) + abs(c - gc)
    return float(total)


def misplaced_tiles(board: Board) -> float:
    return float(sum(1 for i, tile in enumerate(board) if tile != 0 and tile != GOAL[i]))


def random_board(moves: int = 200, rng: Optional[random.Random] = None) -> Board:
    """Scramble the goal with random gap moves, so the board is always solvable."""
    rng = rng or random.Random()
    board = GOAL
    for _ in range(moves):
        board = move_gap(board, rng.choice(gap_actions(board)))
    return board


class EightPuzzleProblem(Problem):
    def __init__(self, start: Board, heuristic: str = "manhattan"):
        if sorted(start) != list(range(9)):
            raise ValueError(f"not an eight puzzle board: {start!r}")
        self.start = tuple(start)
        self._h = manhattan if heuristic == "manhattan" else misplaced_tiles

    def initial_state(self) -> Board:
        return self.start

    def is_goal(self, s: Board) -> bool:
        return s == GOAL

    def actions(self, s: Board) -> Iterable[str]:
        return gap_actions(s)

    def result(self, s: Board, a: str) -> Board:
        return move_gap(s, a)

    def step_cost(self, s: Board, a: str, s2: Board) -> float:
        return 1.0

    def heuristic(self, s: Board) -> float:
        return self._h(s)
