# aima_search/algorithms/greedy.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.cancellation import CancellationToken
from ..core.evaluation import Heuristic, heuristic_only, resolve_heuristic

def greedy_best_first_search(problem, h: Optional[Heuristic] = None, graph: bool = True,
                             cancel: Optional[CancellationToken] = None):
    # greedy: f = h; falls back to the problem's heuristic, then to 0
    h = resolve_heuristic(problem, h)
    return best_first_search(problem, f=heuristic_only(h), name="Greedy", graph=graph, cancel=cancel)
