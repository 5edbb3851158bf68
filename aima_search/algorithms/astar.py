# aima_search/algorithms/astar.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.cancellation import CancellationToken
from ..core.evaluation import Heuristic, path_cost_plus_heuristic, resolve_heuristic

def a_star_search(problem, h: Optional[Heuristic] = None, graph: bool = True,
                  cancel: Optional[CancellationToken] = None):
    """A*: f = g + h. h must be non-negative; the path is optimal when h is admissible."""
    h = resolve_heuristic(problem, h)
    return best_first_search(problem, f=path_cost_plus_heuristic(h), name="A*", graph=graph, cancel=cancel)

def weighted_a_star_search(problem, w: float = 1.5, h: Optional[Heuristic] = None,
                           cancel: Optional[CancellationToken] = None):
    """
    Weighted A*: f = g + w*h (w>1 focuses search; not optimal in general).
    """
    h = resolve_heuristic(problem, h)
    return best_first_search(problem, f=path_cost_plus_heuristic(h, weight=w),
                             name=f"WeightedA*(w={w})", cancel=cancel)
