# This code implements Uniform Cost Search (UCS) by reusing the generic best-first search function.
# aima_search/algorithms/ucs.py
from __future__ import annotations
from typing import Optional
from .best_first import best_first_search
from ..core.cancellation import CancellationToken
from ..core.evaluation import path_cost

def uniform_cost_search(problem, graph: bool = True, cancel: Optional[CancellationToken] = None):
    return best_first_search(problem, f=path_cost(), name="UCS", graph=graph, cancel=cancel)
