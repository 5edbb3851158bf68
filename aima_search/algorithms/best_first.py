# aima_search/algorithms/best_first.py
from __future__ import annotations
from typing import Callable, Optional
from .queue_search import queue_search
from ..core.cancellation import CancellationToken
from ..core.frontiers import PriorityQueue
from ..core.metrics import SearchResult
from ..core.node import Node
from ..core.problem import Problem

def best_first_search(
    problem: Problem,
    f: Callable[[Node], float],
    name: str = "BestFirst",
    graph: bool = True,
    cancel: Optional[CancellationToken] = None,
) -> SearchResult:
    """Expand the frontier node with the lowest f(n); ties go to the earliest generated node."""
    frontier = PriorityQueue(key=f)
    return queue_search(problem, frontier, name, graph=graph, cost_aware=True, cancel=cancel)
