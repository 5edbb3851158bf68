# aima_search/algorithms/bfs.py
# Breadth-first search: FIFO frontier, goal test when a child is generated.
from __future__ import annotations
from typing import Optional
from .queue_search import queue_search
from ..core.cancellation import CancellationToken
from ..core.frontiers import FIFOQueue
from ..core.metrics import SearchResult
from ..core.problem import Problem

def breadth_first_search(problem: Problem, graph: bool = True,
                         cancel: Optional[CancellationToken] = None) -> SearchResult:
    # goal tested at generation; returns the shallowest goal without expanding its layer
    name = "BFS" if graph else "BFS(tree)"
    return queue_search(problem, FIFOQueue(), name, graph=graph, early_goal_test=True, cancel=cancel)
