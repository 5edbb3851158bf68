# aima_search/algorithms/dfs.py
# This code implements Depth-First Search (DFS) using a LIFO stack to explore nodes in a search tree.
from __future__ import annotations
from typing import Optional
from .queue_search import queue_search
from ..core.cancellation import CancellationToken
from ..core.frontiers import LIFOStack
from ..core.metrics import SearchResult
from ..core.problem import Problem

def depth_first_search(problem: Problem, graph: bool = True,
                       cancel: Optional[CancellationToken] = None) -> SearchResult:
    """DFS. With graph=False no reached map is kept and cyclic spaces may never terminate."""
    name = "DFS" if graph else "DFS(tree)"
    return queue_search(problem, LIFOStack(), name, graph=graph, cancel=cancel)
