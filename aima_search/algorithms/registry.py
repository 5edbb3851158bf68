# aima_search/algorithms/registry.py
# Named search strategies for demos and benchmarks. The mapping is built fresh for each
# caller; there is no module-level list to mutate.
from __future__ import annotations
from functools import partial
from typing import Callable, Dict, Optional
from .astar import a_star_search, weighted_a_star_search
from .bfs import breadth_first_search
from .depth_limited import depth_limited_search
from .dfs import depth_first_search
from .greedy import greedy_best_first_search
from .hill_climbing import hill_climbing_search
from .ids import iterative_deepening_search
from .simulated_annealing import simulated_annealing_search
from .ucs import uniform_cost_search
from ..config import get_settings
from ..core.evaluation import Heuristic
from ..core.metrics import SearchResult

SearchFn = Callable[..., SearchResult]

# strategies that draw random numbers; benchmarks repeat these
STOCHASTIC = frozenset({"Simulated Annealing"})


def algorithm_registry(h: Optional[Heuristic] = None, dls_limit: Optional[int] = None,
                       ids_max_depth: Optional[int] = None, seed: Optional[int] = None,
                       weight: float = 1.5) -> Dict[str, SearchFn]:
    """name -> callable(problem, cancel=None). Unset arguments come from the settings."""
    settings = get_settings()
    limit = settings.dls_limit if dls_limit is None else dls_limit
    max_depth = settings.ids_max_depth if ids_max_depth is None else ids_max_depth
    seed = settings.seed if seed is None else seed
    return {
        # ---------------- Uninformed ----------------
        "BFS": breadth_first_search,
        "DFS": depth_first_search,
        f"DLS(l={limit})": partial(depth_limited_search, limit=limit),
        "IDS": partial(iterative_deepening_search, max_depth=max_depth),
        "UCS": uniform_cost_search,
        # ---------------- Informed ----------------
        "Greedy": partial(greedy_best_first_search, h=h),
        "A*": partial(a_star_search, h=h),
        f"WeightedA*(w={weight})": partial(weighted_a_star_search, w=weight, h=h),
        # ---------------- Local ----------------
        "Hill-Climbing": partial(hill_climbing_search, h=h),
        "Simulated Annealing": partial(simulated_annealing_search, h=h, seed=seed),
    }
