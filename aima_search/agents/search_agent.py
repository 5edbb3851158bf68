# aima_search/agents/search_agent.py
# Offline problem-solving agent: plans once with a search strategy, then replays the plan
# one action per percept.
from __future__ import annotations
import logging
from collections import deque
from typing import Any, Callable, Dict, List, Optional
from ..core.cancellation import CancellationToken
from ..core.metrics import SearchResult
from ..core.problem import Action, NO_OP

logger = logging.getLogger(__name__)

Search = Callable[..., SearchResult]


class SearchAgent:
    def __init__(self, problem, search: Search, cancel: Optional[CancellationToken] = None):
        if not callable(search):
            raise ValueError("SearchAgent needs a callable search strategy")
        self.problem = problem
        self.search = search
        if cancel is None:
            self.search_result: SearchResult = search(problem)
        else:
            self.search_result = search(problem, cancel=cancel)
        logger.info("%s: %s, %d actions, %d nodes expanded", self.search_result.algo,
                    self.search_result.outcome.value, len(self.search_result.actions),
                    self.search_result.nodes_expanded)
        self.actions: List[Action] = list(self.search_result.actions) if self.search_result.success else []
        self._plan = deque(self.actions)
        self.alive = True

    def execute(self, percept: Any) -> Action:
        """Next planned action; NoOp once the plan is used up (or there never was one)."""
        if self._plan:
            return self._plan.popleft()
        self.alive = False
        return NO_OP

    @property
    def done(self) -> bool:
        return not self.alive

    @property
    def instrumentation(self) -> Dict[str, str]:
        """Search counters as strings (nodesExpanded, queueSize, maxQueueSize, pathCost, ...)."""
        return {k: str(v) for k, v in self.search_result.metrics.items()}
