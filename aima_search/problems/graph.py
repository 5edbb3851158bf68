# aima_search/problems/graph.py
# Explicit weighted graph as a search problem: states are vertex names, the action is the
# neighbour to drive to, and the step cost is the edge weight.
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Mapping, Optional, Sequence, Tuple
from ..core.problem import Problem, State, Action

Graph = Mapping[str, Mapping[str, float]]


def undirected(edges: Sequence[Tuple[str, str, float]]) -> Dict[str, Dict[str, float]]:
    """Adjacency dict from (a, b, weight) triples, both directions, in listing order."""
    graph: Dict[str, Dict[str, float]] = {}
    for a, b, w in edges:
        graph.setdefault(a, {})[b] = w
        graph.setdefault(b, {})[a] = w
    return graph


@dataclass
class GraphProblem(Problem):
    start: str
    goal: str
    graph: Graph
    h: Optional[Callable[[str], float]] = field(default=None, repr=False)

    def initial_state(self) -> State: return self.start
    def is_goal(self, s: State) -> bool: return s == self.goal
    def actions(self, s: State) -> Iterable[Action]:
        return list(self.graph.get(s, {}).keys())
    def result(self, s: State, a: Action) -> State:
        return a  # action is the neighbour
    def step_cost(self, s: State, a: Action, s2: State) -> float:
        return float(self.graph[s][s2])
    def heuristic(self, s: State) -> float:
        return 0.0 if self.h is None else float(self.h(s))
