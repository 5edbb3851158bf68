# aima_search/algorithms/simulated_annealing.py
"""
Simulated annealing (AIMA Fig. 4.5): stochastic hill climbing where some downhill
moves are allowed. Downhill moves are accepted readily while the temperature is high
and less often as the schedule cools it.

value(n) = -h(n), so climbing "uphill" minimises the heuristic.
Termination comes only from the schedule reaching 0 (or cancellation); there is no
step limit, so pick a schedule that reaches 0 in finite time.
"""
from __future__ import annotations
import logging
import math
import random
from typing import Callable, Optional
from ..config import get_settings
from ..core.cancellation import CancellationToken, cancelled
from ..core.evaluation import Heuristic, resolve_heuristic
from ..core.metrics import MeasuredRun, Metrics, Outcome, SearchResult
from ..core.node import SearchTree
from ..core.problem import Problem
from ..core.utils import path_result

logger = logging.getLogger(__name__)

ACCEPTED_MOVES = "acceptedMoves"
STEPS = "steps"

Schedule = Callable[[int], float]


class Scheduler:
    """T(t) = k * exp(-lam * t) for t < limit, else 0."""

    def __init__(self, k: float = 20.0, lam: float = 0.045, limit: int = 100):
        self.k = k
        self.lam = lam
        self.limit = limit

    @classmethod
    def from_settings(cls) -> "Scheduler":
        s = get_settings()
        return cls(k=s.sa_k, lam=s.sa_lambda, limit=s.sa_limit)

    def __call__(self, t: int) -> float:
        if t < self.limit:
            return self.k * math.exp(-self.lam * t)
        return 0.0

    def __repr__(self) -> str:
        return f"Scheduler(k={self.k}, lam={self.lam}, limit={self.limit})"


def probability_of_acceptance(temperature: float, delta_e: float) -> float:
    """e^(ΔE / T)"""
    return math.exp(delta_e / temperature)


def simulated_annealing_search(
    problem: Problem,
    h: Optional[Heuristic] = None,
    schedule: Optional[Schedule] = None,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    cancel: Optional[CancellationToken] = None,
) -> SearchResult:
    """
    Returns the path to the last current node whatever happens; `final_state` is that node's
    state. Outcome is SOLUTION iff it is a goal when the temperature hits 0.
    A seeded `rng` (or `seed`) makes runs reproducible.
    """
    name = "Simulated Annealing"
    h = resolve_heuristic(problem, h)
    schedule = schedule or Scheduler.from_settings()
    if rng is None:
        rng = random.Random(seed if seed is not None else get_settings().seed)

    def value(n) -> float:
        return -float(h(n.state))

    metrics = Metrics()
    metrics.set(ACCEPTED_MOVES, 0)
    metrics.set(STEPS, 0)
    tree = SearchTree(metrics)

    with MeasuredRun(get_settings().trace_memory) as meter:
        current = tree.root(problem.initial_state())
        t = 0
        while True:
            if cancelled(cancel):
                return path_result(name, Outcome.CANCELLED, tree, current, meter)
            temperature = schedule(t)
            t += 1
            metrics.set(STEPS, t)
            if temperature <= 0:
                outcome = Outcome.SOLUTION if problem.is_goal(current.state) else Outcome.FAILURE
                logger.debug("%s: frozen after %d steps, %s", name, t, outcome.value)
                return path_result(name, outcome, tree, current, meter)

            children = list(tree.expand(current, problem))
            if not children:
                # dead end: wait for the next time step
                continue
            nxt = rng.choice(children)
            delta_e = value(nxt) - value(current)
            if delta_e > 0 or rng.random() < probability_of_acceptance(temperature, delta_e):
                current = tree.keep_only(children, nxt)
                metrics.increment(ACCEPTED_MOVES)
            else:
                tree.keep_only(children)
