# aima_search/agents/environment.py
# A problem-backed environment: the percept is the current state, actions move the
# world with problem.result. Lets agents be exercised without a domain simulator.
from __future__ import annotations
import logging
from typing import Any, List, Optional
from ..core.problem import Action, NO_OP, State

logger = logging.getLogger(__name__)


class ProblemEnvironment:
    """
    Wraps a Problem as a world the agent acts in.

    - percept(): the current state
    - step(a): apply RESULT(s, a); NoOp leaves the state alone
    - t counts steps, cost accumulates step costs
    """
    def __init__(self, problem, state: Optional[State] = None):
        self.problem = problem
        self._start = problem.initial_state() if state is None else state
        self.reset()

    def reset(self) -> State:
        self.state = self._start
        self.t = 0
        self.cost = 0.0
        return self.percept()

    def percept(self) -> State:
        return self.state

    def step(self, action: Action) -> State:
        if action != NO_OP:
            nxt = self.problem.result(self.state, action)
            self.cost += float(self.problem.step_cost(self.state, action, nxt))
            self.state = nxt
        self.t += 1
        return self.percept()


def run_agent(agent: Any, env: ProblemEnvironment, max_steps: int = 1000) -> List[Action]:
    """Percept -> act -> step until the agent dies or max_steps; returns the actions taken."""
    actions: List[Action] = []
    for _ in range(max_steps):
        action = agent.execute(env.percept())
        actions.append(action)
        env.step(action)
        if not getattr(agent, "alive", True):
            break
    else:
        logger.info("agent still running after %d steps", max_steps)
    return actions
