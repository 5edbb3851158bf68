# aima_search/agents/online_dfs.py
"""
Online DFS agent (AIMA Fig. 4.21).

The agent never sees the state space as a whole: each call to ``execute`` gets one
percept, and the only memory is what the agent has tabulated so far:

- result[(s, a)]     observed transitions
- untried[s]         actions not yet attempted from s
- unbacktracked[s]   states we came to s from and have not gone back to yet
- (s, a)             the previous state and action

Only sound where every action can be undone by some other action. With irreversible
actions the agent may get stuck or stop early; that is a property of the algorithm.
"""
from __future__ import annotations
import logging
from typing import Any, Callable, Dict, List, Optional, Tuple
from ..core.problem import Action, NO_OP, State

logger = logging.getLogger(__name__)

PerceptToState = Callable[[Any], State]


class OnlineDFSAgent:
    def __init__(self, problem, percept_to_state: PerceptToState):
        if problem is None:
            raise ValueError("OnlineDFSAgent needs a problem (actions + goal test)")
        if not callable(percept_to_state):
            raise ValueError("OnlineDFSAgent needs a callable percept-to-state function")
        self.problem = problem
        self.percept_to_state = percept_to_state
        self.reset()

    def reset(self) -> None:
        self.alive = True
        self.result: Dict[Tuple[State, Action], State] = {}
        self.untried: Dict[State, List[Action]] = {}
        self.unbacktracked: Dict[State, List[State]] = {}
        self.s: Optional[State] = None
        self.a: Optional[Action] = None

    def execute(self, percept) -> Action:
        if not self.alive:
            return NO_OP
        s1 = self.percept_to_state(percept)

        if self.problem.is_goal(s1):
            action = NO_OP
        else:
            if s1 not in self.untried:
                self.untried[s1] = list(self.problem.actions(s1))

            if self.s is not None:
                # Only record a transition the first time we see it, otherwise we can
                # keep oscillating between the same two states.
                if self.result.get((self.s, self.a)) != s1:
                    self.result[(self.s, self.a)] = s1
                    self.unbacktracked.setdefault(s1, []).insert(0, self.s)

            if not self.untried[s1]:
                backtracks = self.unbacktracked.get(s1)
                if not backtracks:
                    action = NO_OP
                else:
                    action = self._action_to(s1, backtracks.pop(0))
            else:
                action = self.untried[s1].pop(0)

        if action == NO_OP:
            # at the goal, or nowhere useful left to go
            self.alive = False
        self.s, self.a = s1, action
        return action

    def _action_to(self, s: State, target: State) -> Action:
        for (s0, a), s2 in self.result.items():
            if s0 == s and s2 == target:
                return a
        logger.warning("no recorded action leads from %r back to %r; stopping", s, target)
        return NO_OP
