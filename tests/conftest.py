import pytest

from aima_search.core.cancellation import CancellationToken
from aima_search.core.problem import GeneralProblem
from aima_search.problems.grid import GridProblem
from aima_search.problems.romania import romania_problem


@pytest.fixture
def romania():
    return romania_problem()


@pytest.fixture
def open_grid():
    return GridProblem(rows=4, cols=4, start=(0, 0), goal=(3, 3))


def make_line(cancel_after=None, token=None):
    """Infinite number line 0, 1, 2, ... with no goal; optionally cancels during an expansion."""
    calls = {"n": 0}

    def actions(s):
        calls["n"] += 1
        if cancel_after is not None and calls["n"] >= cancel_after:
            token.cancel()
        return ["+1"]

    return GeneralProblem(
        initial=0,
        actions_fn=actions,
        result_fn=lambda s, a: s + 1,
        goal_test=lambda s: False,
    )


@pytest.fixture
def line_factory():
    def build(cancel_after=None):
        token = CancellationToken()
        return make_line(cancel_after, token), token
    return build
