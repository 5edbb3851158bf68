import logging

import pytest

from aima_search import config
from aima_search.algorithms.simulated_annealing import Scheduler
from aima_search.config import SearchSettings, get_settings, setup_logging

ENV_VARS = ("AIMA_DLS_LIMIT", "AIMA_IDS_MAX_DEPTH", "AIMA_SEED", "AIMA_TRACE_MEMORY",
            "AIMA_SA_K", "AIMA_SA_LAMBDA", "AIMA_SA_LIMIT", "AIMA_LOG_LEVEL")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


def test_defaults(clean_env):
    s = SearchSettings.from_env()
    assert s == SearchSettings()
    assert s.dls_limit == 12 and s.ids_max_depth is None and s.seed is None
    assert s.trace_memory is True
    assert s.log_level == "WARNING"


def test_env_overrides(clean_env):
    clean_env.setenv("AIMA_DLS_LIMIT", "4")
    clean_env.setenv("AIMA_IDS_MAX_DEPTH", "9")
    clean_env.setenv("AIMA_SEED", "42")
    clean_env.setenv("AIMA_TRACE_MEMORY", "off")
    clean_env.setenv("AIMA_SA_K", "5")
    clean_env.setenv("AIMA_SA_LIMIT", "10")
    clean_env.setenv("AIMA_LOG_LEVEL", "debug")
    s = get_settings()
    assert (s.dls_limit, s.ids_max_depth, s.seed) == (4, 9, 42)
    assert s.trace_memory is False
    assert s.log_level == "DEBUG"

    sched = Scheduler.from_settings()
    assert sched(0) == 5.0
    assert sched(10) == 0.0


def test_blank_values_fall_back(clean_env):
    clean_env.setenv("AIMA_SEED", "  ")
    assert SearchSettings.from_env().seed is None


@pytest.mark.parametrize("name,value", [("AIMA_LOG_LEVEL", "LOUD"), ("AIMA_DLS_LIMIT", "-1"),
                                        ("AIMA_SA_K", "hot")])
def test_invalid_values(clean_env, name, value):
    clean_env.setenv(name, value)
    with pytest.raises(ValueError):
        SearchSettings.from_env()


def test_setup_logging_runs_once(clean_env):
    clean_env.setattr(config.setup_logging, "_configured", False, raising=False)
    calls = []
    clean_env.setattr(logging, "basicConfig", lambda **kw: calls.append(kw))
    setup_logging("info")
    setup_logging("debug")
    assert len(calls) == 1
    assert calls[0]["level"] == logging.INFO
