"""
Central configuration for search tunables and logging.
Every value can be overridden with an environment variable.
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional

logger = logging.getLogger(__name__)

_TRUE = {"1", "true", "yes", "on"}


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return int(raw)


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return float(raw)


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in _TRUE


@dataclass(frozen=True)
class SearchSettings:
    dls_limit: int = 12                  # depth-limited search
    ids_max_depth: Optional[int] = None  # None = unbounded iterative deepening
    seed: Optional[int] = None           # RNG seed for stochastic strategies
    trace_memory: bool = True            # tracemalloc peak memory in MeasuredRun
    sa_k: float = 20.0                   # simulated annealing schedule k*exp(-lam*t)
    sa_lambda: float = 0.045
    sa_limit: int = 100
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "SearchSettings":
        level = os.getenv("AIMA_LOG_LEVEL", cls.log_level).upper()
        if level not in ("DEBUG", "INFO", "WARNING", "ERROR"):
            raise ValueError(f"AIMA_LOG_LEVEL must be DEBUG, INFO, WARNING or ERROR, got {level!r}")
        settings = cls(
            dls_limit=_env_int("AIMA_DLS_LIMIT", cls.dls_limit),
            ids_max_depth=_env_int("AIMA_IDS_MAX_DEPTH", cls.ids_max_depth),
            seed=_env_int("AIMA_SEED", cls.seed),
            trace_memory=_env_bool("AIMA_TRACE_MEMORY", cls.trace_memory),
            sa_k=_env_float("AIMA_SA_K", cls.sa_k),
            sa_lambda=_env_float("AIMA_SA_LAMBDA", cls.sa_lambda),
            sa_limit=_env_int("AIMA_SA_LIMIT", cls.sa_limit),
            log_level=level,
        )
        if settings.dls_limit < 0:
            raise ValueError("AIMA_DLS_LIMIT must be >= 0")
        return settings


@lru_cache(maxsize=1)
def get_settings() -> SearchSettings:
    """Settings read once from the environment."""
    return SearchSettings.from_env()


def setup_logging(level: Optional[str] = None) -> None:
    """Configure root logging once, controlled by env var AIMA_LOG_LEVEL."""
    if getattr(setup_logging, "_configured", False):
        return
    name = (level or get_settings().log_level).upper()
    logging.basicConfig(
        level=getattr(logging, name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    setup_logging._configured = True  # type: ignore[attr-defined]
