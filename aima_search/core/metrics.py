# aima_search/core/metrics.py
from __future__ import annotations
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional
import time, tracemalloc

NODES_EXPANDED = "nodesExpanded"
QUEUE_SIZE = "queueSize"
MAX_QUEUE_SIZE = "maxQueueSize"
PATH_COST = "pathCost"
MAX_DEPTH = "maxDepth"

_COUNTERS = (NODES_EXPANDED, QUEUE_SIZE, MAX_QUEUE_SIZE, PATH_COST, MAX_DEPTH)


class Metrics(Mapping):
    """Named instrumentation counters, read as a plain string-keyed mapping."""

    def __init__(self) -> None:
        self._values: Dict[str, float] = {}
        self.clear()

    def clear(self) -> None:
        self._values = {k: 0 for k in _COUNTERS}

    def increment(self, key: str, by: float = 1) -> None:
        self._values[key] = self._values.get(key, 0) + by

    def set(self, key: str, value: float) -> None:
        self._values[key] = value

    def track_queue(self, size: int) -> None:
        self._values[QUEUE_SIZE] = size
        if size > self._values[MAX_QUEUE_SIZE]:
            self._values[MAX_QUEUE_SIZE] = size

    def track_depth(self, depth: int) -> None:
        if depth > self._values[MAX_DEPTH]:
            self._values[MAX_DEPTH] = depth

    @property
    def nodes_expanded(self) -> int:
        return int(self._values[NODES_EXPANDED])

    def as_properties(self) -> Dict[str, str]:
        """Snapshot with string values, for CLI/GUI reporting."""
        return {k: str(v) for k, v in self._values.items()}

    def __getitem__(self, key: str) -> float:
        return self._values[key]

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"Metrics({self._values!r})"


class Outcome(Enum):
    SOLUTION = "solution"
    FAILURE = "failure"    # no goal reachable in the searched space
    CUTOFF = "cutoff"      # depth bound hit; a goal may exist deeper
    CANCELLED = "cancelled"


@dataclass
class SearchResult:
    algo: str
    outcome: Outcome
    actions: List[Any]
    cost: float
    nodes_expanded: int
    time_s: Optional[float] = None
    peak_kb: Optional[int] = None
    final_state: Any = None
    metrics: Dict[str, float] = field(default_factory=dict)
    error: Optional[str] = None

    @property
    def success(self) -> bool:
        return self.outcome is Outcome.SOLUTION

    @property
    def is_failure(self) -> bool:
        return self.outcome is Outcome.FAILURE

    @property
    def is_cutoff(self) -> bool:
        return self.outcome is Outcome.CUTOFF

    @property
    def is_cancelled(self) -> bool:
        return self.outcome is Outcome.CANCELLED


class MeasuredRun:
    """
    Context manager for timing and (approximate) peak memory.
    Safe to query .elapsed and .peak_kb *inside* the with-block.
    Leaves an already running tracemalloc session alone, so runs can nest.
    """
    def __init__(self, trace_memory: bool = True) -> None:
        self.t0: Optional[float] = None
        self.t1: Optional[float] = None
        self._peak_kb: int = 0
        self._tracing: bool = False
        self._owns_trace: bool = False
        self.trace_memory = trace_memory

    def __enter__(self) -> "MeasuredRun":
        if self.trace_memory:
            self._tracing = True
            if not tracemalloc.is_tracing():
                tracemalloc.start()
                self._owns_trace = True
        self.t0 = time.perf_counter()
        return self

    def __exit__(self, exc_type, exc, tb) -> bool:
        self.t1 = time.perf_counter()
        if self._tracing:
            current, peak = tracemalloc.get_traced_memory()
            if self._owns_trace:
                tracemalloc.stop()
                self._owns_trace = False
            self._tracing = False
            self._peak_kb = max(self._peak_kb, peak // 1024)
        return False  # don't suppress exceptions

    @property
    def elapsed(self) -> float:
        """Seconds elapsed. Works before and after __exit__."""
        if self.t0 is None:
            return 0.0
        if self.t1 is None:
            return time.perf_counter() - self.t0
        return self.t1 - self.t0

    @property
    def peak_kb(self) -> int:
        """Approx peak KB. Works before and after __exit__."""
        if self._tracing and tracemalloc.is_tracing():
            current, peak = tracemalloc.get_traced_memory()
            return max(self._peak_kb, peak // 1024)
        return self._peak_kb
