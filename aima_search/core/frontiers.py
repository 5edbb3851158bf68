# aima_search/core/frontiers.py
# Frontier containers. Queue-based strategies differ only in which one they use
# (FIFO = BFS, LIFO = DFS, priority = UCS/Greedy/A*).
from __future__ import annotations
import heapq
from collections import deque
from typing import Any, Callable, Protocol


class Frontier(Protocol):
    def push(self, x: Any) -> None: ...
    def pop(self) -> Any: ...
    def __len__(self) -> int: ...


class FIFOQueue:
    def __init__(self):
        self.q = deque()
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.popleft()
    def __len__(self): return len(self.q)
    def __repr__(self): return f"FIFOQueue(size={len(self.q)})"


class LIFOStack:
    def __init__(self):
        self.q = []
    def push(self, x): self.q.append(x)
    def pop(self): return self.q.pop()
    def __len__(self): return len(self.q)
    def __repr__(self): return f"LIFOStack(size={len(self.q)})"


class PriorityQueue:
    """Min-heap by key(x). Equal keys pop in insertion order, which keeps runs reproducible."""
    def __init__(self, key: Callable[[Any], float]):
        self.key = key
        self.h = []
        self.counter = 0
    def push(self, x):
        self.counter += 1
        heapq.heappush(self.h, (self.key(x), self.counter, x))
    def pop(self):
        return heapq.heappop(self.h)[2]
    def min_key(self) -> float:
        """Key of the next item to pop, or +inf when empty."""
        return self.h[0][0] if self.h else float("inf")
    def __len__(self): return len(self.h)
    def __repr__(self): return f"PriorityQueue(size={len(self.h)})"
