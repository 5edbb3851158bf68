# aima_search/core/cancellation.py
# Cooperative cancellation: searches poll the token at the top of every expansion loop.
from __future__ import annotations
import threading
from typing import Optional


class CancellationToken:
    """Explicit cancel flag handed to a search call.

    Setting it never interrupts an expansion already in progress; the search
    notices at its next loop boundary and returns a CANCELLED result.
    """
    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def is_cancelled(self) -> bool:
        return self._event.is_set()


def cancelled(token: Optional[CancellationToken]) -> bool:
    return token is not None and token.is_cancelled
