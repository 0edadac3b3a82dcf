"""
Concurrency Gate
================
Caps the number of simultaneous hash generations.
"""

import threading
from contextlib import contextmanager
from typing import Iterator


class ConcurrencyGate:
    """
    Counting semaphore with scoped acquisition.

    Example:
        gate = ConcurrencyGate(2)

        with gate.slot():
            hash = primitive.generate(secret, cost)
    """

    def __init__(self, limit: int):
        if limit < 1:
            raise ValueError("limit must be at least 1")
        self.limit = limit
        self._semaphore = threading.BoundedSemaphore(limit)

    def acquire(self) -> None:
        """Block until a slot is free."""
        self._semaphore.acquire()

    def release(self) -> None:
        """Free one slot. Raises ValueError if none is held."""
        self._semaphore.release()

    @contextmanager
    def slot(self) -> Iterator[None]:
        self.acquire()
        try:
            yield
        finally:
            self.release()
