"""
Source of unique numbers, for naming temporary build artifacts.

A single daemon producer thread feeds 0, 1, 2, ... into a one-slot queue.
Every call to ``next()`` takes exactly one value off the queue, so concurrent
callers always observe distinct numbers without sharing a counter.
"""
import itertools
import logging
import queue
import threading
from typing import Optional

logger = logging.getLogger(__name__)


class UniqueNameGenerator:
    """Hands out strictly increasing integers to any number of threads."""

    def __init__(self, start: int = 0):
        self._start = start
        self._queue: "queue.Queue[int]" = queue.Queue(maxsize=1)
        self._producer: Optional[threading.Thread] = None
        self._lock = threading.Lock()

    @property
    def is_running(self) -> bool:
        return self._producer is not None and self._producer.is_alive()

    def start(self) -> None:
        """Start the producer thread. Safe to call more than once."""
        with self._lock:
            if self._producer is not None:
                return
            self._producer = threading.Thread(
                target=self._produce,
                name="sliderepl-uniq",
                daemon=True,
            )
            self._producer.start()
            logger.debug(f"Unique name producer started at {self._start}")

    def _produce(self) -> None:
        for i in itertools.count(self._start):
            self._queue.put(i)

    def next(self) -> int:
        """Block until the producer hands over the next number."""
        if self._producer is None:
            self.start()
        return self._queue.get()


_unique_names: Optional[UniqueNameGenerator] = None
_unique_names_lock = threading.Lock()


def get_unique_names() -> UniqueNameGenerator:
    """Get the process-wide generator instance."""
    global _unique_names
    with _unique_names_lock:
        if _unique_names is None:
            _unique_names = UniqueNameGenerator()
    return _unique_names
