"""Bounded-concurrency worker pool.

``run_workers`` is the single fan-out primitive of the scanner. The
pipeline uses it twice: once over target URLs and, nested inside each URL
task, once over that URL's package names.

Execution model
---------------
- ``concurrency`` persistent worker threads pull items from one shared
  queue until it is exhausted.
- A bounded semaphore of the same size gates each worker invocation, so
  at most ``concurrency`` invocations run at once per pool.
- A worker signals failure by raising. The failure is recorded and the
  thread moves on to the next item; nothing is cancelled.
- Results are collected in completion order. Every input contributes
  exactly one entry (``None`` for a failed invocation).

Nested pools each respect their own limit, so simultaneous activity can
reach ``outer * inner`` invocations in the worst case.
"""

from __future__ import annotations

import logging
import queue
import threading
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import Generic, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")

_DONE = object()


@dataclass
class PoolResult(Generic[R]):
    """Outcome of one ``run_workers`` call.

    Attributes:
        results: One entry per input in completion order; ``None`` where
            the worker raised.
        first_error: First exception observed in completion order, kept
            for diagnostics only.
        failures: Number of worker invocations that raised.
    """

    results: list[R | None] = field(default_factory=list)
    first_error: Exception | None = None
    failures: int = 0

    def successful(self) -> list[R]:
        """Return the non-``None`` results."""
        return [r for r in self.results if r is not None]


def run_workers(
    inputs: Sequence[T],
    worker: Callable[[T], R],
    concurrency: int,
) -> PoolResult[R]:
    """Apply ``worker`` to every input with bounded parallelism.

    Args:
        inputs: Items to process. Each one is handed to exactly one worker.
        worker: Callable run on a pool thread; raises to signal failure.
        concurrency: Thread count and in-flight limit. Values below 1 are
            treated as 1.

    Returns:
        PoolResult holding ``len(inputs)`` entries and the first error.
    """
    limit = max(1, concurrency)
    outcome: PoolResult[R] = PoolResult()
    if not inputs:
        return outcome

    tasks: queue.Queue[object] = queue.Queue()
    for item in inputs:
        tasks.put(item)
    n_threads = min(limit, len(inputs))
    for _ in range(n_threads):
        tasks.put(_DONE)

    gate = threading.BoundedSemaphore(limit)
    lock = threading.Lock()

    def _record(value: R | None, error: Exception | None) -> None:
        with lock:
            outcome.results.append(value)
            if error is not None:
                outcome.failures += 1
                if outcome.first_error is None:
                    outcome.first_error = error

    def _loop() -> None:
        while True:
            item = tasks.get()
            if item is _DONE:
                return
            with gate:
                try:
                    value = worker(item)  # type: ignore[arg-type]
                except Exception as exc:
                    logger.debug("Worker failed on %r: %s", item, exc)
                    _record(None, exc)
                    continue
            _record(value, None)

    threads = [
        threading.Thread(target=_loop, name=f"unclaimed-worker-{i}", daemon=True)
        for i in range(n_threads)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    return outcome
