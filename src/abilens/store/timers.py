"""Default timer facility: one reaper thread over a min-heap of deadlines.

`schedule` pushes `(due, seq, handle)` onto a heap and wakes the reaper;
`handle.cancel()` only marks the entry dead, the reaper drops it when it
reaches the head. Thread count is constant in the number of armings.
Callbacks run on the reaper thread, outside the scheduler lock.
"""

from __future__ import annotations

import heapq
import itertools
import logging
import threading
import time
from collections.abc import Callable

from abilens.core.interfaces import IScheduler

logger = logging.getLogger(__name__)


class HeapTimerHandle:
    __slots__ = ("callback", "cancelled")

    def __init__(self, callback: Callable[[], None]) -> None:
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class HeapTimerScheduler(IScheduler):
    """Single daemon reaper thread serving every armed expiry."""

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self._clock = clock
        self._heap: list[tuple[float, int, HeapTimerHandle]] = []
        self._seq = itertools.count()
        self._cond = threading.Condition()
        self._thread: threading.Thread | None = None

    def schedule(self, callback: Callable[[], None], delay_ms: int) -> HeapTimerHandle:
        handle = HeapTimerHandle(callback)
        due = self._clock() + max(delay_ms, 0) / 1000.0
        with self._cond:
            heapq.heappush(self._heap, (due, next(self._seq), handle))
            if self._thread is None:
                self._thread = threading.Thread(target=self._run, name="abilens-ttl-reaper", daemon=True)
                self._thread.start()
            self._cond.notify()
        return handle

    def pending(self) -> int:
        """Number of armed, non-cancelled entries."""
        with self._cond:
            return sum(1 for _, _, h in self._heap if not h.cancelled)

    def _next_due(self) -> HeapTimerHandle:
        with self._cond:
            while True:
                while self._heap and self._heap[0][2].cancelled:
                    heapq.heappop(self._heap)
                if not self._heap:
                    self._cond.wait()
                    continue
                delay = self._heap[0][0] - self._clock()
                if delay <= 0:
                    return heapq.heappop(self._heap)[2]
                self._cond.wait(delay)

    def _run(self) -> None:
        while True:
            handle = self._next_due()
            if handle.cancelled:
                continue
            try:
                handle.callback()
            except Exception:
                # keep the reaper alive for the remaining armings
                logger.exception("ttl expiry callback failed")
