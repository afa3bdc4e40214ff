"""Storage-unbounded TTL key-value store (not an LRU).

Every `set` arms a one-shot expiry on an `IScheduler`; the entry removes
itself when that expiry fires. There is no size or access bound: entries
live until they expire, are deleted, or the store is cleared.

Concurrency
-----------
One re-entrant lock guards the value map and the timer map together.
Each arming carries a fresh token; an expiry whose token is no longer the
current one for its key (because the key was re-set, deleted or cleared in
the meantime) is ignored. Cancel-then-rearm is therefore atomic with respect
to timer dispatch, even when a timer thread has already started running.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Generic, TypeVar

from abilens.core.interfaces import IScheduler, ITimerHandle
from abilens.store.timers import HeapTimerScheduler

logger = logging.getLogger(__name__)

K = TypeVar("K")
V = TypeVar("V")


@dataclass(slots=True, eq=False)
class _Arming:
    """One pending expiry; identity is the token."""

    handle: ITimerHandle | None = None


class TTLStore(Generic[K, V]):
    """Mapping with per-entry time-to-live and autonomous expiry."""

    def __init__(self, default_ttl_ms: int, scheduler: IScheduler | None = None) -> None:
        self._default_ttl_ms = default_ttl_ms
        self._scheduler = scheduler or HeapTimerScheduler()
        self._data: dict[K, V] = {}
        self._timers: dict[K, _Arming] = {}
        self._lock = threading.RLock()

    @property
    def default_ttl_ms(self) -> int:
        return self._default_ttl_ms

    # ---------- internals ----------

    def _cancel(self, k: K) -> None:
        arming = self._timers.pop(k, None)
        if arming is not None and arming.handle is not None:
            arming.handle.cancel()

    def _expire(self, k: K, arming: _Arming) -> None:
        with self._lock:
            if self._timers.get(k) is not arming:
                return  # superseded or already removed
            del self._timers[k]
            self._data.pop(k, None)
        logger.debug("ttl store: expired key %r", k)

    # ---------- public API ----------

    def set(self, k: K, v: V, ttl_ms: int | None = None) -> None:
        """Store `v` under `k`, replacing any value and restarting its TTL."""
        ttl = self._default_ttl_ms if ttl_ms is None else ttl_ms
        with self._lock:
            self._cancel(k)
            arming = _Arming()
            # registered before arming so a zero-delay timer still finds itself current
            self._timers[k] = arming
            self._data[k] = v
            arming.handle = self._scheduler.schedule(lambda: self._expire(k, arming), ttl)

    def get(self, k: K) -> V | None:
        with self._lock:
            return self._data.get(k)

    def has(self, k: K) -> bool:
        with self._lock:
            return k in self._data

    def delete(self, k: K) -> bool:
        """Remove `k` and cancel its expiry; return whether it was present."""
        with self._lock:
            self._cancel(k)
            if k in self._data:
                del self._data[k]
                return True
            return False

    def clear(self) -> None:
        with self._lock:
            for k in list(self._timers):
                self._cancel(k)
            self._data.clear()

    def size(self) -> int:
        with self._lock:
            return len(self._data)

    def __len__(self) -> int:
        return self.size()

    def __contains__(self, k: object) -> bool:
        with self._lock:
            return k in self._data
