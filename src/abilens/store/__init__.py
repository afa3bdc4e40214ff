"""Expiring key-value storage.

This package provides:
- TTLStore: generic mapping with per-entry TTL and cancellable expiry
- HeapTimerScheduler: default `IScheduler`, one reaper thread over a deadline heap
"""

from abilens.store.timers import HeapTimerScheduler
from abilens.store.ttl_store import TTLStore

__all__ = [
    "TTLStore",
    "HeapTimerScheduler",
]
