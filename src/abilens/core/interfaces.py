from __future__ import annotations

from collections.abc import Callable
from typing import Protocol, runtime_checkable


# ---------------------------------------------------------------------------
# ITimerHandle
# ---------------------------------------------------------------------------

@runtime_checkable
class ITimerHandle(Protocol):
    """
    Handle to one scheduled, not-yet-fired callback.

    Domain expectations:
    - `cancel()` is idempotent.
    - Cancelling after the callback fired is a no-op.
    """

    def cancel(self) -> None:
        ...


# ---------------------------------------------------------------------------
# IScheduler
# ---------------------------------------------------------------------------

@runtime_checkable
class IScheduler(Protocol):
    """
    Abstract one-shot timer facility used by the TTL store for expiry.

    Domain expectations:
    - Each `schedule` call runs `callback` at most once, after roughly `delay_ms`.
    - The callback may run on another thread; the store serializes itself.
    """

    def schedule(self, callback: Callable[[], None], delay_ms: int) -> ITimerHandle:
        """
        Arm `callback` to run once after `delay_ms` milliseconds.

        Implementations:
        - HeapTimerScheduler (single reaper thread, min-heap of deadlines)
        - Manual clock for deterministic tests
        """
        ...
