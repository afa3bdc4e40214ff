from collections.abc import Callable
from pathlib import Path

import pytest

from abilens.core.config import RegistryConfig
from abilens.decoding.registry import AbiRegistry


class ManualHandle:
    def __init__(self, due: int, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True


class ManualScheduler:
    """Deterministic timer facility: time only moves on `advance`."""

    def __init__(self) -> None:
        self.now = 0
        self.handles: list[ManualHandle] = []

    def schedule(self, callback: Callable[[], None], delay_ms: int) -> ManualHandle:
        handle = ManualHandle(self.now + delay_ms, callback)
        self.handles.append(handle)
        return handle

    def advance(self, ms: int) -> None:
        self.now += ms
        for h in sorted(self.handles, key=lambda h: h.due):
            if h.due <= self.now and not h.cancelled and not h.fired:
                h.fired = True
                h.callback()

    def pending(self) -> list[ManualHandle]:
        return [h for h in self.handles if not h.cancelled and not h.fired]


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def registry(scheduler: ManualScheduler) -> AbiRegistry:
    return AbiRegistry(RegistryConfig(default_ttl_ms=1_000), scheduler=scheduler)


@pytest.fixture
def erc20_abi_path() -> Path:
    return Path(__file__).parent / "abi" / "erc20_abi.json"
