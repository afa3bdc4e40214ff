"""ABI registry keyed by namespace (typically a contract address).

This module exposes `AbiRegistry`, which owns one `TTLStore` and keeps per
namespace:
- the ABI items exactly as registered (for `get_abis`)
- a selector → `AbiItem` index (for the calldata / log decoders)

Re-registering a namespace rebuilds the whole index and restarts its TTL.
Each registry is independent; there is no module-level default instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pydantic import ValidationError

from abilens.abi_items import AbiItem, parse_abi_items
from abilens.core.config import RegistryConfig
from abilens.core.interfaces import IScheduler
from abilens.core.models import DecodedCall, DecodedLog, LogEntry, RegistryState
from abilens.decoding import decoder
from abilens.decoding.signatures import selector
from abilens.errors import InvalidInputError
from abilens.store.timers import HeapTimerScheduler
from abilens.store.ttl_store import TTLStore

logger = logging.getLogger(__name__)


def build_selector_index(items: Iterable[AbiItem]) -> dict[str, AbiItem]:
    """Index named items by selector; unnamed items are skipped."""
    index: dict[str, AbiItem] = {}
    for item in items:
        sel = selector(item)
        if sel is None:
            logger.debug("skipping unnamed %s item", item.type)
            continue
        index[sel] = item
    return index


class AbiRegistry:
    """Namespace → (ABI items, selector index) with time-based expiry."""

    def __init__(
        self,
        config: RegistryConfig | None = None,
        *,
        scheduler: IScheduler | None = None,
    ) -> None:
        self._config = config or RegistryConfig()
        # one reaper shared by every store this registry creates
        self._scheduler = scheduler or HeapTimerScheduler()
        self._store: TTLStore[str, RegistryState] = TTLStore(self._config.default_ttl_ms, self._scheduler)

    @property
    def config(self) -> RegistryConfig:
        return self._config

    def set_cache_timeout(self, ttl_ms: int) -> None:
        """Start over with a fresh store whose default TTL is `ttl_ms`.

        Previously registered namespaces are dropped along with their timers.
        """
        config = RegistryConfig(default_ttl_ms=ttl_ms)
        self._store.clear()
        self._config = config
        self._store = TTLStore(ttl_ms, self._scheduler)

    def has_abi(self, key: str) -> bool:
        return self._store.has(key)

    def get_abis(self, key: str) -> Sequence[Any] | None:
        st = self._store.get(key)
        return st.items if st else None

    def get_method_ids(self, key: str) -> dict[str, AbiItem] | None:
        st = self._store.get(key)
        return st.selector_index if st else None

    def add_abi(self, key: str, items: Sequence[AbiItem | dict[str, Any]]) -> None:
        """Register `items` under `key`, replacing any previous state.

        Raises
        ------
        InvalidInputError
            If `items` is not a list/tuple or an entry is not a valid ABI item.
            Nothing is stored in that case.
        """
        if not isinstance(items, (list, tuple)):
            received = type(items).__name__
            raise InvalidInputError(f"Expected ABI array, got {received}", received=received)
        try:
            parsed = parse_abi_items(items)
        except ValidationError as e:
            raise InvalidInputError(f"Invalid ABI item under {key!r}: {e}", received=type(items).__name__) from e

        state = RegistryState(items=items, selector_index=build_selector_index(parsed))
        self._store.set(key, state)
        logger.debug("registered %d selectors for %r", len(state.selector_index), key)

    def remove_abi(self, key: str) -> None:
        if self._store.delete(key):
            logger.debug("removed ABI for %r", key)

    def remove_all_abis(self) -> None:
        self._store.clear()

    def __len__(self) -> int:
        return self._store.size()

    # ---------- decoding (delegates) ----------

    def decode_method(self, key: str, data: str) -> DecodedCall | None:
        return decoder.decode_method(registry=self, key=key, data=data)

    def decode_log_item(self, key: str, log: LogEntry | Mapping[str, Any]) -> DecodedLog | None:
        return decoder.decode_log_item(registry=self, key=key, log=log)

    def decode_logs(self, key: str, logs: Iterable[LogEntry | Mapping[str, Any]]) -> list[DecodedLog] | None:
        return decoder.decode_logs(registry=self, key=key, logs=logs)
