"""Core data models for registry state and decoded output.

This module defines:
- `LogEntry`: minimal log record consumed by the log decoder.
- `DecodedParam` / `DecodedCall` / `DecodedLog`: decoder output.
- `RegistryState`: the per-namespace record held in the TTL store.

Design notes
------------
- Decoded integers are rendered as base-10 strings to preserve exactness
  (uint256 does not fit JSON numbers).
- `RegistryState.items` keeps the sequence exactly as registered; the
  `selector_index` is rebuilt wholesale on every registration.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import asdict, dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from abilens.abi_items import AbiItem


# === Log record ===


@dataclass(slots=True, frozen=True)
class LogEntry:
    """Raw log as returned by `eth_getLogs`, reduced to what decoding needs."""

    address: str | None
    topics: tuple[str, ...]
    data: str = "0x"  # "0x..."

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any]) -> LogEntry:
        """Build from an RPC-style dict (`address`, `topics`, `data`)."""
        return cls(
            address=raw.get("address"),
            topics=tuple(raw.get("topics") or ()),
            data=raw.get("data") or "0x",
        )


# === Decoded output ===


@dataclass(slots=True)
class DecodedParam:
    """One decoded parameter: declared name and type, normalized value."""

    name: str
    type: str
    value: Any


@dataclass(slots=True)
class DecodedCall:
    name: str
    params: list[DecodedParam] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(slots=True)
class DecodedLog:
    """Decoded event; `events` follows the ABI input order, not topic/data order."""

    name: str
    address: str | None
    events: list[DecodedParam] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


# === Registry record ===


@dataclass(slots=True, frozen=True)
class RegistryState:
    """Everything stored for one namespace key."""

    items: Sequence[Any]
    selector_index: dict[str, AbiItem]
