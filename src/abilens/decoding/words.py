"""Adapter over `eth_abi.decode`.

Renders eth_abi output in JSON-friendly shapes:
- `bytes` / `bytesN` → "0x"-prefixed hex string
- tuples and arrays → lists (recursively)
- ints, bools, strings and checksummed addresses are returned as-is
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Any

from eth_abi import decode as abi_decode


def _to_plain(value: Any) -> Any:
    if isinstance(value, (bytes, bytearray)):
        return "0x" + bytes(value).hex()
    if isinstance(value, (tuple, list)):
        return [_to_plain(v) for v in value]
    return value


def decode_words(types: Sequence[str], payload: bytes) -> list[Any]:
    """Decode `payload` as the ABI tuple `types`; one value per type."""
    if not types:
        return []
    return [_to_plain(v) for v in abi_decode(list(types), payload)]
