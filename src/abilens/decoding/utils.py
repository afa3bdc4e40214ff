"""Decoding utilities: value normalizers for calldata and log output."""

from __future__ import annotations

from typing import Any

from abilens.core.constants import ADDRESS_HEX_LEN, LOG_NUMERIC_TYPES


def _map_nested(value: Any, fn) -> Any:
    """Apply `fn` to scalars, element-wise through (nested) arrays."""
    if isinstance(value, (list, tuple)):
        return [_map_nested(v, fn) for v in value]
    return fn(value)


def _to_decimal(value: Any) -> str:
    return str(int(value))


# ---------- calldata path ----------


def normalize_call_value(abi_type: str, value: Any) -> Any:
    """Normalize one decoded calldata value by its declared type.

    - uint*/int*   → base-10 string (element-wise for arrays)
    - address*     → lowercase (element-wise for arrays), no length fix
    - anything else passes through
    """
    if abi_type.startswith("uint") or abi_type.startswith("int"):
        return _map_nested(value, _to_decimal)
    if abi_type.startswith("address"):
        return _map_nested(value, lambda v: v.lower())
    return value


# ---------- log path ----------


def fix_address_length(addr: str) -> str:
    """Lowercase and drop left padding right after "0x" beyond 20 bytes.

    Repairs 32-byte topic encodings of addresses:
    "0x000000000000000000000000abcd..." → "0xabcd..." (42 chars).
    """
    v = addr.lower()
    excess = len(v) - ADDRESS_HEX_LEN
    if excess > 0:
        v = v[:2] + v[2 + excess:]
    return v


def to_decimal_string(value: Any) -> str:
    """Render a hex string ("0x...") or a base-10 value as a base-10 string."""
    if isinstance(value, str) and value.startswith("0x"):
        return str(int(value[2:], 16))
    return str(int(value))


def normalize_log_value(abi_type: str, value: Any) -> Any:
    """Normalize one assembled log value (topic or data) by its declared type."""
    if abi_type == "address":
        return fix_address_length(value)
    if abi_type in LOG_NUMERIC_TYPES:
        return to_decimal_string(value)
    return value
