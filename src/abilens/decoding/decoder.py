"""Calldata and event-log decoders backed by an `AbiRegistry`.

Lookups are permissive: an unknown namespace, unknown selector or empty
topic list yields None, since data from another contract is routine.
Malformed hex or a payload that does not match the ABI is not caught here;
`ValueError` / `eth_abi` decoding errors propagate to the caller.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any

from eth_utils import decode_hex, remove_0x_prefix

from abilens.core.constants import FUNCTION_SELECTOR_HEX_LEN
from abilens.core.models import DecodedCall, DecodedLog, DecodedParam, LogEntry
from abilens.decoding.signatures import canonical_type
from abilens.decoding.utils import normalize_call_value, normalize_log_value
from abilens.decoding.words import decode_words

if TYPE_CHECKING:
    from abilens.decoding.registry import AbiRegistry

_SELECTOR_END = 2 + FUNCTION_SELECTOR_HEX_LEN


# ---------- calldata ----------


def decode_method(*, registry: AbiRegistry, key: str, data: str) -> DecodedCall | None:
    """Decode "0x" + 4-byte selector + ABI-encoded args into a `DecodedCall`."""
    index = registry.get_method_ids(key)
    if index is None:
        return None

    item = index.get(data[2:_SELECTOR_END].lower())
    if item is None:
        return None

    types = [canonical_type(i) for i in item.inputs]
    decoded = decode_words(types, bytes.fromhex(data[_SELECTOR_END:]))

    params = [
        DecodedParam(name=inp.name, type=inp.type, value=normalize_call_value(inp.type, value))
        for inp, value in zip(item.inputs, decoded)
    ]
    return DecodedCall(name=item.name or "", params=params)


# ---------- logs ----------


def _as_log_entry(log: LogEntry | Mapping[str, Any]) -> LogEntry:
    if isinstance(log, LogEntry):
        return log
    return LogEntry.from_mapping(log)


def decode_log_item(
    *,
    registry: AbiRegistry,
    key: str,
    log: LogEntry | Mapping[str, Any],
) -> DecodedLog | None:
    """Decode one log (topics + data) into a `DecodedLog` or None if unmatched.

    Indexed inputs are read from topics[1:], the rest from `data`; output
    keeps the ABI input order.
    """
    index = registry.get_method_ids(key)
    if index is None:
        return None

    entry = _as_log_entry(log)
    if not entry.topics:
        return None

    event = index.get(remove_0x_prefix(entry.topics[0]).lower())
    if event is None:
        return None

    # Not enough topics for the declared indexed inputs
    n_indexed = sum(1 for i in event.inputs if i.indexed)
    if len(entry.topics) < 1 + n_indexed:
        return None

    data_types = [canonical_type(i) for i in event.inputs if not i.indexed]
    data_vals = decode_words(data_types, decode_hex(entry.data))

    topic_i = 1
    data_i = 0
    events: list[DecodedParam] = []
    for inp in event.inputs:
        if inp.indexed:
            value = entry.topics[topic_i]
            topic_i += 1
        else:
            value = data_vals[data_i]
            data_i += 1
        events.append(DecodedParam(name=inp.name, type=inp.type, value=normalize_log_value(inp.type, value)))

    return DecodedLog(name=event.name or "", address=entry.address, events=events)


def decode_logs(
    *,
    registry: AbiRegistry,
    key: str,
    logs: Iterable[LogEntry | Mapping[str, Any]],
) -> list[DecodedLog] | None:
    """Decode every log, dropping unmatched ones; None if nothing matched."""
    out: list[DecodedLog] = []
    for log in logs:
        decoded = decode_log_item(registry=registry, key=key, log=log)
        if decoded is not None:
            out.append(decoded)
    return out or None
