"""Canonical type strings and selector derivation.

- `canonical_type`: flatten (possibly nested) tuple params into "(a,b)[]" form.
- `canonical_signature`: "name(type1,type2,...)" as hashed on-chain.
- `selector`: keccak of the signature; 4 bytes for functions, 32 for events.
"""

from __future__ import annotations

from eth_utils import keccak

from abilens.abi_items import AbiItem, AbiParam, ItemKind
from abilens.core.constants import FUNCTION_SELECTOR_HEX_LEN

TUPLE_PREFIX = "tuple"


def canonical_type(param: AbiParam) -> str:
    """Return the type string used in signature hashing.

    `tuple`, `tuple[]`, `tuple[2][3]` expand to "(c1,c2,...)" followed by the
    bracket suffix carried after the literal "tuple" prefix.
    """
    t = param.type
    if not t.startswith(TUPLE_PREFIX):
        return t
    inner = ",".join(canonical_type(c) for c in param.components or [])
    return f"({inner}){t[len(TUPLE_PREFIX):]}"


def canonical_signature(item: AbiItem) -> str:
    return f"{item.name}({','.join(canonical_type(i) for i in item.inputs)})"


def selector(item: AbiItem) -> str | None:
    """Hex selector without 0x, or None for unnamed items."""
    if not item.name:
        return None
    digest = keccak(text=canonical_signature(item)).hex()
    if item.kind is ItemKind.EVENT:
        return digest
    return digest[:FUNCTION_SELECTOR_HEX_LEN]
