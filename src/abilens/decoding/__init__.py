"""ABI-driven decoding of calldata and event logs.

This package provides:
- Canonical type / signature / selector derivation
- AbiRegistry: namespace-keyed ABI state with TTL expiry
- Calldata and log decoders that return normalized, ordered parameters
"""

from abilens.decoding.decoder import decode_log_item, decode_logs, decode_method
from abilens.decoding.registry import AbiRegistry, build_selector_index
from abilens.decoding.signatures import canonical_signature, canonical_type, selector
from abilens.decoding.words import decode_words

__all__ = [
    "AbiRegistry",
    "build_selector_index",
    "canonical_signature",
    "canonical_type",
    "selector",
    "decode_words",
    "decode_method",
    "decode_log_item",
    "decode_logs",
]
