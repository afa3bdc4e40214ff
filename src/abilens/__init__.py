from __future__ import annotations

from .abi_items import AbiItem, AbiParam, ItemKind, load_abi
from .core.config import RegistryConfig
from .core.models import DecodedCall, DecodedLog, DecodedParam, LogEntry
from .decoding.registry import AbiRegistry
from .decoding.signatures import canonical_signature, canonical_type, selector
from .errors import InvalidInputError
from .store.ttl_store import TTLStore

__all__ = [
    "AbiRegistry",
    "RegistryConfig",
    "TTLStore",
    "AbiItem",
    "AbiParam",
    "ItemKind",
    "load_abi",
    "canonical_type",
    "canonical_signature",
    "selector",
    "DecodedCall",
    "DecodedLog",
    "DecodedParam",
    "LogEntry",
    "InvalidInputError",
]
