"""Pydantic models for JSON ABI entries plus loading helpers.

`AbiParam` / `AbiItem` accept the Solidity JSON ABI shape and keep unknown
keys (`outputs`, `stateMutability`, ...) so registered items round-trip.
`AbiItem.kind` turns the free-form `type` string into an explicit `ItemKind`.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from enum import Enum
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict


class ItemKind(str, Enum):
    FUNCTION = "function"
    EVENT = "event"
    CONSTRUCTOR = "constructor"
    FALLBACK = "fallback"
    OTHER = "other"


class AbiParam(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str = ""
    type: str
    indexed: bool = False
    components: list[AbiParam] | None = None
    internalType: str | None = None


class AbiItem(BaseModel):
    model_config = ConfigDict(extra="allow")

    # JSON ABI: "type" may be omitted and then defaults to "function"
    type: str = "function"
    name: str | None = None
    inputs: list[AbiParam] = []
    anonymous: bool = False

    @property
    def kind(self) -> ItemKind:
        try:
            return ItemKind(self.type)
        except ValueError:
            return ItemKind.OTHER


AbiJson = Iterable[dict[str, Any]]
AbiSpec = AbiJson | Path


def load_abi(abi: AbiSpec) -> list[dict[str, Any]]:
    """Return raw ABI entries from a JSON file or an in-memory iterable.

    Files may hold a bare list or a compiler artifact with an "abi" key.
    """
    if isinstance(abi, Path):
        raw = json.loads(abi.read_text())
        if isinstance(raw, dict) and "abi" in raw:
            raw = raw["abi"]
        return raw
    return list(abi)


def parse_abi_item(entry: AbiItem | dict[str, Any]) -> AbiItem:
    if isinstance(entry, AbiItem):
        return entry
    return AbiItem.model_validate(entry)


def parse_abi_items(entries: Iterable[AbiItem | dict[str, Any]]) -> list[AbiItem]:
    return [parse_abi_item(entry) for entry in entries]
