"""Value types for the parsed KV3 document tree."""

from __future__ import annotations

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Union


@dataclass(frozen=True)
class KScalar:
    text: str  # raw token, quotes kept

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class KBlob:
    hex: str  # single-space separated byte pairs

    def __str__(self) -> str:
        return self.hex


@dataclass(frozen=True)
class KArray:
    items: tuple["Value", ...] = ()

    def __len__(self) -> int:
        return len(self.items)

    def __str__(self) -> str:
        return "[" + ", ".join(str(v) for v in self.items) + "]"


@dataclass(frozen=True)
class KObject:
    entries: Mapping[str, "Value"] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if not isinstance(self.entries, MappingProxyType):
            # snapshot the caller's mapping
            object.__setattr__(self, "entries", MappingProxyType(dict(self.entries)))

    def __len__(self) -> int:
        return len(self.entries)

    def __str__(self) -> str:
        return "{" + ", ".join(f"{k} = {v}" for k, v in self.entries.items()) + "}"


Value = Union[KObject, KArray, KScalar, KBlob]
