"""Document — a parsed KV3 tree plus path queries."""

from __future__ import annotations

from dataclasses import dataclass

from .getter import resolve, resolve_node
from .reader import parse
from .values import Value


@dataclass(frozen=True)
class Document:
    """Holds the root value of a parsed KV3 document."""

    root: Value

    @classmethod
    def from_text(cls, text: str) -> "Document":
        return cls(parse(text))

    def get(self, path: str) -> str:
        """Scalar text at *path*, or ``""`` when absent."""
        return resolve(self.root, path)

    def node(self, path: str) -> Value | None:
        return resolve_node(self.root, path)

    def has(self, path: str) -> bool:
        return resolve_node(self.root, path) is not None
