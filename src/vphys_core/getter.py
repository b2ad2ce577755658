"""Path resolution over a parsed KV3 tree."""

from __future__ import annotations

import re

from .values import KArray, KBlob, KObject, KScalar, Value


_SEGMENT_RE = re.compile(r"(?P<key>[^\[\]]*)(?:\[(?P<index>\d+)\])?")


def split_segment(segment: str) -> tuple[str, int | None] | None:
    """Split ``key[3]`` into ``("key", 3)``; plain ``key`` gives ``("key", None)``.

    Returns ``None`` when the index suffix is malformed.
    """
    m = _SEGMENT_RE.fullmatch(segment)
    if m is None:
        return None
    index = m.group("index")
    return m.group("key"), (int(index) if index is not None else None)


def resolve_node(tree: Value, path: str) -> Value | None:
    """Walk *path* from *tree* and return the node it names, or ``None``.

    - each segment needs an object holding the key
    - an ``[i]`` suffix needs the value to be an array with ``i`` in bounds
    """
    current: Value = tree
    for segment in path.split("."):
        parts = split_segment(segment)
        if parts is None:
            return None
        key, index = parts

        if not isinstance(current, KObject):
            return None
        if key not in current.entries:
            return None
        current = current.entries[key]

        if index is None:
            continue
        if not isinstance(current, KArray):
            return None
        if index >= len(current.items):
            return None
        current = current.items[index]

    return current


def resolve(tree: Value, path: str) -> str:
    """Resolve *path* to a scalar string.

    Returns ``""`` for anything missing or non-scalar. Callers rely on the
    empty string to detect the end of an ``[i]`` enumeration.
    """
    node = resolve_node(tree, path)
    if isinstance(node, KScalar):
        return node.text
    if isinstance(node, KBlob):
        return node.hex
    if isinstance(node, (KObject, KArray)):
        return ""
    # None: nothing at path
    return ""
