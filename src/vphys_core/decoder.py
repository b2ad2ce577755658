"""Byte-blob decoding: hex text to fixed-size little-endian records."""

from __future__ import annotations

import logging

import numpy as np

from .errors import MalformedEncoding
from .model import HalfEdge


LOGGER = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Record layouts
# ---------------------------------------------------------------------------

FLOAT = np.dtype("<f4")
INT32 = np.dtype("<i4")
BYTE = np.dtype("u1")

VERTEX = np.dtype([("x", "<f4"), ("y", "<f4"), ("z", "<f4")])
HALF_EDGE = np.dtype([("next", "u1"), ("twin", "u1"), ("origin", "u1"), ("face", "u1")])
FACE = BYTE
TRIANGLE_INDEX = INT32


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def hex_bytes(hex_text: str) -> bytes:
    """Decode whitespace-separated hex pairs into raw bytes.

    Whitespace is irrelevant to the result; ``"AABB"`` and ``"AA BB"`` agree.
    """
    digits = "".join(hex_text.split())
    if len(digits) % 2:
        raise MalformedEncoding(f"incomplete byte pair ({len(digits)} hex digits)")
    try:
        return bytes.fromhex(digits)
    except ValueError as exc:
        raise MalformedEncoding(f"invalid hex data: {exc}") from exc


def decode(hex_text: str, record: np.dtype, *, strict: bool = False) -> np.ndarray:
    """Reinterpret a hex blob as an array of *record* values.

    Bytes that do not fill a whole trailing record are dropped with a
    warning, or raise ``MalformedEncoding`` when *strict* is set.
    """
    record = np.dtype(record)
    data = hex_bytes(hex_text)
    count, leftover = divmod(len(data), record.itemsize)
    if leftover:
        if strict:
            raise MalformedEncoding(
                f"{len(data)} bytes is not a multiple of the {record.itemsize}-byte record"
            )
        LOGGER.warning(
            "dropping %d trailing byte(s) that do not fill a %d-byte record",
            leftover,
            record.itemsize,
        )
    LOGGER.debug("decoded %d bytes into %d record(s) of %s", len(data), count, record)
    if count == 0:
        return np.empty(0, dtype=record)
    return np.frombuffer(data, dtype=record, count=count)


def decode_vertices(hex_text: str, *, strict: bool = False) -> np.ndarray:
    return decode(hex_text, VERTEX, strict=strict)


def decode_faces(hex_text: str, *, strict: bool = False) -> np.ndarray:
    return decode(hex_text, FACE, strict=strict)


def decode_half_edges(hex_text: str, *, strict: bool = False) -> np.ndarray:
    return decode(hex_text, HALF_EDGE, strict=strict)


def decode_indices(hex_text: str, *, strict: bool = False) -> np.ndarray:
    return decode(hex_text, TRIANGLE_INDEX, strict=strict)


# ---------------------------------------------------------------------------
# Record → model conversion
# ---------------------------------------------------------------------------

def points_array(vertices: np.ndarray) -> np.ndarray:
    """View decoded ``VERTEX`` records as an ``(n, 3)`` float32 array.

    No values are converted, so the coordinate bytes stay exactly as decoded.
    """
    vertices = np.ascontiguousarray(vertices, dtype=VERTEX)
    return vertices.view(FLOAT).reshape(-1, 3)


def to_half_edges(edges: np.ndarray) -> list[HalfEdge]:
    return [
        HalfEdge(int(e["next"]), int(e["twin"]), int(e["origin"]), int(e["face"]))
        for e in edges
    ]
