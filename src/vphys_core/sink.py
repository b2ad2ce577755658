"""Triangle sink and the flat ``.tri`` output format."""

from __future__ import annotations

from pathlib import Path
from typing import BinaryIO, Iterable, Iterator

import numpy as np

from .model import Triangle, as_triangles


TRIANGLE_DTYPE = np.dtype("<f4")
TRIANGLE_SIZE = 9 * TRIANGLE_DTYPE.itemsize  # 36 bytes, no header or padding


class TriangleSink:
    """Accumulates triangles in emission order.

    Triangles are held as ``(k, 3, 3)`` float32 blocks so coordinates
    decoded from a blob are written back byte for byte.
    """

    def __init__(self) -> None:
        self._blocks: list[np.ndarray] = []

    def append(self, triangle: Triangle) -> None:
        self._blocks.append(np.array(triangle.coords(), dtype=TRIANGLE_DTYPE).reshape(1, 3, 3))

    def extend(self, triangles: np.ndarray | Iterable[Triangle]) -> None:
        """Add a ``(k, 3, 3)`` coordinate block or an iterable of Triangle."""
        if isinstance(triangles, np.ndarray):
            block = triangles.astype(TRIANGLE_DTYPE, copy=False).reshape(-1, 3, 3)
        else:
            block = np.array([t.coords() for t in triangles], dtype=TRIANGLE_DTYPE).reshape(-1, 3, 3)
        if len(block):
            self._blocks.append(block)

    def __len__(self) -> int:
        return sum(len(b) for b in self._blocks)

    def __iter__(self) -> Iterator[Triangle]:
        for block in self._blocks:
            yield from as_triangles(block)

    def to_bytes(self) -> bytes:
        """9 little-endian float32 per triangle: P1.xyz, P2.xyz, P3.xyz."""
        if not self._blocks:
            return b""
        return np.concatenate(self._blocks).tobytes()

    def write(self, fp: BinaryIO) -> int:
        data = self.to_bytes()
        fp.write(data)
        return len(data)

    def save(self, path: str | Path) -> int:
        with open(path, "wb") as fh:
            return self.write(fh)
