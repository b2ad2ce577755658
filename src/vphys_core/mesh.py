"""Mesh assembly: flat triangle-index lists to triangles."""

from __future__ import annotations

import logging

import numpy as np

from .decoder import points_array
from .errors import IndexOutOfRange


LOGGER = logging.getLogger(__name__)


def assemble_mesh(indices: np.ndarray, vertices: np.ndarray) -> np.ndarray:
    """Emit one triangle per consecutive ``(i0, i1, i2)`` index triple.

    Returns a ``(k, 3, 3)`` float32 block of the decoded coordinates.
    """
    points = points_array(vertices)
    flat = np.asarray(indices, dtype=np.int64)

    usable = len(flat) - len(flat) % 3
    if usable != len(flat):
        LOGGER.warning("ignoring %d index(es) after the last full triangle", len(flat) - usable)
    flat = flat[:usable]

    bad = flat[(flat < 0) | (flat >= len(points))]
    if len(bad):
        raise IndexOutOfRange("vertex", int(bad[0]), len(points))

    return points[flat.reshape(-1, 3)]
