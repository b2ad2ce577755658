"""Hull reconstruction: half-edge faces to triangle fans."""

from __future__ import annotations

import logging
from typing import Sequence

import numpy as np

from .decoder import points_array, to_half_edges
from .errors import IndexOutOfRange, LoopBoundExceeded
from .model import HalfEdge


LOGGER = logging.getLogger(__name__)


def reconstruct_hull(
    vertices: np.ndarray,
    faces: np.ndarray,
    edges: np.ndarray,
) -> np.ndarray:
    """Triangulate every face of a half-edge hull.

    *vertices*, *faces* and *edges* are decoded ``VERTEX``, ``FACE`` and
    ``HALF_EDGE`` arrays. Each face is fanned from the origin of its start
    half-edge, so an N-gon gives N-2 triangles. Hull faces are convex.

    Returns a ``(k, 3, 3)`` float32 block holding the decoded coordinates
    unchanged. A face whose chain does not close is logged and skipped. An
    index past the end of the vertex or half-edge table raises
    ``IndexOutOfRange``.
    """
    points = points_array(vertices)
    half_edges = to_half_edges(edges)

    corners: list[tuple[int, int, int]] = []
    for face_no, start in enumerate(int(f) for f in faces):
        try:
            corners.extend(fan_face(start, half_edges, len(points)))
        except LoopBoundExceeded as exc:
            LOGGER.warning("skipping hull face %d: %s", face_no, exc)

    return points[np.array(corners, dtype=np.intp).reshape(-1, 3)]


def fan_face(
    start: int,
    edges: Sequence[HalfEdge],
    vertex_count: int,
) -> list[tuple[int, int, int]]:
    """Vertex index triples fanning the face whose loop begins at *start*.

    The walk visits each half-edge at most once, so it always terminates;
    a chain that revisits an edge other than *start* raises
    ``LoopBoundExceeded``.
    """
    anchor = _origin(edges, start, vertex_count)
    edge = _edge(edges, start).next
    seen = {start}
    corners: list[tuple[int, int, int]] = []

    while edge != start:
        if edge in seen:
            raise LoopBoundExceeded(start, len(seen))
        seen.add(edge)

        following = _edge(edges, edge).next
        if following == start:
            break
        corners.append((
            anchor,
            _origin(edges, edge, vertex_count),
            _origin(edges, following, vertex_count),
        ))
        edge = following

    return corners


def _edge(edges: Sequence[HalfEdge], index: int) -> HalfEdge:
    if not 0 <= index < len(edges):
        raise IndexOutOfRange("half-edge", index, len(edges))
    return edges[index]


def _origin(edges: Sequence[HalfEdge], index: int, vertex_count: int) -> int:
    origin = _edge(edges, index).origin
    if not 0 <= origin < vertex_count:
        raise IndexOutOfRange("vertex", origin, vertex_count)
    return origin
