"""Collision shape selection and conversion of a vphys document to triangles."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

import numpy as np

from .decoder import decode_faces, decode_half_edges, decode_indices, decode_vertices
from .document import Document
from .errors import IndexOutOfRange, MalformedEncoding
from .hull import reconstruct_hull
from .mesh import assemble_mesh
from .sink import TriangleSink


LOGGER = logging.getLogger(__name__)

DEFAULT_GROUPS = ('"default"', '"Default"')
SHAPE_ROOT = "m_parts[0].m_rnShape"


# ---------------------------------------------------------------------------
# Report
# ---------------------------------------------------------------------------

@dataclass
class ShapeFailure:
    kind: str  # "hull" | "mesh"
    index: int
    error: Exception

    def __str__(self) -> str:
        return f"{self.kind}[{self.index}]: {self.error}"


@dataclass
class ConversionReport:
    triangles: TriangleSink = field(default_factory=TriangleSink)
    hulls_total: int = 0
    hulls_converted: int = 0
    meshes_total: int = 0
    meshes_converted: int = 0
    failures: list[ShapeFailure] = field(default_factory=list)


# ---------------------------------------------------------------------------
# Selection
# ---------------------------------------------------------------------------

def collision_attribute_indices(
    doc: Document,
    groups: tuple[str, ...] = DEFAULT_GROUPS,
) -> list[int]:
    """Indices of ``m_collisionAttributes`` whose group string is in *groups*.

    Group strings are compared verbatim, quotes included.
    """
    indices: list[int] = []
    for i, group in _enumerate(doc, "m_collisionAttributes[{}].m_CollisionGroupString"):
        if group in groups:
            indices.append(i)
    LOGGER.info("collision attributes selected: %s", indices)
    return indices


def _enumerate(doc: Document, template: str) -> Iterator[tuple[int, str]]:
    """Yield ``(i, value)`` for ``template.format(i)`` until a value is absent."""
    i = 0
    while True:
        value = doc.get(template.format(i))
        if not value:
            return
        yield i, value
        i += 1


def _attribute_index(raw: str) -> int:
    try:
        return int(raw)
    except ValueError:
        raise MalformedEncoding(f"collision attribute index {raw!r} is not an integer") from None


# ---------------------------------------------------------------------------
# Per-shape geometry
# ---------------------------------------------------------------------------

def hull_triangles(doc: Document, index: int) -> np.ndarray:
    base = f"{SHAPE_ROOT}.m_hulls[{index}].m_Hull"
    vertex_blob = doc.get(f"{base}.m_VertexPositions") or doc.get(f"{base}.m_Vertices")
    vertices = decode_vertices(vertex_blob)
    faces = decode_faces(doc.get(f"{base}.m_Faces"))
    edges = decode_half_edges(doc.get(f"{base}.m_Edges"))
    LOGGER.debug(
        "hull[%d]: %d vertices, %d faces, %d half-edges",
        index, len(vertices), len(faces), len(edges),
    )
    return reconstruct_hull(vertices, faces, edges)


def mesh_triangles(doc: Document, index: int) -> np.ndarray:
    base = f"{SHAPE_ROOT}.m_meshes[{index}].m_Mesh"
    indices = decode_indices(doc.get(f"{base}.m_Triangles"))
    vertices = decode_vertices(doc.get(f"{base}.m_Vertices"))
    LOGGER.debug(
        "mesh[%d]: %d vertices, %d indices", index, len(vertices), len(indices)
    )
    return assemble_mesh(indices, vertices)


# ---------------------------------------------------------------------------
# Conversion
# ---------------------------------------------------------------------------

_SHAPES = (
    ("hull", "m_hulls", hull_triangles),
    ("mesh", "m_meshes", mesh_triangles),
)


def convert(
    doc: Document,
    sink: TriangleSink | None = None,
    groups: tuple[str, ...] = DEFAULT_GROUPS,
) -> ConversionReport:
    """Collect the triangles of every hull and mesh in a selected collision group.

    A shape that fails to decode or reconstruct is recorded in the report and
    contributes no triangles; the remaining shapes are still converted.
    """
    report = ConversionReport(triangles=sink if sink is not None else TriangleSink())
    selected = set(collision_attribute_indices(doc, groups))

    for kind, array_key, build in _SHAPES:
        template = f"{SHAPE_ROOT}.{array_key}[{{}}].m_nCollisionAttributeIndex"
        total = converted = 0
        for i, raw in _enumerate(doc, template):
            total += 1
            try:
                if _attribute_index(raw) not in selected:
                    continue
                triangles = build(doc, i)
            except (MalformedEncoding, IndexOutOfRange) as exc:
                LOGGER.error("%s[%d] skipped: %s", kind, i, exc)
                report.failures.append(ShapeFailure(kind, i, exc))
                continue
            report.triangles.extend(triangles)
            converted += 1

        LOGGER.info("%s: %d total, %d converted", kind, total, converted)
        if kind == "hull":
            report.hulls_total, report.hulls_converted = total, converted
        else:
            report.meshes_total, report.meshes_converted = total, converted

    LOGGER.info("%d triangles collected", len(report.triangles))
    return report
