"""Shared builders for .vphys test documents."""

import numpy as np
import pytest


HEADER = "<!-- kv3 encoding:text:version{e21c7f3c-8a33-41c5-9977-a76d3a32aa0d} format:vpc19:version{f7b2ff8c-40fa-4b6f-8ddc-1d2f0bbf8b6d} -->"

TETRA_VERTICES = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (0.0, 1.0, 0.0), (0.0, 0.0, 1.0)]

# (next, twin, origin, face); faces wind (0,2,1) (0,1,3) (0,3,2) (1,2,3)
TETRA_EDGES = [
    (1, 8, 0, 0), (2, 9, 2, 0), (0, 3, 1, 0),
    (4, 2, 0, 1), (5, 11, 1, 1), (3, 6, 3, 1),
    (7, 5, 0, 2), (8, 10, 3, 2), (6, 0, 2, 2),
    (10, 1, 1, 3), (11, 7, 2, 3), (9, 4, 3, 3),
]
TETRA_FACES = [0, 3, 6, 9]
TETRA_TRIANGLES = [(0, 2, 1), (0, 1, 3), (0, 3, 2), (1, 2, 3)]


def hex_blob(data: bytes) -> str:
    return "#[ " + " ".join(f"{b:02X}" for b in data) + " ]"


def float_blob(points) -> str:
    return hex_blob(np.array(points, dtype="<f4").tobytes())


def _hull(attr, vertices=TETRA_VERTICES, faces=TETRA_FACES, edges=TETRA_EDGES,
          vertex_key="m_VertexPositions"):
    return (
        "{\n"
        f"\t\t\t\t\tm_nCollisionAttributeIndex = {attr}\n"
        "\t\t\t\t\tm_Hull =\n\t\t\t\t\t{\n"
        f"\t\t\t\t\t\t{vertex_key} = {float_blob(vertices)}\n"
        f"\t\t\t\t\t\tm_Faces = {hex_blob(bytes(faces))}\n"
        f"\t\t\t\t\t\tm_Edges = {hex_blob(bytes(b for e in edges for b in e))}\n"
        "\t\t\t\t\t}\n"
        "\t\t\t\t}"
    )


def _mesh(attr, vertices, indices):
    return (
        "{\n"
        f"\t\t\t\t\tm_nCollisionAttributeIndex = {attr}\n"
        "\t\t\t\t\tm_Mesh =\n\t\t\t\t\t{\n"
        f"\t\t\t\t\t\tm_Triangles = {hex_blob(np.array(indices, dtype='<i4').tobytes())}\n"
        f"\t\t\t\t\t\tm_Vertices = {float_blob(vertices)}\n"
        "\t\t\t\t\t}\n"
        "\t\t\t\t}"
    )


def _document(groups, hulls=(), meshes=()):
    attributes = ",\n".join(
        f"\t\t{{\n\t\t\tm_CollisionGroupString = {g}\n\t\t}}" for g in groups
    )
    return (
        f"{HEADER}\n"
        "{\n"
        "\t// generated for tests\n"
        "\tm_parts =\n\t[\n\t\t{\n"
        "\t\t\tm_rnShape =\n\t\t\t{\n"
        f"\t\t\t\tm_hulls =\n\t\t\t\t[\n{','.join(hulls)}\n\t\t\t\t]\n"
        f"\t\t\t\tm_meshes =\n\t\t\t\t[\n{','.join(meshes)}\n\t\t\t\t]\n"
        "\t\t\t}\n\t\t},\n\t]\n"
        f"\tm_collisionAttributes =\n\t[\n{attributes}\n\t]\n"
        "}\n"
    )


class VphysBuilder:
    hull = staticmethod(_hull)
    mesh = staticmethod(_mesh)
    document = staticmethod(_document)


@pytest.fixture
def vphys():
    return VphysBuilder()


@pytest.fixture
def tetra_expected():
    """Expected 36-byte records for the tetrahedron hull, in face order."""
    return [
        np.array([TETRA_VERTICES[i] for i in tri], dtype="<f4").tobytes()
        for tri in TETRA_TRIANGLES
    ]
