"""vphys_core — KV3 parsing and collision mesh reconstruction for .vphys files."""

from .document import Document
from .reader import parse
from .getter import resolve, resolve_node
from .values import KArray, KBlob, KObject, KScalar, Value
from .decoder import (
    BYTE,
    FACE,
    FLOAT,
    HALF_EDGE,
    INT32,
    TRIANGLE_INDEX,
    VERTEX,
    decode,
)
from .model import HalfEdge, Triangle, Vec3, as_triangles
from .hull import reconstruct_hull
from .mesh import assemble_mesh
from .sink import TriangleSink
from .collision import ConversionReport, collision_attribute_indices, convert
from .errors import (
    IndexOutOfRange,
    LoopBoundExceeded,
    MalformedDocument,
    MalformedEncoding,
    VphysCoreError,
)

__all__ = [
    "parse",
    "resolve",
    "resolve_node",
    "Document",
    "KArray",
    "KBlob",
    "KObject",
    "KScalar",
    "Value",
    "decode",
    "BYTE",
    "FACE",
    "FLOAT",
    "HALF_EDGE",
    "INT32",
    "TRIANGLE_INDEX",
    "VERTEX",
    "HalfEdge",
    "Triangle",
    "Vec3",
    "as_triangles",
    "reconstruct_hull",
    "assemble_mesh",
    "TriangleSink",
    "ConversionReport",
    "collision_attribute_indices",
    "convert",
    "VphysCoreError",
    "MalformedDocument",
    "MalformedEncoding",
    "IndexOutOfRange",
    "LoopBoundExceeded",
]
