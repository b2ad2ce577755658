"""Geometry value types shared by the reconstructors and the sink."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Vec3:
    x: float
    y: float
    z: float

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z


@dataclass(frozen=True, slots=True)
class HalfEdge:
    next: int
    twin: int  # kept for format fidelity, unused by reconstruction
    origin: int
    face: int


@dataclass(frozen=True, slots=True)
class Triangle:
    p1: Vec3
    p2: Vec3
    p3: Vec3

    def coords(self) -> tuple[float, ...]:
        """The 9 coordinates in output order (P1.xyz, P2.xyz, P3.xyz)."""
        return (*self.p1, *self.p2, *self.p3)

    @classmethod
    def from_rows(cls, rows) -> "Triangle":
        """Build from a ``(3, 3)`` array-like, one point per row."""
        return cls(*(Vec3(float(r[0]), float(r[1]), float(r[2])) for r in rows))


def as_triangles(block) -> list[Triangle]:
    """``(k, 3, 3)`` coordinate block → list of Triangle."""
    return [Triangle.from_rows(rows) for rows in block]
