"""Geometric primitives used throughout the generator.

All coordinates are in feet. The floor plane is X-Z (Three.js convention),
Y is up. The front elevation sits on z = 0 and the building extends
towards +z.
"""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the floor plane (X-Z in Three.js convention)."""
    model_config = ConfigDict(frozen=True)

    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)


class Point3D(BaseModel):
    """Point in 3D space."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float


def p2(x: float, z: float) -> Point2D:
    return Point2D(x=x, z=z)


def p3(x: float, y: float, z: float) -> Point3D:
    return Point3D(x=x, y=y, z=z)


def rectangle(x0: float, z0: float, x1: float, z1: float) -> tuple[Point2D, ...]:
    """Counter-clockwise (viewed from +y) rectangle from two opposite corners."""
    return (p2(x0, z0), p2(x1, z0), p2(x1, z1), p2(x0, z1))
