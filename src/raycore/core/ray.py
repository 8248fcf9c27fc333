"""Points and parametric rays.

A Point3D is a position, not a displacement: the only mixed operation is
translation by a Vec3D. Rays are evaluated as origin + t * direction for any
real t (negative values walk backwards from the origin).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Tuple

from .vec3d import Vec3D


@dataclass(frozen=True)
class Point3D:
    x: float
    y: float
    z: float

    def __post_init__(self) -> None:
        object.__setattr__(self, "x", float(self.x))
        object.__setattr__(self, "y", float(self.y))
        object.__setattr__(self, "z", float(self.z))

    @classmethod
    def origin(cls) -> "Point3D":
        return cls(0.0, 0.0, 0.0)

    @classmethod
    def from_vector(cls, v: Vec3D) -> "Point3D":
        """Position reached by translating the origin by ``v``."""
        return cls(v.x, v.y, v.z)

    def to_vector(self) -> Vec3D:
        """Displacement from the origin to this point."""
        return Vec3D((self.x, self.y, self.z))

    def translate(self, v: Vec3D) -> "Point3D":
        if not isinstance(v, Vec3D):
            raise TypeError(f"Point3D can only be translated by a Vec3D, got {type(v).__name__}")
        return Point3D(self.x + v.x, self.y + v.y, self.z + v.z)

    def __add__(self, other: Any) -> "Point3D":
        if not isinstance(other, Vec3D):
            return NotImplemented
        return self.translate(other)

    def to_tuple(self) -> Tuple[float, float, float]:
        return (self.x, self.y, self.z)


@dataclass(frozen=True)
class Ray:
    origin: Point3D
    direction: Vec3D

    def at(self, t: float) -> Point3D:
        return self.origin.translate(self.direction * t)
