from __future__ import annotations

import math
from numbers import Real
from typing import Any

from .vector import Vector


class Vec3D(Vector):
    """Three-dimensional vector of floats.

    ``*`` with another Vec3D is component-wise; use ``cross`` for the cross
    product. ``*`` and ``/`` with a real number scale every component.
    """

    DIM = 3

    __slots__ = ()

    @classmethod
    def _coerce(cls, value: Any) -> float:
        return float(value)

    @classmethod
    def xyz(cls, x: float, y: float, z: float) -> "Vec3D":
        return cls((x, y, z))

    @property
    def x(self) -> float:
        return self._components[0]

    @property
    def y(self) -> float:
        return self._components[1]

    @property
    def z(self) -> float:
        return self._components[2]

    def cross(self, other: "Vec3D") -> "Vec3D":
        self._check_same_kind(other)
        u, v = self, other
        return Vec3D((
            u.y * v.z - u.z * v.y,
            u.z * v.x - u.x * v.z,
            u.x * v.y - u.y * v.x,
        ))

    def norm(self) -> float:
        return math.sqrt(self.norm_squared())

    def __add__(self, other: Any) -> "Vec3D":
        if not isinstance(other, Vec3D):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "Vec3D":
        if not isinstance(other, Vec3D):
            return NotImplemented
        return self.sub(other)

    def __mul__(self, other: Any) -> "Vec3D":
        if isinstance(other, Vec3D):
            return self.mul(other)
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __rmul__(self, other: Any) -> "Vec3D":
        if isinstance(other, Real):
            return self.scale(float(other))
        return NotImplemented

    def __truediv__(self, other: Any) -> "Vec3D":
        if not isinstance(other, Real):
            return NotImplemented
        if other == 0:
            raise ZeroDivisionError("Vec3D division by zero")
        return self.scale(1.0 / float(other))

    def __neg__(self) -> "Vec3D":
        return self.neg()
