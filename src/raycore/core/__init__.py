from .field import Field, Float64Field, FLOAT64
from .vector import Vector
from .vec3d import Vec3D
from .ray import Point3D, Ray

__all__ = [
    "Field",
    "Float64Field",
    "FLOAT64",
    "Vector",
    "Vec3D",
    "Point3D",
    "Ray",
]
