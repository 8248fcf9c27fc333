import numpy as np
import pytest

from raycore.core import Point3D, Ray, Vec3D


def test_point_translation_is_component_wise():
    rng = np.random.default_rng(0)
    for _ in range(20):
        p = Point3D(*rng.uniform(-100.0, 100.0, size=3))
        v = Vec3D(rng.uniform(-100.0, 100.0, size=3))
        q = p + v
        assert isinstance(q, Point3D)
        assert q == p.translate(v)
        assert (q.x, q.y, q.z) == (p.x + v.x, p.y + v.y, p.z + v.z)


def test_point_only_translates_by_vectors():
    p = Point3D(1.0, 2.0, 3.0)
    with pytest.raises(TypeError):
        p + p
    with pytest.raises(TypeError):
        p.translate((1.0, 0.0, 0.0))


def test_point_vector_conversions():
    v = Vec3D.xyz(1.0, -2.0, 0.5)
    p = Point3D.from_vector(v)
    assert p.to_vector() == v
    assert Point3D.origin() + v == p
    assert p.to_tuple() == (1.0, -2.0, 0.5)


def test_ray_at_zero_is_origin():
    o = Point3D(1.0, 2.0, 3.0)
    r = Ray(o, Vec3D.xyz(0.0, 0.0, -1.0))
    assert r.at(0.0) == o


@pytest.mark.parametrize("t", [-3.5, -1.0, 0.25, 1.0, 7.0])
def test_ray_at_matches_origin_plus_scaled_direction(t):
    o = Point3D(0.5, -1.0, 2.0)
    d = Vec3D.xyz(1.0, 2.0, -0.5)
    r = Ray(o, d)
    assert r.at(t) == o + d * t


def test_ray_is_immutable():
    r = Ray(Point3D.origin(), Vec3D.unit(0))
    with pytest.raises(AttributeError):
        r.origin = Point3D(1.0, 1.0, 1.0)


def test_ray_at_with_numpy_parameter():
    o = Point3D(1.0, 0.0, 0.0)
    d = Vec3D.xyz(0.0, 2.0, 0.0)
    r = Ray(o, d)
    t = np.float64(0.5)
    assert o + t * d == Point3D(1.0, 1.0, 0.0)
    assert r.at(t) == Point3D(1.0, 1.0, 0.0)
