"""Unit tests for Vec3, Ray and AABB."""

import math
import pickle

import pytest

from core.math import AABB, Ray, Vec3, ZERO


class TestVec3:
    """Tests for vector arithmetic."""

    def test_add_sub(self):
        a = Vec3(1.0, 2.0, 3.0)
        b = Vec3(0.5, -1.0, 2.0)
        assert a + b == Vec3(1.5, 1.0, 5.0)
        assert a - b == Vec3(0.5, 3.0, 1.0)

    def test_scalar_and_componentwise_mul(self):
        a = Vec3(1.0, 2.0, 3.0)
        assert a * 2 == Vec3(2.0, 4.0, 6.0)
        assert 2 * a == Vec3(2.0, 4.0, 6.0)
        assert a * Vec3(0.0, 1.0, 2.0) == Vec3(0.0, 2.0, 6.0)

    def test_dot_cross(self):
        x = Vec3(1.0, 0.0, 0.0)
        y = Vec3(0.0, 1.0, 0.0)
        assert x.dot(y) == 0.0
        assert x.cross(y) == Vec3(0.0, 0.0, 1.0)

    def test_normalize_gives_unit_length(self):
        v = Vec3(-1.0, -3.0, 2.0).normalize()
        assert v.length() == pytest.approx(1.0)

    def test_normalize_zero_vector_does_not_raise(self):
        assert ZERO.normalize() == ZERO

    def test_reflect(self):
        d = Vec3(1.0, -1.0, 0.0)
        n = Vec3(0.0, 1.0, 0.0)
        assert d.reflect(n) == Vec3(1.0, 1.0, 0.0)

    def test_abs_min_max(self):
        a = Vec3(-1.0, 2.0, -3.0)
        b = Vec3(0.0, 1.0, 4.0)
        assert a.abs() == Vec3(1.0, 2.0, 3.0)
        assert a.min(b) == Vec3(-1.0, 1.0, -3.0)
        assert a.max(b) == Vec3(0.0, 2.0, 4.0)

    def test_is_immutable(self):
        v = Vec3(1.0, 2.0, 3.0)
        with pytest.raises(AttributeError):
            v.x = 5.0

    def test_pickle(self):
        v = Vec3(0.1, 0.2, 0.3)
        assert pickle.loads(pickle.dumps(v)) == v

    def test_iter(self):
        v = Vec3(1.0, 2.0, 3.0)
        assert tuple(v) == (1.0, 2.0, 3.0)


class TestRay:
    def test_direction_kept_as_given(self):
        ray = Ray(ZERO, Vec3(0.0, 0.0, 2.0))
        assert ray.direction == Vec3(0.0, 0.0, 2.0)

    def test_point_at_parameter(self):
        ray = Ray(Vec3(1.0, 0.0, 0.0), Vec3(0.0, 1.0, 0.0))
        assert ray.point_at_parameter(2.5) == Vec3(1.0, 2.5, 0.0)


class TestAABB:
    def test_surrounding_box(self):
        a = AABB(Vec3(0.0, 0.0, 0.0), Vec3(1.0, 1.0, 1.0))
        b = AABB(Vec3(-1.0, 0.5, 0.5), Vec3(0.5, 2.0, 0.5))
        box = AABB.surrounding_box(a, b)
        assert box.min == Vec3(-1.0, 0.0, 0.0)
        assert box.max == Vec3(1.0, 2.0, 1.0)
        assert box.contains(a)
        assert box.contains(b)
        assert not a.contains(box)

    def test_center_and_diagonal(self):
        box = AABB(Vec3(-1.0, -1.0, -1.0), Vec3(1.0, 1.0, 1.0))
        assert box.center() == ZERO
        assert box.diagonal() == pytest.approx(2.0 * math.sqrt(3.0))
