import math
from abc import ABC, abstractmethod
from core.math import Vec3, Ray, AABB
from core.material import HitRecord


def ray_sphere(ray: Ray, center: Vec3, radius: float) -> float:
    """
    Distance along ``ray`` to the sphere surface, or ``inf`` when there is none.

    Solves t^2 - 2bt + (v.v - r^2) = 0 with v = center - origin and b = v.dir.
    When the origin is inside the sphere the exit point is returned, so rays
    leaving a surface slightly offset along the normal still get a forward hit.
    """
    v = center - ray.origin
    b = v.dot(ray.direction)
    disc = b * b - v.dot(v) + radius * radius
    if disc < 0.0:
        return float('inf')
    d = math.sqrt(disc)
    t2 = b + d
    if t2 < 0.0:
        return float('inf')
    t1 = b - d
    return t1 if t1 > 0.0 else t2


def shadow_test(ray: Ray, center: Vec3, radius: float) -> bool:
    """True when the sphere blocks ``ray`` anywhere in front of its origin."""
    v = center - ray.origin
    b = v.dot(ray.direction)
    disc = b * b - v.dot(v) + radius * radius
    return disc >= 0.0 and b + math.sqrt(disc) >= 0.0


class Hittable(ABC):
    @abstractmethod
    def intersect(self, hit: HitRecord, ray: Ray) -> HitRecord:
        """Return a record closer than ``hit``, or ``hit`` itself."""

    @abstractmethod
    def shadow(self, ray: Ray) -> bool:
        pass

    @abstractmethod
    def bounding_box(self) -> AABB:
        pass


class Sphere(Hittable):
    __slots__ = ("center", "radius", "color", "box")

    def __init__(self, center: Vec3, radius: float, color: Vec3):
        if not radius > 0:
            raise ValueError(f"sphere radius must be positive, got {radius}")
        self.center = center
        self.radius = float(radius)
        self.color = color
        r = Vec3(radius, radius, radius)
        self.box = AABB(center - r, center + r)

    def intersect(self, hit: HitRecord, ray: Ray) -> HitRecord:
        l = ray_sphere(ray, self.center, self.radius)
        if l >= hit.t:
            return hit
        p = ray.point_at_parameter(l)
        return HitRecord(l, (p - self.center).normalize(), self.color)

    def shadow(self, ray: Ray) -> bool:
        return shadow_test(ray, self.center, self.radius)

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self):
        return f"Sphere({self.center!r}, {self.radius})"
