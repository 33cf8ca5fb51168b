from typing import Iterator, Sequence
from core.math import Ray, AABB
from core.material import HitRecord
from core.geometry import Hittable, Sphere, ray_sphere, shadow_test


class Group(Hittable):
    """
    Inner node of the scene tree.

    Children are wrapped in a bounding sphere centred on the middle of their
    combined box, with half the box diagonal as radius. A ray starting outside
    that sphere whose entry distance is not shorter than the best hit so far
    skips the whole subtree.
    """

    __slots__ = ("objects", "box", "bound_center", "bound_radius")

    def __init__(self, objects: Sequence[Hittable]):
        if len(objects) == 0:
            raise ValueError("a group needs at least one child")
        self.objects = tuple(objects)

        box = self.objects[0].bounding_box()
        for obj in self.objects[1:]:
            box = AABB.surrounding_box(box, obj.bounding_box())
        self.box = box
        self.bound_center = box.center()
        self.bound_radius = box.diagonal() * 0.5

    def intersect(self, hit: HitRecord, ray: Ray) -> HitRecord:
        # an origin inside the bound (secondary rays) can reach children at any
        # distance short of the exit point, so only outside origins are culled
        v = self.bound_center - ray.origin
        if v.dot(v) > self.bound_radius * self.bound_radius:
            if ray_sphere(ray, self.bound_center, self.bound_radius) >= hit.t:
                return hit

        for obj in self.objects:
            hit = obj.intersect(hit, ray)
        return hit

    def shadow(self, ray: Ray) -> bool:
        if not shadow_test(ray, self.bound_center, self.bound_radius):
            return False
        return any(obj.shadow(ray) for obj in self.objects)

    def bounding_box(self) -> AABB:
        return self.box

    def __repr__(self):
        return f"Group({len(self.objects)} children, radius={self.bound_radius:.3f})"


def leaves(node: Hittable) -> Iterator[Sphere]:
    """Every sphere under ``node``, depth first in child order."""
    if isinstance(node, Group):
        for obj in node.objects:
            yield from leaves(obj)
    else:
        yield node


def intersect_unculled(node: Hittable, hit: HitRecord, ray: Ray) -> HitRecord:
    """Nearest hit over all leaves, ignoring bounding spheres."""
    for sphere in leaves(node):
        hit = sphere.intersect(hit, ray)
    return hit
