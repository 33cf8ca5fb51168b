import math
from core.math import Vec3
from core.material import position_color
from core.geometry import Hittable, Sphere
from core.acceleration import Group
from core.scene import Scene, RenderSettings
from core.camera import Camera


# children sit above the parent, one per (dx, dz) diagonal
CHILD_OFFSETS = tuple(Vec3(dx, 1.0, dz) for dz in (-1.0, 1.0) for dx in (-1.0, 1.0))


def build(level: int, center: Vec3, radius: float) -> Hittable:
    """
    Sphere-flake of the given recursion depth.

    Level 1 is a bare sphere. Higher levels wrap the central sphere and four
    half-size sub-flakes, placed ``3r / sqrt(12)`` along each child offset, in
    a bounding group.
    """
    if level < 1:
        raise ValueError(f"recursion level must be at least 1, got {level}")

    sphere = Sphere(center, radius, position_color(center))
    if level == 1:
        return sphere

    rn = 3.0 * radius / math.sqrt(12.0)
    objects = [sphere]
    for offset in CHILD_OFFSETS:
        objects.append(build(level - 1, center + offset * rn, radius / 2.0))
    return Group(objects)


def sphere_count(level: int) -> int:
    """Number of spheres ``build`` creates for ``level``."""
    return (4 ** level - 1) // 3


class SphereFlakeBuilder:
    """Creates the sphere-flake scene and its matching camera."""

    def __init__(self,
                 center: Vec3 = Vec3(0.0, -1.0, 0.0),
                 radius: float = 1.0,
                 eye: Vec3 = Vec3(0.0, 0.0, -4.0)):
        self.center = center
        self.radius = radius
        self.eye = eye

    def build_scene(self, settings: RenderSettings) -> Scene:
        root = build(settings.level, self.center, self.radius)
        return Scene(root, settings.lights)

    def create_camera(self, size: int) -> Camera:
        return Camera(size, self.eye)
