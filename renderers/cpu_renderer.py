import time
from typing import List, Sequence
from core.math import Vec3, Ray, ZERO
from core.material import NO_HIT
from core.geometry import Hittable
from core.scene import Scene, RenderSettings
from core.camera import Camera
from core.image import ImageSink
from renderers.base_renderer import BaseRenderer, RendererFactory


MAX_DEPTH = 1         # reflection bounces after the primary ray
DELTA = 1e-7          # offset along the normal for secondary ray origins
REFLECTANCE = 0.5

WHITE = Vec3(1.0, 1.0, 1.0)


def screen(a: Vec3, b: Vec3) -> Vec3:
    """Screen blend, 1 - (1 - a)(1 - b) per channel."""
    return WHITE - (WHITE - a) * (WHITE - b)


def ray_trace(lights: Sequence[Vec3], ray: Ray, scene: Hittable, depth: int = 0) -> Vec3:
    """
    Color seen along ``ray``.

    Each light adds a Lambertian term (zero when the surface faces away or a
    shadow ray toward the light is blocked) screened with half of one mirror
    bounce. Per-light results are screened together so no channel exceeds 1.
    """
    hit = scene.intersect(NO_HIT, ray)
    if hit.t == float('inf'):
        return ZERO

    color = ZERO
    for light in lights:
        g = hit.normal.dot(light)
        if g >= 0:
            continue

        o = ray.point_at_parameter(hit.t) + hit.normal * DELTA

        diffuse = ZERO
        if not scene.shadow(Ray(o, -light)):
            diffuse = hit.color * -g

        reflected = ZERO
        if depth < MAX_DEPTH:
            reflected_ray = Ray(o, ray.direction.reflect(hit.normal))
            reflected = ray_trace(lights, reflected_ray, scene, depth + 1) * REFLECTANCE

        color = screen(color, screen(diffuse, reflected))
    return color


def render_pixel(scene: Scene, camera: Camera, x: int, y: int, ss: int) -> Vec3:
    """Average of an ss x ss grid of rays through pixel (x, y)."""
    col = ZERO
    for dx in range(ss):
        for dy in range(ss):
            ray = camera.get_ray(x + dx / ss, y + dy / ss)
            col += ray_trace(scene.lights, ray, scene.root)
    return col / (ss * ss)


def render_row(scene: Scene, camera: Camera, y: int, ss: int) -> List[Vec3]:
    return [render_pixel(scene, camera, x, y, ss) for x in range(camera.size)]


class CPURenderer(BaseRenderer):
    """Single-threaded CPU ray tracer."""

    def __init__(self):
        super().__init__("cpu_raytracer")

    def get_capabilities(self) -> List[str]:
        return [
            "ray_tracing",
            "shadows",
            "reflection",
            "multiple_lights",
            "supersampling",
            "bounding_spheres"
        ]

    def render(self, scene: Scene, camera: Camera, settings: RenderSettings, sink: ImageSink) -> None:
        start_time = time.time()
        n = camera.size

        print(f"CPU rendering: {n}x{n}, {settings.supersample}x{settings.supersample} samples per pixel")

        # top row first; screen y grows upward
        for y in range(n - 1, -1, -1):
            sink.write_row(render_row(scene, camera, y, settings.supersample))

            if y % 50 == 0:
                print(f"Rows remaining: {y}")

        elapsed = time.time() - start_time
        minutes = int(elapsed // 60)
        seconds = elapsed % 60
        print(f"CPU rendering finished: {minutes}m {seconds:.2f}s")


RendererFactory.register("cpu_raytracer", CPURenderer)
