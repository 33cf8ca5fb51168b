from typing import Optional, Sequence, Tuple
from dataclasses import dataclass, field
from core.math import Vec3
from core.geometry import Hittable


DEFAULT_LIGHT = Vec3(-1.0, -3.0, 2.0).normalize()


@dataclass
class RenderSettings:
    size: int = 512
    level: int = 9
    supersample: int = 4
    lights: Tuple[Vec3, ...] = field(default_factory=lambda: (DEFAULT_LIGHT,))
    grayscale: bool = False
    output: Optional[str] = None

    def __post_init__(self):
        if self.size < 1:
            raise ValueError(f"image size must be at least 1, got {self.size}")
        if self.level < 1:
            raise ValueError(f"recursion level must be at least 1, got {self.level}")
        if self.supersample < 1:
            raise ValueError(f"supersampling factor must be at least 1, got {self.supersample}")

        lights = []
        for light in self.lights:
            if light.length() == 0:
                raise ValueError("light direction must not be the zero vector")
            lights.append(light.normalize())
        self.lights = tuple(lights)

        if self.output is None:
            self.output = "image.pgm" if self.grayscale else "image.ppm"


class Scene:
    """Immutable scene tree plus the directional lights shining on it."""

    def __init__(self, root: Hittable, lights: Sequence[Vec3] = (DEFAULT_LIGHT,)):
        self.root = root
        self.lights: Tuple[Vec3, ...] = tuple(lights)
