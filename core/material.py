from core.math import Vec3, ZERO


def position_color(center: Vec3) -> Vec3:
    """
    Diffuse color of a sphere, derived from where it sits: the normalized
    absolute value of its center. A sphere at the origin comes out black.
    """
    return center.abs().normalize()


class HitRecord:
    """Nearest intersection found so far. ``t == inf`` means nothing was hit."""

    __slots__ = ("t", "normal", "color")

    def __init__(self, t: float = float('inf'), normal: Vec3 = ZERO, color: Vec3 = ZERO):
        self.t = t
        self.normal = normal
        self.color = color

    @property
    def is_hit(self) -> bool:
        return self.t != float('inf')

    def __repr__(self):
        return f"HitRecord(t={self.t}, normal={self.normal!r}, color={self.color!r})"


NO_HIT = HitRecord()
