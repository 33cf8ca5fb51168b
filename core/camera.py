from core.math import Vec3, Ray


class Camera:
    """Pinhole camera looking down +z with the image plane ``size`` units away."""

    def __init__(self,
                 size: int,                              # square image width/height in pixels
                 eye: Vec3 = Vec3(0.0, 0.0, -4.0)):
        self.size = size
        self.origin = eye
        self.half = size / 2.0

    def get_ray(self, sx: float, sy: float) -> Ray:
        # (sx, sy) is a screen-space position in pixel units, y pointing up
        direction = Vec3(sx - self.half, sy - self.half, float(self.size))
        return Ray(self.origin, direction.normalize())
