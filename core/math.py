import math


class Vec3:
    """Immutable 3-component vector used for points, directions and colors."""

    __slots__ = ("x", "y", "z")

    def __init__(self, x=0.0, y=0.0, z=0.0):
        object.__setattr__(self, "x", float(x))
        object.__setattr__(self, "y", float(y))
        object.__setattr__(self, "z", float(z))

    def __setattr__(self, name, value):
        raise AttributeError("Vec3 is immutable")

    def __reduce__(self):
        return (Vec3, (self.x, self.y, self.z))

    def __add__(self, other):
        return Vec3(self.x + other.x,
                    self.y + other.y,
                    self.z + other.z)

    def __sub__(self, other):
        return Vec3(self.x - other.x,
                    self.y - other.y,
                    self.z - other.z)

    def __mul__(self, t):
        # scalar or componentwise (Hadamard) product
        if isinstance(t, Vec3):
            return Vec3(self.x * t.x,
                        self.y * t.y,
                        self.z * t.z)
        return Vec3(self.x * t, self.y * t, self.z * t)

    __rmul__ = __mul__

    def __truediv__(self, t):
        return Vec3(self.x / t, self.y / t, self.z / t)

    def __neg__(self):
        return Vec3(-self.x, -self.y, -self.z)

    def __iter__(self):
        yield self.x
        yield self.y
        yield self.z

    def __eq__(self, other):
        if not isinstance(other, Vec3):
            return NotImplemented
        return self.x == other.x and self.y == other.y and self.z == other.z

    def __hash__(self):
        return hash((self.x, self.y, self.z))

    def dot(self, other):
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other):
        return Vec3(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x
        )

    def length(self):
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self):
        l = self.length()
        if l == 0:
            return Vec3(0, 0, 0)
        return self / l

    def reflect(self, normal):
        # r = v - 2 * dot(v, n) * n
        return self - normal * (2 * self.dot(normal))

    def abs(self):
        return Vec3(abs(self.x), abs(self.y), abs(self.z))

    def min(self, other):
        return Vec3(min(self.x, other.x), min(self.y, other.y), min(self.z, other.z))

    def max(self, other):
        return Vec3(max(self.x, other.x), max(self.y, other.y), max(self.z, other.z))

    def __repr__(self):
        return f"Vec3({self.x:.3f}, {self.y:.3f}, {self.z:.3f})"


ZERO = Vec3(0.0, 0.0, 0.0)


class Ray:
    """Origin and direction. The direction is kept exactly as given."""

    __slots__ = ("origin", "direction")

    def __init__(self, origin: Vec3, direction: Vec3):
        self.origin = origin
        self.direction = direction

    def point_at_parameter(self, t):
        return self.origin + self.direction * t

    def __repr__(self):
        return f"Ray({self.origin!r}, {self.direction!r})"


class AABB:
    __slots__ = ("min", "max")

    def __init__(self, min_pt: Vec3, max_pt: Vec3):
        self.min = min_pt
        self.max = max_pt

    @staticmethod
    def surrounding_box(box0, box1):
        return AABB(box0.min.min(box1.min), box0.max.max(box1.max))

    def center(self) -> Vec3:
        return (self.min + self.max) * 0.5

    def diagonal(self) -> float:
        return (self.max - self.min).length()

    def contains(self, other) -> bool:
        return (self.min.x <= other.min.x and self.min.y <= other.min.y and self.min.z <= other.min.z and
                other.max.x <= self.max.x and other.max.y <= self.max.y and other.max.z <= self.max.z)

    def __repr__(self):
        return f"AABB({self.min!r}, {self.max!r})"
