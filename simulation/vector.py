"""Immutable 2D vector used for dot positions and directions."""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other):
        return Vector2(self.x + other.x, self.y + other.y)

    def __mul__(self, scalar):
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __iter__(self):
        yield self.x
        yield self.y

    def length(self):
        return math.hypot(self.x, self.y)

    def normalized(self):
        """Unit vector in the same direction. The zero vector stays zero."""
        length = self.length()
        if length == 0:
            return self
        return Vector2(self.x / length, self.y / length)

    def rotated(self, angle):
        """Rotate counter-clockwise by ``angle`` radians."""
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)
        return Vector2(self.x * cos_a - self.y * sin_a,
                       self.x * sin_a + self.y * cos_a)


def normalize(v):
    return v.normalized()


def rotate(v, angle):
    return v.rotated(angle)
