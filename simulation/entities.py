import math

from simulation.state import DotState
from simulation.vector import Vector2

MAX_DEFLECTION = math.pi / 4


class Dot:
    """A colored dot moving in a straight line and bouncing off the surface edges."""

    def __init__(self, id, position, direction, color, speed=5.0, radius=5.0):
        self.id = id
        self.position = position
        self.direction = direction
        self.color = color
        self.speed = speed
        self.radius = radius
        self.bounces = 0

    def update(self, bounds, rng):
        """Advance one frame. Each axis that hits an edge flips, deflects and counts a bounce."""
        self.position = self.position + self.direction * self.speed
        x, y = self.position

        if x <= 0 or x >= bounds.width:
            flipped = Vector2(-self.direction.x, self.direction.y)
            self.direction = flipped.rotated(rng.random() * MAX_DEFLECTION)
            self.bounces += 1

        # Corner hits fall through both checks: two deflections, two bounces.
        if y <= 0 or y >= bounds.height:
            flipped = Vector2(self.direction.x, -self.direction.y)
            self.direction = flipped.rotated(rng.random() * MAX_DEFLECTION)
            self.bounces += 1

    def to_state(self):
        """Immutable render view."""
        return DotState(self.id, self.position.x, self.position.y, self.radius, self.color.hex)
