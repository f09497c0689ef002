"""Bounds of the rendering surface the dots bounce inside."""


class Bounds:
    """Surface extent. Replaced as a whole on resize, never mutated."""

    __slots__ = ("width", "height")

    def __init__(self, width, height):
        self.width = max(0, width)
        self.height = max(0, height)

    def __eq__(self, other):
        if not isinstance(other, Bounds):
            return NotImplemented
        return (self.width, self.height) == (other.width, other.height)

    def __repr__(self):
        return f"Bounds({self.width}x{self.height})"
