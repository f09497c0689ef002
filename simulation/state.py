from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp


class DotState:
    __slots__ = ("id", "x", "y", "radius", "color")

    def __init__(self, id, x, y, radius, color):
        self.id, self.x, self.y, self.radius, self.color = id, x, y, radius, color

    def to_dict(self):
        return {"id": self.id, "x": self.x, "y": self.y, "r": self.radius, "color": self.color}


class StateSnapshot:
    """One rendered frame: what the canvas should draw, in store order."""

    __slots__ = ("id", "timestamp", "tick", "time", "dots", "width", "height")

    def __init__(self, tick, time, dots, width=0, height=0, id=None, timestamp=None):
        self.id = id or generate_ksuid()
        self.timestamp = timestamp or format_timestamp()
        self.tick = tick
        self.time = time
        self.dots = dots
        self.width = width
        self.height = height

    def to_dict(self):
        return {
            "id": self.id,
            "timestamp": self.timestamp,
            "tick": self.tick,
            "sim_time_s": self.time,
            "bounds": [self.width, self.height],
            "dots": [dot.to_dict() for dot in self.dots],
        }
