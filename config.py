import json
from pathlib import Path

_DEFAULT_CONFIG = Path(__file__).parent / "config.json"


class SimulationConfig:
    __slots__ = ("frame_interval", "world_width", "world_height", "spawn_interval",
                 "speed", "radius", "max_bounces", "seed")

    def __init__(self, frame_interval=1 / 60, world_width=800, world_height=600, spawn_interval=0.05,
                 speed=5.0, radius=5.0, max_bounces=4, seed=None):
        self.frame_interval = frame_interval
        self.world_width = world_width
        self.world_height = world_height
        self.spawn_interval = spawn_interval
        self.speed = speed
        self.radius = radius
        self.max_bounces = max_bounces
        self.seed = seed


class ServerConfig:
    __slots__ = ("host", "port")

    def __init__(self, host="127.0.0.1", port=8080):
        self.host = host
        self.port = port


class LoggingConfig:
    __slots__ = ("level", "file", "crash_file")

    def __init__(self, level="INFO", file="logs/playground.log", crash_file="logs/crash.log"):
        self.level = level
        self.file = file
        self.crash_file = crash_file


class Config:
    __slots__ = ("simulation", "server", "logging")

    def __init__(self, simulation=None, server=None, logging=None):
        self.simulation = simulation or SimulationConfig()
        self.server = server or ServerConfig()
        self.logging = logging or LoggingConfig()

    @classmethod
    def from_dict(cls, d):
        return cls(
            SimulationConfig(**d.get("simulation", {})),
            ServerConfig(**d.get("server", {})),
            LoggingConfig(**d.get("logging", {})),
        )


def load_config(path=None):
    config_path = Path(path) if path else _DEFAULT_CONFIG

    if not config_path.exists():
        return Config()

    with open(config_path) as file:
        return Config.from_dict(json.load(file))
