"""Unit tests for configuration loading."""

import json

import pytest
from config import (
    Config,
    SimulationConfig,
    ServerConfig,
    LoggingConfig,
    load_config,
)


class TestSimulationConfig:
    """Tests for SimulationConfig class."""

    def test_default_values(self):
        """Defaults: 60 fps frames, 50 ms spawn cadence, four bounces."""
        config = SimulationConfig()
        assert config.frame_interval == pytest.approx(1 / 60)
        assert config.spawn_interval == 0.05
        assert config.speed == 5.0
        assert config.radius == 5.0
        assert config.max_bounces == 4
        assert config.seed is None

    def test_custom_values(self):
        config = SimulationConfig(world_width=320, world_height=200, speed=2.5, seed=7)
        assert (config.world_width, config.world_height) == (320, 200)
        assert config.speed == 2.5
        assert config.seed == 7

    def test_unknown_field_rejected(self):
        with pytest.raises(TypeError):
            SimulationConfig(dot_count=5)


class TestServerConfig:
    def test_default_values(self):
        config = ServerConfig()
        assert config.host == "127.0.0.1"
        assert config.port == 8080


class TestLoggingConfig:
    def test_default_values(self):
        config = LoggingConfig()
        assert config.level == "INFO"
        assert config.file == "logs/playground.log"
        assert config.crash_file == "logs/crash.log"


class TestConfig:
    """Tests for main Config class."""

    def test_default_config(self):
        config = Config()
        assert isinstance(config.simulation, SimulationConfig)
        assert isinstance(config.server, ServerConfig)
        assert isinstance(config.logging, LoggingConfig)

    def test_from_dict(self):
        data = {
            "simulation": {"spawn_interval": 0.1, "max_bounces": 2},
            "server": {"port": 9000},
            "logging": {"level": "DEBUG"}
        }
        config = Config.from_dict(data)
        assert config.simulation.spawn_interval == 0.1
        assert config.simulation.max_bounces == 2
        assert config.server.port == 9000
        assert config.logging.level == "DEBUG"

    def test_from_dict_partial(self):
        config = Config.from_dict({"simulation": {"seed": 3}})
        assert config.simulation.seed == 3
        assert config.server.port == 8080


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_reads_file(self):
        """load_config reads the bundled config.json."""
        config = load_config()
        assert isinstance(config, Config)
        assert config.simulation.world_width == 1024
        assert config.simulation.world_height == 768
        assert config.simulation.max_bounces == 4

    def test_load_config_custom_path(self, tmp_path):
        path = tmp_path / "playground.json"
        path.write_text(json.dumps({"simulation": {"radius": 2.0}}))
        assert load_config(path).simulation.radius == 2.0

    def test_load_config_missing_file(self, tmp_path):
        """load_config returns defaults for missing file."""
        config = load_config(tmp_path / "nonexistent.json")
        assert config.simulation.spawn_interval == 0.05
