"""Pytest fixtures for all tests."""

import random

import pytest
from httpx import AsyncClient, ASGITransport

from ui.app import create_app
from communication.bus import EventBus
from simulation.engine import SimulationEngine
from simulation.palette import ColorSelection
from simulation.spawner import SpawnController
from simulation.store import DotStore
from simulation.world import Bounds
from config import SimulationConfig


@pytest.fixture
def bounds():
    """A 100x100 surface."""
    return Bounds(width=100, height=100)


@pytest.fixture
def rng():
    """Seeded random source."""
    return random.Random(1234)


@pytest.fixture
def sim_config():
    """Fast test simulation config."""
    return SimulationConfig(
        frame_interval=0.01,
        world_width=100,
        world_height=100,
        spawn_interval=0.01,
        seed=1234,
    )


@pytest.fixture
def store(rng):
    return DotStore(rng)


@pytest.fixture
def selection():
    return ColorSelection()


@pytest.fixture
def spawner(store, selection, sim_config):
    return SpawnController(store, selection, random.Random(99), sim_config)


@pytest.fixture
async def bus():
    """Create test event bus."""
    return EventBus(queue_size=10)


@pytest.fixture
async def engine(bus, sim_config):
    """Create test simulation engine."""
    eng = SimulationEngine(bus=bus, config=sim_config)
    yield eng
    if eng._task:
        await eng.stop()
    await eng.spawner.close()


@pytest.fixture
async def app():
    """Create test FastAPI app."""
    return create_app()


@pytest.fixture
async def client(app):
    """Create async test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await app.state.engine.spawner.close()
