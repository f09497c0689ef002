import asyncio
import random
import time
from config import load_config
from internal.logging import get_logger
from simulation.palette import ColorSelection
from simulation.spawner import SpawnController
from simulation.state import StateSnapshot
from simulation.store import DotStore
from simulation.world import Bounds

class EngineState:
    STOPPED = "stopped"
    RUNNING = "running"
    PAUSED = "paused"

class SimulationEngine:
    """Frame clock for the playground. One tick per frame: update, expire, snapshot."""

    def __init__(self, bus, config=None, rng=None):
        self.bus = bus
        self.config = config or load_config().simulation
        self.rng = rng or random.Random(self.config.seed)
        self._lock = asyncio.Lock()
        self._log = get_logger()
        self.world = Bounds(self.config.world_width, self.config.world_height)
        self.store = DotStore(self.rng, max_bounces=self.config.max_bounces)
        self.selection = ColorSelection()
        self.spawner = SpawnController(self.store, self.selection, self.rng, self.config)
        self.frame = 0
        self.sim_time = 0.0
        self._state = EngineState.STOPPED
        self._task = None
        self._stop = asyncio.Event()
        self._last_publish_frame = -1

    @property
    def paused(self):
        return self._state == EngineState.PAUSED

    @property
    def state(self):
        return self._state

    def reset(self):
        self.frame = 0
        self.sim_time = 0.0
        self._last_publish_frame = -1
        self.store.clear()

    def resize(self, width, height):
        self.world = Bounds(width, height)
        self._log.debug(f"resize {self.world.width}x{self.world.height}")
        return self.world

    def tick(self, elapsed=0.0):
        """Advance every dot by one frame and return what should be drawn."""
        bounds = self.world
        self.store.update_all(bounds)
        expired = self.store.expire()
        if expired:
            self._log.debug(f"expired n={expired} frame={self.frame}")
        self.frame += 1
        self.sim_time += elapsed
        return self._snapshot(bounds)

    async def start(self):
        if self._task:
            return
        self._stop.clear()
        self._state = EngineState.RUNNING
        self._task = asyncio.create_task(self._loop())

    async def stop(self):
        self._stop.set()
        if self._task:
            await self._task
            self._task = None
        await self.spawner.close()
        self._state = EngineState.STOPPED
        await self.bus.publish({"kind": "engine_stopped", "tick": self.frame}, topic="control")

    async def pause(self):
        async with self._lock:
            self._state = EngineState.PAUSED
            self._log.info(f"engine paused frame={self.frame}")

    async def resume(self):
        async with self._lock:
            self._state = EngineState.RUNNING
            self._log.info(f"engine resumed frame={self.frame}")

    async def get_snapshot(self):
        async with self._lock:
            return self._snapshot(self.world)

    def _snapshot(self, bounds):
        return StateSnapshot(self.frame, self.sim_time, self.store.snapshot(),
                             width=bounds.width, height=bounds.height)

    async def _loop(self):
        frame_interval = self.config.frame_interval
        next_frame_time = time.perf_counter()
        last_frame_time = next_frame_time
        self._log.info(f"engine start dt={frame_interval:.4f}")

        while not self._stop.is_set():
            wait_time = next_frame_time - time.perf_counter()
            if wait_time > 0:
                try:
                    await asyncio.wait_for(self._stop.wait(), timeout=wait_time)
                    break
                except asyncio.TimeoutError:
                    pass
            now = time.perf_counter()
            # Late frames are not made up: re-anchor the schedule on the current time.
            next_frame_time = max(next_frame_time + frame_interval, now)

            try:
                async with self._lock:
                    if self._state != EngineState.RUNNING:
                        last_frame_time = now
                        continue
                    snapshot = self.tick(now - last_frame_time)
                    last_frame_time = now
            except Exception as exc:
                self._log.error("tick fail", error=exc)
                last_frame_time = now
                continue

            if self.frame != self._last_publish_frame:
                await self.bus.publish(snapshot, topic="frame")
                self._last_publish_frame = self.frame

        self._log.info(f"engine stop frame={self.frame}")
