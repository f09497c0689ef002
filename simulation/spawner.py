"""Turns press/drag input into new dots."""

import asyncio

from internal.logging import get_logger
from simulation.entities import Dot
from simulation.vector import Vector2


class SpawnController:
    """Spawns at the press origin on a fixed cadence while held, and once per drag update."""

    def __init__(self, store, selection, rng, config):
        self.store = store
        self.selection = selection
        self.config = config
        self._rng = rng
        self._log = get_logger()
        self._origin = None
        self._task = None
        self._next_id = 0
        self.spawned = 0
        self.skipped = 0

    @property
    def pressed(self):
        return self._origin is not None

    async def press_start(self, x, y):
        # Swap in the new sequence before awaiting, so a concurrent release or press sees it.
        previous = self._task
        self._origin = Vector2(x, y)
        self._task = asyncio.create_task(self._run())
        self._log.debug(f"press start at ({x:.1f}, {y:.1f})")
        await self._cancel(previous)

    def drag_update(self, x, y):
        return self.spawn(Vector2(x, y))

    async def press_end(self):
        self._origin = None
        task, self._task = self._task, None
        await self._cancel(task)

    async def close(self):
        await self.press_end()

    async def _cancel(self, task):
        if task is None:
            return
        task.cancel()
        try:
            await task
        except asyncio.CancelledError:
            pass

    def on_timer(self):
        """One periodic firing: spawn at the original press position."""
        if self._origin is None:
            return None
        return self.spawn(self._origin)

    def spawn(self, position):
        colors = self.selection.snapshot()
        if not colors:
            self.skipped += 1
            return None

        direction = Vector2(self._rng.uniform(-1, 1), self._rng.uniform(-1, 1)).normalized()
        color = colors[self._rng.randrange(len(colors))]
        self._next_id += 1
        dot = Dot(f"d{self._next_id:05d}", position, direction, color,
                  speed=self.config.speed, radius=self.config.radius)
        self.store.insert(dot)
        self.spawned += 1
        return dot

    async def _run(self):
        interval = self.config.spawn_interval
        while True:
            await asyncio.sleep(interval)
            try:
                self.on_timer()
            except Exception as exc:
                self._log.error("spawn fail", error=exc)

    def get_stats(self):
        return {"spawned": self.spawned, "skipped": self.skipped, "pressed": self.pressed}
