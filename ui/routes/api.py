"""Stats and subscriber introspection."""

from fastapi import APIRouter, Depends

from utils.timestamp import format_timestamp
from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1", tags=["api"])

# Set by app.py
_engine = None
_bus = None
_file_logger = None


def init(engine, bus, file_logger):
    global _engine, _bus, _file_logger
    _engine = engine
    _bus = bus
    _file_logger = file_logger


@router.get("/stats")
async def stats(username=Depends(verify_basic_auth)):
    snapshot = await _engine.get_snapshot()
    return {
        "timestamp": format_timestamp(),
        "simulation": {
            "frame": snapshot.tick,
            "sim_time_s": snapshot.time,
            "bounds": [snapshot.width, snapshot.height],
            "paused": _engine.paused,
            "store": _engine.store.get_stats(),
            "spawner": _engine.spawner.get_stats(),
            "selected": [color.name.lower() for color in _engine.selection.snapshot()],
        },
        "bus": _bus.get_stats(),
        "logger": _file_logger.get_stats(),
    }


@router.get("/subscribers")
async def subscribers(username=Depends(verify_basic_auth)):
    return await _bus.get_subscriber_info()
