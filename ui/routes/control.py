"""Playground control routes."""

import time

from fastapi import APIRouter, Depends

from ui.auth import verify_basic_auth

router = APIRouter(prefix="/api/v1/control", tags=["control"])

# Set by app.py
_engine = None
_bus = None


def init(engine, bus):
    global _engine, _bus
    _engine = engine
    _bus = bus


@router.post("/pause")
async def pause(username=Depends(verify_basic_auth)):
    """Freeze the dots in place. No frames are made up on resume."""
    await _engine.pause()
    await _bus.publish({"kind": "paused", "by": username, "timestamp": time.time()}, topic="control")
    return {"ok": True, "frame": _engine.frame}


@router.post("/resume")
async def resume(username=Depends(verify_basic_auth)):
    await _engine.resume()
    await _bus.publish({"kind": "resumed", "by": username, "timestamp": time.time()}, topic="control")
    return {"ok": True, "frame": _engine.frame}


@router.post("/reset")
async def reset(username=Depends(verify_basic_auth)):
    """Remove every dot and restart the frame counter."""
    await _engine.spawner.press_end()
    _engine.reset()
    await _bus.publish({"kind": "reset", "by": username, "timestamp": time.time()}, topic="control")
    return {"ok": True}
