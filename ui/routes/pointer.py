"""Pointer and surface input relayed from the canvas page."""

from fastapi import APIRouter
from pydantic import BaseModel, Field

router = APIRouter(prefix="/api/v1/input", tags=["input"])

# Set by app.py
_engine = None


def init(engine):
    global _engine
    _engine = engine


class Point(BaseModel):
    x: float
    y: float


class Size(BaseModel):
    width: float = Field(ge=0)
    height: float = Field(ge=0)


@router.post("/press")
async def press(point: Point):
    """Start spawning at the press position until release."""
    await _engine.spawner.press_start(point.x, point.y)
    return {"ok": True}


@router.post("/drag")
async def drag(point: Point):
    """Spawn one dot where the pointer moved to."""
    dot = _engine.spawner.drag_update(point.x, point.y)
    return {"ok": True, "spawned": dot.id if dot else None}


@router.post("/release")
async def release():
    await _engine.spawner.press_end()
    return {"ok": True}


@router.post("/resize")
async def resize(size: Size):
    """Report the canvas size; used from the next frame on."""
    bounds = _engine.resize(size.width, size.height)
    return {"width": bounds.width, "height": bounds.height}
