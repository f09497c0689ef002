"""Palette listing and toggling."""

from fastapi import APIRouter, HTTPException, status

from core.errors import PaletteError
from simulation.palette import Color

router = APIRouter(prefix="/api/v1/palette", tags=["palette"])

# Set by app.py
_engine = None
_bus = None


def init(engine, bus):
    global _engine, _bus
    _engine = engine
    _bus = bus


@router.get("")
async def list_colors():
    return _engine.selection.to_list()


@router.post("/{name}/toggle")
async def toggle(name: str):
    try:
        color = Color.from_name(name)
    except PaletteError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=exc.to_dict()) from exc
    _engine.selection.toggle(color)
    colors = _engine.selection.to_list()
    await _bus.publish({"kind": "palette", "colors": colors}, topic="palette")
    return colors
