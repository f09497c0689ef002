"""Health and heartbeat routes."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from core.health import Status
from utils.timestamp import format_timestamp

router = APIRouter(prefix="/api/v1", tags=["health"])

# Set by app.py
_engine = None
_health_checker = None


def init(engine, health_checker):
    global _engine, _health_checker
    _engine = engine
    _health_checker = health_checker


@router.get("/health")
async def health():
    report = await _health_checker.check()
    status_code = 200 if report.status != Status.FAIL else 503
    return JSONResponse(content=report.to_dict(), status_code=status_code)


@router.get("/heartbeat")
async def heartbeat():
    """Lightweight heartbeat for frequent polling."""
    snapshot = await _engine.get_snapshot()
    return {
        "status": "ok",
        "timestamp": format_timestamp(),
        "tick": snapshot.tick,
        "dots": len(snapshot.dots),
        "uptime_s": snapshot.time,
        "engine_state": _engine.state,
    }
