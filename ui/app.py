"""FastAPI host for the playground: canvas page, frame stream and input routes."""

import asyncio
import json
import uuid
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse, StreamingResponse
from fastapi.staticfiles import StaticFiles

from communication.bus import EventBus
from config import load_config
from core.health import (
    get_health_checker,
    check_event_loop,
    create_bus_check,
    create_engine_check,
    create_logger_check,
)
from internal.logging import get_logger, LogLevel, StructuredLogger, AsyncFileLogger
from utils.crash import create_async_handler
from simulation.engine import SimulationEngine
from simulation.state import StateSnapshot
from ui.routes import control, api, health, pointer, palette

STATIC_DIR = Path(__file__).parent / "static"

# Every Nth frame is summarised into the file log
FRAME_LOG_EVERY = 60


def create_app(config=None):
    """Create and configure the FastAPI application."""
    config = config or load_config()

    StructuredLogger.configure(min_level=LogLevel.parse(config.logging.level))
    logger_instance = get_logger()

    bus = EventBus(queue_size=100)
    engine = SimulationEngine(bus=bus, config=config.simulation)
    file_logger = AsyncFileLogger(file_path=config.logging.file)
    health_checker = get_health_checker()

    def on_palette_change(selected):
        file_logger.try_log("palette", [color.name.lower() for color in selected])

    engine.selection.subscribe(on_palette_change)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger_instance.info("Playground starting", version="1.0.0")
        loop = asyncio.get_running_loop()
        loop.set_exception_handler(create_async_handler(logger_instance))

        await file_logger.start()
        log_sub = await bus.subscribe("logger", max_queue_size=200)

        async def log_worker():
            while True:
                item = await log_sub.queue.get()
                if isinstance(item, StateSnapshot):
                    if item.tick % FRAME_LOG_EVERY == 0:
                        file_logger.try_log("frame", {"tick": item.tick, "dots": len(item.dots),
                                                      "bounds": [item.width, item.height]})
                else:
                    file_logger.try_log("event", item)

        app.state.log_worker = asyncio.create_task(log_worker())

        health_checker.register("event_loop", check_event_loop, critical=True)
        health_checker.register("event_bus", create_bus_check(bus), critical=True)
        health_checker.register("simulation_engine", create_engine_check(engine), critical=True)
        health_checker.register("async_logger", create_logger_check(file_logger), critical=False)

        await engine.start()
        logger_instance.info("Playground started", width=engine.world.width, height=engine.world.height)

        yield

        logger_instance.info("Playground shutting down")
        await engine.stop()
        app.state.log_worker.cancel()
        try:
            await app.state.log_worker
        except asyncio.CancelledError:
            pass
        await file_logger.stop()
        logger_instance.info("Playground shutdown complete")

    app = FastAPI(
        title="Dot Playground",
        version="1.0.0",
        description="interactive bouncing-dot playground",
        lifespan=lifespan,
    )
    app.state.engine = engine
    app.state.bus = bus

    app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

    control.init(engine, bus)
    api.init(engine, bus, file_logger)
    health.init(engine, health_checker)
    pointer.init(engine)
    palette.init(engine, bus)

    app.include_router(control.router)
    app.include_router(api.router)
    app.include_router(health.router)
    app.include_router(pointer.router)
    app.include_router(palette.router)

    # Canvas page and the SSE frame stream read the bus directly

    @app.get("/", response_class=HTMLResponse)
    async def index():
        """Serve the canvas page."""
        return (STATIC_DIR / "index.html").read_text(encoding="utf-8")

    @app.get("/events")
    async def events(request: Request):
        """SSE endpoint - streams frames and palette/control events."""
        subscriber_name = f"ui-{uuid.uuid4().hex[:8]}"
        sub = await bus.subscribe(subscriber_name, max_queue_size=10)

        async def event_generator():
            try:
                snapshot = await engine.get_snapshot()
                yield format_sse("state", snapshot.to_dict())
                yield format_sse("event", {"kind": "palette", "colors": engine.selection.to_list()})

                while True:
                    if await request.is_disconnected():
                        break

                    try:
                        item = await asyncio.wait_for(sub.queue.get(), timeout=1.0)
                    except asyncio.TimeoutError:
                        yield ": keep-alive\n\n"
                        continue

                    if isinstance(item, StateSnapshot):
                        yield format_sse("state", item.to_dict())
                    else:
                        yield format_sse("event", item)
            finally:
                await bus.unsubscribe(subscriber_name)

        return StreamingResponse(event_generator(), media_type="text/event-stream")

    return app


def format_sse(event, data):
    """Format data as Server-Sent Event."""
    return f"event: {event}\ndata: {json.dumps(data, default=str)}\n\n"
