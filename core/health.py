import asyncio
import time
from enum import Enum
from utils.timestamp import format_timestamp

class Status(Enum):
    OK = "healthy"
    DEGRADED = "degraded"
    FAIL = "unhealthy"

class CheckResult:
    __slots__ = ("name", "status", "msg")

    def __init__(self, name, status, msg=""):
        self.name = name
        self.status = status
        self.msg = msg

    def to_dict(self):
        return {"name": self.name,
                "status": self.status.value,
                "msg": self.msg}

class HealthReport:
    __slots__ = ("status", "checks", "uptime", "timestamp")

    def __init__(self, status, checks, uptime=0):
        self.status = status
        self.checks = checks
        self.uptime = uptime
        self.timestamp = format_timestamp()

    def to_dict(self):
        return {"status": self.status.value,
                "timestamp": self.timestamp,
                "uptime": round(self.uptime, 1),
                "checks": [check.to_dict() for check in self.checks]}

_checker = None

class HealthChecker:
    """Runs registered async checks, caching the combined report for ``ttl`` seconds."""

    def __init__(self, ttl=1.0, timeout=5.0):
        self._checks = {}
        self._cache = None
        self._cache_time = 0
        self._ttl = ttl
        self._timeout = timeout
        self._start_time = time.time()

    def register(self, name, check_fn, critical=True):
        self._checks[name] = (check_fn, critical)
        self._cache = None

    async def check(self):
        now = time.time()
        if self._cache and now - self._cache_time < self._ttl:
            return self._cache

        results = []
        for name, (check_fn, is_critical) in self._checks.items():
            try:
                result = await asyncio.wait_for(check_fn(), timeout=self._timeout)
            except asyncio.TimeoutError:
                result = CheckResult(name, Status.FAIL, "timeout")
            except Exception as exc:
                result = CheckResult(name, Status.FAIL, str(exc))
            results.append((result, is_critical))

        self._cache = HealthReport(combine([result for result, _ in results],
                                           [critical for _, critical in results]),
                                   [result for result, _ in results], now - self._start_time)
        self._cache_time = now
        return self._cache

def combine(results, critical_flags):
    """A failing critical check fails the whole report; anything else not OK degrades it."""
    status = Status.OK
    for result, is_critical in zip(results, critical_flags):
        if result.status == Status.FAIL and is_critical:
            return Status.FAIL
        if result.status != Status.OK:
            status = Status.DEGRADED
    return status

def get_health_checker():
    global _checker
    if not _checker:
        _checker = HealthChecker()
    return _checker

# Checks
async def check_event_loop():
    await asyncio.sleep(0)
    return CheckResult("loop", Status.OK)

def create_bus_check(bus, drop_ratio=0.1):
    async def check():
        stats = bus.get_stats()
        if stats["total_published"] > 0 and stats["total_dropped"] / stats["total_published"] > drop_ratio:
            return CheckResult("bus", Status.DEGRADED, "drops")
        return CheckResult("bus", Status.OK, f"{stats['subscriber_count']}sub")
    return check

def create_engine_check(engine, threshold=5.0):
    last_seen = [None, time.time()]

    async def check():
        snapshot = await engine.get_snapshot()
        now = time.time()

        if engine.state == "stopped":
            return CheckResult("engine", Status.DEGRADED, "stopped")

        if engine.state == "paused":
            last_seen[0], last_seen[1] = snapshot.tick, now
            return CheckResult("engine", Status.OK, f"paused@{snapshot.tick}")

        if last_seen[0] is not None and snapshot.tick == last_seen[0] and now - last_seen[1] > threshold:
            return CheckResult("engine", Status.FAIL, f"stuck@{snapshot.tick}")

        last_seen[0], last_seen[1] = snapshot.tick, now
        return CheckResult("engine", Status.OK, f"f{snapshot.tick} dots={len(snapshot.dots)}")
    return check

def create_logger_check(file_logger):
    async def check():
        queue_size, max_size = file_logger.queue.qsize(), file_logger.queue.maxsize
        if queue_size / max_size > 0.9:
            return CheckResult("log", Status.DEGRADED, f"{queue_size}/{max_size}")
        return CheckResult("log", Status.OK)
    return check
