"""Microsecond UTC timestamps for logs, snapshots and error records."""

import time
from datetime import datetime, timezone


def now_micros():
    """Microseconds since the Unix epoch."""
    return time.time_ns() // 1_000


def format_timestamp(epoch_us=None):
    """ISO 8601, UTC, always six fractional digits and a trailing Z."""
    if epoch_us is None:
        epoch_us = now_micros()
    seconds, micros = divmod(epoch_us, 1_000_000)
    moment = datetime.fromtimestamp(seconds, tz=timezone.utc).replace(microsecond=micros)
    return moment.isoformat(timespec="microseconds").replace("+00:00", "Z")
