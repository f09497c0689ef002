"""Crash capture for the playground process and its event loop."""

import json
import os
import sys
import traceback

from utils.ksuid import generate_ksuid
from utils.timestamp import format_timestamp

# Overridden from LoggingConfig.crash_file by configure()
_crash_log = "logs/crash.log"


def configure(crash_file):
    global _crash_log
    _crash_log = crash_file


def _crash_record(exc_name, exc_msg, tb, context=None):
    record = {"id": generate_ksuid(), "timestamp": format_timestamp(),
              "type": exc_name, "msg": exc_msg, "traceback": tb}
    if context:
        record["context"] = context
    return record


def _append(record):
    """Append a crash record. Never raises: this runs while the process is already failing."""
    try:
        log_dir = os.path.dirname(_crash_log)
        if log_dir:
            os.makedirs(log_dir, exist_ok=True)
        with open(_crash_log, "a") as f:
            f.write(json.dumps(record, default=str) + "\n")
    except OSError as exc:
        sys.stderr.write(f"crash log unavailable ({_crash_log}): {exc}\n")


def log_crash(exc_type, exc_value, exc_tb):
    """sys.excepthook replacement: banner on stderr plus a JSONL record."""
    exc_name = exc_type.__name__ if exc_type else "Unknown"
    exc_msg = str(exc_value) if exc_value else ""
    tb = "".join(traceback.format_exception(exc_type, exc_value, exc_tb))
    record = _crash_record(exc_name, exc_msg, tb)

    rule = "=" * 60
    sys.stderr.write(f"\n{rule}\nCRASH [{record['id']}] {record['timestamp']}\n{rule}\n")
    sys.stderr.write(f"{exc_name}: {exc_msg}\n{'-' * 60}\n{tb}{rule}\n\n")
    _append(record)
    return record


def log_async_crash(exc, context, logger=None):
    """Record an exception the event loop could not deliver to anyone."""
    exc_name = type(exc).__name__ if exc else "AsyncError"
    exc_msg = str(exc) if exc else context.get("message", "Unknown")
    tb = "".join(traceback.format_exception(type(exc), exc, exc.__traceback__)) if exc else None

    if logger:
        logger.error("async exception", error=exc_msg, task=str(context.get("future", "unknown")))

    record = _crash_record(exc_name, exc_msg, tb, str(context))
    _append(record)
    return record


def create_async_handler(logger=None):
    """Exception handler for loop.set_exception_handler."""
    def handler(loop, context):
        log_async_crash(context.get("exception"), context, logger)
    return handler


def install_crash_handler():
    sys.excepthook = log_crash
