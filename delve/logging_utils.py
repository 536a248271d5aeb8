"""Structured key=value logging for the generator.

Each record is one line: level, timestamp, logger name and the event fields,
either as ``key=value`` pairs or as compact JSON (``DELVE_LOG_JSON=1``).
``DELVE_LOG_LEVEL`` (debug|info|warn|error) sets the threshold.

Usage:
    from delve.logging_utils import get_logger
    log = get_logger("dungeon").bind(seed=42)
    log.info(event="dungeon_generated", rooms=9)

Values are written as-is when numeric; anything else is str()'d with spaces
replaced by underscores. ``None`` fields are dropped. Reserved keys: level, ts,
logger.
"""

from __future__ import annotations

import json
import os
import sys
import time
from typing import Any, Dict, Optional

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
TRUTHY = ("1", "true", "TRUE", "yes", "on")

CURRENT_LEVEL = LEVELS.get(os.getenv("DELVE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("DELVE_LOG_JSON", "0") in TRUTHY


def configure(level: Optional[str] = None, json_mode: Optional[bool] = None) -> None:
    """Override the env-derived threshold and output mode at runtime."""
    global CURRENT_LEVEL, JSON_MODE
    if level is not None:
        if level.lower() not in LEVELS:
            raise ValueError(f"unknown log level {level!r}")
        CURRENT_LEVEL = LEVELS[level.lower()]
    if json_mode is not None:
        JSON_MODE = json_mode


def _render_value(value: Any) -> str:
    if isinstance(value, (int, float)):
        return str(value)
    return str(value).replace(" ", "_")


def format_record(level: str, logger: str, fields: Dict[str, Any]) -> str:
    rec = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if JSON_MODE:
        rec.update(level=level, ts=ts, logger=logger)
        return json.dumps(rec, separators=(",", ":"), default=str)
    head = [f"level={level}", f"ts={ts}", f"logger={logger}"]
    return " ".join(head + [f"{k}={_render_value(v)}" for k, v in rec.items()])


class StructuredLogger:
    def __init__(self, name: str, context: Optional[Dict[str, Any]] = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **context) -> "StructuredLogger":
        """Return a child logger that adds ``context`` to every record."""
        return StructuredLogger(self.name, {**self.context, **context})

    def enabled(self, level: str) -> bool:
        return LEVELS[level] >= CURRENT_LEVEL

    def _emit(self, level: str, fields: Dict[str, Any]) -> None:
        if not self.enabled(level):
            return
        line = format_record(level, self.name, {**self.context, **fields})
        print(line, file=sys.stderr if level == "error" else sys.stdout)

    def debug(self, **fields):
        self._emit("debug", fields)

    def info(self, **fields):
        self._emit("info", fields)

    def warn(self, **fields):
        self._emit("warn", fields)

    def error(self, **fields):
        self._emit("error", fields)


_LOGGERS: Dict[str, StructuredLogger] = {}


def get_logger(name: str) -> StructuredLogger:
    if name not in _LOGGERS:
        _LOGGERS[name] = StructuredLogger(name)
    return _LOGGERS[name]


log = get_logger("delve")
