"""Structured key=value logging for growth rate events.

Emits one line per event with a timestamp, level and logger name, either as
``key=value`` pairs or as compact JSON. Threshold and output mode come from
the environment and are read on every call, so tests and the CLI can adjust
them at runtime:

    GROWTH_LOG_LEVEL  debug | info | warn | error   (default: info)
    GROWTH_LOG_JSON   1 / true / yes / on enables JSON lines

Usage:
    from growthrates.logging_utils import get_logger
    log = get_logger("registry")
    log.info(event="growth_rate_registered", id="Fast")

Reserved keys: level, ts, logger.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
_TRUTHY = ("1", "true", "TRUE", "yes", "on")


def _threshold() -> int:
    return LEVELS.get(os.getenv("GROWTH_LOG_LEVEL", "info").lower(), 20)


def _json_mode() -> bool:
    return os.getenv("GROWTH_LOG_JSON", "0") in _TRUTHY


def _format(level: str, fields: dict) -> str:
    ts = int(time.time())
    if _json_mode():
        rec = {k: v for k, v in fields.items() if v is not None}
        rec["level"] = level
        rec["ts"] = ts
        return json.dumps(rec, separators=(",", ":"), default=repr)
    parts = [f"level={level}", f"ts={ts}"]
    for k, v in fields.items():
        if v is None:
            continue
        if isinstance(v, (int, float)):
            parts.append(f"{k}={v}")
        else:
            parts.append(f"{k}={str(v).replace(' ', '_')}")
    return " ".join(parts)


class _Logger:
    def __init__(self, name: str):
        self.name = name

    def _log(self, lvl: str, **fields) -> None:
        if LEVELS[lvl] < _threshold():
            return
        fields.setdefault("logger", self.name)
        stream = sys.stderr if lvl in ("warn", "error") else sys.stdout
        print(_format(lvl, fields), file=stream)

    def debug(self, **fields) -> None:
        self._log("debug", **fields)

    def info(self, **fields) -> None:
        self._log("info", **fields)

    def warn(self, **fields) -> None:
        self._log("warn", **fields)

    def error(self, **fields) -> None:
        self._log("error", **fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    if name not in _LOGGER_CACHE:
        _LOGGER_CACHE[name] = _Logger(name)
    return _LOGGER_CACHE[name]


log = get_logger("growthrates")
