"""Minimal structured logging helper.

Wraps print() to emit key=value pairs with a timestamp and level, so request
and generation events are easy to grep or parse without configuring the
stdlib logging tree.

Usage:
    from imagemaze.logging_utils import log
    log.info(event="maze_generated", width=101, height=75)

    req_log = log.bind(path="/")
    req_log.warn(event="image_rejected", reason="decode")

Non-numeric values are str()'d with spaces replaced by underscores.
Reserved keys: level, ts. Set MAZE_LOG_JSON=1 for one JSON object per line.
"""

from __future__ import annotations

import json
import os
import sys
import time

LEVELS = {"debug": 10, "info": 20, "warn": 30, "error": 40}
CURRENT_LEVEL = LEVELS.get(os.getenv("MAZE_LOG_LEVEL", "info").lower(), 20)
JSON_MODE = os.getenv("MAZE_LOG_JSON", "0") in ("1", "true", "TRUE", "yes", "on")


def _kv(key: str, value) -> str:
    if isinstance(value, (int, float)):
        return f"{key}={value}"
    return f"{key}=" + str(value).replace(" ", "_")


def _format(level: str, fields: dict) -> str:
    present = {k: v for k, v in fields.items() if v is not None}
    ts = int(time.time())
    if JSON_MODE:
        return json.dumps({**present, "level": level, "ts": ts}, separators=(",", ":"), default=str)
    return " ".join([f"level={level}", f"ts={ts}"] + [_kv(k, v) for k, v in present.items()])


class _Logger:
    def __init__(self, name: str, context: dict | None = None):
        self.name = name
        self.context = dict(context or {})

    def bind(self, **fields) -> "_Logger":
        """Return a logger that adds ``fields`` to every record."""
        return _Logger(self.name, {**self.context, **fields})

    def _log(self, lvl: str, fields: dict):
        if LEVELS[lvl] < CURRENT_LEVEL:
            return
        record = {"logger": self.name, **self.context, **fields}
        print(_format(lvl, record), file=sys.stderr if lvl == "error" else sys.stdout)

    def debug(self, **fields):
        self._log("debug", fields)

    def info(self, **fields):
        self._log("info", fields)

    def warn(self, **fields):
        self._log("warn", fields)

    def error(self, **fields):
        self._log("error", fields)


_LOGGER_CACHE: dict[str, _Logger] = {}


def get_logger(name: str) -> _Logger:
    return _LOGGER_CACHE.setdefault(name, _Logger(name))


log = get_logger("imagemaze")
