"""Logging setup: one stream handler, JSON or human-readable lines."""

from __future__ import annotations

import json
import logging
from datetime import datetime, timezone

# Extra attributes copied into JSON lines when a log call passes them.
_EXTRA_FIELDS = ("task_id", "operation")


class JSONFormatter(logging.Formatter):
    """Format log records as single-line JSON objects."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in _EXTRA_FIELDS:
            val = record.__dict__.get(key)
            if val is not None:
                log[key] = str(val)
        if record.exc_info:
            log["exception"] = self.formatException(record.exc_info)
        return json.dumps(log, ensure_ascii=False)


def setup_logging(level: str = "INFO", fmt: str = "text") -> None:
    """
    Configure the root logger. Safe to call more than once: handlers
    installed by an earlier call are replaced.
    """
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_task_api_handler", False):
            root.removeHandler(h)

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(
            fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        ))
    handler._task_api_handler = True
    root.addHandler(handler)
    root.setLevel(getattr(logging, level.upper(), logging.INFO))
