"""Logging setup for applications embedding csvrender.

The library only creates module loggers. An application calls
``setup_logging`` once to get console output and, optionally, a JSON-lines
file in which every ``extra={...}`` field becomes a key.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional

from .env import is_dev_mode

CONSOLE_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

# Attributes every LogRecord has; anything else came in through ``extra``.
_RECORD_ATTRIBUTES = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", None, None))
) | {"message", "asctime", "taskName"}

_CONFIGURED = False
_LOG_FILE: Optional[Path] = None


def _json_safe(value: Any) -> Any:
    if isinstance(value, (str, int, float, bool)) or value is None:
        return value
    return str(value)


class StructuredFormatter(logging.Formatter):
    """One JSON object per record: timestamp, level, logger, message, extras."""

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update(
            (key, _json_safe(value))
            for key, value in vars(record).items()
            if key not in _RECORD_ATTRIBUTES and not key.startswith("_")
        )
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def _handlers_for(log_file: Optional[Path]) -> List[logging.Handler]:
    console = logging.StreamHandler()
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))
    if log_file is None:
        return [console]

    log_file.parent.mkdir(parents=True, exist_ok=True)
    structured = logging.FileHandler(log_file, encoding="utf-8")
    structured.setFormatter(StructuredFormatter())
    return [console, structured]


def setup_logging(level: Optional[int] = None, log_file: Optional[Path] = None) -> Optional[Path]:
    """Configure the root logger on the first call; later calls are no-ops.

    ``level`` defaults to DEBUG in dev mode (CSVRENDER_ENV=dev), INFO otherwise.
    Returns the JSON log file in effect, if any.
    """
    global _CONFIGURED, _LOG_FILE

    if _CONFIGURED:
        return _LOG_FILE

    log_path = Path(log_file) if log_file is not None else None
    root = logging.getLogger()
    for handler in list(root.handlers):
        root.removeHandler(handler)
    for handler in _handlers_for(log_path):
        root.addHandler(handler)
    root.setLevel(level if level is not None else (logging.DEBUG if is_dev_mode() else logging.INFO))

    _CONFIGURED = True
    _LOG_FILE = log_path
    return log_path


def get_log_file_path() -> Optional[Path]:
    return _LOG_FILE
