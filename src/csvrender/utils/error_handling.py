"""Error formatting, structured error logging and optional timing.

Pipeline failures are logged once with ``log_exception`` and re-raised with a
message built by ``format_error_message``:

    try:
        artifact = renderer.make(table)
    except Exception as exc:
        log_exception(exc, "Rendering png failed", extra={"export_target": "png"})
        raise RenderError(format_error_message(exc, "Rendering png failed"), cause=exc) from exc

Set CSVRENDER_PERF_DEBUG=1 to log durations of ``@timed`` functions and
``TimingContext`` blocks at DEBUG level.
"""

from __future__ import annotations

import logging
import os
import time
from functools import wraps
from typing import Any, Callable, Optional, TypeVar

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])

PERF_ENV_VAR = "CSVRENDER_PERF_DEBUG"


def perf_debug_enabled() -> bool:
    return os.environ.get(PERF_ENV_VAR, "0") == "1"


class TimingContext:
    """Measure a block. ``elapsed`` is always set; logging needs perf debug on."""

    def __init__(self, label: str):
        self.label = label
        self.elapsed = 0.0
        self._started = 0.0

    def __enter__(self) -> "TimingContext":
        self._started = time.perf_counter()
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.elapsed = time.perf_counter() - self._started
        if perf_debug_enabled():
            outcome = "failed after" if exc_type is not None else "took"
            logger.debug(
                f"PERF: {self.label} {outcome} {self.elapsed:.3f}s",
                extra={"event": "perf", "duration": self.elapsed},
            )


def timed(func: F) -> F:
    """Log how long each call of ``func`` takes (perf debug only)."""
    label = f"{func.__module__}.{func.__qualname__}"

    @wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        if not perf_debug_enabled():
            return func(*args, **kwargs)
        with TimingContext(label):
            return func(*args, **kwargs)

    return wrapper  # type: ignore


def format_error_message(
    error: BaseException,
    context: Optional[str] = None,
    include_type: bool = True,
) -> str:
    """Build ``"<context> - <Type>: <message>"`` for display.

    Errors without a message are shown by type name alone.
    """
    detail = str(error)
    if detail in ("", "None"):
        detail = type(error).__name__
    elif include_type:
        detail = f"{type(error).__name__}: {detail}"

    return f"{context} - {detail}" if context else detail


def log_exception(
    error: BaseException,
    context: str,
    extra: Optional[dict] = None,
    level: int = logging.ERROR,
) -> None:
    """Log ``error`` under ``context`` with its traceback and structured fields."""
    fields = {"event": "error", "error_type": type(error).__name__}
    fields.update(extra or {})
    logger.log(level, f"{context}: {error}", extra=fields, exc_info=error)
