"""Environment switches read at runtime."""

import os

_DEV_VALUES = frozenset({"dev", "development", "1", "true", "yes"})


def is_dev_mode() -> bool:
    """True when CSVRENDER_ENV (or CSVRENDER_DEV_MODE) names a dev setting."""
    raw = os.environ.get("CSVRENDER_ENV") or os.environ.get("CSVRENDER_DEV_MODE") or ""
    return raw.strip().lower() in _DEV_VALUES


__all__ = ["is_dev_mode"]
