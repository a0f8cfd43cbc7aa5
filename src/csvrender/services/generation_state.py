"""Observable loading/progress state of one export pipeline.

Readers may poll ``is_loading``/``progress`` from any thread or subscribe to
change notifications. Only the owning pipeline mutates the state, and
subscribers are called on the thread performing the mutation, in
registration order. A new subscriber immediately receives the current value.
"""

from __future__ import annotations

import logging
import threading
from typing import Callable, List

from ..utils.error_handling import log_exception

logger = logging.getLogger(__name__)

LoadingListener = Callable[[bool], None]
ProgressListener = Callable[[float], None]


class GenerationState:
    """Thread-safe ``(is_loading, progress)`` pair with subscriber lists."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._is_loading = False
        self._progress = 0.0
        self._loading_listeners: List[LoadingListener] = []
        self._progress_listeners: List[ProgressListener] = []

    @property
    def is_loading(self) -> bool:
        with self._lock:
            return self._is_loading

    @property
    def progress(self) -> float:
        with self._lock:
            return self._progress

    # ------------------------------------------------------------------
    # Subscriptions
    # ------------------------------------------------------------------

    def subscribe_loading(self, listener: LoadingListener) -> Callable[[], None]:
        """Register ``listener`` for loading changes; returns an unsubscribe callable."""
        with self._lock:
            self._loading_listeners.append(listener)
            current = self._is_loading
        self._call(listener, current)
        return lambda: self._remove(self._loading_listeners, listener)

    def subscribe_progress(self, listener: ProgressListener) -> Callable[[], None]:
        """Register ``listener`` for progress changes; returns an unsubscribe callable."""
        with self._lock:
            self._progress_listeners.append(listener)
            current = self._progress
        self._call(listener, current)
        return lambda: self._remove(self._progress_listeners, listener)

    # ------------------------------------------------------------------
    # Mutations (owning pipeline only)
    # ------------------------------------------------------------------

    def try_begin(self) -> bool:
        """Atomically enter the loading state; False if already loading."""
        with self._lock:
            if self._is_loading:
                return False
            self._is_loading = True
            self._progress = 0.0
            loading_listeners = list(self._loading_listeners)
            progress_listeners = list(self._progress_listeners)

        for listener in loading_listeners:
            self._call(listener, True)
        for listener in progress_listeners:
            self._call(listener, 0.0)
        return True

    def set_progress(self, fraction: float) -> None:
        """Raise progress to ``fraction`` (clamped to [0, 1]); never lowers it."""
        fraction = max(0.0, min(1.0, float(fraction)))
        with self._lock:
            if fraction <= self._progress:
                return
            self._progress = fraction
            listeners = list(self._progress_listeners)

        for listener in listeners:
            self._call(listener, fraction)

    def finish(self) -> None:
        """Leave the loading state, keeping the last progress value."""
        with self._lock:
            if not self._is_loading:
                return
            self._is_loading = False
            listeners = list(self._loading_listeners)

        for listener in listeners:
            self._call(listener, False)

    # ------------------------------------------------------------------

    def _remove(self, listeners: list, listener) -> None:
        with self._lock:
            if listener in listeners:
                listeners.remove(listener)

    @staticmethod
    def _call(listener, value) -> None:
        try:
            listener(value)
        except Exception as exc:
            log_exception(exc, "State listener failed", level=logging.WARNING)
