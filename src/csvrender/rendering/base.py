"""Common renderer behaviour: planning, font size and progress reporting."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Callable, Optional, Sequence

from ..config.render_config import DEFAULT_FONT_SIZE, LayoutConfig
from ..config.visual_config import Style
from ..models.artifacts import Artifact
from ..models.table import ExportTarget, Table
from .layout import LayoutEngine, LayoutPlan
from .metrics import QtTextMeasurer, TextMeasurer
from .qt_runtime import ensure_qt_app

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[float], None]


def _ignore_progress(fraction: float) -> None:
    return None


class ProgressReporter:
    """Report ``completed / total`` after each step.

    The last step is held back until ``finish``, so 1.0 is only reported
    once the artifact is complete.
    """

    def __init__(self, total: int, callback: Optional[ProgressCallback] = None):
        self.total = max(1, total)
        self.completed = 0
        self.callback = callback or _ignore_progress
        self._last = 0.0

    def advance(self, steps: int = 1) -> None:
        self.completed = min(self.total, self.completed + steps)
        if self.completed < self.total:
            self._emit(self.completed / self.total)

    def finish(self) -> None:
        self.completed = self.total
        self._emit(1.0)

    def _emit(self, fraction: float) -> None:
        fraction = max(self._last, min(1.0, fraction))
        self._last = fraction
        self.callback(fraction)


def progress_steps(plan: LayoutPlan) -> int:
    """Rows for a single-unit plan, otherwise units."""
    if len(plan.units) == 1:
        return len(plan.units[0].rows)
    return len(plan.units)


class TableRenderer(ABC):
    """Base class for the PNG and PDF renderers.

    Construct in the main thread (it bootstraps the Qt application); ``make``
    and ``render`` may then run on a worker thread.
    """

    export_target: ExportTarget

    def __init__(
        self,
        font_size: float = DEFAULT_FONT_SIZE,
        max_rows_per_unit: Optional[int] = None,
        layout_config: Optional[LayoutConfig] = None,
        measurer: Optional[TextMeasurer] = None,
        font_family: Optional[str] = None,
    ):
        ensure_qt_app()
        self.font_size = float(font_size)
        self.max_rows_per_unit = max_rows_per_unit
        self.layout_config = layout_config or LayoutConfig()
        self.font_family = font_family
        self._measurer = measurer

    def set_font_size(self, font_size: float) -> None:
        if font_size <= 0:
            raise ValueError(f"font_size must be > 0, got {font_size}")
        self.font_size = float(font_size)

    def plan(self, table: Table, styles: Optional[Sequence[Style]] = None) -> LayoutPlan:
        """Lay out ``table`` with this renderer's font size and row limit."""
        measurer = self._measurer or QtTextMeasurer(self.font_family)
        engine = LayoutEngine(measurer, self.layout_config)
        if styles is None:
            styles = [column.style for column in table.columns]
        return engine.layout(table, styles, self.font_size, self.max_rows_per_unit)

    def make(self, table: Table, on_progress: Optional[ProgressCallback] = None) -> Artifact:
        """Plan and render in one step."""
        return self.render(self.plan(table), on_progress)

    @abstractmethod
    def render(self, plan: LayoutPlan, on_progress: Optional[ProgressCallback] = None) -> Artifact:
        """Draw ``plan`` and return the finished artifact."""
