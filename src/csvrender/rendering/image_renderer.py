"""PNG output: all units stacked into one QImage."""

from __future__ import annotations

import logging
import math
from typing import Optional

from PyQt6.QtGui import QColor, QImage, QPainter

from ..config.visual_config import PRINT_COLORS
from ..models.artifacts import RasterImage
from ..models.table import ExportTarget
from ..utils.error_handling import timed
from .base import ProgressCallback, ProgressReporter, TableRenderer, progress_steps
from .layout import LayoutPlan
from .qt_runtime import DOTS_PER_METER_72DPI
from .table_painter import TablePainter

logger = logging.getLogger(__name__)


class ImageRenderer(TableRenderer):
    """Render a layout plan to a single raster image."""

    export_target = ExportTarget.PNG

    @timed
    def render(self, plan: LayoutPlan, on_progress: Optional[ProgressCallback] = None) -> RasterImage:
        width = math.ceil(plan.width)
        height = math.ceil(plan.height)

        image = QImage(width, height, QImage.Format.Format_ARGB32)
        if image.isNull():
            raise RuntimeError(f"Unable to allocate a {width}x{height} image")
        image.setDotsPerMeterX(DOTS_PER_METER_72DPI)
        image.setDotsPerMeterY(DOTS_PER_METER_72DPI)
        image.fill(QColor(PRINT_COLORS["page_bg"]))

        reporter = ProgressReporter(progress_steps(plan), on_progress)
        per_row = len(plan.units) == 1
        table_painter = TablePainter(plan, self.font_family)

        painter = QPainter()
        if not painter.begin(image):
            raise RuntimeError("Failed to initialize image painter")
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)

            offset_y = 0.0
            for unit in plan.units:
                table_painter.draw_unit(
                    painter,
                    unit,
                    offset_y=offset_y,
                    on_row=(lambda _row: reporter.advance()) if per_row else None,
                )
                offset_y += unit.height
                if not per_row:
                    reporter.advance()
        finally:
            painter.end()

        reporter.finish()
        logger.debug(f"Rendered {width}x{height} image from {len(plan.units)} units")
        return RasterImage(image)
