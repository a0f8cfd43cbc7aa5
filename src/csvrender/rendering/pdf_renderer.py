"""PDF output using PyQt6's QPdfWriter, one page per layout unit."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from PyQt6.QtCore import QBuffer, QIODevice, QMarginsF, QSizeF
from PyQt6.QtGui import QPageLayout, QPageSize, QPainter, QPdfWriter

from ..config.render_config import DEFAULT_PDF_AUTHOR, DEFAULT_PDF_TITLE
from ..models.artifacts import PdfDocument
from ..models.table import ExportTarget
from ..utils.error_handling import timed
from .base import ProgressCallback, ProgressReporter, TableRenderer, progress_steps
from .layout import LayoutPlan, LayoutUnit
from .table_painter import TablePainter

logger = logging.getLogger(__name__)

# Device units are points.
PDF_RESOLUTION = 72


@dataclass(frozen=True)
class PdfMetadata:
    """Document information written into the PDF."""

    author: str = DEFAULT_PDF_AUTHOR
    title: str = DEFAULT_PDF_TITLE


def _page_size(unit: LayoutUnit) -> QPageSize:
    return QPageSize(
        QSizeF(unit.width, unit.height),
        QPageSize.Unit.Point,
        f"Unit {unit.number}",
        QPageSize.SizeMatchPolicy.ExactMatch,
    )


class PdfRenderer(TableRenderer):
    """Render a layout plan to an in-memory PDF document."""

    export_target = ExportTarget.PDF

    def __init__(self, *args, metadata: Optional[PdfMetadata] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.metadata = metadata or PdfMetadata()

    def _setup_writer(self, buffer: QBuffer, first_unit: LayoutUnit) -> QPdfWriter:
        """Configure QPdfWriter for exact-size, margin-free pages."""
        writer = QPdfWriter(buffer)
        writer.setResolution(PDF_RESOLUTION)
        writer.setTitle(self.metadata.title)
        writer.setAuthor(self.metadata.author)
        writer.setCreator("csvrender")
        writer.setPageMargins(QMarginsF(0, 0, 0, 0), QPageLayout.Unit.Point)
        writer.setPageSize(_page_size(first_unit))
        return writer

    @timed
    def render(self, plan: LayoutPlan, on_progress: Optional[ProgressCallback] = None) -> PdfDocument:
        if not plan.units:
            raise ValueError("Layout plan has no units")

        buffer = QBuffer()
        if not buffer.open(QIODevice.OpenModeFlag.WriteOnly):
            raise RuntimeError("Failed to open PDF buffer")

        reporter = ProgressReporter(progress_steps(plan), on_progress)
        per_row = len(plan.units) == 1
        page_sizes: List[Tuple[float, float]] = []

        table_painter = TablePainter(plan, self.font_family)
        writer = self._setup_writer(buffer, plan.units[0])

        painter = QPainter()
        if not painter.begin(writer):
            buffer.close()
            raise RuntimeError("Failed to initialize PDF painter")
        try:
            painter.setRenderHint(QPainter.RenderHint.Antialiasing)
            painter.setRenderHint(QPainter.RenderHint.TextAntialiasing)

            for page_number, unit in enumerate(plan.units, start=1):
                if page_number > 1:
                    writer.setPageSize(_page_size(unit))
                    if not writer.newPage():
                        raise RuntimeError(f"Failed to start PDF page {page_number}")

                table_painter.draw_unit(
                    painter,
                    unit,
                    on_row=(lambda _row: reporter.advance()) if per_row else None,
                )
                page_sizes.append((unit.width, unit.height))
                if not per_row:
                    reporter.advance()
        finally:
            painter.end()
            buffer.close()

        data = buffer.data().data()
        if not data:
            raise RuntimeError("PDF writer produced no output")

        reporter.finish()
        logger.debug(f"Rendered {len(page_sizes)}-page PDF ({len(data)} bytes)")
        return PdfDocument(
            data=data,
            page_sizes=page_sizes,
            title=self.metadata.title,
            author=self.metadata.author,
        )
