"""QPainter drawing of one layout unit (shared by PNG and PDF output)."""

from __future__ import annotations

from typing import Callable, Optional

from PyQt6.QtCore import QLineF, QRectF, Qt
from PyQt6.QtGui import QColor, QPainter, QPen

from ..config.visual_config import PRINT_COLORS
from .layout import CellBox, LayoutPlan, LayoutUnit, RowLayout
from .metrics import make_font

TEXT_FLAGS = Qt.AlignmentFlag.AlignLeft | Qt.AlignmentFlag.AlignVCenter


class TablePainter:
    """Draws table units: cell backgrounds, text, then grid lines on top."""

    def __init__(self, plan: LayoutPlan, font_family: Optional[str] = None):
        self.plan = plan
        self.body_font = make_font(plan.font_size, family=font_family)
        self.header_font = make_font(plan.font_size, bold=True, family=font_family)

    def draw_unit(
        self,
        painter: QPainter,
        unit: LayoutUnit,
        offset_y: float = 0.0,
        on_row: Optional[Callable[[RowLayout], None]] = None,
    ) -> None:
        """Draw ``unit`` with its top edge at ``offset_y``.

        ``on_row`` is called after each data row is drawn.
        """
        painter.save()
        try:
            painter.translate(0, offset_y)
            painter.fillRect(QRectF(0, 0, unit.width, unit.height), QColor(PRINT_COLORS["page_bg"]))

            self._draw_row(painter, unit.header, self.header_font)
            for row in unit.rows:
                self._draw_row(painter, row, self.body_font)
                if on_row is not None:
                    on_row(row)

            self._draw_grid(painter, unit)
        finally:
            painter.restore()

    def _draw_row(self, painter: QPainter, row: RowLayout, font) -> None:
        painter.setFont(font)
        for cell in row.cells:
            self._draw_cell(painter, cell)

    def _draw_cell(self, painter: QPainter, cell: CellBox) -> None:
        rect = QRectF(cell.x, cell.y, cell.width, cell.height)
        background = cell.style.header_background if cell.is_header else cell.style.background
        painter.fillRect(rect, QColor(background))

        if not cell.text:
            return
        pad = self.plan.padding_x
        text_rect = rect.adjusted(pad, 0, -pad, 0)
        painter.setPen(QColor(cell.style.text_color))
        # Plain drawText: no mnemonic or markup interpretation of the cell text.
        painter.drawText(text_rect, TEXT_FLAGS, cell.text)

    def _draw_grid(self, painter: QPainter, unit: LayoutUnit) -> None:
        painter.setPen(QPen(QColor(PRINT_COLORS["grid"]), self.plan.line_width))

        rows = [unit.header] + unit.rows
        left = unit.header.cells[0].x
        right = unit.header.cells[-1].x + unit.header.cells[-1].width
        top = unit.header.y
        bottom = rows[-1].y + rows[-1].height

        for row in rows:
            painter.drawLine(QLineF(left, row.y, right, row.y))
        painter.drawLine(QLineF(left, bottom, right, bottom))

        for cell in unit.header.cells:
            painter.drawLine(QLineF(cell.x, top, cell.x, bottom))
        painter.drawLine(QLineF(right, top, right, bottom))
