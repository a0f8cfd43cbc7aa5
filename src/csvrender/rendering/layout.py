"""Table geometry: column widths, row heights and pagination into units.

A unit is one PDF page or one vertical strip of the PNG. Every unit repeats
the header row; column widths are computed over the whole table so all units
line up. Coordinates are unit-local, in points (1 pt = 1 px at 72 dpi).
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from ..config.render_config import LayoutConfig
from ..config.visual_config import Style
from ..errors import EmptyDataError
from ..models.table import Table
from ..utils.error_handling import timed
from .metrics import TextMeasurer

logger = logging.getLogger(__name__)

# Measured to size rows, so they fit ascenders and descenders.
LINE_SAMPLE = "Agjy"


@dataclass(frozen=True)
class CellBox:
    """Absolute rectangle of one cell and what goes in it."""

    x: float
    y: float
    width: float
    height: float
    text: str
    style: Style
    column: int
    is_header: bool = False


@dataclass
class RowLayout:
    """Cells of one table row. ``index`` is the source row index (0 for the header)."""

    index: int
    y: float
    height: float
    cells: List[CellBox] = field(default_factory=list)


@dataclass
class LayoutUnit:
    """One page or strip: the repeated header plus a slice of data rows."""

    number: int
    header: RowLayout
    rows: List[RowLayout]
    width: float
    height: float

    @property
    def row_indices(self) -> List[int]:
        return [row.index for row in self.rows]


@dataclass
class LayoutPlan:
    """Complete geometry of a table ready to render."""

    units: List[LayoutUnit]
    column_widths: List[float]
    row_height: float
    font_size: float
    padding_x: float
    line_width: float

    @property
    def total_rows(self) -> int:
        return sum(len(unit.rows) for unit in self.units)

    @property
    def width(self) -> float:
        """Widest unit."""
        return max((unit.width for unit in self.units), default=0.0)

    @property
    def height(self) -> float:
        """All units stacked vertically."""
        return sum(unit.height for unit in self.units)


def chunk_rows(count: int, max_rows_per_unit: Optional[int]) -> List[range]:
    """Split ``range(count)`` into consecutive groups of at most ``max_rows_per_unit``."""
    if max_rows_per_unit is None:
        return [range(count)]
    if max_rows_per_unit <= 0:
        raise ValueError(f"max_rows_per_unit must be > 0, got {max_rows_per_unit}")
    unit_count = math.ceil(count / max_rows_per_unit)
    return [
        range(i * max_rows_per_unit, min(count, (i + 1) * max_rows_per_unit))
        for i in range(unit_count)
    ]


class LayoutEngine:
    """Compute a LayoutPlan from a table using a TextMeasurer."""

    def __init__(self, measurer: TextMeasurer, config: Optional[LayoutConfig] = None):
        self.measurer = measurer
        self.config = config or LayoutConfig()

    @timed
    def layout(
        self,
        table: Table,
        styles: Sequence[Style],
        font_size: float,
        max_rows_per_unit: Optional[int] = None,
    ) -> LayoutPlan:
        if table.is_empty:
            raise EmptyDataError()
        if font_size <= 0:
            raise ValueError(f"font_size must be > 0, got {font_size}")
        column_count = table.column_count
        if len(styles) != column_count:
            raise ValueError(f"Expected {column_count} styles, got {len(styles)}")

        padding_x = self.config.padding_x * font_size
        padding_y = self.config.padding_y * font_size
        margin = self.config.margin * font_size

        header_texts = table.column_names
        row_values = [row.padded(column_count) for row in table.rows]

        column_widths = self._column_widths(header_texts, row_values, font_size, padding_x)
        row_height = self._row_height(font_size, padding_y)
        table_width = sum(column_widths)

        units: List[LayoutUnit] = []
        for number, group in enumerate(chunk_rows(len(table.rows), max_rows_per_unit), start=1):
            header = self._row_layout(
                0, margin, margin, row_height, header_texts, column_widths, styles, is_header=True
            )
            rows = []
            y = margin + row_height
            for position in group:
                rows.append(
                    self._row_layout(
                        table.rows[position].index, margin, y, row_height,
                        row_values[position], column_widths, styles,
                    )
                )
                y += row_height
            units.append(
                LayoutUnit(
                    number=number,
                    header=header,
                    rows=rows,
                    width=table_width + 2 * margin,
                    height=row_height * (len(rows) + 1) + 2 * margin,
                )
            )

        logger.debug(
            f"Layout: {column_count} columns, {len(table.rows)} rows, {len(units)} units"
        )
        return LayoutPlan(
            units=units,
            column_widths=column_widths,
            row_height=row_height,
            font_size=font_size,
            padding_x=padding_x,
            line_width=self.config.line_width,
        )

    def _column_widths(
        self,
        header_texts: Sequence[str],
        row_values: Sequence[Sequence[str]],
        font_size: float,
        padding_x: float,
    ) -> List[float]:
        widths = []
        for column, name in enumerate(header_texts):
            widest, _ = self.measurer.measure(name, font_size, bold=True)
            for values in row_values:
                width, _ = self.measurer.measure(values[column], font_size)
                widest = max(widest, width)
            widths.append(math.ceil(widest + 2 * padding_x))
        return widths

    def _row_height(self, font_size: float, padding_y: float) -> float:
        _, text_height = self.measurer.measure(LINE_SAMPLE, font_size, bold=True)
        return math.ceil(max(text_height, font_size) + 2 * padding_y)

    @staticmethod
    def _row_layout(
        index: int,
        x: float,
        y: float,
        height: float,
        texts: Sequence[str],
        column_widths: Sequence[float],
        styles: Sequence[Style],
        is_header: bool = False,
    ) -> RowLayout:
        cells = []
        for column, (text, width) in enumerate(zip(texts, column_widths)):
            cells.append(
                CellBox(
                    x=x, y=y, width=width, height=height, text=text,
                    style=styles[column], column=column, is_header=is_header,
                )
            )
            x += width
        return RowLayout(index=index, y=y, height=height, cells=cells)
