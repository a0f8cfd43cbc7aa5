"""Layout and rendering of tables to PNG images and PDF documents.

- LayoutEngine: column widths, row heights and pagination into units
- ImageRenderer: QImage-based PNG output (units stacked vertically)
- PdfRenderer: QPdfWriter-based PDF output (one page per unit)
"""

from .base import ProgressReporter, TableRenderer
from .image_renderer import ImageRenderer
from .layout import CellBox, LayoutEngine, LayoutPlan, LayoutUnit, RowLayout
from .metrics import QtTextMeasurer, TextMeasurer
from .pdf_renderer import PdfMetadata, PdfRenderer

__all__ = [
    "CellBox",
    "ImageRenderer",
    "LayoutEngine",
    "LayoutPlan",
    "LayoutUnit",
    "PdfMetadata",
    "PdfRenderer",
    "ProgressReporter",
    "QtTextMeasurer",
    "RowLayout",
    "TableRenderer",
    "TextMeasurer",
]
