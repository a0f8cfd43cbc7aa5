"""Table and artifact models.

Re-exports the public model types so callers can import from ``csvrender.models``.
"""

from ..config.visual_config import Style
from .table import Column, ExportTarget, Row, Table, normalize_export_target
from .artifacts import Artifact, PdfDocument, RasterImage

__all__ = [
    "Artifact",
    "Column",
    "ExportTarget",
    "PdfDocument",
    "RasterImage",
    "Row",
    "Style",
    "Table",
    "normalize_export_target",
]
