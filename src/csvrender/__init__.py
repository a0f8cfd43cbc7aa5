"""csvrender - render delimited text tables to PNG images and PDF documents.

Typical use:
    from csvrender import load_from_string, ExportTarget

    with load_from_string("a,b,c\\n1,2,3") as pipeline:
        pipeline.generate(font_size=14, export_target=ExportTarget.PDF)
        pipeline.write("table.pdf")
"""

from .config.render_config import RenderConfig
from .errors import (
    CsvRenderError,
    EmptyDataError,
    GenerationInProgressError,
    NothingToPersistError,
    RenderError,
    SourceAccessError,
    UnsupportedExportTargetError,
)
from .models import Column, ExportTarget, PdfDocument, RasterImage, Row, Style, Table
from .processing import StyleAssigner, build_table
from .services import (
    ExportPipeline,
    GenerationState,
    load_from_disk,
    load_from_network,
    load_from_string,
)

__version__ = "0.1.0"

__all__ = [
    "Column",
    "CsvRenderError",
    "EmptyDataError",
    "ExportPipeline",
    "ExportTarget",
    "GenerationInProgressError",
    "GenerationState",
    "NothingToPersistError",
    "PdfDocument",
    "RasterImage",
    "RenderConfig",
    "RenderError",
    "Row",
    "SourceAccessError",
    "Style",
    "StyleAssigner",
    "Table",
    "UnsupportedExportTargetError",
    "build_table",
    "load_from_disk",
    "load_from_network",
    "load_from_string",
]
