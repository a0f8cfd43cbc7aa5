"""Rendered outputs handed back by the export pipeline."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Tuple, Union

from PyQt6.QtCore import QBuffer, QIODevice
from PyQt6.QtGui import QImage

from .table import ExportTarget

logger = logging.getLogger(__name__)


class RasterImage:
    """A rendered table as a single QImage, encoded to PNG on demand."""

    export_target = ExportTarget.PNG

    def __init__(self, image: QImage):
        self.image = image

    @property
    def width(self) -> int:
        return self.image.width()

    @property
    def height(self) -> int:
        return self.image.height()

    def to_bytes(self) -> bytes:
        """Encode the image as PNG."""
        buffer = QBuffer()
        buffer.open(QIODevice.OpenModeFlag.WriteOnly)
        try:
            if not self.image.save(buffer, "PNG"):
                raise RuntimeError("Failed to encode image as PNG")
            return buffer.data().data()
        finally:
            buffer.close()

    def write(self, path: Union[Path, str]) -> bytes:
        """Write the PNG to ``path`` (created or overwritten) and return its bytes."""
        data = self.to_bytes()
        Path(path).write_bytes(data)
        logger.debug(f"Wrote {len(data)} bytes of PNG to {path}")
        return data


@dataclass
class PdfDocument:
    """A rendered multi-page PDF held in memory."""

    data: bytes
    page_sizes: List[Tuple[float, float]] = field(default_factory=list)  # points
    title: str = ""
    author: str = ""

    export_target = ExportTarget.PDF

    @property
    def page_count(self) -> int:
        return len(self.page_sizes)

    def to_bytes(self) -> bytes:
        return self.data

    def write(self, path: Union[Path, str]) -> bytes:
        Path(path).write_bytes(self.data)
        logger.debug(f"Wrote {self.page_count}-page PDF to {path}")
        return self.data


Artifact = Union[RasterImage, PdfDocument]
