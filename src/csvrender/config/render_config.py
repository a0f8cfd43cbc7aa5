"""Runtime configuration for table rendering."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Optional

logger = logging.getLogger(__name__)

DEFAULT_FONT_SIZE = 12.0
DEFAULT_PDF_AUTHOR = "Author"
DEFAULT_PDF_TITLE = "Title"


@dataclass(frozen=True)
class LayoutConfig:
    """Cell spacing, expressed as multiples of the font size."""

    padding_x: float = 0.6
    padding_y: float = 0.4
    margin: float = 1.0
    line_width: float = 1.0


@dataclass
class RenderConfig:
    """Defaults shared by the image and PDF renderers."""

    font_size: float = DEFAULT_FONT_SIZE
    max_rows_per_unit: Optional[int] = None
    pdf_author: str = DEFAULT_PDF_AUTHOR
    pdf_title: str = DEFAULT_PDF_TITLE
    poll_interval: float = 0.05  # seconds between progress queue checks
    layout: LayoutConfig = field(default_factory=LayoutConfig)

    @classmethod
    def from_env(cls) -> "RenderConfig":
        """Build a config, overriding defaults with CSVRENDER_* variables."""
        config = cls()

        font_size = _read_number("CSVRENDER_FONT_SIZE", float)
        if font_size is not None and font_size > 0:
            config.font_size = font_size

        max_rows = _read_number("CSVRENDER_MAX_ROWS", int)
        if max_rows is not None and max_rows > 0:
            config.max_rows_per_unit = max_rows

        author = os.environ.get("CSVRENDER_PDF_AUTHOR")
        if author:
            config.pdf_author = author

        title = os.environ.get("CSVRENDER_PDF_TITLE")
        if title:
            config.pdf_title = title

        return config


def _read_number(name: str, kind):
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return kind(raw.strip())
    except ValueError:
        logger.warning(f"Ignoring invalid {name}={raw!r}")
        return None
