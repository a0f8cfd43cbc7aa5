"""Convenience constructors: raw text, local file or URL to an ExportPipeline.

Example:
    >>> pipeline = load_from_string("a,b,c\\n1,2,3\\n4,5,6")
    >>> image = pipeline.generate(font_size=14)
    >>> pipeline.write("table.png")
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Union

import httpx

from ..config.render_config import RenderConfig
from ..models.table import ExportTarget
from ..processing.ingest import read_local, read_network
from ..processing.style_assigner import StyleAssigner
from ..processing.table_builder import build_table
from .export_pipeline import ExportPipeline

logger = logging.getLogger(__name__)


def load_from_string(
    raw_text: str,
    separator: str = ",",
    max_length: Optional[int] = None,
    export_target: Union[ExportTarget, str] = ExportTarget.PNG,
    config: Optional[RenderConfig] = None,
    style_assigner: Optional[StyleAssigner] = None,
) -> ExportPipeline:
    """Parse ``raw_text`` and wrap it in a pipeline.

    ``max_length`` truncates long data fields (see ``build_table``).
    """
    table = build_table(raw_text, separator, max_length, style_assigner)
    return ExportPipeline(table, export_target=export_target, config=config)


def load_from_disk(
    path: Union[Path, str],
    separator: str = ",",
    max_length: Optional[int] = None,
    export_target: Union[ExportTarget, str] = ExportTarget.PNG,
    config: Optional[RenderConfig] = None,
    check_access: bool = False,
    style_assigner: Optional[StyleAssigner] = None,
) -> ExportPipeline:
    """Read a local file (raises SourceAccessError) and wrap it in a pipeline."""
    raw_text = read_local(path, check_access=check_access)
    logger.info(f"Loaded {len(raw_text)} characters from {path}")
    return load_from_string(raw_text, separator, max_length, export_target, config, style_assigner)


def load_from_network(
    url: str,
    separator: str = ",",
    max_length: Optional[int] = None,
    export_target: Union[ExportTarget, str] = ExportTarget.PNG,
    config: Optional[RenderConfig] = None,
    client: Optional[httpx.Client] = None,
    style_assigner: Optional[StyleAssigner] = None,
) -> ExportPipeline:
    """Download ``url`` (raises SourceAccessError) and wrap it in a pipeline."""
    raw_text = read_network(url, client=client)
    return load_from_string(raw_text, separator, max_length, export_target, config, style_assigner)
