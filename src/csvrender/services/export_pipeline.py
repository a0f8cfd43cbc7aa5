"""Export pipeline: turns a parsed table into PNG or PDF output.

One pipeline owns one table. ``generate`` is single-flight: a call made while
another is running fails immediately. Rendering runs on a private
single-thread executor; the calling thread waits for it and is the only
writer of the pipeline's GenerationState, receiving progress from the worker
through a queue.
"""

from __future__ import annotations

import logging
import queue
from concurrent.futures import Future, ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List, Optional, Sequence, Union

from ..config.render_config import RenderConfig
from ..errors import (
    EmptyDataError,
    GenerationInProgressError,
    NothingToPersistError,
    RenderError,
    UnsupportedExportTargetError,
)
from ..models.artifacts import Artifact
from ..models.table import Column, ExportTarget, Row, Table, normalize_export_target
from ..rendering.base import ProgressCallback, TableRenderer
from ..rendering.image_renderer import ImageRenderer
from ..rendering.pdf_renderer import PdfMetadata, PdfRenderer
from ..utils.error_handling import TimingContext, format_error_message, log_exception
from .generation_state import GenerationState

logger = logging.getLogger(__name__)


def _render_job(renderer: TableRenderer, table: Table, on_progress: ProgressCallback) -> Artifact:
    """Worker-side entry point. Receives a table snapshot, not the pipeline."""
    return renderer.make(table, on_progress)


class ExportPipeline:
    """Generate and persist table images/documents for one table.

    Args:
        table: Parsed table; owned by this pipeline from now on.
        export_target: Target used by ``write`` until ``generate`` changes it.
        config: Font size, row limit, PDF metadata and polling defaults.
        image_renderer: PNG renderer (default: ``ImageRenderer`` from config).
        pdf_renderer: PDF renderer (default: ``PdfRenderer`` from config).
    """

    def __init__(
        self,
        table: Table,
        export_target: Union[ExportTarget, str] = ExportTarget.PNG,
        config: Optional[RenderConfig] = None,
        image_renderer: Optional[TableRenderer] = None,
        pdf_renderer: Optional[TableRenderer] = None,
    ):
        self.config = config or RenderConfig()
        self._table = table
        self.export_target = normalize_export_target(export_target)

        self._image_renderer = image_renderer or ImageRenderer(
            font_size=self.config.font_size,
            max_rows_per_unit=self.config.max_rows_per_unit,
            layout_config=self.config.layout,
        )
        self._pdf_renderer = pdf_renderer or PdfRenderer(
            font_size=self.config.font_size,
            max_rows_per_unit=self.config.max_rows_per_unit,
            layout_config=self.config.layout,
            metadata=PdfMetadata(author=self.config.pdf_author, title=self.config.pdf_title),
        )

        self._state = GenerationState()
        self._latest: Dict[ExportTarget, Artifact] = {}
        self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix="csvrender-render")

    # ------------------------------------------------------------------
    # Table access
    # ------------------------------------------------------------------

    @property
    def table(self) -> Table:
        return self._table

    @property
    def columns(self) -> List[Column]:
        return self._table.columns

    @property
    def rows(self) -> List[Row]:
        return self._table.rows

    @property
    def raw_text(self) -> Optional[str]:
        return self._table.raw_text

    def update_columns(self, columns: Sequence[Column]) -> None:
        """Replace all columns. Must not be called while generating."""
        if self.is_loading:
            logger.warning("Columns replaced while a generation is running")
        self._table.update_columns(columns)

    def update_rows(self, rows: Sequence[Row]) -> None:
        """Replace all rows. Must not be called while generating."""
        if self.is_loading:
            logger.warning("Rows replaced while a generation is running")
        self._table.update_rows(rows)

    # ------------------------------------------------------------------
    # State
    # ------------------------------------------------------------------

    @property
    def state(self) -> GenerationState:
        return self._state

    @property
    def is_loading(self) -> bool:
        return self._state.is_loading

    @property
    def progress(self) -> float:
        return self._state.progress

    def latest_output(self, export_target: Union[ExportTarget, str, None] = None) -> Optional[Artifact]:
        """Most recent artifact for ``export_target`` (default: current target)."""
        target = self.export_target if export_target is None else normalize_export_target(export_target)
        return self._latest.get(target)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    def generate(
        self,
        font_size: Optional[float] = None,
        export_target: Union[ExportTarget, str] = ExportTarget.PNG,
    ) -> Artifact:
        """Render the table and return the artifact.

        Args:
            font_size: Overrides (and keeps) the renderer's font size.
            export_target: ``ExportTarget.PNG`` or ``ExportTarget.PDF``.

        Raises:
            GenerationInProgressError: Another generation is running.
            EmptyDataError: The table has no columns or no rows.
            UnsupportedExportTargetError: No renderer for ``export_target``.
            RenderError: Layout or drawing failed; ``cause`` holds the original error.
        """
        if not self._state.try_begin():
            raise GenerationInProgressError()

        try:
            if self._table.is_empty:
                raise EmptyDataError()

            target = self._resolve_target(export_target)
            renderer = self._select_renderer(target)
            if font_size is not None:
                renderer.set_font_size(font_size)
            self.export_target = target

            logger.info(
                f"Generating {target.value} for {self._table.column_count} columns, "
                f"{len(self._table.rows)} rows",
                extra={"event": "generate_start", "export_target": target.value},
            )
            with TimingContext(f"generate_{target.value}") as timing:
                artifact = self._run_render(renderer, target)
            self._latest[target] = artifact

            logger.info(
                f"Generated {target.value} in {timing.elapsed:.3f}s",
                extra={"event": "generate_done", "export_target": target.value, "duration": timing.elapsed},
            )
            return artifact
        finally:
            self._state.finish()

    @staticmethod
    def _resolve_target(export_target: Union[ExportTarget, str]) -> ExportTarget:
        try:
            return normalize_export_target(export_target)
        except ValueError as exc:
            raise UnsupportedExportTargetError(export_target) from exc

    def _select_renderer(self, target: ExportTarget) -> TableRenderer:
        if target is ExportTarget.PNG:
            return self._image_renderer
        elif target is ExportTarget.PDF:
            return self._pdf_renderer
        raise UnsupportedExportTargetError(target)

    def _run_render(self, renderer: TableRenderer, target: ExportTarget) -> Artifact:
        snapshot = Table(
            separator=self._table.separator,
            columns=list(self._table.columns),
            rows=list(self._table.rows),
        )
        updates: "queue.Queue[float]" = queue.Queue()
        future = self._executor.submit(_render_job, renderer, snapshot, updates.put)

        self._pump_progress(future, updates)
        try:
            return future.result()
        except Exception as exc:
            context = f"Rendering {target.value} failed"
            log_exception(exc, context, extra={"export_target": target.value})
            raise RenderError(format_error_message(exc, context), cause=exc) from exc

    def _pump_progress(self, future: Future, updates: "queue.Queue[float]") -> None:
        """Forward worker progress into the state until the job finishes."""
        while True:
            try:
                fraction = updates.get(timeout=self.config.poll_interval)
            except queue.Empty:
                if future.done():
                    break
                continue
            self._state.set_progress(fraction)

        # Everything the worker queued happened before the future completed.
        while True:
            try:
                fraction = updates.get_nowait()
            except queue.Empty:
                return
            self._state.set_progress(fraction)

    # ------------------------------------------------------------------
    # Persistence
    # ------------------------------------------------------------------

    def write(self, destination: Union[Path, str], strict: bool = False) -> Optional[bytes]:
        """Write the latest artifact of the current export target.

        Returns the written bytes, or None when nothing was generated yet for
        the current target (``NothingToPersistError`` with ``strict=True``).
        """
        artifact = self._latest.get(self.export_target)
        if artifact is None:
            if strict:
                raise NothingToPersistError(self.export_target)
            logger.warning(f"Nothing generated yet for {self.export_target.value}; skipping write")
            return None

        data = artifact.write(destination)
        logger.info(
            f"Wrote {len(data)} bytes to {destination}",
            extra={"event": "write", "export_target": self.export_target.value},
        )
        return data

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        """Shut down the render worker."""
        self._executor.shutdown(wait=True)

    def __enter__(self) -> "ExportPipeline":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()
