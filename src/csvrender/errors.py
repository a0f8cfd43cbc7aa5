"""Exception types raised by csvrender."""

from __future__ import annotations

from typing import Optional


class CsvRenderError(Exception):
    """Base class for all csvrender errors."""


class EmptyDataError(CsvRenderError):
    """The table has no columns or no rows."""

    def __init__(self, message: str = "Table has no columns or no rows") -> None:
        super().__init__(message)


class GenerationInProgressError(CsvRenderError):
    """A generation is already running on this pipeline."""

    def __init__(self, message: str = "Generation already in progress") -> None:
        super().__init__(message)


class UnsupportedExportTargetError(CsvRenderError):
    """No renderer matches the requested export target."""

    def __init__(self, export_target: object) -> None:
        super().__init__(f"Unsupported export target: {export_target!r}")
        self.export_target = export_target


class SourceAccessError(CsvRenderError):
    """A source could not be read or decoded.

    ``data`` holds the raw bytes when they were read but could not be decoded.
    """

    def __init__(self, message: str, source: str, data: Optional[bytes] = None) -> None:
        super().__init__(f"{message}: {source}")
        self.source = source
        self.data = data


class RenderError(CsvRenderError):
    """Drawing or text measurement failed. ``cause`` is the original error."""

    def __init__(self, message: str, cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.cause = cause


class NothingToPersistError(CsvRenderError):
    """Nothing has been generated yet for the current export target."""

    def __init__(self, export_target: object) -> None:
        super().__init__(f"No generated output to write for {export_target!r}")
        self.export_target = export_target


__all__ = [
    "CsvRenderError",
    "EmptyDataError",
    "GenerationInProgressError",
    "UnsupportedExportTargetError",
    "SourceAccessError",
    "RenderError",
    "NothingToPersistError",
]
