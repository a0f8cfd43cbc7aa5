from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Sequence, Tuple

from ..config.visual_config import Style


class ExportTarget(str, Enum):
    """Output formats a table can be rendered to."""

    PNG = "png"
    PDF = "pdf"

    @property
    def file_extension(self) -> str:
        return self.value

    @property
    def mime_type(self) -> str:
        if self is ExportTarget.PNG:
            return "image/png"
        return "application/pdf"


def normalize_export_target(value) -> ExportTarget:
    """Normalize a string/enum to an ExportTarget (case-insensitive)."""
    if isinstance(value, ExportTarget):
        return value
    return ExportTarget(str(value).strip().lower())


@dataclass(frozen=True)
class Column:
    """Header cell plus the style used for the whole column."""

    name: str
    style: Style


@dataclass(frozen=True)
class Row:
    """One data line. ``index`` is its 1-based position below the header."""

    index: int
    values: Tuple[str, ...]

    def padded(self, column_count: int) -> Tuple[str, ...]:
        """Values fitted to ``column_count``: extras dropped, gaps filled with ''."""
        values = self.values[:column_count]
        if len(values) < column_count:
            values = values + ("",) * (column_count - len(values))
        return values


@dataclass
class Table:
    """Parsed columns and rows of one delimited text source."""

    separator: str = ","
    columns: List[Column] = field(default_factory=list)
    rows: List[Row] = field(default_factory=list)
    raw_text: Optional[str] = None

    @property
    def column_count(self) -> int:
        return len(self.columns)

    @property
    def is_empty(self) -> bool:
        return not self.columns or not self.rows

    @property
    def column_names(self) -> List[str]:
        return [column.name for column in self.columns]

    def update_columns(self, columns: Sequence[Column]) -> None:
        self.columns = list(columns)

    def update_rows(self, rows: Sequence[Row]) -> None:
        self.rows = list(rows)
