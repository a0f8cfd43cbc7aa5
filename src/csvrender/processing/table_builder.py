"""Parse delimited text into a Table.

The first non-empty line becomes the header, every following non-empty line a
row. Quoting is not interpreted: the separator and line breaks always split.

Example:
    >>> table = build_table("a,b,c\\n1,2,3\\n4,5,6")
    >>> table.column_names
    ['a', 'b', 'c']
    >>> [(row.index, row.values) for row in table.rows]
    [(1, ('1', '2', '3')), (2, ('4', '5', '6'))]
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from ..models.table import Column, Row, Table
from .style_assigner import StyleAssigner

logger = logging.getLogger(__name__)

ELLIPSIS = "..."

_LINE_BREAK = re.compile(r"[\r\n]")


def split_lines(raw_text: str) -> List[str]:
    """Split on every CR and LF character, dropping empty lines."""
    return [line for line in _LINE_BREAK.split(raw_text) if line]


def truncate_field(value: str, max_length: Optional[int]) -> str:
    if max_length is not None and len(value) > max_length:
        return value[:max_length] + ELLIPSIS
    return value


def build_table(
    raw_text: str,
    separator: str = ",",
    max_field_length: Optional[int] = None,
    style_assigner: Optional[StyleAssigner] = None,
) -> Table:
    """Build a Table from raw delimited text.

    Args:
        raw_text: Decoded text, one record per line.
        separator: Field separator; empty fields are kept.
        max_field_length: When set, longer data fields are cut to this length
            and suffixed with ``...``. Header names are never cut.
        style_assigner: Source of column styles (default: seeded from the header).

    Returns:
        Table with columns and 1-based indexed rows. A single-line input gets a
        synthesized ``"0".."N-1"`` header and becomes row 1.
    """
    if not separator:
        raise ValueError("separator must not be empty")
    if max_field_length is not None and max_field_length < 0:
        raise ValueError(f"max_field_length must be >= 0, got {max_field_length}")

    lines = split_lines(raw_text)
    if len(lines) == 1:
        field_count = len(lines[0].split(separator))
        lines.insert(0, separator.join(str(i) for i in range(field_count)))

    assigner = style_assigner or StyleAssigner()
    columns: List[Column] = []
    rows: List[Row] = []

    for line_number, line in enumerate(lines):
        items = line.split(separator)
        if line_number == 0:
            styles = assigner.assign(len(items), names=items)
            columns = [Column(name=name, style=style) for name, style in zip(items, styles)]
            continue
        if len(items) != len(columns):
            logger.debug(
                f"Row {line_number} has {len(items)} fields, expected {len(columns)}"
            )
        values = tuple(truncate_field(item, max_field_length) for item in items)
        rows.append(Row(index=line_number, values=values))

    logger.debug(f"Parsed table: {len(columns)} columns, {len(rows)} rows")
    return Table(separator=separator, columns=columns, rows=rows, raw_text=raw_text)
