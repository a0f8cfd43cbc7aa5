"""Text ingestion, parsing and column styling."""

from .ingest import decode_bytes, read_local, read_network
from .style_assigner import StyleAssigner
from .table_builder import build_table

__all__ = [
    "StyleAssigner",
    "build_table",
    "decode_bytes",
    "read_local",
    "read_network",
]
