"""Shared visual style constants for rendered tables."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


# Colors for print (light background)
PRINT_COLORS = {
    "text": "#1f2937",
    "grid": "#9ca3af",
    "page_bg": "#ffffff",
}


@dataclass(frozen=True)
class Style:
    """Visual treatment applied to every cell of one column."""

    name: str
    background: str
    header_background: str
    text_color: str = PRINT_COLORS["text"]


# Column palette - light tints so text stays readable in print
COLUMN_STYLES: Tuple[Style, ...] = (
    Style("red", "#fef2f2", "#fecaca"),
    Style("blue", "#eff6ff", "#bfdbfe"),
    Style("green", "#f0fdf4", "#bbf7d0"),
    Style("orange", "#fff7ed", "#fed7aa"),
    Style("violet", "#f5f3ff", "#ddd6fe"),
    Style("cyan", "#ecfeff", "#a5f3fc"),
    Style("yellow", "#fefce8", "#fef08a"),
    Style("pink", "#fdf2f8", "#fbcfe8"),
    Style("gray", "#f9fafb", "#e5e7eb"),
)
