"""Text measurement used by the layout engine."""

from __future__ import annotations

from typing import Optional, Protocol, Tuple

from PyQt6.QtGui import QFont, QFontMetricsF, QImage

from .qt_runtime import DOTS_PER_METER_72DPI


class TextMeasurer(Protocol):
    """Minimal interface for font metrics consumed by the layout engine."""

    def measure(self, text: str, font_size: float, bold: bool = False) -> Tuple[float, float]:
        ...


def make_font(font_size: float, bold: bool = False, family: Optional[str] = None) -> QFont:
    font = QFont(family) if family else QFont()
    font.setPointSizeF(float(font_size))
    if bold:
        font.setWeight(QFont.Weight.DemiBold)
    return font


def reference_device() -> QImage:
    """Tiny 72 dpi image so metrics match the renderers' device units."""
    image = QImage(1, 1, QImage.Format.Format_ARGB32)
    image.setDotsPerMeterX(DOTS_PER_METER_72DPI)
    image.setDotsPerMeterY(DOTS_PER_METER_72DPI)
    return image


class QtTextMeasurer:
    """Measure single-line text with QFontMetricsF at 72 dpi."""

    def __init__(self, family: Optional[str] = None):
        self.family = family
        self._device = reference_device()
        self._metrics: dict = {}

    def _metrics_for(self, font_size: float, bold: bool) -> QFontMetricsF:
        key = (float(font_size), bold)
        metrics = self._metrics.get(key)
        if metrics is None:
            metrics = QFontMetricsF(make_font(font_size, bold, self.family), self._device)
            self._metrics[key] = metrics
        return metrics

    def measure(self, text: str, font_size: float, bold: bool = False) -> Tuple[float, float]:
        metrics = self._metrics_for(font_size, bold)
        return metrics.horizontalAdvance(text), metrics.height()
