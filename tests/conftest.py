"""Pytest configuration and fixtures."""

import math
import os
import sys
from pathlib import Path
from typing import Tuple

import pytest

# Add src directory to Python path
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from csvrender.models import ExportTarget, PdfDocument, Table
from csvrender.processing import StyleAssigner, build_table


# ---------------------------------------------------------------------------
# Qt Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="session")
def qt_app():
    """Provide the offscreen QGuiApplication used by the renderers."""
    from csvrender.rendering.qt_runtime import ensure_qt_app

    app = ensure_qt_app()
    app.processEvents()
    yield app
    app.processEvents()


# ---------------------------------------------------------------------------
# Table Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture
def sample_text() -> str:
    """Three columns, two rows."""
    return "a,b,c\n1,2,3\n4,5,6"


@pytest.fixture
def sample_table(sample_text: str) -> Table:
    return build_table(sample_text, style_assigner=StyleAssigner(seed=7))


@pytest.fixture
def long_table() -> Table:
    """Two columns, 25 rows."""
    lines = ["name,value"] + [f"row{i},{i * 10}" for i in range(1, 26)]
    return build_table("\n".join(lines), style_assigner=StyleAssigner(seed=7))


# ---------------------------------------------------------------------------
# Fake Measurer / Renderer Fixtures
# ---------------------------------------------------------------------------

class FakeMeasurer:
    """Deterministic metrics: 0.5em per character (0.6em bold), lines 1.2em high."""

    def __init__(self):
        self.calls = []

    def measure(self, text: str, font_size: float, bold: bool = False) -> Tuple[float, float]:
        self.calls.append((text, font_size, bold))
        width = len(text) * font_size * (0.6 if bold else 0.5)
        return width, math.ceil(font_size * 1.2)


class FakeRenderer:
    """Stand-in for a TableRenderer that records calls and reports progress."""

    def __init__(self, export_target=ExportTarget.PDF, steps: int = 4, error: Exception = None):
        self.export_target = export_target
        self.font_size = 12.0
        self.steps = steps
        self.error = error
        self.calls = []
        self.before_finish = None

    def set_font_size(self, font_size: float) -> None:
        if font_size <= 0:
            raise ValueError(f"font_size must be > 0, got {font_size}")
        self.font_size = float(font_size)

    def make(self, table, on_progress=None):
        self.calls.append(table)
        if self.error is not None:
            raise self.error
        for step in range(1, self.steps):
            on_progress(step / self.steps)
        if self.before_finish is not None:
            self.before_finish()
        on_progress(1.0)
        return PdfDocument(data=b"%PDF-fake", page_sizes=[(10.0, 10.0)])


@pytest.fixture
def fake_measurer() -> FakeMeasurer:
    return FakeMeasurer()


@pytest.fixture
def make_renderer():
    """Factory for FakeRenderer instances."""
    return FakeRenderer

