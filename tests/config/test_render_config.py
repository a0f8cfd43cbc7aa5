"""Tests for render configuration and visual constants."""

import pytest

from csvrender.config.render_config import (
    DEFAULT_FONT_SIZE,
    DEFAULT_PDF_AUTHOR,
    DEFAULT_PDF_TITLE,
    LayoutConfig,
    RenderConfig,
)
from csvrender.config.visual_config import COLUMN_STYLES
from csvrender.models import ExportTarget, normalize_export_target

ENV_VARS = ("CSVRENDER_FONT_SIZE", "CSVRENDER_MAX_ROWS", "CSVRENDER_PDF_AUTHOR", "CSVRENDER_PDF_TITLE")


@pytest.fixture
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


class TestRenderConfig:
    """Tests for RenderConfig."""

    def test_defaults(self):
        config = RenderConfig()
        assert config.font_size == DEFAULT_FONT_SIZE
        assert config.max_rows_per_unit is None
        assert config.pdf_author == DEFAULT_PDF_AUTHOR
        assert config.pdf_title == DEFAULT_PDF_TITLE
        assert config.layout == LayoutConfig()

    def test_from_env_without_overrides(self, clean_env):
        assert RenderConfig.from_env() == RenderConfig()

    def test_from_env_overrides(self, clean_env):
        clean_env.setenv("CSVRENDER_FONT_SIZE", "16.5")
        clean_env.setenv("CSVRENDER_MAX_ROWS", "40")
        clean_env.setenv("CSVRENDER_PDF_AUTHOR", "Ops")
        clean_env.setenv("CSVRENDER_PDF_TITLE", "Daily report")

        config = RenderConfig.from_env()

        assert config.font_size == 16.5
        assert config.max_rows_per_unit == 40
        assert config.pdf_author == "Ops"
        assert config.pdf_title == "Daily report"

    @pytest.mark.parametrize("value", ["abc", "0", "-3"])
    def test_invalid_values_ignored(self, clean_env, value):
        clean_env.setenv("CSVRENDER_FONT_SIZE", value)
        clean_env.setenv("CSVRENDER_MAX_ROWS", value)

        config = RenderConfig.from_env()

        assert config.font_size == DEFAULT_FONT_SIZE
        assert config.max_rows_per_unit is None


class TestExportTarget:
    """Tests for ExportTarget helpers."""

    @pytest.mark.parametrize("value", ["png", "PNG", " png ", ExportTarget.PNG])
    def test_normalize_png(self, value):
        assert normalize_export_target(value) is ExportTarget.PNG

    def test_normalize_unknown(self):
        with pytest.raises(ValueError):
            normalize_export_target("svg")

    def test_mime_types(self):
        assert ExportTarget.PNG.mime_type == "image/png"
        assert ExportTarget.PDF.mime_type == "application/pdf"
        assert ExportTarget.PDF.file_extension == "pdf"


def test_palette_styles_are_distinct():
    assert len({style.name for style in COLUMN_STYLES}) == len(COLUMN_STYLES)
    assert all(style.background != style.header_background for style in COLUMN_STYLES)
