"""Tests for table geometry and pagination."""

import math

import pytest

from csvrender.config.render_config import LayoutConfig
from csvrender.errors import EmptyDataError
from csvrender.models import Table
from csvrender.processing import StyleAssigner, build_table
from csvrender.rendering.layout import LINE_SAMPLE, LayoutEngine, chunk_rows


def _styles(table):
    return [column.style for column in table.columns]


class TestChunkRows:
    """Tests for chunk_rows."""

    def test_no_limit_single_group(self):
        assert chunk_rows(5, None) == [range(5)]

    def test_even_split(self):
        assert chunk_rows(4, 2) == [range(0, 2), range(2, 4)]

    def test_remainder_in_last_group(self):
        groups = chunk_rows(25, 10)
        assert [len(g) for g in groups] == [10, 10, 5]

    @pytest.mark.parametrize("limit", [0, -3])
    def test_non_positive_limit_rejected(self, limit):
        with pytest.raises(ValueError):
            chunk_rows(5, limit)


class TestLayoutEngine:
    """Tests for LayoutEngine.layout."""

    def test_single_unit_without_limit(self, fake_measurer, sample_table):
        plan = LayoutEngine(fake_measurer).layout(sample_table, _styles(sample_table), 10.0)

        assert len(plan.units) == 1
        unit = plan.units[0]
        assert unit.number == 1
        assert unit.row_indices == [1, 2]
        assert [cell.text for cell in unit.header.cells] == ["a", "b", "c"]
        assert all(cell.is_header for cell in unit.header.cells)

    def test_pagination_repeats_header(self, fake_measurer, long_table):
        plan = LayoutEngine(fake_measurer).layout(
            long_table, _styles(long_table), 10.0, max_rows_per_unit=10
        )

        assert len(plan.units) == math.ceil(25 / 10)
        assert [len(unit.rows) for unit in plan.units] == [10, 10, 5]
        assert plan.units[2].row_indices == list(range(21, 26))
        for unit in plan.units:
            assert [cell.text for cell in unit.header.cells] == ["name", "value"]
        assert plan.total_rows == 25

    def test_column_width_uses_widest_cell_and_padding(self, fake_measurer):
        table = build_table("ab,c\nlongvalue,x", style_assigner=StyleAssigner(seed=1))
        config = LayoutConfig(padding_x=0.5, padding_y=0.5, margin=1.0)
        plan = LayoutEngine(fake_measurer, config).layout(table, _styles(table), 10.0)

        # body: 9 chars * 5pt, header "ab" bold: 2 * 6pt
        assert plan.column_widths[0] == math.ceil(9 * 5.0 + 2 * 5.0)
        # header "c" bold (6pt) wider than body "x" (5pt)
        assert plan.column_widths[1] == math.ceil(6.0 + 2 * 5.0)

    def test_header_measured_bold(self, fake_measurer, sample_table):
        LayoutEngine(fake_measurer).layout(sample_table, _styles(sample_table), 10.0)

        assert ("a", 10.0, True) in fake_measurer.calls
        assert ("1", 10.0, False) in fake_measurer.calls
        assert (LINE_SAMPLE, 10.0, True) in fake_measurer.calls

    def test_row_height_and_unit_dimensions(self, fake_measurer, sample_table):
        config = LayoutConfig(padding_x=0.5, padding_y=0.5, margin=1.0)
        plan = LayoutEngine(fake_measurer, config).layout(sample_table, _styles(sample_table), 10.0)

        # text height ceil(12.0) + 2 * 5
        assert plan.row_height == 22
        unit = plan.units[0]
        assert unit.height == 22 * 3 + 2 * 10.0
        assert unit.width == sum(plan.column_widths) + 2 * 10.0
        assert plan.width == unit.width
        assert plan.height == unit.height

    def test_cells_are_contiguous(self, fake_measurer, sample_table):
        plan = LayoutEngine(fake_measurer).layout(sample_table, _styles(sample_table), 10.0)
        row = plan.units[0].rows[0]

        for left, right in zip(row.cells, row.cells[1:]):
            assert left.x + left.width == right.x
        assert row.y == plan.units[0].header.y + plan.row_height

    def test_cells_carry_column_styles(self, fake_measurer, sample_table):
        styles = _styles(sample_table)
        plan = LayoutEngine(fake_measurer).layout(sample_table, styles, 10.0)

        for cell in plan.units[0].rows[1].cells:
            assert cell.style == styles[cell.column]

    def test_ragged_rows_fitted_to_header(self, fake_measurer):
        table = build_table("a,b,c\n1\n1,2,3,4", style_assigner=StyleAssigner(seed=1))
        plan = LayoutEngine(fake_measurer).layout(table, _styles(table), 10.0)

        rows = plan.units[0].rows
        assert [cell.text for cell in rows[0].cells] == ["1", "", ""]
        assert [cell.text for cell in rows[1].cells] == ["1", "2", "3"]

    def test_larger_font_gives_larger_plan(self, fake_measurer, sample_table):
        engine = LayoutEngine(fake_measurer)
        small = engine.layout(sample_table, _styles(sample_table), 10.0)
        large = engine.layout(sample_table, _styles(sample_table), 20.0)

        assert large.width > small.width
        assert large.height > small.height

    def test_empty_table_rejected(self, fake_measurer):
        with pytest.raises(EmptyDataError):
            LayoutEngine(fake_measurer).layout(Table(), [], 10.0)

    def test_invalid_font_size_rejected(self, fake_measurer, sample_table):
        with pytest.raises(ValueError):
            LayoutEngine(fake_measurer).layout(sample_table, _styles(sample_table), 0)

    def test_style_count_mismatch_rejected(self, fake_measurer, sample_table):
        with pytest.raises(ValueError):
            LayoutEngine(fake_measurer).layout(sample_table, _styles(sample_table)[:1], 10.0)
