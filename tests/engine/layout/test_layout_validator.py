"""
Unit tests for layout validation and performance diagnostics.
"""

import pytest

from bento_toolkit.core.models import GridCell, GridLayout, SizeClass
from bento_toolkit.engine.layout.validator import (
    measure_layout_performance,
    validate_grid_layout,
)


def cell(item_id, row_start, row_end, col_start, col_end, size=SizeClass.COMPACT):
    return GridCell(item_id, row_start, row_end, col_start, col_end, size, size.visual_weight)


def layout_of(rows, columns, *cells):
    return GridLayout(rows, columns, tuple(cells), sum(c.visual_weight for c in cells), 1.0)


class TestValidateGridLayout:
    """Tests for validate_grid_layout function."""

    def test_validate_when_valid_layout_then_no_errors(self):
        # Arrange
        layout = layout_of(2, 2, cell("a", 0, 1, 0, 2, SizeClass.WIDE), cell("b", 1, 2, 0, 1))

        # Act
        report = validate_grid_layout(layout)

        # Assert
        assert report.is_valid
        assert report.cell_density == 0.75
        assert report.average_span == 1.5
        assert report.grid_efficiency == 0.75
        assert report.warnings == ()

    def test_validate_when_cells_overlap_then_error_names_coordinate(self):
        layout = layout_of(2, 2, cell("a", 0, 2, 0, 1, SizeClass.TALL), cell("b", 1, 2, 0, 2, SizeClass.WIDE))

        report = validate_grid_layout(layout)

        assert not report.is_valid
        assert any("overlap detected at 1-0" in e for e in report.errors)

    def test_validate_when_cell_out_of_bounds_then_errors(self):
        layout = layout_of(1, 2, cell("a", 0, 2, 1, 3))

        report = validate_grid_layout(layout)

        assert any("row bounds invalid" in e for e in report.errors)
        assert any("column bounds invalid" in e for e in report.errors)

    def test_validate_when_empty_span_then_error(self):
        layout = layout_of(2, 2, cell("a", 1, 1, 0, 1))

        report = validate_grid_layout(layout)

        assert any("invalid span" in e for e in report.errors)

    def test_validate_when_zero_dimensions_then_error(self):
        report = validate_grid_layout(GridLayout.empty())

        assert not report.is_valid
        assert "No cells in layout" in report.warnings
        assert report.cell_density == 0.0

    def test_validate_when_sparse_then_low_density_warning(self):
        report = validate_grid_layout(layout_of(2, 2, cell("a", 0, 1, 0, 1)))
        assert any("Low grid density" in w for w in report.warnings)

    def test_validate_when_full_then_high_density_warning(self):
        report = validate_grid_layout(layout_of(1, 1, cell("a", 0, 1, 0, 1)))
        assert any("Very high grid density" in w for w in report.warnings)

    def test_validate_when_large_cells_then_span_warning(self):
        big = cell("a", 0, 3, 0, 2, SizeClass.TALL)
        report = validate_grid_layout(layout_of(3, 2, big))

        assert report.average_span == 6.0
        assert any("Large average cell span" in w for w in report.warnings)

    def test_to_dict_when_serialized_then_performance_block(self):
        data = validate_grid_layout(layout_of(1, 1, cell("a", 0, 1, 0, 1))).to_dict()

        assert data["isValid"] is True
        assert data["performance"]["cellDensity"] == 1.0


class TestMeasureLayoutPerformance:
    """Tests for measure_layout_performance function."""

    def test_measure_when_compact_reading_order_then_ideal(self):
        layout = layout_of(
            2, 2,
            cell("a", 0, 1, 0, 1), cell("b", 0, 1, 1, 2),
            cell("c", 1, 2, 0, 1), cell("d", 1, 2, 1, 2),
        )

        perf = measure_layout_performance(layout)

        assert perf.render_complexity == 0.2
        assert perf.layout_shift_risk == 0.0
        assert perf.accessibility_score == 1.0
        assert perf.narrow_optimization == 1.0

    def test_measure_when_reverse_order_then_accessibility_drops(self):
        layout = layout_of(
            2, 2,
            cell("d", 1, 2, 1, 2), cell("c", 1, 2, 0, 1),
            cell("b", 0, 1, 1, 2), cell("a", 0, 1, 0, 1),
        )

        perf = measure_layout_performance(layout)

        assert perf.accessibility_score == pytest.approx(0.7)

    def test_measure_when_wide_cell_over_two_columns_then_not_narrow_friendly(self):
        layout = layout_of(1, 3, cell("a", 0, 1, 0, 3, SizeClass.WIDE))

        perf = measure_layout_performance(layout)

        assert perf.narrow_optimization == 0.0
        assert perf.layout_shift_risk == 1.0

    def test_measure_when_empty_then_neutral(self):
        perf = measure_layout_performance(GridLayout.empty())

        assert perf.render_complexity == 0.0
        assert perf.layout_shift_risk == 0.0
        assert perf.to_dict()["accessibilityScore"] == 1.0
