"""
Unit Tests for Core Models

Tests for ContentItem, SizeClass, GridCell, GridLayout and LayoutResult.
"""

import pytest

from bento_toolkit.core.models import (
    ContentItem,
    GridCell,
    GridLayout,
    LayoutMetrics,
    LayoutResult,
    SizeClass,
)


class TestSizeClass:
    """Tests for SizeClass spans and weights."""

    def test_span_when_tall_then_two_rows_one_column(self):
        assert SizeClass.TALL.span(4) == (2, 1)

    def test_span_when_wide_on_single_column_then_clipped(self):
        assert SizeClass.WIDE.span(4) == (1, 2)
        assert SizeClass.WIDE.span(1) == (1, 1)

    def test_visual_weight_when_looked_up_then_matches_table(self):
        assert SizeClass.TALL.visual_weight == 3.0
        assert SizeClass.WIDE.visual_weight == 2.5
        assert SizeClass.COMPACT.visual_weight == 1.0


class TestContentItem:
    """Tests for ContentItem validation."""

    def test_init_when_valid_then_creates_item(self):
        # Act
        item = ContentItem("t1", "Great.", 5, 8, SizeClass.WIDE)

        # Assert
        assert item.visual_weight == 2.5
        assert item.identifying_field == "t1"

    def test_init_when_rating_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="rating must be within 0-5"):
            ContentItem("t1", "Great.", 6, 8, SizeClass.WIDE)

    def test_init_when_priority_out_of_range_then_raises_error(self):
        with pytest.raises(ValueError, match="priority must be within 1-10"):
            ContentItem("t1", "Great.", 5, 0, SizeClass.WIDE)

    def test_init_when_id_has_whitespace_then_raises_error(self):
        with pytest.raises(ValueError, match="id must be non-empty"):
            ContentItem("t 1", "Great.", 5, 5, SizeClass.WIDE)

    def test_init_when_size_class_is_string_then_raises_error(self):
        with pytest.raises(ValueError, match="Invalid size class"):
            ContentItem("t1", "Great.", 5, 5, "wide")

    def test_to_dict_when_attribution_set_then_included(self):
        item = ContentItem("t1", "Great.", 5, 8, SizeClass.WIDE, attribution="Acme")
        assert item.to_dict() == {
            "id": "t1",
            "text": "Great.",
            "rating": 5,
            "priority": 8,
            "sizeClass": "wide",
            "attribution": "Acme",
        }


class TestGridCell:
    """Tests for GridCell derived properties."""

    def test_properties_when_tall_cell_then_derived_correctly(self):
        # Arrange
        cell = GridCell("t1", 0, 2, 1, 2, SizeClass.TALL, 3.0)

        # Assert
        assert cell.row_span == 2
        assert cell.col_span == 1
        assert cell.area == 2
        assert cell.center == (1.0, 1.5)
        assert list(cell.covered()) == [(0, 1), (1, 1)]

    def test_from_dict_when_round_tripped_then_equal(self):
        cell = GridCell("w1", 0, 1, 0, 2, SizeClass.WIDE, 2.5)
        assert GridCell.from_dict(cell.to_dict()) == cell


class TestGridLayout:
    """Tests for GridLayout helpers."""

    def test_empty_when_created_then_zero_dimensions(self):
        layout = GridLayout.empty()
        assert (layout.rows, layout.columns, layout.cell_count) == (0, 0, 0)

    def test_cell_for_when_item_missing_then_none(self):
        cell = GridCell("a", 0, 1, 0, 1, SizeClass.COMPACT, 1.0)
        layout = GridLayout(1, 1, (cell,), 1.0, 1.0)

        assert layout.cell_for("a") is cell
        assert layout.cell_for("b") is None

    def test_to_dict_when_serialized_then_camel_case_keys(self):
        cell = GridCell("a", 0, 1, 0, 1, SizeClass.COMPACT, 1.0)
        layout = GridLayout(1, 1, (cell,), 1.0, 1.0)

        data = layout.to_dict()

        assert set(data) == {"rows", "columns", "cells", "totalVisualWeight", "balanceScore"}
        assert GridLayout.from_dict(data) == layout


class TestLayoutResult:
    """Tests for LayoutResult accessors."""

    def test_placed_count_when_cells_present_then_counts_cells(self):
        cell = GridCell("a", 0, 1, 0, 1, SizeClass.COMPACT, 1.0)
        result = LayoutResult(
            success=True,
            layout=GridLayout(1, 1, (cell,), 1.0, 1.0),
            metrics=LayoutMetrics(),
        )

        assert result.placed_count == 1
        assert result.cells == (cell,)
        assert result.unplaced == ()
