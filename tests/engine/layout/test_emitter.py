"""
Unit tests for grid template emission and parsing.
"""

import pytest

from bento_toolkit.core.models import GridCell, GridLayout, SizeClass
from bento_toolkit.engine.layout.emitter import (
    CellCoordinate,
    emit_grid_template,
    parse_template_matrix,
)


@pytest.fixture
def sample_layout():
    """Tall on the left, wide top right, compact below it; placed out of reading order."""
    cells = (
        GridCell("c1", 1, 2, 1, 2, SizeClass.COMPACT, 1.0),
        GridCell("w1", 0, 1, 1, 3, SizeClass.WIDE, 2.5),
        GridCell("t", 0, 2, 0, 1, SizeClass.TALL, 3.0),
    )
    return GridLayout(2, 3, cells, 6.5, 0.5)


class TestEmitGridTemplate:
    """Tests for emit_grid_template function."""

    def test_emit_when_layout_then_matrix_owned_by_ids(self, sample_layout):
        # Act
        template = emit_grid_template(sample_layout)

        # Assert
        assert template.matrix == (
            ("t", "w1", "w1"),
            ("t", "c1", "."),
        )
        assert (template.rows, template.columns) == (2, 3)

    def test_emit_when_cells_out_of_order_then_coordinates_in_reading_order(self, sample_layout):
        template = emit_grid_template(sample_layout)

        assert [c.item_id for c in template.coordinates] == ["t", "w1", "c1"]
        assert template.coordinates[0] == CellCoordinate("t", 0, 2, 0, 1)

    def test_to_text_when_emitted_then_quoted_rows(self, sample_layout):
        text = emit_grid_template(sample_layout).to_text()

        assert text == '"t w1 w1"\n"t c1 ."'

    def test_emit_when_custom_filler_then_used_for_gaps(self, sample_layout):
        template = emit_grid_template(sample_layout, filler="_")

        assert template.matrix[1][2] == "_"

    def test_emit_when_id_equals_filler_then_raises_error(self):
        layout = GridLayout(1, 1, (GridCell(".", 0, 1, 0, 1, SizeClass.COMPACT, 1.0),), 1.0, 0.0)

        with pytest.raises(ValueError, match="collides with filler"):
            emit_grid_template(layout)

    def test_emit_when_id_contains_quote_then_raises_error(self):
        layout = GridLayout(1, 1, (GridCell('a"b', 0, 1, 0, 1, SizeClass.COMPACT, 1.0),), 1.0, 0.0)

        with pytest.raises(ValueError, match="cannot be used as an area name"):
            emit_grid_template(layout)

    def test_emit_when_empty_layout_then_empty_matrix(self):
        template = emit_grid_template(GridLayout.empty())

        assert template.matrix == ()
        assert template.coordinates == ()

    def test_to_dict_when_emitted_then_camel_case_coordinates(self, sample_layout):
        data = emit_grid_template(sample_layout).to_dict()

        assert data["coordinates"][1] == {
            "itemId": "w1", "rowStart": 0, "rowEnd": 1, "colStart": 1, "colEnd": 3,
        }
        assert data["matrix"][0] == ["t", "w1", "w1"]


class TestParseTemplateMatrix:
    """Tests for parse_template_matrix function."""

    def test_parse_when_emitted_matrix_then_same_coordinates(self, sample_layout):
        template = emit_grid_template(sample_layout)

        assert parse_template_matrix(template.matrix) == list(template.coordinates)

    def test_parse_when_ragged_rows_then_raises_error(self):
        with pytest.raises(ValueError, match="differ in length"):
            parse_template_matrix([["a", "b"], ["a"]])

    def test_parse_when_area_not_rectangular_then_raises_error(self):
        matrix = [
            ["a", "a"],
            ["a", "b"],
        ]

        with pytest.raises(ValueError, match="'a' is not rectangular"):
            parse_template_matrix(matrix)

    def test_parse_when_empty_then_empty_list(self):
        assert parse_template_matrix([]) == []
