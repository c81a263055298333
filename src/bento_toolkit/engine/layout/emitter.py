"""
Module: engine.layout.emitter

Purpose:
    Convert a validated GridLayout into the representations consumed by
    a rendering layer: a reading-ordered coordinate list and a
    row x column area matrix (the shape of a grid-template-areas value).

    Both views are lossless: parse_template_matrix() rebuilds the
    coordinate list from a matrix.

Key Classes:
    - CellCoordinate: One item's span
    - GridTemplate: Coordinates plus area matrix

Key Functions:
    - emit_grid_template(): Layout -> GridTemplate
    - parse_template_matrix(): Matrix -> coordinates
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from bento_toolkit.core.models import GridLayout

DEFAULT_FILLER = "."


@dataclass(frozen=True)
class CellCoordinate:
    """Span of one item, half-open in both directions."""
    item_id: str
    row_start: int
    row_end: int
    col_start: int
    col_end: int

    def to_dict(self) -> dict:
        return {
            "itemId": self.item_id,
            "rowStart": self.row_start,
            "rowEnd": self.row_end,
            "colStart": self.col_start,
            "colEnd": self.col_end,
        }


@dataclass(frozen=True)
class GridTemplate:
    """
    External representation of a layout.

    Attributes:
        rows: Grid rows
        columns: Grid columns
        coordinates: Cell spans in reading order (row, then column)
        matrix: rows x columns owning ids, filler for empty units
        filler: Marker for empty units
    """
    rows: int
    columns: int
    coordinates: tuple[CellCoordinate, ...]
    matrix: tuple[tuple[str, ...], ...]
    filler: str = DEFAULT_FILLER

    def to_text(self) -> str:
        """
        Quoted row strings, one per line.

        Example:
            >>> print(template.to_text())
            "a a b"
            "c . b"
        """
        return "\n".join(f'"{" ".join(row)}"' for row in self.matrix)

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "coordinates": [c.to_dict() for c in self.coordinates],
            "matrix": [list(row) for row in self.matrix],
        }


def _check_id(item_id: str, filler: str) -> None:
    if not item_id or '"' in item_id or any(ch.isspace() for ch in item_id):
        raise ValueError(f"Item id cannot be used as an area name: {item_id!r}")
    if item_id == filler:
        raise ValueError(f"Item id collides with filler {filler!r}")


def emit_grid_template(layout: GridLayout, filler: str = DEFAULT_FILLER) -> GridTemplate:
    """
    Emit the coordinate list and area matrix for a layout.

    Args:
        layout: Validated layout
        filler: Marker for empty units

    Returns:
        GridTemplate

    Raises:
        ValueError: If an id contains whitespace or quotes, or equals the filler
    """
    grid = [[filler] * layout.columns for _ in range(layout.rows)]
    for cell in layout.cells:
        _check_id(cell.item_id, filler)
        for row, col in cell.covered():
            grid[row][col] = cell.item_id

    ordered = sorted(layout.cells, key=lambda c: (c.row_start, c.col_start))
    coordinates = tuple(
        CellCoordinate(c.item_id, c.row_start, c.row_end, c.col_start, c.col_end)
        for c in ordered
    )
    return GridTemplate(
        rows=layout.rows,
        columns=layout.columns,
        coordinates=coordinates,
        matrix=tuple(tuple(row) for row in grid),
        filler=filler,
    )


def parse_template_matrix(
    matrix: Sequence[Sequence[str]],
    filler: str = DEFAULT_FILLER,
) -> list[CellCoordinate]:
    """
    Rebuild reading-ordered coordinates from an area matrix.

    Args:
        matrix: Rows of area names
        filler: Marker for empty units

    Returns:
        Coordinates in reading order

    Raises:
        ValueError: If rows differ in length or an area is not rectangular
    """
    if not matrix:
        return []
    width = len(matrix[0])
    if any(len(row) != width for row in matrix):
        raise ValueError("Template matrix rows differ in length")

    bounds: dict[str, list[int]] = {}
    for r, row in enumerate(matrix):
        for c, name in enumerate(row):
            if name == filler:
                continue
            if name not in bounds:
                bounds[name] = [r, r, c, c]
            else:
                b = bounds[name]
                b[0], b[1] = min(b[0], r), max(b[1], r)
                b[2], b[3] = min(b[2], c), max(b[3], c)

    coordinates = []
    for name, (r0, r1, c0, c1) in bounds.items():
        for r in range(r0, r1 + 1):
            for c in range(c0, c1 + 1):
                if matrix[r][c] != name:
                    raise ValueError(f"Area {name!r} is not rectangular")
        coordinates.append(CellCoordinate(name, r0, r1 + 1, c0, c1 + 1))

    return sorted(coordinates, key=lambda c: (c.row_start, c.col_start))
