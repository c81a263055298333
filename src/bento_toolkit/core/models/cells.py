"""
Module: cells

Purpose:
    Data models for placed grid regions and complete grid layouts.
    Immutable dataclasses with half-open spans.

Key Classes:
    - GridCell: Rectangular region owned by one item
    - GridLayout: Grid dimensions plus placed cells

Dependencies:
    - dataclasses (std)
    - .items.SizeClass

Used By:
    - engine.placement.search: Creates GridCells
    - engine.layout: Validation and emission
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator

from .items import SizeClass


@dataclass(frozen=True)
class GridCell:
    """
    Rectangular span ``[row_start, row_end) x [col_start, col_end)``.

    Attributes:
        item_id: Id of the owning content item
        row_start: First row (0-indexed, inclusive)
        row_end: Last row (exclusive)
        col_start: First column (0-indexed, inclusive)
        col_end: Last column (exclusive)
        size_class: Size class the cell was placed for
        visual_weight: Visual weight of the owning item

    Example:
        >>> cell = GridCell("t1", 0, 2, 1, 2, SizeClass.TALL, 3.0)
        >>> cell.area
        2
        >>> cell.center
        (1.0, 1.5)
    """

    item_id: str
    row_start: int
    row_end: int
    col_start: int
    col_end: int
    size_class: SizeClass
    visual_weight: float

    @property
    def row_span(self) -> int:
        return self.row_end - self.row_start

    @property
    def col_span(self) -> int:
        return self.col_end - self.col_start

    @property
    def area(self) -> int:
        """Number of grid units covered."""
        return self.row_span * self.col_span

    @property
    def center(self) -> tuple[float, float]:
        """(row, col) centre of the span."""
        return (
            (self.row_start + self.row_end) / 2,
            (self.col_start + self.col_end) / 2,
        )

    def covered(self) -> Iterator[tuple[int, int]]:
        """Yield every (row, col) unit covered by this cell."""
        for row in range(self.row_start, self.row_end):
            for col in range(self.col_start, self.col_end):
                yield row, col

    def to_dict(self) -> dict:
        """Serialize to the external camelCase cell shape."""
        return {
            "itemId": self.item_id,
            "rowStart": self.row_start,
            "rowEnd": self.row_end,
            "colStart": self.col_start,
            "colEnd": self.col_end,
            "sizeClass": self.size_class.value,
            "visualWeight": self.visual_weight,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GridCell:
        """
        Deserialize from dictionary.

        Args:
            data: Dict in the shape produced by to_dict()

        Returns:
            GridCell instance
        """
        size_class = SizeClass(data["sizeClass"])
        return cls(
            item_id=data["itemId"],
            row_start=data["rowStart"],
            row_end=data["rowEnd"],
            col_start=data["colStart"],
            col_end=data["colEnd"],
            size_class=size_class,
            visual_weight=data.get("visualWeight", size_class.visual_weight),
        )

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return (
            f"GridCell({self.item_id!r}, rows={self.row_start}:{self.row_end}, "
            f"cols={self.col_start}:{self.col_end})"
        )


@dataclass(frozen=True)
class GridLayout:
    """
    Grid dimensions with the cells placed in it.

    Attributes:
        rows: Number of rows actually used
        columns: Number of columns
        cells: Placed cells in placement order
        total_visual_weight: Sum of cell visual weights
        balance_score: Quadrant balance, 0-1 (higher is better balanced)
    """

    rows: int
    columns: int
    cells: tuple[GridCell, ...]
    total_visual_weight: float
    balance_score: float

    @classmethod
    def empty(cls) -> GridLayout:
        """A 0x0 layout with no cells."""
        return cls(rows=0, columns=0, cells=(), total_visual_weight=0, balance_score=0)

    @property
    def cell_count(self) -> int:
        return len(self.cells)

    def cell_for(self, item_id: str) -> GridCell | None:
        """Find the cell owned by an item, or None."""
        return next((c for c in self.cells if c.item_id == item_id), None)

    def to_dict(self) -> dict:
        return {
            "rows": self.rows,
            "columns": self.columns,
            "cells": [cell.to_dict() for cell in self.cells],
            "totalVisualWeight": self.total_visual_weight,
            "balanceScore": self.balance_score,
        }

    @classmethod
    def from_dict(cls, data: dict) -> GridLayout:
        return cls(
            rows=data["rows"],
            columns=data["columns"],
            cells=tuple(GridCell.from_dict(c) for c in data.get("cells", [])),
            total_visual_weight=data.get("totalVisualWeight", 0),
            balance_score=data.get("balanceScore", 0),
        )
