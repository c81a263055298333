"""
Module: engine.placement.occupancy

Purpose:
    Occupancy matrix for one placement computation. Tracks which grid
    units are taken and answers "does this span fit here" queries.

Key Classes:
    - OccupancyGrid: rows x columns boolean matrix with an optional row cap

Dependencies:
    - numpy: Boolean occupancy matrix

Used By:
    - engine.placement.search: Candidate enumeration and occupation
"""

from __future__ import annotations

import logging
from typing import Iterator, Optional

import numpy as np

logger = logging.getLogger(__name__)


class OccupancyGrid:
    """
    Row x column occupancy matrix (mutable, one per computation).

    Args:
        rows: Initial row count (capped by max_rows)
        columns: Column count
        max_rows: Hard cap on rows, for the initial size and every expansion

    Example:
        >>> grid = OccupancyGrid(2, 3)
        >>> grid.occupy(0, 0, 1, 2)
        >>> grid.is_available(0, 1, 1, 1)
        False
        >>> list(grid.iter_free_positions(1, 2))
        [(1, 0), (1, 1)]
    """

    def __init__(self, rows: int, columns: int, max_rows: Optional[int] = None):
        if columns <= 0:
            raise ValueError(f"columns must be positive: {columns}")
        if rows < 0:
            raise ValueError(f"rows must be non-negative: {rows}")
        if max_rows is not None:
            rows = min(rows, max_rows)
        self.columns = columns
        self.max_rows = max_rows
        self._cells = np.zeros((rows, columns), dtype=bool)

    @property
    def rows(self) -> int:
        return self._cells.shape[0]

    @property
    def occupied_count(self) -> int:
        """Number of occupied grid units."""
        return int(self._cells.sum())

    @property
    def used_rows(self) -> int:
        """Rows up to and including the last row with an occupied unit."""
        occupied = np.flatnonzero(self._cells.any(axis=1))
        return int(occupied[-1]) + 1 if occupied.size else 0

    def is_available(self, row: int, col: int, row_span: int, col_span: int) -> bool:
        """True when the span lies inside the grid and every unit is free."""
        if row < 0 or col < 0 or row_span <= 0 or col_span <= 0:
            return False
        if row + row_span > self.rows or col + col_span > self.columns:
            return False
        return not self._cells[row:row + row_span, col:col + col_span].any()

    def occupy(self, row: int, col: int, row_span: int, col_span: int) -> None:
        """
        Mark every unit of a span as occupied.

        Raises:
            ValueError: If the span is out of bounds or overlaps
        """
        if not self.is_available(row, col, row_span, col_span):
            raise ValueError(
                f"Span {row_span}x{col_span} at ({row}, {col}) is not available"
            )
        self._cells[row:row + row_span, col:col + col_span] = True

    def expand(self, extra_rows: int) -> int:
        """
        Append free rows, respecting the row cap.

        Returns:
            Number of rows actually added
        """
        target = self.rows + max(0, extra_rows)
        if self.max_rows is not None:
            target = min(target, self.max_rows)
        added = max(0, target - self.rows)
        if added:
            extra = np.zeros((added, self.columns), dtype=bool)
            self._cells = np.vstack([self._cells, extra])
            logger.debug(f"Expanded occupancy grid by {added} rows to {self.rows}")
        return added

    def iter_free_positions(self, row_span: int, col_span: int) -> Iterator[tuple[int, int]]:
        """Yield legal top-left positions for a span in row-major order."""
        for row in range(self.rows - row_span + 1):
            for col in range(self.columns - col_span + 1):
                if self.is_available(row, col, row_span, col_span):
                    yield row, col

    def first_free_row(self) -> Optional[int]:
        """First row with no occupied unit, or None when every row is touched."""
        free = np.flatnonzero(~self._cells.any(axis=1))
        return int(free[0]) if free.size else None

    def __repr__(self) -> str:
        return (
            f"OccupancyGrid({self.rows}x{self.columns}, "
            f"occupied={self.occupied_count})"
        )
