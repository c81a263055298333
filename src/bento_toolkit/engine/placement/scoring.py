"""
Module: engine.placement.scoring

Purpose:
    Position criteria used by the placement search and the layout-level
    balance and clustering measures used by the metrics.

Key Classes:
    - ClusteringTracker: Incremental same-size clustering score

Key Functions:
    - reading_flow_score(): Top-left preference
    - row_balance_score(): Preference for the vertical middle
    - clustering_score(): Clustering score of a complete layout
    - visual_balance(): Quadrant balance of visual weight

Dependencies:
    - numpy: Quadrant weight statistics
    - bento_toolkit.common.thresholds: SCORING_WEIGHTS

Used By:
    - engine.placement.search
    - engine.layout.metrics
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np

from bento_toolkit.common.thresholds import SCORING_WEIGHTS
from bento_toolkit.core.models import GridCell


def reading_flow_score(row: int, col: int, rows: int, columns: int) -> float:
    """
    Preference for positions near the top-left, 0-1.

    Rows weigh more than columns, so the grid fills top to bottom.
    """
    W = SCORING_WEIGHTS
    max_row = max(1, rows - 1)
    max_col = max(1, columns - 1)
    return (
        W.reading_flow_row_share * (1 - row / max_row)
        + W.reading_flow_col_share * (1 - col / max_col)
    )


def row_balance_score(row: int, rows: int) -> float:
    """Preference for rows near the vertical middle of the grid, 0-1."""
    half = rows / 2
    if half <= 0:
        return 0.0
    return 1 - abs(row - half) / half


def _pair_penalty(a: GridCell, b: GridCell) -> float:
    if a.size_class is not b.size_class:
        return 0.0
    limit = SCORING_WEIGHTS.clustering_distance
    (ar, ac), (br, bc) = a.center, b.center
    distance = math.hypot(ar - br, ac - bc)
    if distance >= limit:
        return 0.0
    return (limit - distance) / limit


def _pair_count(n: int) -> int:
    return n * (n - 1) // 2


def clustering_score(cells: Sequence[GridCell]) -> float:
    """
    Clustering score of a set of cells, 0-1 (1 means no clustering).

    Every pair of same-size cells whose centres are closer than the
    clustering distance adds a penalty; the total is averaged over all
    pairs.
    """
    if len(cells) <= 1:
        return 1.0
    penalty = sum(
        _pair_penalty(cells[i], cells[j])
        for i in range(len(cells))
        for j in range(i + 1, len(cells))
    )
    return max(0.0, 1 - penalty / _pair_count(len(cells)))


class ClusteringTracker:
    """
    Incremental clustering score for a growing layout.

    Keeps the accumulated penalty of the placed cells so scoring one
    candidate costs O(n) instead of O(n^2).

    Example:
        >>> tracker = ClusteringTracker()
        >>> tracker.add(cell_a)
        >>> tracker.score_with(candidate)
        0.75
    """

    def __init__(self, cells: Iterable[GridCell] = ()):
        self._cells: list[GridCell] = []
        self._penalty = 0.0
        for cell in cells:
            self.add(cell)

    def __len__(self) -> int:
        return len(self._cells)

    def add(self, cell: GridCell) -> None:
        self._penalty += sum(_pair_penalty(cell, other) for other in self._cells)
        self._cells.append(cell)

    def score_with(self, candidate: GridCell) -> float:
        """Clustering score of the placed cells plus a candidate."""
        pairs = _pair_count(len(self._cells) + 1)
        if pairs == 0:
            return 1.0
        penalty = self._penalty + sum(
            _pair_penalty(candidate, other) for other in self._cells
        )
        return max(0.0, 1 - penalty / pairs)

    @property
    def score(self) -> float:
        pairs = _pair_count(len(self._cells))
        if pairs == 0:
            return 1.0
        return max(0.0, 1 - self._penalty / pairs)


def visual_balance(cells: Sequence[GridCell], rows: int, columns: int) -> float:
    """
    Balance of visual weight across grid quadrants, 0-1.

    Cells are assigned to a quadrant by their centre. A single-column
    grid is split into top and bottom halves only.

    Returns:
        ``max(0, 1 - std / mean)`` of the quadrant weights; 1 with no cells
    """
    if not cells:
        return 1.0

    mid_row = rows / 2
    mid_col = columns / 2
    split_columns = columns > 1
    weights = np.zeros(4 if split_columns else 2)

    for cell in cells:
        center_row, center_col = cell.center
        index = 0 if center_row < mid_row else 1
        if split_columns:
            index = index * 2 + (0 if center_col < mid_col else 1)
        weights[index] += cell.visual_weight

    mean = weights.mean()
    if mean <= 0:
        return 1.0
    return max(0.0, 1 - float(weights.std()) / float(mean))
