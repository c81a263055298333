"""
Module: engine.placement.search

Purpose:
    Greedy placement of ranked items into an occupancy grid. Each item
    goes to the highest-scoring free position; when none exists a ladder
    of fallback tiers is tried before the item is reported as unplaced.

Key Functions:
    - find_best_position(): Score every free position for one item
    - place_item(): Fallback ladder, returns a PlacementOutcome
    - place_from_template(): Fill catalog template slots
    - describe_outcome(): Warning messages for an outcome
    - align_reading_order(): Rank-ordered reading flow within each size class

Fallback ladder:
    1. search with the configured criteria
    2. retry with clustering and row balance disabled
    3. expand the grid (bounded by the row cap) and retry
    4. sequential placement in the first free row, span clipped to fit
    5. PlacementFailure

Dependencies:
    - engine.placement.occupancy: OccupancyGrid
    - engine.placement.scoring: Position criteria

Used By:
    - engine.controller
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Iterable, Optional, Sequence

from bento_toolkit.common.thresholds import SCORING_WEIGHTS, STRATEGY_THRESHOLDS
from bento_toolkit.core.models import (
    ContentItem,
    GridCell,
    Placed,
    PlacementFailure,
    PlacementOutcome,
    SizeClass,
)

from ..weighting.calculator import calculate_placement_score
from .occupancy import OccupancyGrid
from .scoring import ClusteringTracker, reading_flow_score, row_balance_score

if TYPE_CHECKING:
    from ..config import PlacementConfig
    from ..strategy.catalog import TemplateSlot

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PositionCandidate:
    """Top-left position with its weighted score."""
    row: int
    col: int
    score: float


def _make_cell(item: ContentItem, row: int, col: int, row_span: int, col_span: int) -> GridCell:
    return GridCell(
        item_id=item.id,
        row_start=row,
        row_end=row + row_span,
        col_start=col,
        col_end=col + col_span,
        size_class=item.size_class,
        visual_weight=item.visual_weight,
    )


def find_best_position(
    grid: OccupancyGrid,
    item: ContentItem,
    config: PlacementConfig,
    tracker: ClusteringTracker,
    placement_score: Optional[float] = None,
) -> Optional[PositionCandidate]:
    """
    Find the highest-scoring free position for an item.

    Candidates are scanned in row-major order and only a strictly better
    score replaces the current best, so ties go to the first position.

    Args:
        grid: Current occupancy
        item: Item to place
        config: Enabled criteria
        tracker: Clustering state of the cells placed so far
        placement_score: Precomputed PlacementScore of the item

    Returns:
        Best candidate, or None when the span fits nowhere
    """
    W = SCORING_WEIGHTS
    row_span, col_span = item.size_class.span(grid.columns)
    if placement_score is None:
        placement_score = calculate_placement_score(item)
    use_clustering = config.prevent_clustering and len(tracker) > 0

    best: Optional[PositionCandidate] = None
    for row, col in grid.iter_free_positions(row_span, col_span):
        score = 0.0
        flow = reading_flow_score(row, col, grid.rows, grid.columns)

        if config.maintain_reading_flow:
            score += flow * W.reading_flow_weight
        if config.prioritize_high_value:
            score += flow * placement_score * W.prominence_weight
        if use_clustering:
            candidate = _make_cell(item, row, col, row_span, col_span)
            score += tracker.score_with(candidate) * W.clustering_weight
        if config.balance_rows:
            score += row_balance_score(row, grid.rows) * W.row_balance_weight

        if best is None or score > best.score:
            best = PositionCandidate(row, col, score)

    return best


def _place_sequentially(grid: OccupancyGrid, item: ContentItem) -> Optional[GridCell]:
    """First fully free row, column 0, span clipped to what fits."""
    row = grid.first_free_row()
    if row is None:
        return None

    row_span, col_span = item.size_class.span(grid.columns)
    for span in range(min(row_span, grid.rows - row), 0, -1):
        if grid.is_available(row, 0, span, col_span):
            return _make_cell(item, row, 0, span, col_span)
    return None


def place_item(
    grid: OccupancyGrid,
    item: ContentItem,
    config: PlacementConfig,
    tracker: ClusteringTracker,
) -> PlacementOutcome:
    """
    Place one item, walking the fallback ladder as needed.

    The grid is mutated when the item is placed; the tracker is left to
    the caller.

    Args:
        grid: Current occupancy
        item: Item to place
        config: Enabled criteria
        tracker: Clustering state of the cells placed so far

    Returns:
        Placed with the tier that succeeded, or PlacementFailure
    """
    placement_score = calculate_placement_score(item)
    row_span, col_span = item.size_class.span(grid.columns)
    attempts = 1

    tiers = [("search", config)]
    simplified = config.simplified()
    if simplified != config:
        tiers.append(("simplified", simplified))

    for index, (tier, tier_config) in enumerate(tiers):
        if index:
            attempts += 1
        best = find_best_position(grid, item, tier_config, tracker, placement_score)
        if best is not None:
            cell = _make_cell(item, best.row, best.col, row_span, col_span)
            grid.occupy(best.row, best.col, row_span, col_span)
            return Placed(cell=cell, tier=tier, attempts=attempts)

    attempts += 1
    if grid.expand(STRATEGY_THRESHOLDS.expansion_rows):
        best = find_best_position(grid, item, config, tracker, placement_score)
        if best is not None:
            cell = _make_cell(item, best.row, best.col, row_span, col_span)
            grid.occupy(best.row, best.col, row_span, col_span)
            return Placed(cell=cell, tier="expanded", attempts=attempts)

    attempts += 1
    cell = _place_sequentially(grid, item)
    if cell is not None:
        grid.occupy(cell.row_start, cell.col_start, cell.row_span, cell.col_span)
        return Placed(cell=cell, tier="sequential", attempts=attempts)

    logger.debug(f"No position for {item.id} in {grid!r} after {attempts} attempts")
    return PlacementFailure(item_id=item.id, attempts=attempts)


def describe_outcome(outcome: PlacementOutcome, item: ContentItem) -> list[str]:
    """
    Warning messages for a placement outcome (empty for a first-try success).

    Args:
        outcome: Result of place_item()
        item: The item that was placed

    Returns:
        Warning messages
    """
    if isinstance(outcome, PlacementFailure):
        return [f"Could not place item: {outcome.item_id} ({outcome.reason})"]

    warnings: list[str] = []
    if outcome.attempts > 1:
        warnings.append(f"{outcome.item_id} placed after {outcome.attempts} attempts")
    if outcome.tier == "sequential":
        cell = outcome.cell
        expected_rows, _ = item.size_class.span(cell.col_span)
        if cell.row_span < expected_rows:
            warnings.append(
                f"{outcome.item_id} placed sequentially with reduced span "
                f"{cell.row_span}x{cell.col_span}"
            )
    return warnings


def place_from_template(
    grid: OccupancyGrid,
    ranked: Sequence[ContentItem],
    slots: Sequence[TemplateSlot],
) -> tuple[list[Placed], list[ContentItem]]:
    """
    Fill catalog template slots with ranked items.

    Each slot takes the highest-ranked remaining item of the slot's size
    class, or the highest-ranked remaining item when none matches. The
    cell takes the slot's span and size class. Slots that do not fit the
    grid are skipped.

    Args:
        grid: Occupancy grid on the template width
        ranked: Items in placement order
        slots: Template slots in fill order

    Returns:
        (placements, items left for search placement)
    """
    remaining = list(ranked)
    placements: list[Placed] = []

    for slot in slots:
        if not remaining:
            break
        row_span = slot.row_end - slot.row_start
        col_span = slot.col_end - slot.col_start
        if not grid.is_available(slot.row_start, slot.col_start, row_span, col_span):
            logger.warning(f"Template slot {slot.name} does not fit {grid!r}, skipping")
            continue

        item = next(
            (i for i in remaining if i.size_class is slot.size_class),
            remaining[0],
        )
        remaining.remove(item)
        grid.occupy(slot.row_start, slot.col_start, row_span, col_span)
        cell = GridCell(
            item_id=item.id,
            row_start=slot.row_start,
            row_end=slot.row_end,
            col_start=slot.col_start,
            col_end=slot.col_end,
            size_class=slot.size_class,
            visual_weight=slot.size_class.visual_weight,
        )
        placements.append(Placed(cell=cell, tier="template"))
        logger.debug(f"Template slot {slot.name} -> {item.id}")

    return placements, remaining


def align_reading_order(
    cells: Sequence[GridCell],
    ranked: Sequence[ContentItem],
    rows: int,
    columns: int,
    pinned: Iterable[str] = (),
) -> list[GridCell]:
    """
    Reassign positions within each size class so rank follows reading flow.

    Positions occupied by items of one size class are handed out again in
    rank order, best reading flow first (ties in reading order). Only ids
    move: every position keeps its span, size class and visual weight, so
    occupancy, clustering and balance are unchanged. Pinned cells keep
    their item.

    Args:
        cells: Placed cells in placement order
        ranked: Items in placement order
        rows: Final grid rows
        columns: Grid columns
        pinned: Ids that must stay where they were placed

    Returns:
        Cells in the same order with ids reassigned
    """
    rank = {item.id: index for index, item in enumerate(ranked)}
    size_of = {item.id: item.size_class for item in ranked}

    pinned_ids = set(pinned)
    groups: dict[SizeClass, list[int]] = {}
    for index, cell in enumerate(cells):
        if cell.item_id in pinned_ids:
            continue
        groups.setdefault(size_of[cell.item_id], []).append(index)

    def position_key(index: int) -> tuple[float, int, int]:
        cell = cells[index]
        flow = reading_flow_score(cell.row_start, cell.col_start, rows, columns)
        return -flow, cell.row_start, cell.col_start

    aligned = list(cells)
    for indices in groups.values():
        if len(indices) < 2:
            continue
        ids = sorted((cells[i].item_id for i in indices), key=rank.__getitem__)
        for item_id, index in zip(ids, sorted(indices, key=position_key)):
            if cells[index].item_id != item_id:
                aligned[index] = replace(cells[index], item_id=item_id)
    return aligned
