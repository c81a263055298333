"""
Module: engine.controller

Purpose:
    Orchestrate one placement computation.
    Weigh → Sort → Select strategy → Place → Measure → Validate

Key Functions:
    - calculate_placement(): Main entry point for a single grid

Dependencies:
    - engine.weighting: Ordering
    - engine.strategy: Strategy, columns and initial rows
    - engine.placement: Occupancy and search
    - engine.layout: Metrics and validation

Used By:
    - engine.responsive: Per-breakpoint runs
    - bento_toolkit.cli: Command-line entry point
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import List, Optional, Sequence

from bento_toolkit.common.thresholds import PERFORMANCE_THRESHOLDS
from bento_toolkit.core.models import (
    ContentItem,
    GridCell,
    GridLayout,
    LayoutMetrics,
    LayoutResult,
    Placed,
)

from .config import PlacementConfig
from .layout.metrics import compute_layout_metrics
from .layout.validator import validate_grid_layout
from .placement.occupancy import OccupancyGrid
from .placement.scoring import ClusteringTracker, visual_balance
from .placement.search import (
    align_reading_order,
    describe_outcome,
    place_from_template,
    place_item,
)
from .strategy.catalog import template_for
from .strategy.selector import initial_rows, resolve_columns, select_strategy, uses_template
from .timing import TimingLog, timed_phase
from .weighting.calculator import round2
from .weighting.sorter import sort_by_priority

logger = logging.getLogger(__name__)

NO_ITEMS_WARNING = "No content items provided"


def empty_result() -> LayoutResult:
    """Result for an empty item list: unsuccessful, 0x0, zero metrics."""
    return LayoutResult(
        success=False,
        layout=GridLayout.empty(),
        metrics=LayoutMetrics(),
        warnings=(NO_ITEMS_WARNING,),
        recommendations=("Add content items to display",),
    )


def build_layout(cells: Sequence[GridCell], columns: int) -> GridLayout:
    """
    Assemble a GridLayout from placed cells.

    The row count is the last row actually used (at least 1).
    """
    rows = max([1] + [cell.row_end for cell in cells])
    return GridLayout(
        rows=rows,
        columns=columns,
        cells=tuple(cells),
        total_visual_weight=sum(cell.visual_weight for cell in cells),
        balance_score=round2(visual_balance(cells, rows, columns)),
    )


def calculate_placement(
    items: Sequence[ContentItem],
    config: Optional[PlacementConfig] = None,
    timing: Optional[TimingLog] = None,
    breakpoint: Optional[str] = None,
) -> LayoutResult:
    """
    Compute a grid layout for a set of items.

    Pipeline:
    1. Sort items by placement score
    2. Select strategy and resolve columns
    3. Fill catalog template slots (templated strategy on 3 columns)
    4. Place remaining items with search and fallbacks
    5. Hand out positions within each size class in rank order
    6. Compute metrics and recommendations
    7. Validate structural invariants

    Never raises for placement problems: items that cannot be placed are
    listed under ``unplaced`` and the result is marked unsuccessful.

    Args:
        items: Validated content items with unique ids
        config: Placement configuration (defaults to PlacementConfig())
        timing: Optional TimingLog to record phase timings into
        breakpoint: Breakpoint name used for timing and log messages

    Returns:
        LayoutResult

    Example:
        >>> result = calculate_placement(items, PlacementConfig(columns=4))
        >>> print(f"{result.placed_count} cells on {result.layout.rows} rows")
    """
    config = config or PlacementConfig()
    label = f"[{breakpoint}] " if breakpoint else ""

    if not items:
        logger.warning(f"{label}{NO_ITEMS_WARNING}")
        return empty_result()

    own_timing = timing is None
    timing = timing or TimingLog()
    warnings: List[str] = []

    if len(items) > PERFORMANCE_THRESHOLDS.recommended_max_items:
        logger.warning(
            f"{label}{len(items)} items exceeds the recommended maximum of "
            f"{PERFORMANCE_THRESHOLDS.recommended_max_items}"
        )

    with timed_phase(timing, "sorting", breakpoint):
        ranked = sort_by_priority(items)

    strategy = select_strategy(len(ranked))
    columns = resolve_columns(
        strategy, config.columns, config.container_width, config.min_card_width
    )
    if config.prevent_clustering and len({i.size_class for i in ranked}) <= 1:
        config = replace(config, prevent_clustering=False)

    rows = initial_rows(strategy, ranked, columns)
    grid = OccupancyGrid(rows, columns, config.max_rows)
    logger.debug(f"{label}{strategy.value}: {len(ranked)} items on {grid!r}")

    cells: List[GridCell] = []
    unplaced: List[str] = []
    sequential: List[str] = []
    tracker = ClusteringTracker()

    with timed_phase(timing, "placement", breakpoint):
        remaining: Sequence[ContentItem] = ranked
        if uses_template(strategy, columns):
            placements, remaining = place_from_template(grid, ranked, template_for(len(ranked)))
            for placed in placements:
                cells.append(placed.cell)
                tracker.add(placed.cell)

        for item in remaining:
            outcome = place_item(grid, item, config, tracker)
            messages = describe_outcome(outcome, item)
            for message in messages:
                logger.warning(f"{label}{message}")
            warnings.extend(messages)

            if isinstance(outcome, Placed):
                cells.append(outcome.cell)
                tracker.add(outcome.cell)
                if outcome.tier == "sequential":
                    sequential.append(outcome.item_id)
            else:
                unplaced.append(outcome.item_id)

        used_rows = max([1] + [cell.row_end for cell in cells])
        cells = align_reading_order(cells, ranked, used_rows, columns, pinned=sequential)

    with timed_phase(timing, "metrics", breakpoint):
        layout = build_layout(cells, columns)
        metrics, recommendations = compute_layout_metrics(layout, items, len(unplaced))

    report = validate_grid_layout(layout)
    for error in report.errors:
        logger.error(f"{label}Layout validation failed: {error}")
        warnings.append(f"Layout validation failed: {error}")
    for warning in report.warnings:
        logger.debug(f"{label}{warning}")

    success = not unplaced and report.is_valid
    logger.info(
        f"{label}Placed {len(cells)}/{len(items)} items with {strategy.value} "
        f"on {layout.rows}x{layout.columns} (balance {metrics.balance_score})"
    )
    if own_timing:
        timing.report()

    return LayoutResult(
        success=success,
        layout=layout,
        metrics=metrics,
        warnings=tuple(warnings),
        recommendations=tuple(recommendations),
        unplaced=tuple(unplaced),
        strategy=strategy,
    )
