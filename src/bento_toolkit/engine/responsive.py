"""
Module: engine.responsive

Purpose:
    Run the placement engine independently per responsive breakpoint,
    each with its own column count, criteria and row budget, and
    guarantee that the narrow layout always succeeds.

Key Classes:
    - Breakpoint: narrow / medium / wide
    - BreakpointSpec: Columns and row budget for one breakpoint
    - ResponsiveLayouts: One LayoutResult per breakpoint

Key Functions:
    - breakpoint_config(): PlacementConfig for a breakpoint
    - sequential_fallback(): One item per row, single column
    - calculate_responsive_placement(): Main entry point

Dependencies:
    - engine.controller: calculate_placement()
    - bento_toolkit.common.thresholds: RESPONSIVE_THRESHOLDS

Used By:
    - bento_toolkit.cli: --responsive mode
"""

from __future__ import annotations

import logging
import math
from dataclasses import dataclass, replace
from enum import Enum
from typing import Optional, Sequence

from bento_toolkit.common.thresholds import RESPONSIVE_THRESHOLDS
from bento_toolkit.core.models import (
    ContentItem,
    GridCell,
    LayoutResult,
    Strategy,
)
from bento_toolkit.core.utils.serialization import serialize_layout_result

from .config import PlacementConfig
from .controller import build_layout, calculate_placement
from .layout.metrics import compute_layout_metrics
from .timing import TimingLog
from .weighting.sorter import sort_by_priority

logger = logging.getLogger(__name__)

FALLBACK_WARNING = "Using fallback sequential layout for narrow breakpoint"


class Breakpoint(Enum):
    """Responsive breakpoint, each placed independently."""

    NARROW = "narrow"
    MEDIUM = "medium"
    WIDE = "wide"

    @classmethod
    def from_viewport(cls, width: int) -> Breakpoint:
        """
        Breakpoint for a viewport width in pixels.

        Example:
            >>> Breakpoint.from_viewport(800)
            <Breakpoint.MEDIUM: 'medium'>
        """
        T = RESPONSIVE_THRESHOLDS
        if width < T.medium_min_viewport:
            return cls.NARROW
        if width < T.wide_min_viewport:
            return cls.MEDIUM
        return cls.WIDE


@dataclass(frozen=True)
class BreakpointSpec:
    """
    Placement constraints for one breakpoint.

    Attributes:
        breakpoint: Breakpoint the constraints apply to
        columns: Column count
        row_budget: Maximum rows available
    """
    breakpoint: Breakpoint
    columns: int
    row_budget: int

    def __post_init__(self) -> None:
        if self.columns <= 0:
            raise ValueError(f"columns must be positive: {self.columns}")
        if self.row_budget <= 0:
            raise ValueError(f"row_budget must be positive: {self.row_budget}")

    @classmethod
    def for_count(cls, breakpoint: Breakpoint, count: int, wide_columns: int) -> BreakpointSpec:
        """Constraints for a breakpoint given the item count."""
        T = RESPONSIVE_THRESHOLDS
        if breakpoint is Breakpoint.NARROW:
            return cls(breakpoint, T.narrow_columns,
                       max(T.narrow_min_rows, count + T.narrow_row_headroom))
        if breakpoint is Breakpoint.MEDIUM:
            return cls(breakpoint, T.medium_columns,
                       max(T.medium_min_rows, math.ceil(count / 2) + T.medium_row_headroom))
        return cls(breakpoint, min(T.wide_columns, wide_columns),
                   max(T.wide_min_rows, math.ceil(count / 4) + T.wide_row_headroom))


def breakpoint_config(spec: BreakpointSpec, base: PlacementConfig) -> PlacementConfig:
    """
    PlacementConfig for a breakpoint.

    The row budget caps the grid unless the base config has a smaller
    ``max_rows``. Narrow layouts disable clustering and row balance.
    """
    max_rows = spec.row_budget
    if base.max_rows is not None:
        max_rows = min(max_rows, base.max_rows)
    config = base.with_columns(spec.columns, max_rows)
    if spec.breakpoint is Breakpoint.NARROW:
        config = replace(config, prevent_clustering=False, balance_rows=False)
    return config


def sequential_fallback(
    items: Sequence[ContentItem],
    strategy: Optional[Strategy] = None,
) -> LayoutResult:
    """
    Place every item in priority order, one per row, single 1x1 column.

    Always succeeds; ignores any row cap.

    Args:
        items: Non-empty item list
        strategy: Strategy reported for the replaced layout

    Returns:
        Successful LayoutResult with rows == len(items) and columns == 1
    """
    ranked = sort_by_priority(items)
    cells = [
        GridCell(
            item_id=item.id,
            row_start=index,
            row_end=index + 1,
            col_start=0,
            col_end=1,
            size_class=item.size_class,
            visual_weight=item.visual_weight,
        )
        for index, item in enumerate(ranked)
    ]
    layout = build_layout(cells, 1)
    metrics, recommendations = compute_layout_metrics(layout, items)
    return LayoutResult(
        success=True,
        layout=layout,
        metrics=metrics,
        warnings=(FALLBACK_WARNING,),
        recommendations=tuple(recommendations),
        strategy=strategy,
    )


@dataclass(frozen=True)
class ResponsiveLayouts:
    """
    One independently computed layout per breakpoint.

    Example:
        >>> layouts = calculate_responsive_placement(items)
        >>> layouts.for_viewport(1280).layout.columns
        3
    """
    narrow: LayoutResult
    medium: LayoutResult
    wide: LayoutResult

    def for_breakpoint(self, breakpoint: Breakpoint) -> LayoutResult:
        return getattr(self, breakpoint.value)

    def for_viewport(self, width: int) -> LayoutResult:
        return self.for_breakpoint(Breakpoint.from_viewport(width))

    @property
    def success(self) -> bool:
        return self.narrow.success and self.medium.success and self.wide.success

    def to_dict(self) -> dict:
        return {bp.value: serialize_layout_result(self.for_breakpoint(bp)) for bp in Breakpoint}


def calculate_responsive_placement(
    items: Sequence[ContentItem],
    config: Optional[PlacementConfig] = None,
) -> ResponsiveLayouts:
    """
    Compute a layout for every breakpoint.

    Each breakpoint runs a separate placement with its own occupancy grid.
    When the narrow layout is not successful and items exist, it is
    replaced by sequential_fallback().

    Args:
        items: Validated content items with unique ids
        config: Base configuration; ``columns`` bounds the wide breakpoint

    Returns:
        ResponsiveLayouts
    """
    config = config or PlacementConfig()
    timing = TimingLog()
    results = {}

    for bp in Breakpoint:
        spec = BreakpointSpec.for_count(bp, len(items), config.columns)
        bp_config = breakpoint_config(spec, config)
        logger.debug(
            f"[{bp.value}] {spec.columns} columns, row budget {bp_config.max_rows}"
        )
        results[bp] = calculate_placement(items, bp_config, timing, bp.value)

    narrow = results[Breakpoint.NARROW]
    if not narrow.success and items:
        logger.warning(f"Narrow layout failed ({len(narrow.unplaced)} unplaced), using fallback")
        results[Breakpoint.NARROW] = sequential_fallback(items, narrow.strategy)

    timing.report()
    return ResponsiveLayouts(
        narrow=results[Breakpoint.NARROW],
        medium=results[Breakpoint.MEDIUM],
        wide=results[Breakpoint.WIDE],
    )
