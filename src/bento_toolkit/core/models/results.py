"""
Module: results

Purpose:
    Result types produced by the placement engine: the per-item
    placement outcome and the complete LayoutResult with metrics.

Key Classes:
    - Strategy: Placement algorithm family
    - Placed: Successful placement of one item
    - PlacementFailure: Item that could not be placed after every fallback
    - LayoutMetrics: Rounded quality metrics
    - LayoutResult: Final engine output

Dependencies:
    - dataclasses (std)
    - .cells: GridCell, GridLayout

Used By:
    - engine.placement.search: Returns PlacementOutcome
    - engine.controller: Builds LayoutResult
    - core.utils.serialization: External representation
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Union

from .cells import GridCell, GridLayout


class Strategy(Enum):
    """
    Placement algorithm family, chosen once per computation from item count.

    Attributes:
        TEMPLATED_AREAS: Curated catalog layouts for small counts
        FLEXIBLE_GRID: Auto-fit columns with search placement
        LINEAR_FLOW: Fixed columns with open-ended rows
    """

    TEMPLATED_AREAS = "templated-areas"
    FLEXIBLE_GRID = "flexible-grid"
    LINEAR_FLOW = "linear-flow"


@dataclass(frozen=True)
class Placed:
    """
    Successful placement of one item.

    Attributes:
        cell: The occupied cell
        tier: Fallback tier that succeeded ("search", "simplified",
            "expanded", "sequential", "template")
        attempts: Number of attempts made, 1 when the first search succeeded
    """

    cell: GridCell
    tier: str = "search"
    attempts: int = 1

    @property
    def item_id(self) -> str:
        return self.cell.item_id


@dataclass(frozen=True)
class PlacementFailure:
    """
    An item that could not be placed after every fallback tier.

    Never raised; recorded as a warning and listed under unplaced items.

    Attributes:
        item_id: Id of the unplaced item
        attempts: Number of attempts made
        reason: Human-readable reason
    """

    item_id: str
    attempts: int
    reason: str = "no free position"


PlacementOutcome = Union[Placed, PlacementFailure]


@dataclass(frozen=True)
class LayoutMetrics:
    """
    Quality metrics for a layout, each in [0, 1] rounded to 2 decimals.

    Attributes:
        balance_score: Visual weight balance across grid quadrants
        readability_score: Mean combined readability of the input items
        visual_harmony: Blend of balance and clustering avoidance
        performance_score: Space utilization of the grid
    """

    balance_score: float = 0.0
    readability_score: float = 0.0
    visual_harmony: float = 0.0
    performance_score: float = 0.0

    def to_dict(self) -> dict:
        return {
            "balanceScore": self.balance_score,
            "readabilityScore": self.readability_score,
            "visualHarmony": self.visual_harmony,
            "performanceScore": self.performance_score,
        }


@dataclass(frozen=True)
class LayoutResult:
    """
    Final engine output (immutable).

    ``success`` is False when the layout is degraded but usable: render
    every placed cell and drop the unplaced ids.

    Attributes:
        success: True when every item was placed and the layout is valid
        layout: The grid layout
        metrics: Rounded quality metrics
        warnings: Warning messages (placement retries, fallbacks, validation)
        recommendations: Suggestions for improving the layout
        unplaced: Ids of items that could not be placed
        strategy: Strategy used, None for empty input

    Example:
        >>> result = calculate_placement(items)
        >>> result.placed_count + len(result.unplaced) == len(items)
        True
    """

    success: bool
    layout: GridLayout
    metrics: LayoutMetrics
    warnings: tuple[str, ...] = ()
    recommendations: tuple[str, ...] = ()
    unplaced: tuple[str, ...] = ()
    strategy: Optional[Strategy] = None

    @property
    def placed_count(self) -> int:
        return len(self.layout.cells)

    @property
    def cells(self) -> tuple[GridCell, ...]:
        return self.layout.cells
