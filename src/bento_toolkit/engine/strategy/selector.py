"""
Module: engine.strategy.selector

Purpose:
    Choose the placement strategy from the item count, resolve the
    effective column count and size the initial occupancy grid.

Key Functions:
    - select_strategy(): Strategy for an item count
    - resolve_columns(): Effective columns for a strategy
    - initial_rows(): Initial grid height
    - uses_template(): Whether the catalog template applies

Dependencies:
    - bento_toolkit.common.thresholds: STRATEGY_THRESHOLDS

Used By:
    - engine.controller
"""

from __future__ import annotations

import logging
import math
from typing import Optional, Sequence

from bento_toolkit.common.thresholds import STRATEGY_THRESHOLDS
from bento_toolkit.core.models import ContentItem, Strategy

logger = logging.getLogger(__name__)


def select_strategy(count: int) -> Strategy:
    """
    Pick the placement strategy for an item count.

    Args:
        count: Number of items

    Returns:
        TEMPLATED_AREAS for up to 10 items, FLEXIBLE_GRID for 11-12,
        LINEAR_FLOW above that
    """
    T = STRATEGY_THRESHOLDS
    if count <= T.templated_max_items:
        return Strategy.TEMPLATED_AREAS
    if count <= T.flexible_max_items:
        return Strategy.FLEXIBLE_GRID
    return Strategy.LINEAR_FLOW


def resolve_columns(
    strategy: Strategy,
    requested: int,
    container_width: Optional[int] = None,
    min_card_width: int = STRATEGY_THRESHOLDS.min_card_width,
) -> int:
    """
    Effective column count for a strategy.

    Args:
        strategy: Selected strategy
        requested: Requested column count
        container_width: Container width in pixels (auto-fit when set)
        min_card_width: Minimum card width for auto-fit

    Returns:
        Column count, at least 1
    """
    T = STRATEGY_THRESHOLDS
    if strategy is Strategy.TEMPLATED_AREAS:
        return T.template_columns if requested >= T.template_columns else requested
    if strategy is Strategy.FLEXIBLE_GRID and container_width is not None:
        fitted = max(1, min(requested, container_width // min_card_width))
        logger.debug(f"Auto-fit {fitted} columns for {container_width}px container")
        return fitted
    return requested


def uses_template(strategy: Strategy, columns: int) -> bool:
    """Catalog templates only fit on the full template width."""
    return (
        strategy is Strategy.TEMPLATED_AREAS
        and columns == STRATEGY_THRESHOLDS.template_columns
    )


def initial_rows(strategy: Strategy, items: Sequence[ContentItem], columns: int) -> int:
    """
    Initial occupancy grid height.

    Args:
        strategy: Selected strategy
        items: Items to be placed
        columns: Effective column count

    Returns:
        Row count before any cap or expansion
    """
    T = STRATEGY_THRESHOLDS
    n = len(items)

    if uses_template(strategy, columns):
        return T.template_rows

    if strategy is Strategy.LINEAR_FLOW:
        area = 0
        for item in items:
            row_span, col_span = item.size_class.span(columns)
            area += row_span * col_span
        return max(1, math.ceil(area / columns))

    factor = T.narrow_row_factor if columns <= 1 else T.row_factor
    return max(math.ceil(factor * n), n + T.row_headroom)
