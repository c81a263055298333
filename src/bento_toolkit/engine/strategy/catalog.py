"""
Module: engine.strategy.catalog

Purpose:
    Curated grid-area templates for small item counts. Pure data: each
    entry lists the slots of a fixed 3-column x 4-row grid in fill order.

Key Classes:
    - TemplateSlot: One named rectangular slot

Key Functions:
    - template_for(): Template entry for an item count

Used By:
    - engine.placement.search: place_from_template()
"""

from __future__ import annotations

from dataclasses import dataclass

from bento_toolkit.common.thresholds import STRATEGY_THRESHOLDS
from bento_toolkit.core.models import SizeClass

TEMPLATE_COLUMNS = STRATEGY_THRESHOLDS.template_columns
TEMPLATE_ROWS = STRATEGY_THRESHOLDS.template_rows


@dataclass(frozen=True)
class TemplateSlot:
    """
    Named slot ``[row_start, row_end) x [col_start, col_end)`` in a template.

    Attributes:
        name: Area name (e.g. "tall1")
        row_start: First row (inclusive)
        row_end: Last row (exclusive)
        col_start: First column (inclusive)
        col_end: Last column (exclusive)
        size_class: Size class the slot is designed for
    """

    name: str
    row_start: int
    row_end: int
    col_start: int
    col_end: int
    size_class: SizeClass

    def __post_init__(self) -> None:
        if self.row_end <= self.row_start or self.col_end <= self.col_start:
            raise ValueError(f"Empty slot span: {self.name}")
        if self.row_end > TEMPLATE_ROWS or self.col_end > TEMPLATE_COLUMNS:
            raise ValueError(f"Slot outside template grid: {self.name}")


_SINGLE = TemplateSlot("single", 0, 1, 0, 3, SizeClass.WIDE)
_TALL1 = TemplateSlot("tall1", 0, 2, 0, 1, SizeClass.TALL)
_WIDE1 = TemplateSlot("wide1", 0, 1, 1, 3, SizeClass.WIDE)
_COMPACT1 = TemplateSlot("compact1", 1, 2, 1, 2, SizeClass.COMPACT)
_COMPACT2 = TemplateSlot("compact2", 1, 2, 2, 3, SizeClass.COMPACT)
_WIDE2 = TemplateSlot("wide2", 2, 3, 0, 2, SizeClass.WIDE)
_COMPACT3 = TemplateSlot("compact3", 2, 3, 2, 3, SizeClass.COMPACT)

TEMPLATE_CATALOG: dict[int, tuple[TemplateSlot, ...]] = {
    1: (_SINGLE,),
    2: (_TALL1, _WIDE1),
    3: (_TALL1, _WIDE1, _COMPACT1),
    4: (_TALL1, _WIDE1, _COMPACT1, _COMPACT2),
    5: (_TALL1, _WIDE1, _COMPACT1, _COMPACT2, _WIDE2),
    6: (_TALL1, _WIDE1, _COMPACT1, _COMPACT2, _WIDE2, _COMPACT3),
}


def template_for(count: int) -> tuple[TemplateSlot, ...]:
    """
    Template slots for an item count.

    Counts above the largest entry use the nearest (largest) template;
    the remaining items are placed by search into the free area.

    Args:
        count: Number of items, at least 1

    Returns:
        Slots in fill order

    Raises:
        ValueError: If count is below 1
    """
    if count < 1:
        raise ValueError(f"count must be positive: {count}")
    return TEMPLATE_CATALOG[min(count, max(TEMPLATE_CATALOG))]
