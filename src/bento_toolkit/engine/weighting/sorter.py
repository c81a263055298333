"""Deterministic ordering of content items by placement score."""

from __future__ import annotations

from typing import Iterable

from bento_toolkit.core.models import ContentItem

from .calculator import calculate_placement_score


def sort_by_priority(items: Iterable[ContentItem]) -> list[ContentItem]:
    """
    Order items for placement.

    Descending placement score, then descending raw priority, then
    descending visual weight. Remaining ties keep input order (the sort
    is stable).

    Args:
        items: Items in input order

    Returns:
        New list in placement order
    """
    return sorted(
        items,
        key=lambda item: (
            -calculate_placement_score(item),
            -item.priority,
            -item.visual_weight,
        ),
    )
