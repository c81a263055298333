"""Weighting: per-item scores and placement ordering."""

from .calculator import (
    round2,
    calculate_readability_score,
    calculate_engagement_score,
    calculate_weight,
    calculate_placement_score,
    calculate_weight_statistics,
)
from .sorter import sort_by_priority

__all__ = [
    "round2",
    "calculate_readability_score",
    "calculate_engagement_score",
    "calculate_weight",
    "calculate_placement_score",
    "calculate_weight_statistics",
    "sort_by_priority",
]
