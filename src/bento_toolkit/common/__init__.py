"""Common utilities shared across the toolkit."""

from __future__ import annotations

from .thresholds import (
    SCORING_WEIGHTS,
    READABILITY_THRESHOLDS,
    STRATEGY_THRESHOLDS,
    RESPONSIVE_THRESHOLDS,
    VALIDATION_THRESHOLDS,
    PERFORMANCE_THRESHOLDS,
)

__all__ = [
    "SCORING_WEIGHTS",
    "READABILITY_THRESHOLDS",
    "STRATEGY_THRESHOLDS",
    "RESPONSIVE_THRESHOLDS",
    "VALIDATION_THRESHOLDS",
    "PERFORMANCE_THRESHOLDS",
]
