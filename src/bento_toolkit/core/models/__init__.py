"""
Core Models Package

Immutable, validated data models shared by the engine and the boundary.

All models in this package are frozen dataclasses, so a computation can
never mutate its input and results can be compared for equality (the
engine is deterministic: equal input gives equal results).
"""

from .items import ContentItem, PlacementWeight, SizeClass, VISUAL_WEIGHTS
from .cells import GridCell, GridLayout
from .results import (
    LayoutMetrics,
    LayoutResult,
    Placed,
    PlacementFailure,
    PlacementOutcome,
    Strategy,
)

__all__ = [
    "ContentItem",
    "PlacementWeight",
    "SizeClass",
    "VISUAL_WEIGHTS",
    "GridCell",
    "GridLayout",
    "LayoutMetrics",
    "LayoutResult",
    "Placed",
    "PlacementFailure",
    "PlacementOutcome",
    "Strategy",
]
