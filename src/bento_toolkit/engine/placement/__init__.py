"""Placement: occupancy tracking, position scoring and greedy search."""

from .occupancy import OccupancyGrid
from .scoring import (
    ClusteringTracker,
    clustering_score,
    reading_flow_score,
    row_balance_score,
    visual_balance,
)
from .search import (
    PositionCandidate,
    describe_outcome,
    find_best_position,
    place_from_template,
    place_item,
)

__all__ = [
    "OccupancyGrid",
    "ClusteringTracker",
    "clustering_score",
    "reading_flow_score",
    "row_balance_score",
    "visual_balance",
    "PositionCandidate",
    "describe_outcome",
    "find_best_position",
    "place_from_template",
    "place_item",
]
