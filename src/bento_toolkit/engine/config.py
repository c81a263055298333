"""
Module: engine.config

Purpose:
    Configuration dataclass for the placement engine. Immutable
    configuration with validation on construction, plus a helper that
    recommends settings for a given item set.

Key Classes:
    - PlacementConfig: Criteria toggles and grid constraints
    - ConfigurationError: Invalid configuration values

Key Functions:
    - optimize_placement_settings(): Recommended config for a set of items

Dependencies:
    - dataclasses (std)

Used By:
    - engine.controller: Main placement entry point
    - engine.responsive: Per-breakpoint variants
    - bento_toolkit.cli: Command-line options
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Sequence

from bento_toolkit.common.thresholds import STRATEGY_THRESHOLDS
from bento_toolkit.core.models import ContentItem

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Placement configuration holds a non-positive size or width."""
    pass


@dataclass(frozen=True)
class PlacementConfig:
    """
    Configuration for one placement computation (immutable).

    Attributes:
        balance_rows: Prefer positions near the vertical middle of the grid
        prevent_clustering: Penalize same-size cards placed close together
        maintain_reading_flow: Prefer top-left positions
        prioritize_high_value: Give high-scoring items the most prominent spots
        columns: Requested column count
        max_rows: Hard cap on grid rows (initial size and expansions)
        container_width: Container width in pixels, enables auto-fit columns
        min_card_width: Minimum card width in pixels for auto-fit

    Example:
        >>> config = PlacementConfig(columns=2, prevent_clustering=False)
        >>> config.simplified().balance_rows
        False
    """

    balance_rows: bool = True
    prevent_clustering: bool = True
    maintain_reading_flow: bool = True
    prioritize_high_value: bool = True

    columns: int = STRATEGY_THRESHOLDS.default_columns
    max_rows: Optional[int] = None
    container_width: Optional[int] = None
    min_card_width: int = STRATEGY_THRESHOLDS.min_card_width

    def __post_init__(self) -> None:
        """Validate configuration on construction."""
        if self.columns <= 0:
            raise ConfigurationError(f"columns must be positive: {self.columns}")
        if self.max_rows is not None and self.max_rows <= 0:
            raise ConfigurationError(f"max_rows must be positive: {self.max_rows}")
        if self.container_width is not None and self.container_width <= 0:
            raise ConfigurationError(
                f"container_width must be positive: {self.container_width}"
            )
        if self.min_card_width <= 0:
            raise ConfigurationError(f"min_card_width must be positive: {self.min_card_width}")

    def simplified(self) -> PlacementConfig:
        """Variant with clustering and row balance disabled (first fallback tier)."""
        return replace(self, prevent_clustering=False, balance_rows=False)

    def with_columns(self, columns: int, max_rows: Optional[int] = None) -> PlacementConfig:
        """Variant with a different column count and optional row cap."""
        return replace(self, columns=columns, max_rows=max_rows)


def optimize_placement_settings(
    items: Sequence[ContentItem],
    base: Optional[PlacementConfig] = None,
) -> PlacementConfig:
    """
    Recommend placement settings for a set of items.

    Clustering avoidance only pays off with enough cards of different
    sizes, so it is turned off for 4 or fewer items or when every item
    shares one size class.

    Args:
        items: Items to be placed
        base: Starting configuration (defaults to PlacementConfig())

    Returns:
        Recommended configuration
    """
    base = base or PlacementConfig()
    size_classes = {item.size_class for item in items}
    if len(items) <= 4 or len(size_classes) <= 1:
        logger.debug(
            f"Disabling clustering avoidance for {len(items)} items "
            f"with {len(size_classes)} size classes"
        )
        return replace(base, prevent_clustering=False)
    return base
