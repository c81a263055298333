"""Centralized threshold and magic number configuration.

This module contains the scoring weights, ratios and limits used by the
placement engine. Having these in one place makes tuning easier and keeps
the scoring formulas readable.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class ScoringWeights:
    """Weights for placement scores and candidate position criteria."""

    # Placement score (item ordering)
    priority_weight: float = 0.5
    readability_weight: float = 0.25
    visual_weight: float = 0.15
    content_length_weight: float = 0.10
    max_visual_weight: float = 3.0  # Tallest size class, normalizes visual weight
    content_length_saturation: int = 200  # Characters at which length bonus maxes out

    # Combined readability
    readability_share: float = 0.7
    engagement_share: float = 0.3

    # Candidate position criteria
    reading_flow_weight: float = 0.4
    prominence_weight: float = 0.3
    clustering_weight: float = 0.2
    row_balance_weight: float = 0.1
    reading_flow_row_share: float = 0.6  # Slight preference for top placement
    reading_flow_col_share: float = 0.4
    clustering_distance: float = 2.0  # Same-size cells closer than this are penalized


@dataclass
class ReadabilityThresholds:
    """Thresholds for text readability and engagement scoring."""

    optimal_word_count: int = 20  # Length score starts dropping above this
    word_count_range: int = 80  # Length score reaches zero at optimal + range
    optimal_sentence_words: int = 10
    sentence_words_range: int = 20
    length_share: float = 0.4
    sentence_share: float = 0.4
    complexity_share: float = 0.2

    max_rating: float = 5.0
    rating_share: float = 0.5
    content_share: float = 0.3
    credibility_share: float = 0.2
    credibility_length: int = 20  # Identifying-field length for full credibility

    # Content lint
    short_text_chars: int = 10
    long_text_chars: int = 500
    min_expected_rating: float = 1.0


@dataclass
class StrategyThresholds:
    """Item-count limits and grid sizes for strategy selection."""

    templated_max_items: int = 10
    flexible_max_items: int = 12
    template_columns: int = 3
    template_rows: int = 4
    default_columns: int = 4
    min_card_width: int = 280  # Auto-fit target width for the flexible grid
    narrow_row_factor: float = 1.5  # Initial rows per item for single column grids
    row_factor: float = 2.0  # Initial rows per item otherwise
    row_headroom: int = 2  # Initial rows never fewer than items + headroom
    expansion_rows: int = 5  # Rows added by the expansion fallback


@dataclass
class ResponsiveThresholds:
    """Per-breakpoint column counts, row budgets and viewport limits."""

    narrow_columns: int = 1
    medium_columns: int = 2
    wide_columns: int = 4

    narrow_min_rows: int = 10
    narrow_row_headroom: int = 3
    medium_min_rows: int = 8
    medium_row_headroom: int = 2
    wide_min_rows: int = 6
    wide_row_headroom: int = 1

    medium_min_viewport: int = 768
    wide_min_viewport: int = 1024


@dataclass
class ValidationThresholds:
    """Thresholds for layout validation warnings and recommendations."""

    min_cell_density: float = 0.4
    max_cell_density: float = 0.9
    max_average_span: float = 4.0
    min_balance_score: float = 0.7
    min_clustering_score: float = 0.8
    efficiency_boost: float = 1.2  # Rewards good space utilization
    harmony_balance_share: float = 0.6
    harmony_clustering_share: float = 0.4


@dataclass
class PerformanceThresholds:
    """Thresholds for timing and complexity diagnostics."""

    layout_calculation_ms: float = 50.0
    recommended_max_items: int = 50
    complexity_cells: int = 20  # Grid cells at which render complexity saturates
    reading_order_penalty: float = 0.1
    max_narrow_friendly_span: int = 2


# Global instances for easy import
SCORING_WEIGHTS = ScoringWeights()
READABILITY_THRESHOLDS = ReadabilityThresholds()
STRATEGY_THRESHOLDS = StrategyThresholds()
RESPONSIVE_THRESHOLDS = ResponsiveThresholds()
VALIDATION_THRESHOLDS = ValidationThresholds()
PERFORMANCE_THRESHOLDS = PerformanceThresholds()
