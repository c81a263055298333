"""
Placement Engine

Public API:
    - calculate_placement(): One grid layout for a list of items
    - calculate_responsive_placement(): One layout per breakpoint
    - emit_grid_template(): External coordinate/matrix representation
    - PlacementConfig: Criteria toggles and grid constraints
"""

from .config import ConfigurationError, PlacementConfig, optimize_placement_settings
from .controller import calculate_placement
from .layout import (
    GridTemplate,
    emit_grid_template,
    measure_layout_performance,
    parse_template_matrix,
    validate_grid_layout,
)
from .responsive import (
    Breakpoint,
    BreakpointSpec,
    ResponsiveLayouts,
    calculate_responsive_placement,
)
from .weighting import calculate_placement_score, calculate_weight_statistics, sort_by_priority

__all__ = [
    "ConfigurationError",
    "PlacementConfig",
    "optimize_placement_settings",
    "calculate_placement",
    "GridTemplate",
    "emit_grid_template",
    "measure_layout_performance",
    "parse_template_matrix",
    "validate_grid_layout",
    "Breakpoint",
    "BreakpointSpec",
    "ResponsiveLayouts",
    "calculate_responsive_placement",
    "calculate_placement_score",
    "calculate_weight_statistics",
    "sort_by_priority",
]
