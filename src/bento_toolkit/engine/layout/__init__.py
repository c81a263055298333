"""Layout: metrics, structural validation and template emission."""

from .emitter import CellCoordinate, GridTemplate, emit_grid_template, parse_template_matrix
from .metrics import compute_layout_metrics
from .validator import (
    LayoutPerformance,
    ValidationReport,
    measure_layout_performance,
    validate_grid_layout,
)

__all__ = [
    "CellCoordinate",
    "GridTemplate",
    "emit_grid_template",
    "parse_template_matrix",
    "compute_layout_metrics",
    "LayoutPerformance",
    "ValidationReport",
    "measure_layout_performance",
    "validate_grid_layout",
]
