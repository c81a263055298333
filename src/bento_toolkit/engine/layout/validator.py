"""
Module: engine.layout.validator

Purpose:
    Structural validation of a computed GridLayout and layout-level
    diagnostics (density, span size, reading order).

Key Classes:
    - ValidationReport: Errors, warnings and diagnostics for a layout
    - LayoutPerformance: Rendering diagnostics

Key Functions:
    - validate_grid_layout(): Check no-overlap and bounds invariants
    - measure_layout_performance(): Complexity and reading order diagnostics

Dependencies:
    - bento_toolkit.common.thresholds: VALIDATION_THRESHOLDS, PERFORMANCE_THRESHOLDS

Used By:
    - engine.controller: Post-placement check
    - bento_toolkit.cli: Diagnostics output
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from bento_toolkit.common.thresholds import PERFORMANCE_THRESHOLDS, VALIDATION_THRESHOLDS
from bento_toolkit.core.models import GridLayout

from ..weighting.calculator import round2

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    """
    Result of validating a layout.

    Attributes:
        errors: Invariant violations (overlap, bounds, empty span)
        warnings: Non-fatal density and span warnings
        cell_density: Occupied units / total units
        average_span: Mean cell area
        grid_efficiency: Density when cells exist, otherwise 0
    """
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()
    cell_density: float = 0.0
    average_span: float = 0.0
    grid_efficiency: float = 0.0

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def to_dict(self) -> dict:
        return {
            "isValid": self.is_valid,
            "errors": list(self.errors),
            "warnings": list(self.warnings),
            "performance": {
                "cellDensity": self.cell_density,
                "averageSpan": self.average_span,
                "gridEfficiency": self.grid_efficiency,
            },
        }


def validate_grid_layout(layout: GridLayout) -> ValidationReport:
    """
    Validate the structural invariants of a layout.

    Checks:
    - positive grid dimensions
    - every cell within ``[0, rows) x [0, columns)``
    - every cell has a non-empty span
    - no grid unit is covered by two cells

    Args:
        layout: Layout to validate

    Returns:
        ValidationReport; ``is_valid`` is False when any error was found

    Example:
        >>> report = validate_grid_layout(result.layout)
        >>> report.is_valid
        True
    """
    T = VALIDATION_THRESHOLDS
    errors: list[str] = []
    warnings: list[str] = []

    if layout.rows <= 0 or layout.columns <= 0:
        errors.append(f"Invalid grid dimensions: {layout.rows}x{layout.columns}")

    if not layout.cells:
        warnings.append("No cells in layout")

    occupied: dict[tuple[int, int], str] = {}
    for index, cell in enumerate(layout.cells):
        if cell.row_start < 0 or cell.row_end > layout.rows:
            errors.append(f"Cell {index} ({cell.item_id}) row bounds invalid")
        if cell.col_start < 0 or cell.col_end > layout.columns:
            errors.append(f"Cell {index} ({cell.item_id}) column bounds invalid")
        if cell.row_start >= cell.row_end or cell.col_start >= cell.col_end:
            errors.append(f"Cell {index} ({cell.item_id}) has invalid span")

        for coordinate in cell.covered():
            owner = occupied.get(coordinate)
            if owner is not None:
                errors.append(
                    f"Cell overlap detected at {coordinate[0]}-{coordinate[1]} "
                    f"({owner}, {cell.item_id})"
                )
            else:
                occupied[coordinate] = cell.item_id

    total_units = layout.rows * layout.columns
    density = len(occupied) / total_units if total_units > 0 else 0.0
    average_span = (
        sum(cell.area for cell in layout.cells) / len(layout.cells) if layout.cells else 0.0
    )
    efficiency = density if layout.cells else 0.0

    if density < T.min_cell_density:
        warnings.append("Low grid density - consider reducing grid size")
    if density > T.max_cell_density:
        warnings.append("Very high grid density - may cause layout issues")
    if average_span > T.max_average_span:
        warnings.append("Large average cell span - may impact narrow layouts")

    return ValidationReport(
        errors=tuple(errors),
        warnings=tuple(warnings),
        cell_density=round2(density),
        average_span=round2(average_span),
        grid_efficiency=round2(efficiency),
    )


@dataclass(frozen=True)
class LayoutPerformance:
    """
    Rendering diagnostics for a layout, each in [0, 1].

    Attributes:
        render_complexity: Grid size and spanning cells (higher is heavier)
        layout_shift_risk: Variance of cell areas (higher is riskier)
        accessibility_score: How closely cell order follows reading order
        narrow_optimization: Share of cells that stay small on narrow screens
    """
    render_complexity: float
    layout_shift_risk: float
    accessibility_score: float
    narrow_optimization: float

    def to_dict(self) -> dict:
        return {
            "renderComplexity": self.render_complexity,
            "layoutShiftRisk": self.layout_shift_risk,
            "accessibilityScore": self.accessibility_score,
            "narrowOptimization": self.narrow_optimization,
        }


def measure_layout_performance(layout: GridLayout) -> LayoutPerformance:
    """
    Rendering diagnostics for a layout.

    Cells are evaluated in layout order, so a cell that starts before its
    predecessor in reading order lowers the accessibility score.

    Args:
        layout: Layout to measure

    Returns:
        LayoutPerformance with values rounded to 2 decimals
    """
    P = PERFORMANCE_THRESHOLDS
    cells = layout.cells

    total_units = layout.rows * layout.columns
    spanning = sum(1 for c in cells if c.row_span > 1 or c.col_span > 1)
    render_complexity = min(1.0, (total_units + spanning * 2) / P.complexity_cells)

    if cells:
        variance = sum((c.area - 1) ** 2 for c in cells) / len(cells)
        layout_shift_risk = min(1.0, variance / 4)
    else:
        layout_shift_risk = 0.0

    reading_order = 1.0
    for previous, current in zip(cells, cells[1:]):
        if (current.row_start, current.col_start) < (previous.row_start, previous.col_start):
            reading_order -= P.reading_order_penalty
    accessibility = max(0.0, reading_order)

    if cells:
        unfriendly = sum(
            1 for c in cells
            if c.col_span > P.max_narrow_friendly_span or c.row_span > P.max_narrow_friendly_span
        )
        narrow_optimization = max(0.0, 1 - unfriendly / len(cells))
    else:
        narrow_optimization = 1.0

    return LayoutPerformance(
        render_complexity=round2(render_complexity),
        layout_shift_risk=round2(layout_shift_risk),
        accessibility_score=round2(accessibility),
        narrow_optimization=round2(narrow_optimization),
    )
