"""
Layout quality metrics and improvement recommendations.

All metric values are rounded half-up to two decimals and lie in [0, 1].
"""

from __future__ import annotations

from typing import Sequence

from bento_toolkit.common.thresholds import VALIDATION_THRESHOLDS
from bento_toolkit.core.models import ContentItem, GridLayout, LayoutMetrics

from ..placement.scoring import clustering_score
from ..weighting.calculator import calculate_weight, round2


def compute_layout_metrics(
    layout: GridLayout,
    items: Sequence[ContentItem],
    unplaced_count: int = 0,
) -> tuple[LayoutMetrics, list[str]]:
    """
    Compute metrics and recommendations for a finished layout.

    Args:
        layout: Layout with ``balance_score`` already computed
        items: All input items (placed or not)
        unplaced_count: Number of items that could not be placed

    Returns:
        (metrics, recommendations)
    """
    T = VALIDATION_THRESHOLDS
    recommendations: list[str] = []

    balance = layout.balance_score
    clustering = clustering_score(layout.cells)

    if items:
        readability = sum(calculate_weight(i).readability_score for i in items) / len(items)
    else:
        readability = 0.0

    total_units = layout.rows * layout.columns
    if total_units > 0:
        performance = min(1.0, T.efficiency_boost * layout.cell_count / total_units)
    else:
        performance = 0.0

    harmony = T.harmony_balance_share * balance + T.harmony_clustering_share * clustering

    if unplaced_count > 0:
        recommendations.append(
            f"Consider increasing grid size or reducing item count ({unplaced_count} unplaced)"
        )
    if balance < T.min_balance_score:
        recommendations.append("Consider adjusting item priorities to improve visual balance")
    if clustering < T.min_clustering_score:
        recommendations.append("Consider varying size classes to reduce clustering")

    metrics = LayoutMetrics(
        balance_score=round2(balance),
        readability_score=round2(readability),
        visual_harmony=round2(harmony),
        performance_score=round2(performance),
    )
    return metrics, recommendations
