"""
Serialization Utilities

Provides to/from JSON utilities for content items and layout results.

- ``deserialize_items()`` / ``load_items()`` are the boundary: every
  upstream payload is validated and normalized before the engine sees it.
- ``serialize_layout_result()`` produces the external result shape
  consumed by the rendering layer.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Iterable

from ..models.items import ContentItem
from ..models.results import LayoutResult
from ..schemas.validator import (
    InvalidItemError,
    find_duplicate_ids,
    lint_item,
    normalize_item_payload,
)

logger = logging.getLogger(__name__)


# ─────────────────────────────────────────────────────────────────────────────
# Content Items
# ─────────────────────────────────────────────────────────────────────────────

def serialize_items(items: Iterable[ContentItem]) -> list[dict[str, Any]]:
    """Serialize items to a JSON-ready list of dicts."""
    return [item.to_dict() for item in items]


def deserialize_items(data: Any, *, lint: bool = True) -> list[ContentItem]:
    """
    Normalize a list of upstream payloads into ContentItems.

    Accepts either a JSON array of items or an object with an ``items``
    array (the shape most content APIs return).

    Args:
        data: Parsed JSON
        lint: Log non-fatal content warnings for each item

    Returns:
        Validated items in input order

    Raises:
        InvalidItemError: If any payload is invalid or ids are duplicated
    """
    if isinstance(data, dict) and "items" in data:
        data = data["items"]
    if not isinstance(data, list):
        raise InvalidItemError(
            f"Expected a list of content items, got {type(data).__name__}"
        )

    items = [
        normalize_item_payload(payload, path=f"items[{i}]")
        for i, payload in enumerate(data)
    ]

    duplicates = find_duplicate_ids(items)
    if duplicates:
        raise InvalidItemError(
            f"Duplicate content item ids: {duplicates}",
            path="items",
            errors=[f"Duplicate id: {d}" for d in duplicates],
        )

    if lint:
        for item in items:
            for warning in lint_item(item):
                logger.warning(warning)

    return items


def load_items(path: Path) -> list[ContentItem]:
    """
    Load and normalize content items from a JSON file.

    Args:
        path: JSON file holding an array of items or ``{"items": [...]}``

    Returns:
        Validated items

    Raises:
        InvalidItemError: If the file is not valid JSON or holds invalid items
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise InvalidItemError(f"Invalid JSON in {path}: {e}", path=str(path)) from e

    items = deserialize_items(data)
    logger.info(f"Loaded {len(items)} content items from {path}")
    return items


# ─────────────────────────────────────────────────────────────────────────────
# Layout Results
# ─────────────────────────────────────────────────────────────────────────────

def serialize_layout_result(result: LayoutResult) -> dict[str, Any]:
    """
    Serialize a LayoutResult to the external representation.

    Returns:
        Dict with success, strategy, layout, metrics, warnings,
        recommendations and unplaced
    """
    return {
        "success": result.success,
        "strategy": result.strategy.value if result.strategy else None,
        "layout": result.layout.to_dict(),
        "metrics": result.metrics.to_dict(),
        "warnings": list(result.warnings),
        "recommendations": list(result.recommendations),
        "unplaced": list(result.unplaced),
    }


def dump_layout_result(result: LayoutResult, path: Path) -> None:
    """Write a serialized LayoutResult to a JSON file."""
    with open(path, "w", encoding="utf-8") as f:
        json.dump(serialize_layout_result(result), f, indent=2)
    logger.debug(f"Saved layout result to {path}")
