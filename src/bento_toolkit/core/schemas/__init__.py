"""
Schemas Package

JSON schema definitions and boundary validation for content payloads.
"""

from .validator import (
    validate_item_payload,
    normalize_item_payload,
    lint_item,
    find_duplicate_ids,
    ValidationError,
    InvalidItemError,
    ITEM_FIELD_ALIASES,
)

__all__ = [
    "validate_item_payload",
    "normalize_item_payload",
    "lint_item",
    "find_duplicate_ids",
    "ValidationError",
    "InvalidItemError",
    "ITEM_FIELD_ALIASES",
]
