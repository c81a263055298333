"""
Schema Validation Utilities

Validates loosely-typed content payloads (as delivered by a content source)
and normalizes them into typed ContentItem values at the boundary.

The engine itself only accepts pre-validated ContentItem instances; every
payload passes through ``normalize_item_payload()`` first.

Key Functions:
    - validate_item_payload(): JSON Schema check of a canonical payload
    - normalize_item_payload(): Alias mapping + validation + construction
    - lint_item(): Non-fatal content warnings
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Mapping, Optional

import jsonschema

from bento_toolkit.common.thresholds import READABILITY_THRESHOLDS

from ..models.items import ContentItem, SizeClass

logger = logging.getLogger(__name__)

# Load schemas lazily
_SCHEMAS: dict[str, dict] = {}

# Upstream field names accepted for each canonical field
ITEM_FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "id": ("_id",),
    "text": ("content", "quote"),
    "sizeClass": ("size_class", "cardType", "card_type"),
    "attribution": ("company",),
}


def _load_schema(name: str) -> dict:
    """Load a schema from the schemas directory."""
    if name not in _SCHEMAS:
        schema_path = Path(__file__).parent / f"{name}.schema.json"
        if not schema_path.exists():
            raise FileNotFoundError(f"Schema not found: {schema_path}")
        with open(schema_path, "r", encoding="utf-8") as f:
            _SCHEMAS[name] = json.load(f)
    return _SCHEMAS[name]


class ValidationError(Exception):
    """Raised when data fails schema validation."""

    def __init__(self, message: str, path: str = "", errors: list[str] | None = None):
        super().__init__(message)
        self.path = path
        self.errors = errors or []


class InvalidItemError(ValidationError):
    """Content payload is missing a field or holds an out-of-range value."""


def validate_item_payload(data: Mapping[str, Any], *, path: str = "") -> None:
    """
    Validate a canonical item payload against the content item schema.

    Args:
        data: Payload with canonical camelCase keys
        path: Location of the payload for error messages (e.g. "items[3]")

    Raises:
        InvalidItemError: If data is invalid; ``errors`` lists every problem
    """
    schema = _load_schema("content_item")
    validator = jsonschema.Draft7Validator(schema)
    problems = sorted(validator.iter_errors(dict(data)), key=lambda e: list(e.absolute_path))
    if not problems:
        return

    first = problems[0]
    location = ".".join(str(p) for p in first.absolute_path)
    full_path = ".".join(p for p in (path, location) if p)
    raise InvalidItemError(
        f"Invalid content item{f' at {path}' if path else ''}: {first.message}",
        path=full_path,
        errors=[e.message for e in problems],
    )


def _canonicalize(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Map upstream aliases onto canonical keys and normalize size class case."""
    data = dict(payload)
    for canonical, aliases in ITEM_FIELD_ALIASES.items():
        if canonical in data:
            continue
        for alias in aliases:
            if alias in data:
                data[canonical] = data[alias]
                break

    size_class = data.get("sizeClass")
    if isinstance(size_class, str):
        data["sizeClass"] = size_class.strip().lower()
    if data.get("attribution") is None:
        data.pop("attribution", None)
    return data


def normalize_item_payload(payload: Any, *, path: str = "") -> ContentItem:
    """
    Validate and normalize one upstream payload into a ContentItem.

    Accepts the aliases in ITEM_FIELD_ALIASES (``_id``, ``content``,
    ``cardType``, ``company`` ...) and case-insensitive size classes.

    Args:
        payload: Loosely-typed mapping from a content source
        path: Location of the payload for error messages

    Returns:
        Validated ContentItem

    Raises:
        InvalidItemError: If the payload is not a mapping or fails validation

    Example:
        >>> item = normalize_item_payload(
        ...     {"_id": "t1", "content": "Great.", "rating": 5,
        ...      "priority": 7, "cardType": "Wide"}
        ... )
        >>> item.size_class
        <SizeClass.WIDE: 'wide'>
    """
    if not isinstance(payload, Mapping):
        raise InvalidItemError(
            f"Content item must be an object, got {type(payload).__name__}",
            path=path,
        )

    data = _canonicalize(payload)
    validate_item_payload(data, path=path)

    # The schema lets a trailing newline in ids and NaN ratings through
    try:
        return ContentItem(
            id=data["id"],
            text=data["text"],
            rating=data["rating"],
            priority=data["priority"],
            size_class=SizeClass(data["sizeClass"]),
            attribution=data.get("attribution", ""),
        )
    except ValueError as e:
        raise InvalidItemError(
            f"Invalid content item{f' at {path}' if path else ''}: {e}",
            path=path,
            errors=[str(e)],
        ) from e


def lint_item(item: ContentItem) -> list[str]:
    """
    Non-fatal content checks for a validated item.

    Args:
        item: Validated content item

    Returns:
        List of warning messages (empty when the item looks fine)
    """
    T = READABILITY_THRESHOLDS
    warnings: list[str] = []
    if len(item.text) < T.short_text_chars:
        warnings.append(f"{item.id}: text is very short (< {T.short_text_chars} characters)")
    if len(item.text) > T.long_text_chars:
        warnings.append(f"{item.id}: text is very long (> {T.long_text_chars} characters)")
    if item.rating < T.min_expected_rating:
        warnings.append(f"{item.id}: rating {item.rating} below expected range (1-5)")
    return warnings


def find_duplicate_ids(items: list[ContentItem]) -> Optional[list[str]]:
    """Return the ids that occur more than once, or None when all are unique."""
    seen: set[str] = set()
    duplicates: list[str] = []
    for item in items:
        if item.id in seen and item.id not in duplicates:
            duplicates.append(item.id)
        seen.add(item.id)
    return duplicates or None
