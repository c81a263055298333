"""
Core Package

Models, schemas and serialization shared by the engine and its callers.
"""

from .models import ContentItem, SizeClass, GridCell, GridLayout, LayoutResult, Strategy
from .schemas import normalize_item_payload, InvalidItemError, ValidationError
from .utils import load_items, deserialize_items, serialize_layout_result

__all__ = [
    "ContentItem",
    "SizeClass",
    "GridCell",
    "GridLayout",
    "LayoutResult",
    "Strategy",
    "normalize_item_payload",
    "InvalidItemError",
    "ValidationError",
    "load_items",
    "deserialize_items",
    "serialize_layout_result",
]
