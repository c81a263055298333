"""Core utilities: serialization of items and layout results."""

from .serialization import (
    serialize_items,
    deserialize_items,
    load_items,
    serialize_layout_result,
    dump_layout_result,
)

__all__ = [
    "serialize_items",
    "deserialize_items",
    "load_items",
    "serialize_layout_result",
    "dump_layout_result",
]
