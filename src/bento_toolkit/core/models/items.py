"""
Module: items

Purpose:
    Provides the ContentItem dataclass - the validated, immutable input
    unit of the placement engine - together with the SizeClass tagged
    variant and the derived PlacementWeight.

Key Classes:
    - SizeClass: Tall / Wide / Compact card size
    - ContentItem: One content card with scoring inputs
    - PlacementWeight: Derived per-item scores

Dependencies:
    - dataclasses (std)
    - enum (std)

Used By:
    - core.schemas.validator: Boundary normalization
    - engine.weighting: Weight calculation and sorting
    - engine.placement: Span lookup
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SizeClass(Enum):
    """
    Visual size of a content card.

    The size class decides the span a card occupies in the grid:
    - TALL: 2 rows x 1 column
    - WIDE: 1 row x 2 columns (clipped to the grid width)
    - COMPACT: 1 row x 1 column

    Example:
        >>> SizeClass("tall")
        <SizeClass.TALL: 'tall'>
        >>> SizeClass.WIDE.visual_weight
        2.5
    """

    TALL = "tall"
    WIDE = "wide"
    COMPACT = "compact"

    @property
    def visual_weight(self) -> float:
        """Relative visual weight of cards in this size class."""
        return VISUAL_WEIGHTS[self]

    def span(self, columns: int) -> tuple[int, int]:
        """
        Row and column span for a grid with the given column count.

        Args:
            columns: Number of columns in the target grid

        Returns:
            (row_span, col_span)
        """
        if self is SizeClass.TALL:
            return 2, 1
        if self is SizeClass.WIDE:
            return 1, min(2, columns)
        return 1, 1


VISUAL_WEIGHTS: dict[SizeClass, float] = {
    SizeClass.TALL: 3.0,
    SizeClass.WIDE: 2.5,
    SizeClass.COMPACT: 1.0,
}


@dataclass(frozen=True)
class ContentItem:
    """
    A content card to be placed in the grid (immutable).

    Attributes:
        id: Unique identifier, non-empty and without whitespace
        text: Card body text used for readability scoring
        rating: Rating in [0, 5]
        priority: Business priority in [1, 10]
        size_class: Visual size of the card
        attribution: Identifying field (e.g. author organisation) used as a
            credibility proxy; the id is used when empty

    Invariants:
        - 0 <= rating <= 5
        - 1 <= priority <= 10
        - id is non-empty and contains no whitespace

    Example:
        >>> item = ContentItem("t1", "Great results.", 5, 8, SizeClass.WIDE)
        >>> item.visual_weight
        2.5
    """

    id: str
    text: str
    rating: float
    priority: float
    size_class: SizeClass
    attribution: str = ""

    def __post_init__(self) -> None:
        """Validate item on construction."""
        if not self.id or any(ch.isspace() for ch in self.id):
            raise ValueError(f"id must be non-empty without whitespace: {self.id!r}")
        if not 0 <= self.rating <= 5:
            raise ValueError(f"rating must be within 0-5: {self.rating}")
        if not 1 <= self.priority <= 10:
            raise ValueError(f"priority must be within 1-10: {self.priority}")
        if not isinstance(self.size_class, SizeClass):
            raise ValueError(f"Invalid size class: {self.size_class!r}")

    @property
    def visual_weight(self) -> float:
        """Visual weight looked up from the size class."""
        return self.size_class.visual_weight

    @property
    def identifying_field(self) -> str:
        """Attribution when present, otherwise the id."""
        return self.attribution or self.id

    def to_dict(self) -> dict:
        """
        Serialize to dictionary for JSON storage.

        Returns:
            Dict with camelCase keys, attribution only when set
        """
        d = {
            "id": self.id,
            "text": self.text,
            "rating": self.rating,
            "priority": self.priority,
            "sizeClass": self.size_class.value,
        }
        if self.attribution:
            d["attribution"] = self.attribution
        return d

    def __repr__(self) -> str:
        """Concise representation for debugging."""
        return f"ContentItem({self.id!r}, {self.size_class.value}, p={self.priority})"


@dataclass(frozen=True)
class PlacementWeight:
    """
    Derived scores for one item.

    Attributes:
        priority: Priority normalized to 0-1
        content_length: Character count of the text
        visual_weight: Weight from the size class (tall=3, wide=2.5, compact=1)
        readability_score: Combined readability and engagement, 0-1
    """

    priority: float
    content_length: int
    visual_weight: float
    readability_score: float
