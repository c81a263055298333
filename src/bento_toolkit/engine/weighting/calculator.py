"""
Module: engine.weighting.calculator

Purpose:
    Derive comparable numeric scores for content items: readability of
    the text, engagement signals, the combined PlacementWeight and the
    single PlacementScore used for ordering.

    Every score is rounded half-up to two decimals so results are
    reproducible across platforms.

Key Functions:
    - calculate_readability_score(): Text readability 0-1
    - calculate_engagement_score(): Rating, outcome words and credibility 0-1
    - calculate_weight(): PlacementWeight for an item
    - calculate_placement_score(): Composite ranking value
    - calculate_weight_statistics(): Summary over an item set

Dependencies:
    - re (std)
    - bento_toolkit.common.thresholds

Used By:
    - engine.weighting.sorter: Ordering
    - engine.placement.search: Prominence criterion
    - engine.layout.metrics: Readability metric
"""

from __future__ import annotations

import logging
import math
import re
from collections import Counter
from typing import Sequence

from bento_toolkit.common.thresholds import READABILITY_THRESHOLDS, SCORING_WEIGHTS
from bento_toolkit.core.models import ContentItem, PlacementWeight

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_END = re.compile(r"[.!?]+")
_PUNCTUATION = re.compile(r"[,;:()]")

# Engagement content signals (case-insensitive)
_CONTENT_SIGNALS = (
    re.compile(r"\d"),
    re.compile(r"%"),
    re.compile(r"\b(increase|improve|reduce|save|boost|enhance)\b", re.IGNORECASE),
    re.compile(r"\b(result|outcome|impact|effect|change)\b", re.IGNORECASE),
)


def round2(value: float) -> float:
    """Round half-up to two decimals."""
    return math.floor(value * 100 + 0.5) / 100


def _clamp01(value: float) -> float:
    return max(0.0, min(1.0, value))


def calculate_readability_score(text: str) -> float:
    """
    Score how easy a text is to read at a glance.

    Blends a length score (short texts are best), a sentence score
    (around ten words per sentence is best) and a complexity score
    (fewer commas, colons and brackets is better).

    Args:
        text: Card body text

    Returns:
        Readability in [0, 1], rounded to 2 decimals

    Example:
        >>> calculate_readability_score("Short and sweet.")
        1.0
    """
    T = READABILITY_THRESHOLDS

    word_count = len(_WHITESPACE.split(text))
    sentences = [s for s in _SENTENCE_END.split(text) if s.strip()]
    avg_sentence = word_count / len(sentences) if sentences else word_count

    length_score = _clamp01(1 - (word_count - T.optimal_word_count) / T.word_count_range)
    sentence_score = _clamp01(
        1 - (avg_sentence - T.optimal_sentence_words) / T.sentence_words_range
    )
    if text:
        complexity_score = 1 - len(_PUNCTUATION.findall(text)) / len(text)
    else:
        complexity_score = 1.0

    return round2(
        T.length_share * length_score
        + T.sentence_share * sentence_score
        + T.complexity_share * complexity_score
    )


def calculate_engagement_score(item: ContentItem) -> float:
    """
    Score how engaging an item is likely to be.

    Args:
        item: Content item

    Returns:
        Engagement in [0, 1], rounded to 2 decimals
    """
    T = READABILITY_THRESHOLDS

    rating_score = item.rating / T.max_rating
    hits = sum(1 for signal in _CONTENT_SIGNALS if signal.search(item.text))
    content_score = hits / len(_CONTENT_SIGNALS)
    credibility = min(1.0, len(item.identifying_field) / T.credibility_length)

    return round2(
        T.rating_share * rating_score
        + T.content_share * content_score
        + T.credibility_share * credibility
    )


def calculate_weight(item: ContentItem) -> PlacementWeight:
    """
    Compute the PlacementWeight for one item.

    Args:
        item: Content item

    Returns:
        PlacementWeight with normalized priority and combined readability
    """
    W = SCORING_WEIGHTS
    readability = calculate_readability_score(item.text)
    engagement = calculate_engagement_score(item)
    combined = round2(W.readability_share * readability + W.engagement_share * engagement)

    return PlacementWeight(
        priority=max(0.0, min(10.0, item.priority)) / 10,
        content_length=len(item.text),
        visual_weight=item.visual_weight,
        readability_score=combined,
    )


def calculate_placement_score(item: ContentItem) -> float:
    """
    Composite ranking value for an item (higher places first).

    Args:
        item: Content item

    Returns:
        PlacementScore in [0, 1], rounded to 2 decimals
    """
    W = SCORING_WEIGHTS
    weight = calculate_weight(item)
    length_bonus = min(1.0, weight.content_length / W.content_length_saturation)

    return round2(
        W.priority_weight * weight.priority
        + W.readability_weight * weight.readability_score
        + W.visual_weight * (weight.visual_weight / W.max_visual_weight)
        + W.content_length_weight * length_bonus
    )


def calculate_weight_statistics(items: Sequence[ContentItem]) -> dict:
    """
    Summary statistics over an item set, for diagnostics.

    Returns:
        Dict with count, average_placement_score, size_class_distribution,
        priority_range (min, max) and average_readability
    """
    if not items:
        return {
            "count": 0,
            "average_placement_score": 0.0,
            "size_class_distribution": {},
            "priority_range": (0, 0),
            "average_readability": 0.0,
        }

    scores = [calculate_placement_score(item) for item in items]
    readability = [calculate_weight(item).readability_score for item in items]
    priorities = [item.priority for item in items]
    distribution = Counter(item.size_class.value for item in items)

    return {
        "count": len(items),
        "average_placement_score": round2(sum(scores) / len(scores)),
        "size_class_distribution": dict(distribution),
        "priority_range": (min(priorities), max(priorities)),
        "average_readability": round2(sum(readability) / len(readability)),
    }
