"""
Unit Tests for Schema Validation

Tests for boundary normalization, content lint and duplicate detection.
"""

import pytest

from bento_toolkit.core.models import SizeClass
from bento_toolkit.core.schemas.validator import (
    InvalidItemError,
    ValidationError,
    find_duplicate_ids,
    lint_item,
    normalize_item_payload,
    validate_item_payload,
)


class TestValidateItemPayload:
    """Tests for validate_item_payload function."""

    def test_validate_when_valid_data_then_no_error(self, payload):
        # Should not raise
        validate_item_payload(payload)

    def test_validate_when_missing_text_then_raises_error(self, payload):
        del payload["text"]

        with pytest.raises(InvalidItemError) as exc_info:
            validate_item_payload(payload, path="items[0]")

        assert "text" in str(exc_info.value)
        assert exc_info.value.errors

    def test_validate_when_rating_too_high_then_raises_error(self, payload):
        payload["rating"] = 7

        with pytest.raises(InvalidItemError) as exc_info:
            validate_item_payload(payload, path="items[2]")

        assert exc_info.value.path == "items[2].rating"

    def test_validate_when_several_problems_then_all_listed(self, payload):
        payload["rating"] = -1
        payload["priority"] = 11

        with pytest.raises(InvalidItemError) as exc_info:
            validate_item_payload(payload)

        assert len(exc_info.value.errors) == 2

    def test_invalid_item_error_when_caught_then_is_validation_error(self):
        assert issubclass(InvalidItemError, ValidationError)


class TestNormalizeItemPayload:
    """Tests for normalize_item_payload function."""

    def test_normalize_when_canonical_payload_then_builds_item(self, payload):
        item = normalize_item_payload(payload)

        assert item.id == "t1"
        assert item.size_class is SizeClass.WIDE
        assert item.attribution == "Northwind Traders"

    def test_normalize_when_aliases_used_then_mapped(self):
        # Arrange
        upstream = {
            "_id": "abc123",
            "content": "Saved us hours every week.",
            "rating": 4,
            "priority": 6,
            "cardType": "Tall",
            "company": "Contoso",
        }

        # Act
        item = normalize_item_payload(upstream)

        # Assert
        assert item.id == "abc123"
        assert item.text == "Saved us hours every week."
        assert item.size_class is SizeClass.TALL
        assert item.attribution == "Contoso"

    def test_normalize_when_attribution_null_then_empty(self, payload):
        payload["attribution"] = None
        assert normalize_item_payload(payload).attribution == ""

    def test_normalize_when_unknown_size_class_then_raises_error(self, payload):
        payload["sizeClass"] = "huge"
        with pytest.raises(InvalidItemError):
            normalize_item_payload(payload)

    def test_normalize_when_id_has_whitespace_then_raises_error(self, payload):
        payload["id"] = "t 1"
        with pytest.raises(InvalidItemError):
            normalize_item_payload(payload)

    def test_normalize_when_not_mapping_then_raises_error(self):
        with pytest.raises(InvalidItemError, match="must be an object"):
            normalize_item_payload(["not", "a", "dict"], path="items[0]")


class TestLintItem:
    """Tests for lint_item function."""

    def test_lint_when_item_fine_then_no_warnings(self, make_item):
        assert lint_item(make_item()) == []

    def test_lint_when_text_short_then_warns(self, make_item):
        warnings = lint_item(make_item(text="Nice."))
        assert warnings == ["t1: text is very short (< 10 characters)"]

    def test_lint_when_text_long_and_low_rating_then_two_warnings(self, make_item):
        warnings = lint_item(make_item(text="x" * 501, rating=0.5))

        assert len(warnings) == 2
        assert "very long" in warnings[0]
        assert "rating 0.5" in warnings[1]


class TestFindDuplicateIds:
    """Tests for find_duplicate_ids function."""

    def test_find_when_unique_then_none(self, make_item):
        assert find_duplicate_ids([make_item("a"), make_item("b")]) is None

    def test_find_when_repeated_then_listed_once(self, make_item):
        items = [make_item("a"), make_item("b"), make_item("a"), make_item("a")]
        assert find_duplicate_ids(items) == ["a"]


class TestNormalizeItemPayloadBoundary:
    """Payloads the schema lets through but the model rejects."""

    def test_normalize_when_id_has_trailing_newline_then_raises_invalid_item(self, payload):
        payload["id"] = "t1\n"

        with pytest.raises(InvalidItemError, match="without whitespace") as exc_info:
            normalize_item_payload(payload, path="items[0]")

        assert exc_info.value.path == "items[0]"
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_normalize_when_rating_nan_then_raises_invalid_item(self, payload):
        payload["rating"] = float("nan")

        with pytest.raises(InvalidItemError, match="rating must be within 0-5"):
            normalize_item_payload(payload)

    @pytest.mark.parametrize("item_id", [".", 'say"hi"'])
    def test_normalize_when_id_not_usable_as_area_name_then_raises_error(self, payload, item_id):
        payload["id"] = item_id

        with pytest.raises(InvalidItemError) as exc_info:
            normalize_item_payload(payload)

        assert exc_info.value.path == "id"
