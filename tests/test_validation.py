"""
Unit tests for request validation and category normalization
"""
import pytest

from faq_service.exceptions import ValidationError
from faq_service.services.validation import normalize_category, validate_payload

pytestmark = pytest.mark.unit


class TestNormalizeCategory:
    """Test category canonicalization"""

    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, ""),
            ("", ""),
            ("   ", ""),
            (",,,", ""),
            ("a, b ,,c", "a,b,c"),
            (" a, b ,,c ", "a,b,c"),
            ("General", "General"),
            ("billing , Account Setup", "billing,Account Setup"),
            ("z,a,z", "z,a,z"),
        ],
    )
    def test_examples(self, raw, expected):
        assert normalize_category(raw) == expected

    @pytest.mark.parametrize(
        "raw", ["", " x ", "a,,b", " ,a , b, ", "one,two,three", "\ttab ,\nnewline"]
    )
    def test_idempotent(self, raw):
        once = normalize_category(raw)

        assert normalize_category(once) == once

    def test_non_string_input(self):
        assert normalize_category(7) == "7"


class TestValidatePayload:
    """Test create/update body validation"""

    def test_valid_payload(self):
        clean = validate_payload("  Q  ", " A ", "x, y")

        assert clean.question == "Q"
        assert clean.answer == "A"
        assert clean.category == "x,y"

    def test_category_optional(self):
        assert validate_payload("Q", "A").category == ""

    @pytest.mark.parametrize(
        "question, answer",
        [(None, "A"), ("Q", None), ("", "A"), ("Q", ""), ("   ", "A"), ("Q", "\n\t")],
    )
    def test_missing_or_blank(self, question, answer):
        with pytest.raises(ValidationError) as exc_info:
            validate_payload(question, answer)

        assert exc_info.value.status_code == 400
        assert exc_info.value.to_dict() == {
            "error": "Validation failed",
            "message": "Question and answer are required",
        }

    def test_booleans_are_stringified(self):
        clean = validate_payload(True, False, True)

        assert clean == ("true", "false", "true")

    def test_false_category_is_kept(self):
        assert normalize_category(False) == "false"

    def test_numbers_are_stringified(self):
        clean = validate_payload(1, 2.5)

        assert clean.question == "1"
        assert clean.answer == "2.5"
