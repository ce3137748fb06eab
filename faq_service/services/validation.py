"""
Request validation and category normalization
"""
from typing import Any, NamedTuple, Optional

from faq_service.exceptions import ValidationError


class CleanFAQ(NamedTuple):
    question: str
    answer: str
    category: str


def _to_text(value: Any) -> str:
    """Stringify a scalar; booleans become "true"/"false" as in JSON"""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def normalize_category(raw: Optional[Any]) -> str:
    """
    Canonicalize a comma separated category string.

    " a, b ,,c " -> "a,b,c". Missing or empty input gives "".
    Literal commas inside a category cannot be expressed.
    """
    if raw is None or raw == "":
        return ""

    tokens = (token.strip() for token in _to_text(raw).split(","))
    return ",".join(token for token in tokens if token)


def _clean_text(value: Optional[Any]) -> str:
    if value is None:
        return ""
    return _to_text(value).strip()


def validate_payload(question: Optional[Any], answer: Optional[Any], category: Optional[Any] = None) -> CleanFAQ:
    """
    Check that question and answer are present and not blank.

    Raises:
        ValidationError: if either field is missing or whitespace only
    """
    clean_question = _clean_text(question)
    clean_answer = _clean_text(answer)

    if not clean_question or not clean_answer:
        raise ValidationError("Question and answer are required")

    return CleanFAQ(
        question=clean_question,
        answer=clean_answer,
        category=normalize_category(category),
    )
