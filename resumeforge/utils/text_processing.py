"""
Text processing utilities shared by the scoring and feedback contexts.
"""

import re
from typing import Iterable

DIGIT_PATTERN = re.compile(r"\d+")


def is_blank(value: str) -> bool:
    """True if the value is empty or whitespace only."""
    return not value.strip()


def count_non_blank(values: Iterable[str]) -> int:
    """Count values that contain something other than whitespace."""
    return sum(1 for value in values if not is_blank(value))


def count_words(*texts: str) -> int:
    """
    Count whitespace-delimited words across several texts.

    Texts are joined with a single space before splitting, so the count does not
    depend on the order the texts are given in.

    Example:
        >>> count_words("Led a team", "", "Shipped  v2")
        5
    """
    return len([word for word in " ".join(texts).split() if word])


def contains_digits(text: str) -> bool:
    """True if the text contains at least one digit."""
    return DIGIT_PATTERN.search(text) is not None


def title_case_key(key: str) -> str:
    """
    Turn an underscore key into a display name.

    Example:
        >>> title_case_key("summary_leadership")
        'Summary Leadership'
    """
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), key.replace("_", " "))
