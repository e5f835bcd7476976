"""Text and number formatting utilities."""

from __future__ import annotations

import math


def capitalize_phrase(phrase: str | None) -> str:
    """Capitalize the first letter of every space-separated word.

    Unlike ``str.title`` the rest of each word is left untouched.

    Args:
        phrase: Provider description such as ``light rain``

    Returns:
        Display phrase such as ``Light Rain``
    """
    if not phrase:
        return ""
    return " ".join(word[:1].upper() + word[1:] for word in phrase.split(" "))


def to_percentage(value: float | None) -> int:
    """Convert a 0-1 probability to a whole percentage.

    Args:
        value: Value to convert (0-1), missing counts as 0

    Returns:
        Rounded percentage
    """
    return math.floor((value or 0.0) * 100 + 0.5)
