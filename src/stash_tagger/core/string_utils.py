"""String helpers for provider field normalization."""

from __future__ import annotations

from typing import Any


def to_title_case(phrase: str) -> str:
    """Capitalize the first character of each space-delimited word.

    The phrase is lower-cased first and split on single spaces only, so runs
    of spaces are preserved.

    Args:
        phrase: Text to convert.

    Returns:
        Title-cased text.

    Example:
        >>> to_title_case("BLONDE")
        'Blonde'
        >>> to_title_case("light brown")
        'Light Brown'
    """
    return " ".join(word[:1].upper() + word[1:] for word in phrase.lower().split(" "))


def optional_string(value: Any) -> str | None:
    """Return value as a string, or None if it is absent or blank.

    Providers occasionally send numbers for text attributes (e.g. height),
    so present values are converted with str().

    Example:
        >>> optional_string("  ") is None
        True
        >>> optional_string("36C")
        '36C'
    """
    if value is None:
        return None
    text = str(value)
    if not text.strip():
        return None
    return text


def optional_title_case(value: Any) -> str | None:
    """Title-case value when present, otherwise return None."""
    text = optional_string(value)
    return to_title_case(text) if text is not None else None
