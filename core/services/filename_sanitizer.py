"""Stateless text helpers for turning descriptions into safe file names.

None of these functions raise on odd input; an empty string is a valid input
and a valid output everywhere.
"""

from __future__ import annotations

import re

from core.models import INVALID_CHARS_PATTERN

_VOWELS = re.compile("[aeiou]", re.IGNORECASE)


def replace_invalid_characters(text: str, replacement: str, strip: bool = True) -> str:
    """Replace each invalid file name character with `replacement`.

    Args:
        text: Source text.
        replacement: "-", "," or "" (drop the character).
        strip: Trim leading/trailing whitespace afterwards. Prefix and suffix
            keep their outer spaces, so callers pass False for those.
    """
    result = INVALID_CHARS_PATTERN.sub(lambda _m: replacement, text)
    return result.strip() if strip else result


def find_invalid_characters(text: str) -> list[str]:
    """Return the invalid characters present in `text`, in order of appearance."""
    return INVALID_CHARS_PATTERN.findall(text)


def collapse_whitespace(text: str) -> str:
    """Reduce every run of two or more spaces to a single space."""
    while "  " in text:
        text = text.replace("  ", " ")
    return text


def contains_vowel(text: str) -> bool:
    return _VOWELS.search(text) is not None


def drop_vowels(text: str) -> str:
    return _VOWELS.sub("", text)


def truncate_by(text: str, amount: int) -> str:
    """Remove `amount` characters from the end; empty if that is all of them."""
    if amount <= 0:
        return text
    if len(text) <= amount:
        return ""
    return text[: len(text) - amount]
