"""Conversions between decimal text and integers."""

from __future__ import annotations

from .chars import is_digit

_LEADING_SPACE = "\t\n\v\f\r "


def atoi(text: str) -> int:
    """Parse the leading decimal integer of ``text``.

    Leading ASCII whitespace is skipped, then one optional sign: either a
    minus or a plus, not both. Parsing stops at the first non-digit.
    Text with no digits gives 0.
    """
    if not isinstance(text, str):
        raise TypeError(f"expected a string, got {type(text).__name__}")
    rest = text.lstrip(_LEADING_SPACE)
    sign = 1
    if rest.startswith("-"):
        sign = -1
        rest = rest[1:]
    elif rest.startswith("+"):
        rest = rest[1:]
    digits = []
    for char in rest:
        if not is_digit(char):
            break
        digits.append(char)
    return sign * int("".join(digits)) if digits else 0


def itoa(number: int) -> str:
    """Return the decimal text of ``number``, with a leading minus if negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    return str(number)