"""Character classification and case conversion.

Each function accepts either a one-character string or an integer code.
Classification is ASCII-only, so non-ASCII letters and digits are not matched.
"""

from __future__ import annotations

from typing import overload


def _code(c: int | str) -> int:
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an integer code, got {type(c).__name__}")
    return c


def is_alpha(c: int | str) -> bool:
    """Return True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """Return True for an ASCII decimal digit."""
    code = _code(c)
    return ord("0") <= code <= ord("9")


def is_alnum(c: int | str) -> bool:
    """Return True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def is_space(c: int | str) -> bool:
    """Return True for ASCII whitespace: tab, newline, vertical tab, form feed, CR, space.

    Integer codes are reduced to a byte first, as an unsigned char would be.
    """
    code = _code(c) & 0xFF
    return 9 <= code <= 13 or code == 32


@overload
def to_lower(c: str) -> str: ...
@overload
def to_lower(c: int) -> int: ...


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return chr(code) if isinstance(c, str) else code


@overload
def to_upper(c: str) -> str: ...
@overload
def to_upper(c: int) -> int: ...


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned unchanged."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return chr(code) if isinstance(c, str) else code