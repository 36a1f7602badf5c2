"""Writing characters, strings and numbers to text streams."""

from __future__ import annotations

import sys
from typing import Optional, TextIO


def _target(stream: Optional[TextIO]) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(char: str, stream: Optional[TextIO] = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")
    _target(stream).write(char)


def put_str(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` to ``stream``; None writes nothing."""
    if text is not None:
        _target(stream).write(text)


def put_endl(text: Optional[str], stream: Optional[TextIO] = None) -> None:
    """Write ``text`` followed by a newline; None writes nothing."""
    if text is not None:
        out = _target(stream)
        out.write(text)
        out.write("\n")


def put_nbr(number: int, stream: Optional[TextIO] = None) -> None:
    """Write ``number`` in decimal, with a leading minus sign if negative."""
    if isinstance(number, bool) or not isinstance(number, int):
        raise TypeError(f"expected an integer, got {type(number).__name__}")
    _target(stream).write(str(number))