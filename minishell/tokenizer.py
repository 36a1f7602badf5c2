"""Splitting a command line into tokens."""

from __future__ import annotations

from typing import Iterable, List

from .chars import is_space

MAX_TOKENS = 100
"""Size of the token table; one slot is kept for the end marker."""

_OPERATORS = frozenset("|><\"'")


class TooManyTokensError(ValueError):
    """Raised when a line yields more tokens than the table can hold."""


def is_delimiter(char: str) -> bool:
    """Return True for whitespace, a pipe, a redirection sign or a quote."""
    return is_space(char) or char in _OPERATORS


def tokenize(line: str) -> List[str]:
    """Split ``line`` into tokens.

    Every delimiter character, whitespace included, is a token of its own;
    each run of other characters is one token. At most ``MAX_TOKENS - 1``
    tokens are allowed.
    """
    if not isinstance(line, str):
        raise TypeError(f"expected a string, got {type(line).__name__}")
    tokens: List[str] = []
    word: List[str] = []
    for char in line:
        if is_delimiter(char):
            if word:
                tokens.append("".join(word))
                word = []
            tokens.append(char)
        else:
            word.append(char)
    if word:
        tokens.append("".join(word))
    if len(tokens) >= MAX_TOKENS:
        raise TooManyTokensError(
            f"line has {len(tokens)} tokens, at most {MAX_TOKENS - 1} allowed"
        )
    return tokens


def format_tokens(tokens: Iterable[str]) -> str:
    """Render tokens as numbered lines of the form ``Token <n> <token>``."""
    return "".join(f"Token {index} {token}\n" for index, token in enumerate(tokens))