"""String helpers: searching, comparing, slicing, joining and bounded copies.

Text functions work on ``str`` and return new strings or indexes, with None
where nothing is found. ``strlcpy`` and ``strlcat`` work on NUL-terminated
byte buffers held in ``bytearray`` objects.
"""

from __future__ import annotations

from typing import Callable, List, MutableSequence, Optional


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"expected a single character, got {char!r}")


def _check_non_negative(name: str, value: int) -> None:
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")


def _c_string(data: bytes | bytearray) -> bytes:
    """Return the bytes before the first NUL, or all of them if there is none."""
    return bytes(data).split(b"\0", 1)[0]


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, char: str) -> Optional[int]:
    """Return the index of the first ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.find(char)
    return None if index < 0 else index


def strrchr(text: str, char: str) -> Optional[int]:
    """Return the index of the last ``char`` in ``text``, or None.

    Searching for the NUL character finds the end of the string.
    """
    _check_char(char)
    if char == "\0":
        return len(text)
    index = text.rfind(char)
    return None if index < 0 else index


def strncmp(first: str, second: str, count: int) -> int:
    """Compare at most ``count`` characters; return -1, 0 or 1.

    The end of a string compares as a character below every other.
    """
    _check_non_negative("count", count)
    for index in range(count):
        a = ord(first[index]) if index < len(first) else 0
        b = ord(second[index]) if index < len(second) else 0
        if a != b:
            return -1 if a < b else 1
        if a == 0:
            break
    return 0


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Return where ``needle`` first occurs wholly within ``haystack[:length]``.

    An empty needle is found at index 0. Returns None when it is not found.
    """
    _check_non_negative("length", length)
    if not needle:
        return 0
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return str(text)


def substr(text: str, start: int, length: int) -> str:
    """Return up to ``length`` characters of ``text`` from ``start``.

    A start at or past the end gives an empty string.
    """
    _check_non_negative("start", start)
    _check_non_negative("length", length)
    if start >= len(text):
        return ""
    return text[start:start + length]


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return first + second


def strtrim(text: str, charset: str) -> str:
    """Strip characters in ``charset`` from both ends of ``text``.

    An empty charset leaves the text unchanged.
    """
    if not charset:
        return text
    return text.strip(charset)


def split(text: str, separator: str) -> List[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    _check_char(separator)
    return [word for word in text.split(separator) if word]


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a string from ``func(index, char)`` applied to each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(buffer: MutableSequence[str], func: Callable[[int, str], str]) -> None:
    """Replace each character of ``buffer`` in place with ``func(index, char)``."""
    for index, char in enumerate(list(buffer)):
        buffer[index] = func(index, char)


def strlcpy(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Copy ``src`` into ``dst`` with at most ``size - 1`` bytes plus a NUL.

    Returns the length of ``src``, so a result of ``size`` or more means the
    copy was truncated. Raises ValueError if ``dst`` cannot hold the copy.
    """
    _check_non_negative("size", size)
    source = _c_string(src)
    if size > 0:
        copied = min(len(source), size - 1)
        if copied + 1 > len(dst):
            raise ValueError(f"destination of {len(dst)} bytes cannot hold {copied + 1}")
        dst[:copied] = source[:copied]
        dst[copied] = 0
    return len(source)


def strlcat(dst: bytearray, src: bytes | bytearray, size: int) -> int:
    """Append ``src`` to the NUL-terminated string in ``dst`` within ``size`` bytes.

    Returns the length of the string it tried to build: the length of ``dst``
    (capped at ``size``) plus the length of ``src``. Raises ValueError if
    ``dst`` holds no NUL or is too small for the result.
    """
    _check_non_negative("size", size)
    source = _c_string(src)
    end = bytes(dst).find(b"\0")
    if end < 0:
        raise ValueError("destination is not NUL-terminated")
    result = (end if end < size else size) + len(source)
    if size == 0:
        return result
    copied = max(0, min(len(source), size - 1 - end))
    if end + copied >= len(dst):
        raise ValueError(f"destination of {len(dst)} bytes cannot hold {end + copied + 1}")
    dst[end:end + copied] = source[:copied]
    dst[end + copied] = 0
    return result